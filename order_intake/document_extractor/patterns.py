"""
Regular expressions used by the common fallback extractor.

Every group is an ordered tuple: when several patterns can match the same
line, the earlier one wins. The module holds data only; matching happens in
the field extractors.
"""

import re

# Customer company signatures: a legal-entity or trade suffix, then a
# "name, street, postcode city" address line as the fallback.
COMPANY_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"^(.+(?:GmbH|UAB|a\.s\.|Ltd|Inc|Corp|Company|Logistic|Transport).*?)$", re.IGNORECASE),
    re.compile(r"^(.+),\s*(.+),\s*([A-Z]{1,2}[-\s]?\d{4,})\s*(.+)$", re.IGNORECASE),
)

# Company line inside a loading/destination context window.
LOCATION_COMPANY_PATTERN = re.compile(r"^(.+(?:GmbH|UAB|Ltd|Inc|Corp|Company).*?)$", re.IGNORECASE)

_REFERENCE_LABELS = r"order|reference|ref|nr|no|number|auftrag(?:snummer|snr)?|užsakymas"

# Order reference, most explicit first. A label must not run on into a word
# ("note"), and the value must not be another label, so "Order No: 123"
# yields "123" rather than "No".
ORDER_REFERENCE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(
        r"\b(?:" + _REFERENCE_LABELS + r")(?![^\W\d_])[\s.:#]*"
        r"(?!(?:" + _REFERENCE_LABELS + r")\b)([A-Z0-9\-]+)",
        re.IGNORECASE,
    ),
    re.compile(r"([A-Z]{1,3}\d{6,})", re.IGNORECASE),
    re.compile(r"\*{2,}\s*([A-Z0-9\-]+)\s*\*{2,}", re.IGNORECASE),
    re.compile(r"(\d{7,})"),
)

# Role keywords anchoring a location context window (English, Lithuanian, German).
LOADING_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"loading", re.IGNORECASE),
    re.compile(r"pickup", re.IGNORECASE),
    re.compile(r"pakrovimo", re.IGNORECASE),
    re.compile(r"abhol", re.IGNORECASE),
)

DESTINATION_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"delivery", re.IGNORECASE),
    re.compile(r"destination", re.IGNORECASE),
    re.compile(r"iškrovimo", re.IGNORECASE),
    re.compile(r"ablad", re.IGNORECASE),
)

# Date token with an optional time of day: group 1 is the date, group 2 the time.
DATE_TOKEN_PATTERN = re.compile(
    r"(?<!\d)(\d{4}-\d{1,2}-\d{1,2}|\d{1,2}[./-]\d{1,2}[./-]\d{2,4})(?!\d)"
    r"(?:\s+(\d{1,2}:\d{2}))?"
)

# "3 x Pallets of glassware", "3xPallets", "20 Euro-Pallets", "5 Karton".
# The "x" is a separator only before whitespace or a capitalized word, so
# "3 xenon lamps" keeps its title.
CARGO_PATTERN = re.compile(
    r"^\s*(\d+)\s*(?:[x×](?=\s|(?-i:[A-Z][a-z])))?\s*([^\W\d_].*?)\s*$",
    re.IGNORECASE,
)

# Truck/trailer plates and similar short codes: "AB12CD", "LT 123", "XYZ4567AB".
TRANSPORT_NUMBER_PATTERN = re.compile(r"\b([A-Z]{1,3}\s?\d{2,4}[A-Z]{0,3})\b", re.IGNORECASE)

FREIGHT_CURRENCIES = ("EUR", "USD", "GBP", "PLN")

# Amount followed by a currency code. Thousands-grouped forms come first so
# "1.250,50 EUR" is read whole instead of as "250,50". Only no-break and
# narrow no-break spaces group thousands; a plain space separates numbers.
FREIGHT_PATTERN = re.compile(
    r"(?<![\d.,])"
    r"(\d{1,3}(?:[.\u00a0\u202f]\d{3})+,\d+|\d{1,3}(?:[,\u00a0\u202f]\d{3})+\.\d+|\d+(?:[.,]\d+)?)"
    r"\s*(" + "|".join(FREIGHT_CURRENCIES) + r")",
    re.IGNORECASE,
)
