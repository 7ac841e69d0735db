"""Pure field extractors for the common fallback extractor — no I/O, easy to unit test.

Each function consumes the full list of document lines and returns one field
of the order. Required fields raise an ExtractionError subclass when nothing
is found; optional fields return None.
"""

import logging
import re

from order_intake.document_extractor.classifier import PackageClassifier
from order_intake.document_extractor.locations import LocationContextExtractor
from order_intake.document_extractor.patterns import (
    CARGO_PATTERN,
    COMPANY_PATTERNS,
    DESTINATION_PATTERNS,
    FREIGHT_PATTERN,
    LOADING_PATTERNS,
    ORDER_REFERENCE_PATTERNS,
    TRANSPORT_NUMBER_PATTERN,
)
from order_intake.exceptions import MissingCustomerError, MissingDestinationLocationError, MissingLoadingLocationError
from order_intake.schemas.order import (
    CargoEntry,
    CompanyDetails,
    Customer,
    CustomerSide,
    FreightData,
    LocationEntry,
)

logger = logging.getLogger("order_intake.fields")

MIN_CARGO_TITLE_LENGTH = 3


def extract_customer(lines: list[str]) -> Customer:
    """Return the first company signature in the document.

    Lines are scanned top to bottom; within a line the legal-suffix pattern
    is tried before the address-line pattern.

    Raises:
        MissingCustomerError: if no line matches any company pattern.
    """
    for line in lines:
        stripped = line.strip()
        for pattern in COMPANY_PATTERNS:
            match = pattern.match(stripped)
            if match:
                company = match.group(1).strip()
                logger.debug("Customer company: %s", company)
                return Customer(side=CustomerSide.NONE, details=CompanyDetails(company=company))

    raise MissingCustomerError()


def extract_order_reference(lines: list[str]) -> str | None:
    """Return the first order reference, or None.

    Pattern priority applies within a line; the document is read top to
    bottom, so an earlier line with a weak match beats a later explicit one.
    """
    for line in lines:
        for pattern in ORDER_REFERENCE_PATTERNS:
            match = pattern.search(line)
            if match:
                reference = match.group(1).strip("* \t")
                if reference:
                    logger.debug("Order reference %s via %s", reference, pattern.pattern)
                    return reference
    return None


def _extract_locations(
    lines: list[str],
    keyword_patterns: tuple[re.Pattern, ...],
    context_extractor: LocationContextExtractor,
) -> list[LocationEntry]:
    # One window per matching keyword: a line mentioning both "Loading" and
    # "Pickup" yields two entries.
    locations: list[LocationEntry] = []
    for index, line in enumerate(lines):
        for pattern in keyword_patterns:
            if pattern.search(line):
                locations.append(context_extractor.extract_context(lines, index))
    return locations


def extract_loading_locations(
    lines: list[str],
    *,
    context_extractor: LocationContextExtractor | None = None,
) -> list[LocationEntry]:
    """Raises MissingLoadingLocationError if no loading keyword is present."""
    locations = _extract_locations(lines, LOADING_PATTERNS, context_extractor or LocationContextExtractor())
    if not locations:
        raise MissingLoadingLocationError()
    return locations


def extract_destination_locations(
    lines: list[str],
    *,
    context_extractor: LocationContextExtractor | None = None,
) -> list[LocationEntry]:
    """Raises MissingDestinationLocationError if no delivery keyword is present."""
    locations = _extract_locations(lines, DESTINATION_PATTERNS, context_extractor or LocationContextExtractor())
    if not locations:
        raise MissingDestinationLocationError()
    return locations


def extract_cargos(
    lines: list[str],
    *,
    classifier: PackageClassifier | None = None,
) -> list[CargoEntry]:
    """Collect every "<count> [x] <description>" line as a cargo entry.

    Falls back to a single "General cargo" entry when no line qualifies.
    """
    classifier = classifier or PackageClassifier()
    cargos: list[CargoEntry] = []

    for line in lines:
        match = CARGO_PATTERN.match(line)
        if not match:
            continue
        count = int(match.group(1))
        title = match.group(2).strip()
        if count > 0 and len(title) >= MIN_CARGO_TITLE_LENGTH:
            cargos.append(CargoEntry(
                title=title,
                package_count=count,
                package_type=classifier.classify(title),
            ))

    if not cargos:
        logger.warning("No cargo lines recognized, using general cargo")
        return [CargoEntry.general_cargo()]
    return cargos


def extract_transport_numbers(lines: list[str]) -> str | None:
    """Join all distinct transport codes with " / ", first-seen order kept."""
    numbers: list[str] = []
    for line in lines:
        for match in TRANSPORT_NUMBER_PATTERN.finditer(line):
            value = match.group(1).strip()
            if value not in numbers:
                numbers.append(value)
    return " / ".join(numbers) if numbers else None


def parse_amount(raw: str) -> float:
    """Normalize a printed amount to a float.

    The right-most separator is the decimal mark when both "," and "." are
    present; a lone comma is a decimal comma. No-break spaces are thousands
    groups.
    """
    value = raw.replace("\u00a0", "").replace("\u202f", "")
    if "," in value and "." in value:
        decimal_mark = "," if value.rfind(",") > value.rfind(".") else "."
        thousands_mark = "." if decimal_mark == "," else ","
        value = value.replace(thousands_mark, "").replace(decimal_mark, ".")
    else:
        value = value.replace(",", ".")
    return float(value)


def extract_freight_data(lines: list[str]) -> FreightData | None:
    """Return price and currency from the first line carrying both."""
    for line in lines:
        match = FREIGHT_PATTERN.search(line)
        if match:
            price = parse_amount(match.group(1))
            currency = match.group(2).upper()
            logger.debug("Freight %.2f %s", price, currency)
            return FreightData(freight_price=price, freight_currency=currency)
    return None
