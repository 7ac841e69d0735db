"""
Context-window extraction of loading and destination places.

A role keyword ("Loading", "Abholung", "Delivery", ...) marks an anchor line.
The lines that follow usually carry the company at that place and the
requested date, so a bounded forward window is scanned for both.
"""

import logging

from order_intake.document_extractor.dates import DateParser
from order_intake.document_extractor.patterns import DATE_TOKEN_PATTERN, LOCATION_COMPANY_PATTERN
from order_intake.schemas.order import CompanyAddress, LocationEntry, LocationTime

logger = logging.getLogger("order_intake.locations")

DEFAULT_WINDOW_SIZE = 10


class LocationContextExtractor:
    """Builds a LocationEntry from the lines following an anchor line."""

    def __init__(self, date_parser: DateParser | None = None, window_size: int = DEFAULT_WINDOW_SIZE):
        self.date_parser = date_parser or DateParser()
        self.window_size = window_size

    def extract_context(self, lines: list[str], anchor_index: int) -> LocationEntry:
        """Scan at most window_size lines starting at the anchor (inclusive).

        The first company line and the first parseable date each win; later
        candidates in the same window are ignored. Always returns an entry,
        with the company defaulted when none was found.
        """
        if anchor_index < 0:
            raise ValueError(f"Anchor index must be non-negative, got {anchor_index}")

        company: str | None = None
        datetime_from: str | None = None

        for raw_line in lines[anchor_index:anchor_index + self.window_size]:
            line = raw_line.strip()
            if not line:
                continue

            if company is None:
                match = LOCATION_COMPANY_PATTERN.match(line)
                if match:
                    company = match.group(1)

            if datetime_from is None:
                datetime_from = self._find_datetime(line)

            if company is not None and datetime_from is not None:
                break

        if company is None:
            logger.warning("No company near anchor line %d, using placeholder", anchor_index)
            address = CompanyAddress()
        else:
            address = CompanyAddress(company=company)

        time = LocationTime(datetime_from=datetime_from) if datetime_from else None
        return LocationEntry(company_address=address, time=time)

    def _find_datetime(self, line: str) -> str | None:
        for match in DATE_TOKEN_PATTERN.finditer(line):
            date_part, time_part = match.groups()
            # A malformed time of day still leaves the date usable.
            candidates = [f"{date_part} {time_part}", date_part] if time_part else [date_part]
            for candidate in candidates:
                parsed = self.date_parser.parse(candidate)
                if parsed:
                    return parsed
        return None
