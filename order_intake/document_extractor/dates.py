"""Tolerant parsing of date strings found on transport orders."""

from datetime import datetime

# Day-first layouts as printed on European orders, ISO last. Two-digit years
# are only tried after every four-digit layout has failed.
DATE_LAYOUTS: tuple[str, ...] = (
    "%d.%m.%Y",
    "%d/%m/%Y",
    "%d-%m-%Y",
    "%Y-%m-%d",
    "%d.%m.%y",
    "%d/%m/%y",
    "%d-%m-%y",
)

TIME_SUFFIX = " %H:%M"


class DateParser:
    """Tries each layout in order and returns the first full parse."""

    def __init__(self, layouts: tuple[str, ...] = DATE_LAYOUTS):
        self.layouts = layouts

    def parse(self, candidate: str) -> str | None:
        """Parse a date (optionally followed by HH:MM) into an ISO-8601 string.

        Returns None when no layout accepts the whole candidate.
        """
        candidate = " ".join(candidate.split())
        if not candidate:
            return None

        for layout in self.layouts:
            for fmt in (layout, layout + TIME_SUFFIX):
                try:
                    return datetime.strptime(candidate, fmt).isoformat()
                except ValueError:
                    continue
        return None
