"""Tests for the LocationContextExtractor window scan."""

import pytest

from order_intake.document_extractor.locations import LocationContextExtractor
from order_intake.schemas.order import UNKNOWN_COMPANY


@pytest.fixture
def extractor():
    return LocationContextExtractor()


class TestCompany:
    def test_company_after_anchor(self, extractor):
        entry = extractor.extract_context(["Loading:", "Müller Kunststoff GmbH"], 0)
        assert entry.company_address.company == "Müller Kunststoff GmbH"

    def test_anchor_line_itself_counts(self, extractor):
        entry = extractor.extract_context(["Loading: Acme GmbH"], 0)
        assert entry.company_address.company == "Loading: Acme GmbH"

    def test_first_company_is_sticky(self, extractor):
        lines = ["Loading", "First GmbH", "Second Ltd"]
        entry = extractor.extract_context(lines, 0)
        assert entry.company_address.company == "First GmbH"

    def test_whitespace_stripped_and_blank_lines_skipped(self, extractor):
        lines = ["Delivery", "", "   ", "   Port Company  "]
        entry = extractor.extract_context(lines, 0)
        assert entry.company_address.company == "Port Company"

    def test_placeholder_when_no_company(self, extractor):
        entry = extractor.extract_context(["Loading", "Hauptstraße 1", "Berlin"], 0)
        assert entry.company_address.company == UNKNOWN_COMPANY
        assert entry.time is None


class TestWindow:
    def test_tenth_line_is_inside(self, extractor):
        lines = ["Loading"] + ["filler"] * 8 + ["Edge GmbH"]
        entry = extractor.extract_context(lines, 0)
        assert entry.company_address.company == "Edge GmbH"

    def test_lines_beyond_window_ignored(self, extractor):
        lines = ["Loading"] + ["filler"] * 10 + ["Far Away GmbH", "01.01.2025"]
        entry = extractor.extract_context(lines, 0)
        assert entry.company_address.company == UNKNOWN_COMPANY
        assert entry.time is None

    def test_lines_before_anchor_ignored(self, extractor):
        lines = ["Before GmbH", "Delivery", "nothing here"]
        entry = extractor.extract_context(lines, 1)
        assert entry.company_address.company == UNKNOWN_COMPANY

    def test_anchor_near_end_of_short_document(self, extractor):
        lines = ["a", "b", "Delivery", "Port Company"]
        entry = extractor.extract_context(lines, 2)
        assert entry.company_address.company == "Port Company"

    def test_anchor_on_last_line(self, extractor):
        entry = extractor.extract_context(["a", "b", "Delivery"], 2)
        assert entry.company_address.company == UNKNOWN_COMPANY

    def test_anchor_past_end(self, extractor):
        entry = extractor.extract_context(["Loading"], 5)
        assert entry.company_address.company == UNKNOWN_COMPANY

    def test_negative_anchor_rejected(self, extractor):
        with pytest.raises(ValueError, match="non-negative"):
            extractor.extract_context(["Loading"], -1)

    def test_custom_window_size(self):
        extractor = LocationContextExtractor(window_size=2)
        entry = extractor.extract_context(["Loading", "x", "Late GmbH"], 0)
        assert entry.company_address.company == UNKNOWN_COMPANY


class TestDates:
    def test_date_with_time(self, extractor):
        entry = extractor.extract_context(["Loading", "Acme GmbH", "12.03.2024 08:00"], 0)
        assert entry.time is not None
        assert entry.time.datetime_from == "2024-03-12T08:00:00"

    def test_date_inside_text(self, extractor):
        entry = extractor.extract_context(["Pickup date: 2024-03-05, ramp 4"], 0)
        assert entry.time.datetime_from == "2024-03-05T00:00:00"

    def test_first_date_kept(self, extractor):
        entry = extractor.extract_context(["Loading", "01.02.2024", "05.02.2024"], 0)
        assert entry.time.datetime_from == "2024-02-01T00:00:00"

    def test_unparseable_date_skipped(self, extractor):
        entry = extractor.extract_context(["Loading", "31.02.2024", "05.03.2024"], 0)
        assert entry.time.datetime_from == "2024-03-05T00:00:00"

    def test_bad_time_keeps_date(self, extractor):
        entry = extractor.extract_context(["Loading 12.03.2024 25:99"], 0)
        assert entry.time.datetime_from == "2024-03-12T00:00:00"
