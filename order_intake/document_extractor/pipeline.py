"""
Common fallback extraction pipeline for transport orders.

Flow:
  1. Run every field extractor over the same document lines
  2. Merge the results into one ExtractedRecord
  3. Enforce the completeness gate (customer, reference, locations)
  4. Hand the record to the order-creation service
"""

import logging
import time

from order_intake.config import Settings, settings as default_settings
from order_intake.document_extractor import fields
from order_intake.document_extractor.classifier import PackageClassifier
from order_intake.document_extractor.dates import DateParser
from order_intake.document_extractor.locations import LocationContextExtractor
from order_intake.exceptions import MissingOrderReferenceError
from order_intake.schemas.order import ExtractedRecord
from order_intake.services.order_service import OrderService

logger = logging.getLogger("order_intake.pipeline")


class CommonExtractionPipeline:
    """Best-effort extractor used when no layout-specific extractor applies."""

    def __init__(self, order_service: OrderService, settings: Settings | None = None):
        self.settings = settings or default_settings
        self.order_service = order_service
        self.date_parser = DateParser()
        self.classifier = PackageClassifier()
        self.context_extractor = LocationContextExtractor(
            date_parser=self.date_parser,
            window_size=self.settings.context_window_lines,
        )

    @staticmethod
    def validate_format(lines: list[str]) -> bool:
        """The fallback accepts any document."""
        return True

    def extract(self, lines: list[str], attachment_filename: str | None = None) -> ExtractedRecord:
        """Extract and validate an order record without creating it.

        Args:
            lines: Document text, one entry per line, in reading order.
            attachment_filename: Source file name, stored lower-cased.

        Returns:
            ExtractedRecord with all mandatory fields populated.

        Raises:
            ExtractionError: the first hard stop hit (customer, loading,
                destination, then order reference).
        """
        start_time = time.monotonic()

        customer = fields.extract_customer(lines)
        loading_locations = fields.extract_loading_locations(lines, context_extractor=self.context_extractor)
        destination_locations = fields.extract_destination_locations(lines, context_extractor=self.context_extractor)
        cargos = fields.extract_cargos(lines, classifier=self.classifier)

        order_reference = fields.extract_order_reference(lines)
        if not order_reference:
            raise MissingOrderReferenceError()

        transport_numbers = fields.extract_transport_numbers(lines)
        freight = fields.extract_freight_data(lines)

        record = ExtractedRecord(
            customer=customer,
            order_reference=order_reference,
            loading_locations=loading_locations,
            destination_locations=destination_locations,
            cargos=cargos,
            transport_numbers=transport_numbers,
            freight_price=freight.freight_price if freight else None,
            freight_currency=freight.freight_currency if freight else None,
            attachment_filenames=[(attachment_filename or "").lower()],
        )

        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(
            "Extracted order %s: %d loading, %d destination, %d cargo (%d ms)",
            record.order_reference,
            len(record.loading_locations),
            len(record.destination_locations),
            len(record.cargos),
            elapsed_ms,
        )
        return record

    def process_lines(self, lines: list[str], attachment_filename: str | None = None) -> ExtractedRecord:
        """Extract a record and forward it to the order service once."""
        logger.info("Processing %d lines from %r", len(lines), attachment_filename or "")
        record = self.extract(lines, attachment_filename)
        self.order_service.create_order(record)
        return record
