"""Order-creation collaborators that receive successfully extracted records."""

import logging

from order_intake.schemas.order import ExtractedRecord

logger = logging.getLogger("order_intake.orders")


class OrderService:
    """Sink for extracted orders. Subclasses persist or forward the payload."""

    def create_order(self, record: ExtractedRecord) -> dict:
        """Create an order from the record and return the stored payload."""
        raise NotImplementedError


class InMemoryOrderService(OrderService):
    """Keeps created orders in a list; used by the CLI and in tests."""

    def __init__(self):
        self.orders: list[dict] = []

    def create_order(self, record: ExtractedRecord) -> dict:
        payload = record.to_order_payload()
        self.orders.append(payload)
        logger.info(
            "Created order %s for %s (%d cargo lines)",
            record.order_reference,
            record.customer.details.company,
            len(record.cargos),
        )
        return payload
