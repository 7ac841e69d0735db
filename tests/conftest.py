import pytest

from order_intake.document_extractor.pipeline import CommonExtractionPipeline
from order_intake.services.order_service import InMemoryOrderService


@pytest.fixture
def order_lines() -> list[str]:
    """A typical transport order as pdfplumber returns it, without cargo lines."""
    return [
        "TRANSPORT ORDER",
        "Acme Logistics GmbH",
        "Order No: AB123456",
        "Loading:",
        "Müller Kunststoff GmbH",
        "Industriestraße 5, 80331 München",
        "12.03.2024 08:00",
        "Delivery:",
        "Baltic Foods UAB",
        "Savanoriu pr. 1, LT-03116 Vilnius",
        "15.03.2024",
        "Truck: AB12CD / Trailer: XY345Z",
        "Freight: 1.250,50 EUR",
    ]


@pytest.fixture
def order_lines_with_cargo(order_lines) -> list[str]:
    return order_lines + [
        "33 x EUR-Pallets",
        "12 Karton Glasflaschen",
    ]


@pytest.fixture
def order_service() -> InMemoryOrderService:
    return InMemoryOrderService()


@pytest.fixture
def pipeline(order_service) -> CommonExtractionPipeline:
    return CommonExtractionPipeline(order_service)
