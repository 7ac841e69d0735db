"""Run the common fallback extractor over one or more order documents.

Usage:
    python -m order_intake order.pdf [other.pdf ...]

Each successfully created order is printed as JSON. The exit status is 1 if
any document could not be turned into an order.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from order_intake.config import settings
from order_intake.document_extractor.parser import DocumentParser
from order_intake.document_extractor.pipeline import CommonExtractionPipeline
from order_intake.services.order_service import InMemoryOrderService

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
)

logger = logging.getLogger("order_intake")


async def run(paths: list[str]) -> int:
    parser = DocumentParser()
    order_service = InMemoryOrderService()
    pipeline = CommonExtractionPipeline(order_service)
    failures = 0

    for path in paths:
        try:
            lines = await parser.parse_lines(path)
            pipeline.process_lines(lines, attachment_filename=Path(path).name)
        except (FileNotFoundError, ValueError) as e:
            failures += 1
            logger.error("Failed to extract %s: %s", path, e)

    for order in order_service.orders:
        print(json.dumps(order, ensure_ascii=False, indent=2))

    logger.info("Created %d orders, %d failed", len(order_service.orders), failures)
    return 1 if failures else 0


def main() -> None:
    arg_parser = argparse.ArgumentParser(prog="order_intake", description=__doc__.splitlines()[0])
    arg_parser.add_argument("paths", nargs="+", help="PDF or text documents")
    args = arg_parser.parse_args()
    sys.exit(asyncio.run(run(args.paths)))


if __name__ == "__main__":
    main()
