from order_intake.document_extractor.classifier import PackageClassifier
from order_intake.document_extractor.dates import DateParser
from order_intake.document_extractor.locations import LocationContextExtractor
from order_intake.document_extractor.parser import DocumentParser, ParsedDocument
from order_intake.document_extractor.pipeline import CommonExtractionPipeline

__all__ = [
    "CommonExtractionPipeline",
    "DateParser",
    "DocumentParser",
    "LocationContextExtractor",
    "PackageClassifier",
    "ParsedDocument",
]
