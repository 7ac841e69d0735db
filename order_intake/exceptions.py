"""Hard-stop failures raised when a document cannot yield a complete order.

All of them derive from ValueError so dispatchers that already treat
ValueError as "this extractor could not handle the document" keep working.
"""


class ExtractionError(ValueError):
    """Base class for extraction hard stops."""


class MissingCustomerError(ExtractionError):
    def __init__(self):
        super().__init__("Invalid PDF: missing customer company")


class MissingOrderReferenceError(ExtractionError):
    def __init__(self):
        super().__init__("Invalid PDF: missing order reference")


class MissingLoadingLocationError(ExtractionError):
    def __init__(self):
        super().__init__("Invalid PDF: no valid loading location found")


class MissingDestinationLocationError(ExtractionError):
    def __init__(self):
        super().__init__("Invalid PDF: no valid destination location found")
