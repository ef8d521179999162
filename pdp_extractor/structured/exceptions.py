class StructuredExtractionError(Exception):
    """Raised when structured extraction fails."""


class ExtractionFormatError(StructuredExtractionError):
    """Raised when the model response is not valid JSON or breaks the result invariants."""
