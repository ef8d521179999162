class TextExtractionError(Exception):
    """Base exception for per-document text extraction failures."""


class FormatUnsupportedError(TextExtractionError):
    """Raised when no extractor is registered for a file extension."""


class SpreadsheetParseError(TextExtractionError):
    """Raised when bytes are not a recognizable workbook or CSV file."""
