from dataclasses import dataclass
from enum import Enum


class ExtractionMethod(str, Enum):
    """How the text of a document was recovered."""

    NATIVE = "native"
    FALLBACK_PARSER = "fallback-parser"
    VISION_OCR = "vision-ocr"
    FILENAME_HEURISTIC = "filename-heuristic"
    FAILED = "failed"


@dataclass(frozen=True)
class ExtractedText:
    """Text recovered from the email body or one attachment."""

    source: str  # attachment filename, or "body"
    text: str
    method: ExtractionMethod
    media_type: str = "text/plain"

    @property
    def char_count(self) -> int:
        return len(self.text)
