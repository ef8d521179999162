from pdp_extractor.extraction.base import BaseTextExtractor
from pdp_extractor.extraction.models import ExtractedText, ExtractionMethod


class PlainTextExtractor(BaseTextExtractor):
    """Decodes bytes as UTF-8. Never raises."""

    def extract(self, data: bytes, filename: str) -> ExtractedText:
        return ExtractedText(
            source=filename,
            text=data.decode("utf-8", errors="replace"),
            method=ExtractionMethod.NATIVE,
            media_type="text/plain",
        )
