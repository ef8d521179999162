from pathlib import PurePath

from pdp_extractor.extraction.base import BaseTextExtractor
from pdp_extractor.extraction.exceptions import FormatUnsupportedError
from pdp_extractor.extraction.models import ExtractedText


def file_extension(filename: str) -> str:
    """Lowercase extension without the dot, '' when there is none."""
    return PurePath(filename).suffix.lower().lstrip(".")


class TextExtractorRegistry:
    """Dispatches documents to a format extractor by filename extension."""

    def __init__(self, extractors: dict[str, BaseTextExtractor]) -> None:
        self._extractors = {
            ext.lower().lstrip("."): extractor for ext, extractor in extractors.items()
        }

    @property
    def supported_extensions(self) -> list[str]:
        return sorted(self._extractors)

    def extractor_for(self, filename: str) -> BaseTextExtractor:
        """Return the extractor registered for *filename*.

        Raises:
            FormatUnsupportedError: if the extension has no extractor.
        """
        extension = file_extension(filename)
        extractor = self._extractors.get(extension)
        if extractor is None:
            raise FormatUnsupportedError(
                f"Unsupported format '.{extension}' for {filename}. "
                f"Choose from: {self.supported_extensions}"
            )
        return extractor

    def extract(self, data: bytes, filename: str) -> ExtractedText:
        return self.extractor_for(filename).extract(data, filename)
