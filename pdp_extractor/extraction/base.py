from abc import ABC, abstractmethod

from pdp_extractor.extraction.models import ExtractedText


class BaseTextExtractor(ABC):
    """Contract for all per-format text extractors."""

    @abstractmethod
    def extract(self, data: bytes, filename: str) -> ExtractedText:
        """Recover plain text from a document.

        Args:
            data: Raw file content.
            filename: Original filename, used for provenance and heuristics.

        Returns:
            ExtractedText labelled with the filename and extraction method.

        Raises:
            TextExtractionError: if the format cannot be read at all.
        """
