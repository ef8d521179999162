from abc import ABC, abstractmethod
from typing import ClassVar

from pdp_extractor.extraction.models import ExtractionMethod


class BasePdfTier(ABC):
    """Contract for one strategy of the PDF extraction cascade.

    A tier's output is accepted when it holds at least ``min_chars``
    characters; otherwise the cascade moves on to the next tier.
    """

    name: ClassVar[str]
    method: ClassVar[ExtractionMethod]

    def __init__(self, min_chars: int) -> None:
        self.min_chars = min_chars

    @abstractmethod
    def extract(self, pdf_bytes: bytes, filename: str) -> str:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.
            filename: PDF filename, for logging and prompts.

        Returns:
            Extracted text, possibly shorter than ``min_chars``.

        Raises:
            PdfTierFailure: if this tier cannot process the document.
        """
