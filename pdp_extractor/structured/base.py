from abc import ABC, abstractmethod

from pdp_extractor.structured.models import StructuredResult


class BaseStructuredExtractor(ABC):
    """Contract for all structured extraction adapters."""

    @abstractmethod
    def extract(self, text: str) -> StructuredResult:
        """Turn aggregated paperwork text into structured entities.

        Args:
            text: Aggregated body and attachment text of one input file.

        Returns:
            StructuredResult with company, workers, certification and flags.

        Raises:
            ExtractionFormatError: if the response is malformed.
            LLMNetworkError: if the provider cannot be reached.
        """
