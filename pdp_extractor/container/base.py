from abc import ABC, abstractmethod

from pdp_extractor.container.models import ParsedContainer


class BaseContainerParser(ABC):
    """Contract for turning one uploaded file into a ParsedContainer."""

    @abstractmethod
    def parse(self, data: bytes, filename: str) -> ParsedContainer:
        """Split raw file bytes into header metadata, body and attachments.

        Args:
            data: Raw uploaded file content.
            filename: Original upload filename.

        Returns:
            ParsedContainer with attachments in container order.

        Raises:
            ContainerParseError: if the bytes cannot be parsed at all.
        """
