from pathlib import PurePath

from pdp_extractor.container.base import BaseContainerParser
from pdp_extractor.container.eml_parser import EmlContainerParser
from pdp_extractor.container.loose_document import LooseDocumentLoader


class ContainerParserFactory:
    """Picks the container parser for an uploaded file."""

    EMAIL_EXTENSIONS: frozenset[str] = frozenset({".eml"})

    def __init__(self) -> None:
        self._email_parser = EmlContainerParser()
        self._loose_loader = LooseDocumentLoader()

    def for_filename(self, filename: str) -> BaseContainerParser:
        if PurePath(filename).suffix.lower() in self.EMAIL_EXTENSIONS:
            return self._email_parser
        return self._loose_loader
