import mimetypes
from pathlib import PurePath

from pdp_extractor.container.base import BaseContainerParser
from pdp_extractor.container.exceptions import ContainerParseError
from pdp_extractor.container.models import ParsedContainer, RawAttachment


class LooseDocumentLoader(BaseContainerParser):
    """Wraps a standalone upload (PDF, workbook, text) as a one-attachment container."""

    def parse(self, data: bytes, filename: str) -> ParsedContainer:
        if not isinstance(data, (bytes, bytearray)):
            raise ContainerParseError(f"{filename}: expected bytes, got {type(data).__name__}")
        name = PurePath(filename).name
        content_type = mimetypes.guess_type(name)[0] or "application/octet-stream"
        return ParsedContainer(
            attachments=[RawAttachment(filename=name, content_type=content_type, payload=bytes(data))]
        )
