import pytest

from pdp_extractor.container.eml_parser import EmlContainerParser
from pdp_extractor.container.exceptions import ContainerParseError
from pdp_extractor.container.factory import ContainerParserFactory
from pdp_extractor.container.loose_document import LooseDocumentLoader


class TestContainerParserFactory:
    def test_eml_uses_email_parser(self) -> None:
        assert isinstance(ContainerParserFactory().for_filename("case.EML"), EmlContainerParser)

    def test_other_files_use_loose_loader(self) -> None:
        assert isinstance(ContainerParserFactory().for_filename("cert.pdf"), LooseDocumentLoader)


class TestLooseDocumentLoader:
    def test_wraps_file_as_single_attachment(self) -> None:
        container = LooseDocumentLoader().parse(b"%PDF-1.4", "uploads/GWO_Jane.pdf")
        assert container.body_text == ""
        assert len(container.attachments) == 1
        attachment = container.attachments[0]
        assert attachment.filename == "GWO_Jane.pdf"
        assert attachment.content_type == "application/pdf"
        assert attachment.size == 8

    def test_unknown_type_defaults_to_octet_stream(self) -> None:
        container = LooseDocumentLoader().parse(b"x", "blob.unknownext")
        assert container.attachments[0].content_type == "application/octet-stream"

    def test_non_bytes_raise(self) -> None:
        with pytest.raises(ContainerParseError):
            LooseDocumentLoader().parse(None, "a.pdf")  # type: ignore[arg-type]
