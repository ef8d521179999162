from pdp_extractor.config.settings import Settings
from pdp_extractor.extraction.attachment_extractor import AttachmentTextExtractor
from pdp_extractor.extraction.plain_text import PlainTextExtractor
from pdp_extractor.extraction.registry import TextExtractorRegistry
from pdp_extractor.extraction.spreadsheet import SpreadsheetExtractor
from pdp_extractor.llm.client_base import BaseLLMClient
from pdp_extractor.pdf.factory import PdfExtractorFactory


class TextExtractorFactory:
    """Creates the per-format extractor registry based on settings."""

    @classmethod
    def create_registry(
        cls,
        settings: Settings,
        llm_client: BaseLLMClient | None = None,
    ) -> TextExtractorRegistry:
        spreadsheet = SpreadsheetExtractor()
        return TextExtractorRegistry(
            {
                "pdf": PdfExtractorFactory.create(settings, llm_client),
                "xlsx": spreadsheet,
                "xls": spreadsheet,
                "csv": spreadsheet,
                "txt": PlainTextExtractor(),
            }
        )

    @classmethod
    def create(
        cls,
        settings: Settings,
        llm_client: BaseLLMClient | None = None,
    ) -> AttachmentTextExtractor:
        """Create the attachment extractor used by the processing pipeline."""
        return AttachmentTextExtractor(cls.create_registry(settings, llm_client))
