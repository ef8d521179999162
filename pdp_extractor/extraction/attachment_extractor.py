from dataclasses import replace

from pdp_extractor.container.models import RawAttachment
from pdp_extractor.extraction.exceptions import TextExtractionError
from pdp_extractor.extraction.filename_heuristics import describe_filename
from pdp_extractor.extraction.models import ExtractedText, ExtractionMethod
from pdp_extractor.extraction.registry import TextExtractorRegistry
from pdp_extractor.logging.logger import Log


class AttachmentTextExtractor:
    """Recovers text from one attachment, degrading failures to a placeholder note.

    Attachment-level failures never abort the file: the placeholder keeps the
    filename hints so structured extraction can still make a best-effort read.
    """

    def __init__(self, registry: TextExtractorRegistry) -> None:
        self._registry = registry

    def extract(self, attachment: RawAttachment) -> ExtractedText:
        try:
            extracted = self._registry.extract(attachment.payload, attachment.filename)
        except TextExtractionError as exc:
            Log.warning(f"Text extraction failed for {attachment.filename}: {exc}")
            return self.placeholder(attachment, str(exc))

        Log.info(
            f"Extracted {extracted.char_count} chars from {attachment.filename} "
            f"({extracted.method.value})"
        )
        return replace(extracted, media_type=attachment.content_type)

    @staticmethod
    def placeholder(attachment: RawAttachment, reason: str) -> ExtractedText:
        return ExtractedText(
            source=attachment.filename,
            text=(
                f"[extraction failed: {reason}] "
                f"Filename suggests: {describe_filename(attachment.filename)}"
            ),
            method=ExtractionMethod.FAILED,
            media_type=attachment.content_type,
        )
