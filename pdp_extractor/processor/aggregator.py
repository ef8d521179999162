from pdp_extractor.extraction.filename_heuristics import describe_filename
from pdp_extractor.extraction.models import ExtractedText
from pdp_extractor.processor.models import AggregatedDocument

BODY_SOURCE = "body"


class TextAggregator:
    """Joins body and attachment texts into one bounded document with provenance headers.

    The body comes first, then attachments in container order. Every segment
    is capped at ``max_chars``; a capped segment ends with a marker giving
    its original length.
    """

    def __init__(self, max_chars: int = 10_000) -> None:
        if max_chars <= 0:
            raise ValueError(f"max_chars must be positive, got {max_chars}")
        self._max_chars = max_chars

    def aggregate(
        self,
        body: ExtractedText | None,
        attachments: list[ExtractedText],
    ) -> AggregatedDocument:
        segments: list[str] = []
        truncated: list[str] = []

        if body is not None and body.text.strip():
            text, was_truncated = self._bounded(body.text)
            if was_truncated:
                truncated.append(body.source)
            segments.append(
                f"=== BODY ({body.media_type}) [method: {body.method.value}] ===\n{text}"
            )

        total = len(attachments)
        for index, attachment in enumerate(attachments, start=1):
            text, was_truncated = self._bounded(attachment.text)
            if was_truncated:
                truncated.append(attachment.source)
            segments.append(
                f"=== ATTACHMENT {index}/{total}: {attachment.source} "
                f"({attachment.media_type}) [method: {attachment.method.value}] ===\n"
                f"Filename indicates: {describe_filename(attachment.source)}\n"
                f"{text}"
            )

        return AggregatedDocument(
            text="\n\n".join(segments),
            segment_count=len(segments),
            truncated_sources=truncated,
        )

    def _bounded(self, text: str) -> tuple[str, bool]:
        if len(text) <= self._max_chars:
            return text, False
        marker = f"\n[truncated: original length {len(text)} characters]"
        return text[: self._max_chars] + marker, True
