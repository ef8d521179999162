from pdp_extractor.extraction.base import BaseTextExtractor
from pdp_extractor.extraction.filename_heuristics import describe_filename
from pdp_extractor.extraction.models import ExtractedText, ExtractionMethod
from pdp_extractor.logging.logger import Log
from pdp_extractor.pdf.base import BasePdfTier
from pdp_extractor.pdf.exceptions import PdfTierFailure

PDF_MEDIA_TYPE = "application/pdf"


class TieredPdfExtractor(BaseTextExtractor):
    """Runs PDF tiers in order and keeps the first output that is long enough.

    Tier failures are logged and skipped. When every tier falls short, the
    text of the first tier (if any) is kept and the filename hints are
    appended, so a PDF always yields something to aggregate.
    """

    def __init__(self, tiers: list[BasePdfTier]) -> None:
        if not tiers:
            raise ValueError("TieredPdfExtractor needs at least one tier")
        self._tiers = tiers

    @property
    def tiers(self) -> list[BasePdfTier]:
        return list(self._tiers)

    def extract(self, data: bytes, filename: str) -> ExtractedText:
        partial = ""
        for index, tier in enumerate(self._tiers):
            try:
                text = tier.extract(data, filename)
            except PdfTierFailure as exc:
                Log.warning(f"PDF tier '{tier.name}' failed for {filename}: {exc}")
                continue

            if index == 0:
                partial = text
            if len(text) >= tier.min_chars:
                Log.info(f"PDF tier '{tier.name}' accepted {len(text)} chars from {filename}")
                return ExtractedText(
                    source=filename,
                    text=text,
                    method=tier.method,
                    media_type=PDF_MEDIA_TYPE,
                )
            Log.warning(
                f"PDF tier '{tier.name}' returned {len(text)} chars for {filename} "
                f"(need {tier.min_chars})"
            )

        Log.warning(f"All PDF tiers failed for {filename}, using filename hints")
        return ExtractedText(
            source=filename,
            text=self._filename_fallback(partial, filename),
            method=ExtractionMethod.FILENAME_HEURISTIC,
            media_type=PDF_MEDIA_TYPE,
        )

    @staticmethod
    def _filename_fallback(partial: str, filename: str) -> str:
        lines = [
            f"[PDF: {filename} - all extraction methods failed]",
            f"Filename indicates: {describe_filename(filename)}",
        ]
        if partial:
            lines.insert(0, partial)
        return "\n".join(lines)
