import pymupdf

from pdp_extractor.extraction.models import ExtractionMethod
from pdp_extractor.pdf.base import BasePdfTier
from pdp_extractor.pdf.exceptions import PdfTierFailure


class PyMuPdfAdapter(BasePdfTier):
    """Alternate text-layer reader via PyMuPDF, capped to the first pages."""

    name = "pymupdf"
    method = ExtractionMethod.FALLBACK_PARSER

    def __init__(self, min_chars: int, max_pages: int = 10) -> None:
        super().__init__(min_chars)
        self._max_pages = max_pages

    def extract(self, pdf_bytes: bytes, filename: str) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                page_count = min(doc.page_count, self._max_pages)
                page_texts = [doc[number].get_text().strip() for number in range(page_count)]
            # blank pages are skipped so markers alone never pass the threshold
            pages = [
                f"--- Page {number} ---\n{text}"
                for number, text in enumerate(page_texts, start=1)
                if text
            ]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise PdfTierFailure(f"pymupdf extraction failed for {filename}: {exc}") from exc
