import io
from urllib.parse import unquote

import pdfplumber
from pdfplumber.page import Page

from pdp_extractor.extraction.models import ExtractionMethod
from pdp_extractor.pdf.base import BasePdfTier
from pdp_extractor.pdf.exceptions import PdfTierFailure


class PdfPlumberAdapter(BasePdfTier):
    """Native layout extraction: positioned text runs of every page, via pdfplumber."""

    name = "pdfplumber"
    method = ExtractionMethod.NATIVE

    def __init__(self, min_chars: int, max_pages: int | None = None) -> None:
        super().__init__(min_chars)
        self._max_pages = max_pages

    def extract(self, pdf_bytes: bytes, filename: str) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [self._page_text(page) for page in pdf.pages[: self._max_pages]]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise PdfTierFailure(f"pdfplumber extraction failed for {filename}: {exc}") from exc

    @staticmethod
    def _page_text(page: Page) -> str:
        runs = page.extract_words(keep_blank_chars=True, use_text_flow=True)
        return " ".join(unquote(run["text"]) for run in runs)
