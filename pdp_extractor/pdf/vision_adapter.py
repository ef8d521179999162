import pymupdf

from pdp_extractor.extraction.models import ExtractionMethod
from pdp_extractor.llm.client_base import BaseLLMClient
from pdp_extractor.llm.prompt_loader import VISION_OCR_PROMPT, load_prompt_template
from pdp_extractor.logging.logger import Log
from pdp_extractor.pdf.base import BasePdfTier
from pdp_extractor.pdf.exceptions import VisionOCRError

_POINTS_PER_INCH = 72


class VisionOcrAdapter(BasePdfTier):
    """Last-resort transcription of scanned PDFs by a vision-capable model.

    The first ``max_pages`` pages are rasterized in memory with PyMuPDF and
    sent as PNG images in a single request. Pixmaps and the document never
    outlive the call.
    """

    name = "vision"
    method = ExtractionMethod.VISION_OCR

    def __init__(
        self,
        *,
        client: BaseLLMClient,
        model: str,
        min_chars: int = 50,
        max_pages: int = 1,
        dpi: int = 200,
        max_dimension: int = 2000,
        max_tokens: int = 4096,
        prompt_template: str | None = None,
    ) -> None:
        super().__init__(min_chars)
        if not 1 <= max_pages <= 3:
            raise ValueError(f"max_pages must be between 1 and 3, got {max_pages}")
        self._client = client
        self._model = model
        self._max_pages = max_pages
        self._dpi = dpi
        self._max_dimension = max_dimension
        self._max_tokens = max_tokens
        self._prompt_template = (
            prompt_template
            if prompt_template is not None
            else load_prompt_template(VISION_OCR_PROMPT)
        )

    def extract(self, pdf_bytes: bytes, filename: str) -> str:
        images = self.render_pages(pdf_bytes, filename)
        Log.info(f"Sending {len(images)} page image(s) of {filename} to vision model")
        try:
            transcription = self._client.create_vision_completion(
                model=self._model,
                prompt=self._prompt_template.format(filename=filename),
                images=images,
                max_tokens=self._max_tokens,
            )
        except Exception as exc:
            raise VisionOCRError(f"Vision transcription failed for {filename}: {exc}") from exc
        return transcription.strip()

    def render_pages(self, pdf_bytes: bytes, filename: str) -> list[bytes]:
        """Rasterize the leading pages to PNG bytes.

        Raises:
            VisionOCRError: if the document cannot be opened or has no pages.
        """
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                page_count = min(doc.page_count, self._max_pages)
                images = [self._render_page(doc[number]) for number in range(page_count)]
        except Exception as exc:
            raise VisionOCRError(f"Could not rasterize {filename}: {exc}") from exc
        if not images:
            raise VisionOCRError(f"{filename} has no pages to rasterize")
        return images

    def _render_page(self, page: pymupdf.Page) -> bytes:
        rect = page.rect
        scale = self._dpi / _POINTS_PER_INCH
        longest_side = max(rect.width, rect.height)
        if longest_side * scale > self._max_dimension:
            scale = self._max_dimension / longest_side
        pixmap = page.get_pixmap(matrix=pymupdf.Matrix(scale, scale))
        return pixmap.tobytes("png")
