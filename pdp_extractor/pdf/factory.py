from pdp_extractor.config.settings import Settings
from pdp_extractor.llm.client_base import BaseLLMClient
from pdp_extractor.pdf.base import BasePdfTier
from pdp_extractor.pdf.pdfplumber_adapter import PdfPlumberAdapter
from pdp_extractor.pdf.pymupdf_adapter import PyMuPdfAdapter
from pdp_extractor.pdf.tiered_extractor import TieredPdfExtractor
from pdp_extractor.pdf.vision_adapter import VisionOcrAdapter


class PdfExtractorFactory:
    """Creates the tiered PDF extractor based on settings."""

    ADAPTERS: dict[str, type[PdfPlumberAdapter] | type[PyMuPdfAdapter]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(
        cls,
        settings: Settings,
        llm_client: BaseLLMClient | None = None,
    ) -> TieredPdfExtractor:
        """Build native, fallback and (when enabled) vision tiers.

        Raises:
            ValueError: if an engine name is unknown or vision is enabled without a client.
        """
        tiers: list[BasePdfTier] = [
            cls._create_text_tier(settings.pdf_native_engine, settings.pdf_min_text_chars),
            cls._create_text_tier(
                settings.pdf_fallback_engine,
                settings.pdf_min_text_chars,
                max_pages=settings.pdf_fallback_max_pages,
            ),
        ]
        if settings.vision_enabled:
            if llm_client is None:
                raise ValueError("vision_enabled requires an LLM client")
            tiers.append(
                VisionOcrAdapter(
                    client=llm_client,
                    model=settings.llm_vision_model_name,
                    min_chars=settings.vision_min_text_chars,
                    max_pages=settings.vision_max_pages,
                    dpi=settings.vision_dpi,
                    max_dimension=settings.vision_max_dimension,
                    max_tokens=settings.vision_max_tokens,
                )
            )
        return TieredPdfExtractor(tiers)

    @classmethod
    def _create_text_tier(
        cls,
        engine_name: str,
        min_chars: int,
        max_pages: int | None = None,
    ) -> BasePdfTier:
        engine = engine_name.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        if max_pages is None:
            return adapter_cls(min_chars=min_chars)
        return adapter_cls(min_chars=min_chars, max_pages=max_pages)
