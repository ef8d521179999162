from pdp_extractor.structured.base import BaseStructuredExtractor
from pdp_extractor.structured.extractor import StructuredExtractor
from pdp_extractor.structured.factory import StructuredExtractorFactory

__all__ = ["BaseStructuredExtractor", "StructuredExtractor", "StructuredExtractorFactory"]
