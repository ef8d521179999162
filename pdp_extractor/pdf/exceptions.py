class PdfTierFailure(Exception):
    """Raised when one PDF extraction tier cannot produce text."""


class VisionOCRError(PdfTierFailure):
    """Raised when rasterization or the vision model transcription fails."""
