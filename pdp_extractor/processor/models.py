from dataclasses import dataclass, field
from enum import Enum

from pdp_extractor.extraction.models import ExtractedText
from pdp_extractor.structured.models import StructuredResult


class ProcessingState(str, Enum):
    """Lifecycle of one input file, in the only order it may be traversed."""

    QUEUED = "queued"
    PARSING_CONTAINER = "parsing-container"
    EXTRACTING_ATTACHMENTS = "extracting-attachments"
    AGGREGATING = "aggregating"
    AWAITING_LLM = "awaiting-llm"
    COMPLETE = "complete"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (ProcessingState.COMPLETE, ProcessingState.FAILED)


@dataclass(frozen=True)
class InputFile:
    """One uploaded file: an ``.eml`` bundle or a loose document."""

    filename: str
    data: bytes = field(repr=False)


@dataclass(frozen=True)
class AggregatedDocument:
    """Bounded text handed to structured extraction."""

    text: str
    segment_count: int
    truncated_sources: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FileOutcome:
    """Terminal result of processing one input file."""

    filename: str
    state: ProcessingState
    result: StructuredResult | None = None
    extracted: list[ExtractedText] = field(default_factory=list)
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is ProcessingState.COMPLETE
