import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pdp_extractor.container.models import ParsedContainer
from pdp_extractor.extraction.models import ExtractedText
from pdp_extractor.processor.models import AggregatedDocument, InputFile
from pdp_extractor.processor.state import FileStateTracker
from pdp_extractor.structured.models import StructuredResult


@dataclass(slots=True)
class PipelineContext:
    file: InputFile
    tracker: FileStateTracker
    cancel_event: threading.Event | None = None
    container: ParsedContainer | None = None
    body: ExtractedText | None = None
    attachments: list[ExtractedText] = field(default_factory=list)
    aggregated: AggregatedDocument | None = None
    result: StructuredResult | None = None

    @property
    def cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
