import threading

from pdp_extractor.config.settings import Settings
from pdp_extractor.container.factory import ContainerParserFactory
from pdp_extractor.extraction.factory import TextExtractorFactory
from pdp_extractor.llm.client_base import BaseLLMClient
from pdp_extractor.llm.factory import LLMClientFactory
from pdp_extractor.logging.logger import Log
from pdp_extractor.processor.aggregator import TextAggregator
from pdp_extractor.processor.models import FileOutcome, InputFile, ProcessingState
from pdp_extractor.processor.pipeline import PipelineContext, PipelineStep
from pdp_extractor.processor.progress import ProgressChannel
from pdp_extractor.processor.state import FileStateTracker
from pdp_extractor.processor.steps import (
    AggregateStep,
    ExtractAttachmentsStep,
    ParseContainerStep,
    StructuredExtractionStep,
)
from pdp_extractor.structured.factory import StructuredExtractorFactory


class Processor:
    """Runs one input file through the extraction pipeline.

    Pipeline: parse container -> extract attachments -> aggregate -> structured extraction.
    Each step advances the file's state and publishes a progress event.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        progress: ProgressChannel | None = None,
    ) -> None:
        self._steps = steps
        self._progress = progress

    def process(
        self,
        file: InputFile,
        cancel_event: threading.Event | None = None,
    ) -> FileOutcome:
        """Process one file and return its completed outcome.

        Raises:
            ContainerParseError, ExtractionFormatError, LLMError,
            ProcessingCancelledError: the file is marked failed first.
        """
        Log.info(f"Processing {file.filename} ({len(file.data)} bytes)")
        tracker = FileStateTracker(file.filename, self._progress)
        context = PipelineContext(file=file, tracker=tracker, cancel_event=cancel_event)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            tracker.fail(str(exc))
            raise

        tracker.advance(ProcessingState.COMPLETE, f"Completed {file.filename}")
        Log.info(f"{file.filename} completed")
        return FileOutcome(
            filename=file.filename,
            state=ProcessingState.COMPLETE,
            result=context.result,
            extracted=list(context.attachments),
        )


def build_processor(
    settings: Settings,
    progress: ProgressChannel | None = None,
    llm_client: BaseLLMClient | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if llm_client is None:
        llm_client = LLMClientFactory.create(settings)
    attachment_extractor = TextExtractorFactory.create(settings, llm_client)
    structured_extractor = StructuredExtractorFactory.create(settings, llm_client)
    steps: list[PipelineStep] = [
        ParseContainerStep(ContainerParserFactory()),
        ExtractAttachmentsStep(attachment_extractor),
        AggregateStep(TextAggregator(settings.aggregate_segment_max_chars)),
        StructuredExtractionStep(structured_extractor),
    ]
    return Processor(steps, progress=progress)
