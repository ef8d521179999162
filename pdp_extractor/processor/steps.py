from pdp_extractor.container.factory import ContainerParserFactory
from pdp_extractor.extraction.attachment_extractor import AttachmentTextExtractor
from pdp_extractor.extraction.models import ExtractedText, ExtractionMethod
from pdp_extractor.logging.logger import Log
from pdp_extractor.processor.aggregator import BODY_SOURCE, TextAggregator
from pdp_extractor.processor.exceptions import ProcessingCancelledError
from pdp_extractor.processor.models import ProcessingState
from pdp_extractor.processor.pipeline import PipelineContext, PipelineStep
from pdp_extractor.structured.base import BaseStructuredExtractor


class ParseContainerStep(PipelineStep):
    def __init__(self, parsers: ContainerParserFactory) -> None:
        self._parsers = parsers

    def run(self, context: PipelineContext) -> PipelineContext:
        context.tracker.advance(
            ProcessingState.PARSING_CONTAINER, f"Parsing {context.file.filename}"
        )
        parser = self._parsers.for_filename(context.file.filename)
        container = parser.parse(context.file.data, context.file.filename)
        context.container = container

        body_text = "\n\n".join(
            part for part in (container.header_text, container.body_text.strip()) if part
        )
        if body_text:
            context.body = ExtractedText(
                source=BODY_SOURCE,
                text=body_text,
                method=ExtractionMethod.NATIVE,
            )
        Log.info(
            f"Parsed {context.file.filename}: {len(container.attachments)} relevant attachments"
        )
        return context


class ExtractAttachmentsStep(PipelineStep):
    def __init__(self, attachment_extractor: AttachmentTextExtractor) -> None:
        self._attachment_extractor = attachment_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.container is None:
            raise ValueError("PipelineContext.container must be set before attachment extraction")
        attachments = context.container.attachments
        total = len(attachments)
        context.tracker.advance(
            ProcessingState.EXTRACTING_ATTACHMENTS,
            f"Extracting text from {total} attachments of {context.file.filename}",
            attachment_count=total,
        )
        for index, attachment in enumerate(attachments, start=1):
            if context.cancelled:
                raise ProcessingCancelledError(
                    f"Processing of {context.file.filename} cancelled before attachment "
                    f"{index}/{total}"
                )
            context.tracker.report_attachment(index, total, attachment.filename)
            context.attachments.append(self._attachment_extractor.extract(attachment))
        return context


class AggregateStep(PipelineStep):
    def __init__(self, aggregator: TextAggregator) -> None:
        self._aggregator = aggregator

    def run(self, context: PipelineContext) -> PipelineContext:
        context.tracker.advance(
            ProcessingState.AGGREGATING, f"Aggregating text of {context.file.filename}"
        )
        context.aggregated = self._aggregator.aggregate(context.body, context.attachments)
        Log.info(
            f"Aggregated {context.aggregated.segment_count} segments "
            f"({len(context.aggregated.text)} chars) for {context.file.filename}"
        )
        if context.aggregated.truncated_sources:
            Log.warning(f"Truncated segments: {context.aggregated.truncated_sources}")
        return context


class StructuredExtractionStep(PipelineStep):
    def __init__(self, structured_extractor: BaseStructuredExtractor) -> None:
        self._structured_extractor = structured_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.aggregated is None:
            raise ValueError("PipelineContext.aggregated must be set before structured extraction")
        context.tracker.advance(
            ProcessingState.AWAITING_LLM, f"Waiting for structured extraction of {context.file.filename}"
        )
        context.result = self._structured_extractor.extract(context.aggregated.text)
        return context
