import threading
from unittest.mock import MagicMock

import pytest

from pdp_extractor.container.exceptions import ContainerParseError
from pdp_extractor.container.factory import ContainerParserFactory
from pdp_extractor.container.models import ParsedContainer, RawAttachment
from pdp_extractor.extraction.attachment_extractor import AttachmentTextExtractor
from pdp_extractor.extraction.models import ExtractedText, ExtractionMethod
from pdp_extractor.processor.aggregator import TextAggregator
from pdp_extractor.processor.exceptions import ProcessingCancelledError
from pdp_extractor.processor.models import InputFile, ProcessingState
from pdp_extractor.processor.pipeline import PipelineContext
from pdp_extractor.processor.processor import Processor
from pdp_extractor.processor.progress import ProgressChannel, ProgressStep
from pdp_extractor.processor.state import FileStateTracker
from pdp_extractor.processor.steps import (
    AggregateStep,
    ExtractAttachmentsStep,
    ParseContainerStep,
    StructuredExtractionStep,
)
from pdp_extractor.structured.exceptions import ExtractionFormatError
from pdp_extractor.structured.models import Company, StructuredResult, Worker


def _container() -> ParsedContainer:
    return ParsedContainer(
        subject="PDP",
        sender="hse@windserv.example",
        body_text="Bonjour",
        attachments=[
            RawAttachment(filename="a.pdf", content_type="application/pdf", payload=b"A"),
            RawAttachment(filename="b.txt", content_type="text/plain", payload=b"B"),
        ],
    )


def _make_pipeline(
    progress: ProgressChannel | None = None,
) -> tuple[Processor, MagicMock, MagicMock, MagicMock]:
    parser = MagicMock()
    parser.parse.return_value = _container()
    parsers = MagicMock(spec=ContainerParserFactory)
    parsers.for_filename.return_value = parser

    attachment_extractor = MagicMock(spec=AttachmentTextExtractor)
    attachment_extractor.extract.side_effect = lambda attachment: ExtractedText(
        source=attachment.filename,
        text=f"text of {attachment.filename}",
        method=ExtractionMethod.NATIVE,
        media_type=attachment.content_type,
    )

    structured = MagicMock()
    structured.extract.return_value = StructuredResult(
        company=Company(name="Windserv SAS"),
        workers=[Worker(first_name="Jane", last_name="Doe")],
    )

    steps = [
        ParseContainerStep(parsers),
        ExtractAttachmentsStep(attachment_extractor),
        AggregateStep(TextAggregator(10_000)),
        StructuredExtractionStep(structured),
    ]
    return Processor(steps, progress=progress), parser, attachment_extractor, structured


def _file() -> InputFile:
    return InputFile(filename="case.eml", data=b"raw")


class TestProcessorSuccess:
    def test_returns_complete_outcome(self) -> None:
        processor, _, _, _ = _make_pipeline()
        outcome = processor.process(_file())
        assert outcome.state is ProcessingState.COMPLETE
        assert outcome.succeeded
        assert outcome.result is not None
        assert outcome.result.company.name == "Windserv SAS"
        assert [e.source for e in outcome.extracted] == ["a.pdf", "b.txt"]

    def test_structured_extraction_called_once_with_aggregate(self) -> None:
        processor, _, _, structured = _make_pipeline()
        processor.process(_file())
        structured.extract.assert_called_once()
        text = structured.extract.call_args.args[0]
        assert text.startswith("=== BODY (text/plain) [method: native] ===\nSubject: PDP")
        assert "text of a.pdf" in text
        assert text.index("text of a.pdf") < text.index("text of b.txt")

    def test_body_segment_includes_headers_and_body(self) -> None:
        processor, _, _, structured = _make_pipeline()
        processor.process(_file())
        text = structured.extract.call_args.args[0]
        assert "From: hse@windserv.example\n\nBonjour" in text

    def test_publishes_progress(self) -> None:
        channel = ProgressChannel()
        processor, _, _, _ = _make_pipeline(channel)
        processor.process(_file())
        steps = [event.step for event in channel.drain()]
        assert steps == [
            ProgressStep.QUEUED,
            ProgressStep.PARSING_CONTAINER,
            ProgressStep.EXTRACTING_ATTACHMENTS,
            ProgressStep.ATTACHMENT,
            ProgressStep.ATTACHMENT,
            ProgressStep.AGGREGATING,
            ProgressStep.AWAITING_LLM,
            ProgressStep.COMPLETE,
        ]


class TestProcessorFailures:
    def test_container_error_propagates_and_marks_failed(self) -> None:
        channel = ProgressChannel()
        processor, parser, _, structured = _make_pipeline(channel)
        parser.parse.side_effect = ContainerParseError("no headers")
        with pytest.raises(ContainerParseError):
            processor.process(_file())
        structured.extract.assert_not_called()
        assert channel.drain()[-1].step is ProgressStep.FAILED

    def test_format_error_propagates(self) -> None:
        processor, _, _, structured = _make_pipeline()
        structured.extract.side_effect = ExtractionFormatError("Invalid JSON")
        with pytest.raises(ExtractionFormatError):
            processor.process(_file())

    def test_cancellation_checked_before_each_attachment(self) -> None:
        processor, _, attachment_extractor, structured = _make_pipeline()
        cancel = threading.Event()

        def extract_then_cancel(attachment: RawAttachment) -> ExtractedText:
            cancel.set()
            return ExtractedText(
                source=attachment.filename, text="x", method=ExtractionMethod.NATIVE
            )

        attachment_extractor.extract.side_effect = extract_then_cancel
        with pytest.raises(ProcessingCancelledError, match="attachment 2/2"):
            processor.process(_file(), cancel_event=cancel)
        assert attachment_extractor.extract.call_count == 1
        structured.extract.assert_not_called()

    def test_cancelled_before_start(self) -> None:
        processor, _, attachment_extractor, _ = _make_pipeline()
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(ProcessingCancelledError):
            processor.process(_file(), cancel_event=cancel)
        attachment_extractor.extract.assert_not_called()


class TestStepPreconditions:
    def test_extract_attachments_requires_container(self) -> None:
        context = PipelineContext(file=_file(), tracker=FileStateTracker("case.eml"))
        with pytest.raises(ValueError, match="container must be set"):
            ExtractAttachmentsStep(MagicMock()).run(context)
