from pdp_extractor.processor.exceptions import InvalidTransitionError
from pdp_extractor.processor.models import ProcessingState
from pdp_extractor.processor.progress import ProgressChannel, ProgressEvent, ProgressStep

_ORDER = [
    ProcessingState.QUEUED,
    ProcessingState.PARSING_CONTAINER,
    ProcessingState.EXTRACTING_ATTACHMENTS,
    ProcessingState.AGGREGATING,
    ProcessingState.AWAITING_LLM,
    ProcessingState.COMPLETE,
]


class FileStateTracker:
    """Moves one file forward through the processing states and reports each move.

    States are strictly sequential. FAILED may be entered from any
    non-terminal state; nothing leaves a terminal state.
    """

    def __init__(self, filename: str, progress: ProgressChannel | None = None) -> None:
        self._filename = filename
        self._progress = progress
        self._state = ProcessingState.QUEUED
        self._history = [ProcessingState.QUEUED]
        self._publish(ProgressStep.QUEUED, f"Queued {filename}")

    @property
    def state(self) -> ProcessingState:
        return self._state

    @property
    def history(self) -> list[ProcessingState]:
        return list(self._history)

    def advance(self, target: ProcessingState, message: str = "", **details: int) -> None:
        """Move to *target*.

        Raises:
            InvalidTransitionError: if *target* is not the next state.
        """
        if self._state.is_terminal:
            raise InvalidTransitionError(
                f"{self._filename} is already {self._state.value}, cannot move to {target.value}"
            )
        if target is not ProcessingState.FAILED:
            expected = _ORDER[_ORDER.index(self._state) + 1]
            if target is not expected:
                raise InvalidTransitionError(
                    f"{self._filename}: {self._state.value} -> {target.value} is not allowed "
                    f"(next state is {expected.value})"
                )
        self._state = target
        self._history.append(target)
        self._publish(
            ProgressStep.for_state(target),
            message or f"{self._filename}: {target.value}",
            **details,
        )

    def fail(self, reason: str) -> None:
        self.advance(ProcessingState.FAILED, f"{self._filename} failed: {reason}")

    def report_attachment(self, current: int, total: int, attachment_name: str) -> None:
        self._publish(
            ProgressStep.ATTACHMENT,
            f"Extracting {attachment_name} ({current}/{total})",
            current=current,
            total=total,
            attachment_count=total,
        )

    def _publish(self, step: ProgressStep, message: str, **details: int) -> None:
        if self._progress is None:
            return
        self._progress.publish(
            ProgressEvent(step=step, message=message, filename=self._filename, **details)
        )
