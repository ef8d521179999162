"""Typed progress events and the bounded channel that carries them.

The coordinator only publishes; a UI, a log sink or the CLI consumes
``ProgressChannel.events()`` from another thread. ``queue.Queue`` serializes
writes from concurrently processed files.
"""

import queue
import threading
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from pdp_extractor.logging.logger import Log
from pdp_extractor.processor.models import ProcessingState


class ProgressStep(str, Enum):
    """What a progress event reports on."""

    QUEUED = "queued"
    PARSING_CONTAINER = "parsing-container"
    EXTRACTING_ATTACHMENTS = "extracting-attachments"
    ATTACHMENT = "attachment"
    AGGREGATING = "aggregating"
    AWAITING_LLM = "awaiting-llm"
    COMPLETE = "complete"
    FAILED = "failed"

    @classmethod
    def for_state(cls, state: ProcessingState) -> "ProgressStep":
        return cls(state.value)


@dataclass(frozen=True)
class ProgressEvent:
    """One observable step of the pipeline.

    ``current``/``total`` locate the attachment being processed and are
    only set when ``step`` is ATTACHMENT.
    """

    step: ProgressStep
    message: str
    filename: str | None = None
    current: int | None = None
    total: int | None = None
    attachment_count: int | None = None


class ProgressChannel:
    """Bounded, thread-safe queue of progress events.

    Publishing never blocks the pipeline: when the consumer falls behind and
    the queue is full, the event is dropped and logged.
    """

    _CLOSED = object()

    def __init__(self, maxsize: int = 256) -> None:
        self._queue: queue.Queue[object] = queue.Queue(maxsize=maxsize)
        self._dropped = 0
        self._dropped_lock = threading.Lock()

    @property
    def dropped(self) -> int:
        return self._dropped

    def publish(self, event: ProgressEvent) -> None:
        try:
            self._queue.put_nowait(event)
        except queue.Full:
            with self._dropped_lock:
                self._dropped += 1
            Log.debug(f"Progress queue full, dropped event: {event.step.value} {event.message}")

    def close(self) -> None:
        """Signal consumers that no more events will be published."""
        self._queue.put(self._CLOSED)

    def events(self, timeout: float | None = None) -> Iterator[ProgressEvent]:
        """Yield events until the channel is closed.

        Raises:
            queue.Empty: if *timeout* elapses without any event.
        """
        while True:
            item = self._queue.get(timeout=timeout)
            if item is self._CLOSED:
                return
            assert isinstance(item, ProgressEvent)
            yield item

    def drain(self) -> list[ProgressEvent]:
        """Return every event currently queued without waiting."""
        drained: list[ProgressEvent] = []
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                return drained
            if isinstance(item, ProgressEvent):
                drained.append(item)
