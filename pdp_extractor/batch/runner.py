import threading
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TypeVar

from pdp_extractor.batch.models import BatchResult
from pdp_extractor.logging.logger import Log
from pdp_extractor.processor.merge import merge_results
from pdp_extractor.processor.models import FileOutcome, InputFile, ProcessingState
from pdp_extractor.processor.processor import Processor

_Item = TypeVar("_Item")


class BatchRunner:
    """Run every file of a batch, catch per-file exceptions, and merge the results.

    A failing file is reported as a failed outcome and never stops the
    others. Outcomes keep the input order whatever the parallelism.
    """

    def __init__(self, processor: Processor, max_workers: int = 1) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self._processor = processor
        self._max_workers = max_workers

    def run(
        self,
        files: list[InputFile],
        cancel_event: threading.Event | None = None,
    ) -> BatchResult:
        """Process *files* and return one outcome per file."""
        return self._run_batch(files, lambda file: self._run_one(file, cancel_event))

    def run_paths(
        self,
        paths: list[Path],
        cancel_event: threading.Event | None = None,
    ) -> BatchResult:
        """Read *paths* from disk and process them; an unreadable path fails only itself."""
        return self._run_batch(paths, lambda path: self._run_path(path, cancel_event))

    def _run_batch(
        self,
        items: Sequence[_Item],
        run_one: Callable[[_Item], FileOutcome],
    ) -> BatchResult:
        Log.info(f"Running batch of {len(items)} files (max_workers={self._max_workers})")
        if self._max_workers == 1 or len(items) <= 1:
            outcomes = [run_one(item) for item in items]
        else:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                outcomes = list(executor.map(run_one, items))

        merged = merge_results([o.result for o in outcomes if o.result is not None])
        failed = sum(1 for outcome in outcomes if not outcome.succeeded)
        Log.info(f"Batch finished: {len(outcomes) - failed} complete, {failed} failed")
        return BatchResult(outcomes=outcomes, merged=merged)

    def _run_path(self, path: Path, cancel_event: threading.Event | None) -> FileOutcome:
        try:
            data = path.read_bytes()
        except OSError as exc:
            return self._handle_failure(path.name, exc)
        return self._run_one(InputFile(filename=path.name, data=data), cancel_event)

    def _run_one(self, file: InputFile, cancel_event: threading.Event | None) -> FileOutcome:
        try:
            return self._processor.process(file, cancel_event)
        except Exception as exc:
            return self._handle_failure(file.filename, exc)

    @staticmethod
    def _handle_failure(filename: str, exc: Exception) -> FileOutcome:
        Log.error(f"File {filename} failed: {type(exc).__name__}: {exc}")
        return FileOutcome(
            filename=filename,
            state=ProcessingState.FAILED,
            error=f"{type(exc).__name__}: {exc}",
        )
