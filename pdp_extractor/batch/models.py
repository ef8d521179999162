from dataclasses import dataclass, field

from pdp_extractor.processor.models import FileOutcome
from pdp_extractor.structured.models import StructuredResult


@dataclass(frozen=True)
class BatchResult:
    """Per-file outcomes in input order, plus the merged result of the successful ones."""

    outcomes: list[FileOutcome] = field(default_factory=list)
    merged: StructuredResult = field(default_factory=StructuredResult)

    @property
    def succeeded(self) -> list[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.succeeded]

    @property
    def failed(self) -> list[FileOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.succeeded]
