"""Result types for adoption runs."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from holdover.adoption.registry import AdoptionRecord


class PassStatus(str, Enum):
    SKIPPED = "skipped"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PassOutcome:
    """Outcome of one handler against one deployment unit."""

    handler: str
    unit: str
    status: PassStatus
    records: List[AdoptionRecord] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class AdoptionRunResult:
    """Result of running every handler over every deployment unit."""

    outcomes: List[PassOutcome] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def records(self) -> List[AdoptionRecord]:
        return [r for o in self.outcomes for r in o.records]

    @property
    def adopted_by_handler(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for outcome in self.outcomes:
            if outcome.status is PassStatus.DONE:
                counts[outcome.handler] = counts.get(outcome.handler, 0) + len(outcome.records)
        return counts

    @property
    def errors(self) -> List[str]:
        return [
            f"{o.handler} in {o.unit}: {o.error}"
            for o in self.outcomes
            if o.status is PassStatus.FAILED
        ]

    @property
    def skipped(self) -> int:
        return sum(1 for o in self.outcomes if o.status is PassStatus.SKIPPED)

    @property
    def success(self) -> bool:
        """Whether every pass completed without errors."""
        return not any(o.status is PassStatus.FAILED for o in self.outcomes)


class ResultCollector:
    """Aggregates pass outcomes during execution."""

    def __init__(self) -> None:
        self._result = AdoptionRunResult()

    def record(self, handler: str, unit: str, records: List[AdoptionRecord]) -> None:
        """Record a completed pass."""
        self._result.outcomes.append(
            PassOutcome(handler=handler, unit=unit, status=PassStatus.DONE, records=records)
        )

    def record_skip(self, handler: str, unit: str) -> None:
        self._result.outcomes.append(
            PassOutcome(handler=handler, unit=unit, status=PassStatus.SKIPPED)
        )

    def record_error(self, handler: str, unit: str, error: Exception) -> None:
        """Record a failed pass."""
        self._result.outcomes.append(
            PassOutcome(handler=handler, unit=unit, status=PassStatus.FAILED, error=str(error))
        )

    def finalize(self, duration: float) -> AdoptionRunResult:
        """Return the final result with duration set."""
        self._result.duration_seconds = duration
        return self._result
