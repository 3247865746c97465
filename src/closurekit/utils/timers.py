"""Named wall-clock timers for the demonstration harness."""

from __future__ import annotations

import contextlib
import time
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple


@dataclass
class TimerRecord:
    """Accumulates elapsed wall-clock time for a named section."""

    total: float = 0.0
    calls: int = 0

    def update(self, dt: float) -> None:
        self.total += dt
        self.calls += 1

    @property
    def mean(self) -> float:
        return self.total / self.calls if self.calls else 0.0


@dataclass
class TimerRegistry:
    """Registry of timers keyed by string labels, in first-use order."""

    records: Dict[str, TimerRecord] = field(default_factory=dict)

    @contextlib.contextmanager
    def time(self, label: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            dt = time.perf_counter() - start
            self.records.setdefault(label, TimerRecord()).update(dt)

    def elapsed(self, label: str) -> float:
        """Total seconds recorded under ``label``; ``0.0`` if it never ran."""

        record = self.records.get(label)
        return record.total if record is not None else 0.0

    def rows(self) -> List[Tuple[str, float, int, float]]:
        """Return ``(label, total, calls, mean)`` per timer, in first-use order."""

        return [(label, record.total, record.calls, record.mean) for label, record in self.records.items()]


__all__ = ["TimerRecord", "TimerRegistry"]
