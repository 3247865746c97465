"""Logging helpers for the demonstration harness."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, TypeVar

from rich.console import Console
from rich.logging import RichHandler

R = TypeVar("R")


def setup_logging(level: str = "INFO", rich_tracebacks: bool = True) -> None:
    """Configure the root logger with optional rich tracebacks."""

    console = Console(stderr=True)
    handler = RichHandler(console=console, rich_tracebacks=rich_tracebacks, show_path=False)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


@dataclass
class CallTally:
    """Count how many times wrapped callables actually run, per label."""

    counts: Dict[str, int] = field(default_factory=dict)

    def incr(self, label: str, amount: int = 1) -> None:
        self.counts[label] = self.counts.get(label, 0) + int(amount)

    def wrap(self, label: str, fn: Callable[..., R]) -> Callable[..., R]:
        """Return ``fn`` wrapped so that every call is counted under ``label``."""

        @functools.wraps(fn)
        def _counted(*args: Any, **kwargs: Any) -> R:
            self.incr(label)
            return fn(*args, **kwargs)

        return _counted

    def __getitem__(self, label: str) -> int:
        return self.counts.get(label, 0)


__all__ = ["setup_logging", "CallTally"]
