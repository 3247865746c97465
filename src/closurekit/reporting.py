"""Render demonstration results."""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from .demos import DemoResult
from .utils.timers import TimerRegistry


def build_table(results: Iterable[DemoResult]) -> Table:
    """Return a :class:`~rich.table.Table` with one row per demonstration."""

    table = Table(title="closurekit demonstrations")
    table.add_column("Demo", style="cyan")
    table.add_column("Call")
    table.add_column("Result", style="green")
    table.add_column("Time (ms)", justify="right")
    for result in results:
        table.add_row(result.name, result.description, repr(result.value), f"{result.elapsed * 1e3:.3f}")
    return table


def build_timer_table(timers: TimerRegistry) -> Table:
    """Return a :class:`~rich.table.Table` summarising every timer in ``timers``."""

    table = Table(title="Timers")
    table.add_column("Label", style="cyan")
    table.add_column("Total (ms)", justify="right")
    table.add_column("Calls", justify="right")
    table.add_column("Mean (ms)", justify="right")
    for label, total, calls, mean in timers.rows():
        table.add_row(label, f"{total * 1e3:.3f}", str(calls), f"{mean * 1e3:.3f}")
    return table


def print_report(
    results: Iterable[DemoResult],
    console: Optional[Console] = None,
    total: Optional[float] = None,
    label: str = "Execution time",
    timers: Optional[TimerRegistry] = None,
) -> None:
    """Print the results table, then the timer summary and total when given."""

    console = console or Console()
    console.print(build_table(results))
    if timers is not None and timers.records:
        console.print(build_timer_table(timers))
    if total is not None:
        console.print(f"{label}: {total * 1e3:.3f}ms")


__all__ = ["build_table", "build_timer_table", "print_report"]
