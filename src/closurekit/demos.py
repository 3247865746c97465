"""Catalogue of demonstrations exercising every utility.

Each demonstration uses the literal inputs of the usage examples the
utilities were first written against and returns the value it computed, so
the harness can render it and the tests can assert on it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from . import sequences as seq
from .errors import UnknownDemoError
from .functions import memoize, once, unary
from .utils.logging import CallTally
from .utils.timers import TimerRegistry

logger = logging.getLogger(__name__)


@dataclass
class DemoResult:
    """Outcome of one demonstration."""

    name: str
    description: str
    value: Any
    elapsed: float


@dataclass
class Demo:
    name: str
    description: str
    run: Callable[[CallTally], Any]


class _Scale:
    def __init__(self, factor: int) -> None:
        self.factor = factor

    def apply(self, value: int) -> int:
        return value * self.factor


def _unary(tally: CallTally) -> Any:
    return seq.map(["1", "2", "3"], unary(int))


def _once(tally: CallTally) -> Any:
    greet = once(tally.wrap("once", lambda: "Executes only once!"))
    return {"results": [greet(), greet()], "underlying_calls": tally["once"]}


def _every(tally: CallTally) -> Any:
    return seq.every([2, 5, 7], lambda arg: arg > 0)


def _any(tally: CallTally) -> Any:
    return seq.any([2, 5, 10], lambda arg: arg > 9)


def _memoize(tally: CallTally) -> Any:
    memory = memoize(tally.wrap("memoize", lambda arg: arg * 2))
    for key in (10, 20, 30, 10):
        memory(key)
    return {"cache": memory(10, None, True), "underlying_calls": tally["memoize"]}


def _map(tally: CallTally) -> Any:
    return seq.map([2, 4], lambda arg: arg**2)


def _filter(tally: CallTally) -> Any:
    return seq.filter([2, 4, 6], lambda arg: arg > 2)


def _zip(tally: CallTally) -> Any:
    return seq.zip([2, 4], [5, 10], lambda x, y: x * y)


def _foreach(tally: CallTally) -> Any:
    squares: List[int] = []

    def record(item: int) -> None:
        logger.info("%d squared is %d", item, item**2)
        squares.append(item**2)

    seq.foreach([2, 3, 5], record)
    return squares


def _context(tally: CallTally) -> Any:
    return seq.map([1, 2, 3], _Scale.apply, _Scale(10))


DEMOS: Dict[str, Demo] = {
    demo.name: demo
    for demo in (
        Demo("unary", "map(['1', '2', '3'], unary(int))", _unary),
        Demo("once", "once(fn) called twice", _once),
        Demo("every", "every([2, 5, 7], x > 0)", _every),
        Demo("any", "any([2, 5, 10], x > 9)", _any),
        Demo("memoize", "memoize(x * 2) over 10, 20, 30, 10", _memoize),
        Demo("map", "map([2, 4], x ** 2)", _map),
        Demo("filter", "filter([2, 4, 6], x > 2)", _filter),
        Demo("zip", "zip([2, 4], [5, 10], x * y)", _zip),
        Demo("foreach", "foreach([2, 3, 5], print x ** 2)", _foreach),
        Demo("context", "map([1, 2, 3], Scale.apply, Scale(10))", _context),
    )
}


def select(names: Optional[Iterable[str]] = None) -> List[Demo]:
    """Return the requested demonstrations in catalogue order; all when ``names`` is empty."""

    wanted = list(names or [])
    if not wanted:
        return list(DEMOS.values())
    unknown = [name for name in wanted if name not in DEMOS]
    if unknown:
        raise UnknownDemoError(f"unknown demo(s): {', '.join(unknown)}")
    return [demo for name, demo in DEMOS.items() if name in wanted]


def run_demos(
    names: Optional[Iterable[str]] = None,
    timers: Optional[TimerRegistry] = None,
) -> List[DemoResult]:
    """Run the selected demonstrations and collect their results."""

    timers = timers if timers is not None else TimerRegistry()
    results: List[DemoResult] = []
    for demo in select(names):
        tally = CallTally()
        with timers.time(demo.name):
            value = demo.run(tally)
        logger.debug("%s -> %r", demo.name, value)
        results.append(DemoResult(demo.name, demo.description, value, timers.elapsed(demo.name)))
    return results


__all__ = ["Demo", "DemoResult", "DEMOS", "select", "run_demos"]
