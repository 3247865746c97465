"""Higher-order transforms over materialised sequences.

Every transform takes an optional ``context``. When it is not ``None`` it is
passed as the first argument of each call, so an unbound method and an
instance can be supplied separately::

    >>> class Scale:
    ...     def __init__(self, factor):
    ...         self.factor = factor
    ...     def apply(self, value):
    ...         return value * self.factor
    >>> map([1, 2, 3], Scale.apply, Scale(10))
    [10, 20, 30]

The names deliberately match the operations they implement and therefore
shadow the builtins of the same name inside this module; import the module
(``from closurekit import sequences as seq``) rather than star-importing it.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

from .calling import invoke, item_at, iterate, size

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


def map(items: Iterable[T], fn: Callable[..., U], context: Optional[Any] = None) -> List[U]:
    """Return a new list with ``fn`` applied to each element, in order."""

    results: List[U] = []
    for item in iterate(items):
        results.append(invoke(fn, context, item))
    return results


def filter(items: Iterable[T], fn: Callable[..., Any], context: Optional[Any] = None) -> List[T]:
    """Return the elements for which ``fn`` is truthy, preserving order."""

    results: List[T] = []
    for item in iterate(items):
        if invoke(fn, context, item):
            results.append(item)
    return results


def foreach(items: Iterable[T], fn: Callable[..., Any], context: Optional[Any] = None) -> None:
    """Call ``fn`` once per element for its side effects."""

    for item in iterate(items):
        invoke(fn, context, item)


def every(items: Iterable[T], fn: Callable[..., Any], context: Optional[Any] = None) -> bool:
    """Return ``True`` if ``fn`` is truthy for all elements.

    ``fn`` is called for every element even once a falsy result has been
    seen. An empty sequence yields ``True``.
    """

    result = True
    for item in iterate(items):
        outcome = bool(invoke(fn, context, item))
        result = result and outcome
    return result


def any(items: Iterable[T], fn: Callable[..., Any], context: Optional[Any] = None) -> bool:
    """Return ``True`` if ``fn`` is truthy for at least one element.

    Like :func:`every`, this never stops early. An empty sequence yields
    ``False``.
    """

    result = False
    for item in iterate(items):
        outcome = bool(invoke(fn, context, item))
        result = result or outcome
    return result


def zip(
    left: Sequence[T],
    right: Sequence[U],
    fn: Callable[..., V],
    context: Optional[Any] = None,
) -> List[V]:
    """Combine two sequences pairwise with ``fn``.

    The result is as long as the shorter input; trailing elements of the
    longer one are ignored.
    """

    results: List[V] = []
    for index in range(min(size(left), size(right))):
        results.append(invoke(fn, context, item_at(left, index), item_at(right, index)))
    return results


__all__ = ["map", "filter", "foreach", "every", "any", "zip"]
