"""Point-of-use helpers shared by the sequence and function transforms.

Nothing here validates arguments up front. Each helper performs the operation
it is named after and translates the interpreter's ``TypeError`` into the
package's own error types only at the moment the operation is attempted.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence

from .errors import InvalidCallableError, InvalidSequenceError

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def invoke(fn: Callable[..., Any], context: Any, *args: Any, **kwargs: Any) -> Any:
    """Call ``fn`` with ``args``, passing ``context`` first when it is not ``None``."""

    if not callable(fn):
        raise InvalidCallableError(f"expected a callable, got {type(fn).__name__!r}")
    if context is None:
        return fn(*args, **kwargs)
    return fn(context, *args, **kwargs)


def iterate(items: Iterable[Any]) -> Iterator[Any]:
    try:
        return iter(items)
    except TypeError as exc:
        raise InvalidSequenceError(f"{type(items).__name__!r} object is not iterable") from exc


def size(items: Sequence[Any]) -> int:
    try:
        return len(items)
    except TypeError as exc:
        raise InvalidSequenceError(f"{type(items).__name__!r} object has no length") from exc


def item_at(items: Sequence[Any], index: int) -> Any:
    try:
        return items[index]
    except (TypeError, KeyError) as exc:
        raise InvalidSequenceError(f"{type(items).__name__!r} object is not indexable") from exc


def arity(fn: Any) -> Optional[int]:
    """Return the number of leading positional parameters without defaults.

    Counting stops at the first parameter that has a default or is variadic or
    keyword-only. Wrappers are measured by their own signature, not the one
    ``functools.wraps`` copies from the wrapped callable. ``None`` is returned
    when no signature can be read, which is the case for non-callables and for
    some builtins.
    """

    try:
        signature = inspect.signature(fn, follow_wrapped=False)
    except (TypeError, ValueError):
        return None
    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind not in _POSITIONAL or parameter.default is not inspect.Parameter.empty:
            break
        count += 1
    return count


__all__ = ["invoke", "iterate", "size", "item_at", "arity"]
