"""Closures that adapt or guard a callable."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Dict, Hashable, Optional, TypeVar

from .calling import arity, invoke

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _describe(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def unary(fn: Callable[..., R], context: Optional[Any] = None) -> Callable[..., R]:
    """Adapt ``fn`` so that it only ever receives its first positional argument.

    A callable whose declared arity is already exactly one is returned
    unchanged. Anything else, including callables whose signature cannot be
    inspected, is wrapped.

    Example
    -------
    >>> from closurekit.sequences import map
    >>> map(["1", "2", "3"], unary(int))
    [1, 2, 3]
    """

    if arity(fn) == 1:
        return fn

    @functools.wraps(fn)
    def _unary(arg: Any, *_ignored: Any, **_ignored_kw: Any) -> R:
        return invoke(fn, context, arg)

    return _unary


def once(fn: Callable[..., R], context: Optional[Any] = None) -> Callable[..., Optional[R]]:
    """Return a wrapper that runs ``fn`` on its first call only.

    The latch is set before ``fn`` runs, so a first call that raises still
    counts. Every later call returns ``None`` without doing any work.
    """

    fired = False

    @functools.wraps(fn)
    def _once(*args: Any, **kwargs: Any) -> Optional[R]:
        nonlocal fired
        if fired:
            logger.debug("once(%s): already fired, call suppressed", _describe(fn))
            return None
        fired = True
        logger.debug("once(%s): firing", _describe(fn))
        return invoke(fn, context, *args, **kwargs)

    return _once


def memoize(
    fn: Callable[..., R],
    context: Optional[Any] = None,
    *,
    strict: bool = False,
) -> Callable[..., Any]:
    """Cache the results of the single-argument callable ``fn`` by argument.

    The returned callable has the signature ``(key, context=None,
    inspect=False)``. ``context`` overrides the receiver bound here for that
    call; ``inspect=True`` returns a snapshot of the cache instead of
    computing anything.

    By default a cached value only counts as a hit when it is truthy, so keys
    whose result is ``0``, ``""``, ``None`` or another falsy value are
    recomputed on every call. Pass ``strict=True`` to test membership instead.

    The cache belongs to the returned callable alone and is never evicted.

    Example
    -------
    >>> memory = memoize(lambda value: value * 2)
    >>> memory(10), memory(20), memory(30)
    (20, 40, 60)
    >>> memory(10, None, True)
    {10: 20, 20: 40, 30: 60}
    """

    cache: Dict[Hashable, R] = {}

    @functools.wraps(fn)
    def _memoized(key: Hashable, context_override: Optional[Any] = None, inspect: bool = False) -> Any:
        if inspect:
            return dict(cache)

        if strict:
            if key in cache:
                logger.debug("memoize(%s): hit for %r", _describe(fn), key)
                return cache[key]
        else:
            cached = cache.get(key)
            if cached:
                logger.debug("memoize(%s): hit for %r", _describe(fn), key)
                return cached
            if key in cache:
                logger.debug("memoize(%s): falsy entry for %r, recomputing", _describe(fn), key)

        receiver = context_override if context_override is not None else context
        result = invoke(fn, receiver, key)
        cache[key] = result
        logger.debug("memoize(%s): stored %r (%d entries)", _describe(fn), key, len(cache))
        return result

    return _memoized


__all__ = ["unary", "once", "memoize"]
