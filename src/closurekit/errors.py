"""Exceptions raised by :mod:`closurekit`."""

from __future__ import annotations


class ClosureKitError(Exception):
    """Base class for errors raised by the package."""


class InvalidCallableError(ClosureKitError, TypeError):
    """Raised when a value that should be invokable is not."""


class InvalidSequenceError(ClosureKitError, TypeError):
    """Raised when a value does not support the sequence operations a transform needs."""


class UnknownDemoError(ClosureKitError, KeyError):
    """Raised when the harness is asked for a demonstration it does not know."""


__all__ = [
    "ClosureKitError",
    "InvalidCallableError",
    "InvalidSequenceError",
    "UnknownDemoError",
]
