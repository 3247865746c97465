"""closurekit
==========

Closure-based higher-order utilities over sequences and callables.

Sequence transforms live in :mod:`closurekit.sequences`; because several of
them share names with builtins (``map``, ``filter``, ``any``, ``zip``) they are
exposed here through the module rather than as top-level names. Function
transforms (:func:`unary`, :func:`once`, :func:`memoize`) are re-exported
directly.
"""

from . import sequences
from .errors import ClosureKitError, InvalidCallableError, InvalidSequenceError, UnknownDemoError
from .functions import memoize, once, unary

__all__ = [
    "sequences",
    "unary",
    "once",
    "memoize",
    "ClosureKitError",
    "InvalidCallableError",
    "InvalidSequenceError",
    "UnknownDemoError",
]
