"""Utility helpers for the :mod:`closurekit` harness."""

from .logging import CallTally, setup_logging
from .timers import TimerRecord, TimerRegistry

__all__ = ["CallTally", "setup_logging", "TimerRecord", "TimerRegistry"]
