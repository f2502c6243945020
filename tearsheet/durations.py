"""Conversion of durations to and from whole seconds."""

from __future__ import annotations

from datetime import timedelta

_MICROS_PER_SECOND = 1_000_000


def duration_to_secs(duration: timedelta) -> int:
    """Return the whole seconds of a duration, truncated toward zero."""
    micros = duration // timedelta(microseconds=1)
    seconds = abs(micros) // _MICROS_PER_SECOND
    return -seconds if micros < 0 else seconds


def duration_from_secs(seconds: int) -> timedelta:
    """Return a duration of the given whole number of seconds."""
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        raise TypeError(f"seconds must be an integer, got {type(seconds).__name__}")
    return timedelta(seconds=seconds)