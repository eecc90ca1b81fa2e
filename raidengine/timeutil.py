"""Monotonic timestamps and durations expressed as integer nanoseconds."""

from __future__ import annotations

import time

NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def now() -> int:
    """Current monotonic timestamp in nanoseconds."""
    return time.monotonic_ns()


def is_initialized(timestamp: int) -> bool:
    """A zero timestamp is the unset value."""
    return timestamp != 0


def from_delta_time(delta_seconds: float) -> int:
    """Turn a frame delta in seconds into a duration truncated to whole seconds."""
    return int(delta_seconds) * NANOS_PER_SECOND


def to_seconds(nanos: int) -> int:
    return _trunc_div(nanos, NANOS_PER_SECOND)


def to_millis(nanos: int) -> int:
    return _trunc_div(nanos, NANOS_PER_MILLI)


def format_hms(nanos: int) -> str:
    """Format a duration as ``HH:MM:SS``, or ``MM:SS`` when under an hour."""
    secs = to_seconds(nanos)
    mins = _trunc_div(secs, 60)
    secs -= mins * 60
    hours = _trunc_div(mins, 60)
    mins -= hours * 60
    if hours > 0:
        return "%02d:%02d:%02d" % (hours, mins, secs)
    return "%02d:%02d" % (mins, secs)


def count_nanos_in_seconds(nanos: int, seconds: int) -> int:
    """How many whole spans of ``nanos`` fit in ``seconds``."""
    return _trunc_div(seconds * NANOS_PER_SECOND, nanos)


def count_nanos_in_millis(nanos: int, millis: int) -> int:
    """How many whole spans of ``nanos`` fit in ``millis``."""
    return _trunc_div(millis * NANOS_PER_MILLI, nanos)