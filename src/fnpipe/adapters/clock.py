"""Monotonic clock adapter backed by :func:`time.perf_counter_ns`."""

from __future__ import annotations

import time


def monotonic_ns() -> int:
    """Return the highest-resolution monotonic timestamp in nanoseconds.

    Example:
        >>> monotonic_ns() <= monotonic_ns()
        True
    """
    return time.perf_counter_ns()


__all__ = ["monotonic_ns"]
