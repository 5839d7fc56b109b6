"""Deterministic clock for tests that run the benchmark."""

from __future__ import annotations


class StepClock:
    """Clock that advances by a fixed step on every read.

    Example:
        >>> clock = StepClock(start=100, step=5)
        >>> clock(), clock(), clock()
        (100, 105, 110)
        >>> clock.reads
        3
    """

    def __init__(self, *, start: int = 0, step: int = 1_000) -> None:
        self._now = start
        self._step = step
        self.reads = 0

    def __call__(self) -> int:
        current = self._now
        self._now += self._step
        self.reads += 1
        return current


__all__ = ["StepClock"]
