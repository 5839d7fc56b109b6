"""Loop-versus-stream equivalence benchmark.

Two implementations of the same filter-normalize-sum computation run over
a fixed synthetic dataset. Each is warmed up, then timed once with an
injected monotonic clock, and their totals must agree.

Contents:
    * :func:`generate_dataset` - Build the fixed 10,000-entry dataset.
    * :func:`sum_iterative` - Explicit loop with a running sum.
    * :func:`sum_declarative` - Lazy filter/map/sum pipeline.
    * :class:`VariantTiming` / :class:`BenchmarkReport` - Results.
    * :func:`run_benchmark` - Warm-up, timed pass, equivalence check.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Final

from .enums import Variant
from .errors import VariantMismatchError
from .functional import text_length
from .pipeline import is_qualifying, normalize

logger = logging.getLogger(__name__)

DATASET_SIZE: Final[int] = 10_000
BLANK_INTERVAL: Final[int] = 10
BLANK_PLACEHOLDER: Final[str] = "   "
WARMUP_ROUNDS: Final[int] = 5

NanosecondClock = Callable[[], int]
"""Zero-argument callable returning a monotonic timestamp in nanoseconds."""


def generate_dataset(size: int = DATASET_SIZE) -> tuple[str, ...]:
    """Return the benchmark input.

    Every tenth entry (index 0, 10, 20, ...) is whitespace only; the others
    read ``"  Abc<i>  "``.

    Example:
        >>> data = generate_dataset()
        >>> len(data), data[0].strip(), data[1]
        (10000, '', '  Abc1  ')
    """
    return tuple(BLANK_PLACEHOLDER if i % BLANK_INTERVAL == 0 else f"  Abc{i}  " for i in range(size))


def sum_iterative(entries: Sequence[str | None]) -> int:
    """Sum normalized lengths with an explicit loop.

    Example:
        >>> sum_iterative(generate_dataset())
        62001
    """
    total = 0
    for entry in entries:
        if entry is not None and entry.strip():
            total += len(entry.strip().lower())
    return total


def sum_declarative(entries: Sequence[str | None]) -> int:
    """Sum normalized lengths with a lazy filter/map/sum chain.

    Example:
        >>> sum_declarative(["  Abc1  ", "   ", None])
        4
    """
    return sum(map(text_length, map(normalize, filter(is_qualifying, entries))))


@dataclass(frozen=True, slots=True)
class VariantTiming:
    """Outcome of one timed variant run."""

    variant: Variant
    total: int
    elapsed_ns: int


@dataclass(frozen=True, slots=True)
class BenchmarkReport:
    """Timed results of both variants over the same dataset.

    Attributes:
        iterative: Timing of the loop variant.
        declarative: Timing of the stream variant.
        dataset_size: Number of entries processed by each variant.
        warmup_rounds: Discarded runs of each variant before timing.
    """

    iterative: VariantTiming
    declarative: VariantTiming
    dataset_size: int
    warmup_rounds: int

    @property
    def total(self) -> int:
        """Shared total of both variants."""
        return self.iterative.total

    def timings(self) -> tuple[VariantTiming, VariantTiming]:
        return (self.iterative, self.declarative)


def run_benchmark(
    clock: NanosecondClock,
    *,
    dataset: Sequence[str | None] | None = None,
    warmup_rounds: int = WARMUP_ROUNDS,
) -> BenchmarkReport:
    """Warm up, time one pass of each variant, and check they agree.

    The clock is read three times: before the loop variant, between the
    variants, and after the stream variant.

    Args:
        clock: Monotonic nanosecond clock.
        dataset: Input shared by both variants; :func:`generate_dataset`
            when omitted.
        warmup_rounds: Untimed runs of each variant before measuring.

    Returns:
        Report with both totals and elapsed times.

    Raises:
        VariantMismatchError: If the two totals differ.

    Example:
        >>> ticks = iter([0, 100, 250])
        >>> report = run_benchmark(lambda: next(ticks))
        >>> report.total, report.iterative.elapsed_ns, report.declarative.elapsed_ns
        (62001, 100, 150)
    """
    data = generate_dataset() if dataset is None else dataset
    logger.debug("Warming up benchmark variants", extra={"entries": len(data), "rounds": warmup_rounds})
    for _ in range(warmup_rounds):
        sum_iterative(data)
        sum_declarative(data)

    started = clock()
    loop_total = sum_iterative(data)
    between = clock()
    stream_total = sum_declarative(data)
    finished = clock()

    if loop_total != stream_total:
        raise VariantMismatchError(iterative=loop_total, declarative=stream_total)

    report = BenchmarkReport(
        iterative=VariantTiming(Variant.ITERATIVE, loop_total, between - started),
        declarative=VariantTiming(Variant.DECLARATIVE, stream_total, finished - between),
        dataset_size=len(data),
        warmup_rounds=warmup_rounds,
    )
    logger.info(
        "Benchmark finished",
        extra={
            "total": report.total,
            "loop_ns": report.iterative.elapsed_ns,
            "stream_ns": report.declarative.elapsed_ns,
        },
    )
    return report


__all__ = [
    "BLANK_INTERVAL",
    "BLANK_PLACEHOLDER",
    "DATASET_SIZE",
    "WARMUP_ROUNDS",
    "BenchmarkReport",
    "NanosecondClock",
    "VariantTiming",
    "generate_dataset",
    "run_benchmark",
    "sum_declarative",
    "sum_iterative",
]
