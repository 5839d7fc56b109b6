"""Showcase use case - the fixed sequence of functional demonstrations.

Each section returns one or more :class:`DemoLine` values instead of
printing, so the CLI decides how to render them (bracket-labelled text or
JSON) and tests can assert on the numbers directly.

Contents:
    * :class:`DemoLine` / :class:`ShowcaseReport` - Rendered results.
    * :func:`reference_demo` - Lambda, static and bound references.
    * :func:`pipeline_demo` - Pipeline evaluation with a counting observer.
    * :func:`composition_demo` - ``and_then`` versus ``compose``.
    * :func:`benchmark_demo` - Loop versus stream timing lines.
    * :func:`sequence_demo` - Prefix of a lazy infinite sequence.
    * :func:`run_showcase` - All of the above, in order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Final

from ..domain.benchmark import BenchmarkReport, run_benchmark
from ..domain.enums import Variant
from ..domain.functional import (
    and_then,
    bind_prefix,
    compose,
    iterate,
    take,
    trim_to_upper,
    wrap_in_brackets,
)
from ..domain.pipeline import Observer, evaluate
from .ports import MonotonicClock

logger = logging.getLogger(__name__)

PIPELINE_SAMPLE: Final[tuple[str | None, ...]] = ("  a  ", "", " bb", None, "CCC ")
SEQUENCE_PREVIEW_LENGTH: Final[int] = 5

#: Column width that lines up ``loop`` and ``stream`` in the perf lines.
_VARIANT_COLUMN: Final[int] = max(len(v.value) for v in Variant)


@dataclass(frozen=True, slots=True)
class DemoLine:
    """One labelled showcase result.

    Example:
        >>> DemoLine("lambda", "len=5", {"len": 5}).render()
        '[lambda] len=5'
    """

    label: str
    message: str
    values: Mapping[str, object] = field(default_factory=dict)

    def render(self) -> str:
        return f"[{self.label}] {self.message}"

    def as_dict(self) -> dict[str, object]:
        return {"label": self.label, "message": self.message, "values": dict(self.values)}


@dataclass(frozen=True, slots=True)
class ShowcaseReport:
    """Ordered showcase results."""

    lines: tuple[DemoLine, ...]

    def render(self) -> list[str]:
        return [line.render() for line in self.lines]

    def as_dicts(self) -> list[dict[str, object]]:
        return [line.as_dict() for line in self.lines]


class ObservationCounter:
    """Observer that counts calls and forwards each value to an optional sink.

    Example:
        >>> counter = ObservationCounter()
        >>> counter("a"); counter("bb")
        >>> counter.count
        2
    """

    def __init__(self, sink: Observer | None = None) -> None:
        self.count = 0
        self._sink = sink

    def __call__(self, value: str) -> None:
        self.count += 1
        logger.debug("Observed pipeline entry", extra={"value": value, "position": self.count})
        if self._sink is not None:
            self._sink(value)


def reference_demo() -> list[DemoLine]:
    """Apply a lambda, a named function, and a bound closure.

    Example:
        >>> [line.render() for line in reference_demo()]
        ['[lambda] len=5', '[method ref] norm=HELLO', '[instance ref] prefix=ID:123']
    """
    length_of: Callable[[str], int] = lambda s: len(s)  # noqa: E731
    add_prefix = bind_prefix("ID:")

    length = length_of("Hello")
    normalized = trim_to_upper("  hello ")
    prefixed = add_prefix("123")
    return [
        DemoLine("lambda", f"len={length}", {"len": length}),
        DemoLine("method ref", f"norm={normalized}", {"norm": normalized}),
        DemoLine("instance ref", f"prefix={prefixed}", {"prefix": prefixed}),
    ]


def pipeline_demo(entries: Sequence[str | None] = PIPELINE_SAMPLE, observe: Observer | None = None) -> DemoLine:
    """Evaluate ``entries`` while counting observed values.

    Args:
        entries: Pipeline input; defaults to the fixed sample list.
        observe: Optional extra observer receiving each normalized value.

    Example:
        >>> pipeline_demo().render()
        '[pipeline] sum=6 logged=3'
    """
    counter = ObservationCounter(observe)
    total = evaluate(entries, counter)
    return DemoLine("pipeline", f"sum={total} logged={counter.count}", {"sum": total, "logged": counter.count})


def composition_demo() -> list[DemoLine]:
    """Show that ``and_then`` and ``compose`` apply functions in opposite orders.

    Example:
        >>> [line.message for line in composition_demo()]
        ['21 vs 17', '[hi] vs [  hi  ]']
    """

    def add2(x: int) -> int:
        return x + 2

    def times3(x: int) -> int:
        return x * 3

    forward = and_then(add2, times3)(5)
    backward = compose(add2, times3)(5)

    trimmed_then_wrapped = and_then(str.strip, wrap_in_brackets)("  hi  ")
    wrapped_then_trimmed = compose(str.strip, wrap_in_brackets)("  hi  ")

    return [
        DemoLine(
            "compose demo #1",
            f"{forward} vs {backward}",
            {"and_then": forward, "compose": backward},
        ),
        DemoLine(
            "compose demo #2",
            f"{trimmed_then_wrapped} vs {wrapped_then_trimmed}",
            {"and_then": trimmed_then_wrapped, "compose": wrapped_then_trimmed},
        ),
    ]


def benchmark_lines(report: BenchmarkReport) -> list[DemoLine]:
    """Render a benchmark report as one perf line per variant.

    Example:
        >>> from fnpipe.domain.benchmark import VariantTiming
        >>> report = BenchmarkReport(
        ...     VariantTiming(Variant.ITERATIVE, 4, 10), VariantTiming(Variant.DECLARATIVE, 4, 20), 1, 0
        ... )
        >>> [line.render() for line in benchmark_lines(report)]
        ['[perf] loop   sum=4 time(ns)=10', '[perf] stream sum=4 time(ns)=20']
    """
    return [
        DemoLine(
            "perf",
            f"{timing.variant.value.ljust(_VARIANT_COLUMN)} sum={timing.total} time(ns)={timing.elapsed_ns}",
            {"variant": timing.variant.value, "sum": timing.total, "time_ns": timing.elapsed_ns},
        )
        for timing in report.timings()
    ]


def benchmark_demo(clock: MonotonicClock) -> list[DemoLine]:
    """Run the equivalence benchmark and render both variants."""
    return benchmark_lines(run_benchmark(clock))


def sequence_demo(length: int = SEQUENCE_PREVIEW_LENGTH) -> DemoLine:
    """Preview the first ``length`` naturals from a lazy infinite sequence.

    Example:
        >>> sequence_demo().render()
        '[sequence] 0 1 2 3 4'
    """
    preview = take(length, iterate(0, lambda n: n + 1))
    return DemoLine("sequence", " ".join(str(n) for n in preview), {"items": preview})


def run_showcase(clock: MonotonicClock, observe: Observer | None = None) -> ShowcaseReport:
    """Run every demonstration in the fixed order.

    Args:
        clock: Monotonic nanosecond clock used by the benchmark.
        observe: Optional observer forwarded to the pipeline section.

    Returns:
        Report holding nine lines: three reference lines, the pipeline line,
        two composition lines, two perf lines and the sequence preview.
    """
    lines: list[DemoLine] = []
    lines.extend(reference_demo())
    lines.append(pipeline_demo(observe=observe))
    lines.extend(composition_demo())
    lines.extend(benchmark_demo(clock))
    lines.append(sequence_demo())
    logger.debug("Showcase complete", extra={"lines": len(lines)})
    return ShowcaseReport(tuple(lines))


__all__ = [
    "PIPELINE_SAMPLE",
    "DemoLine",
    "ObservationCounter",
    "ShowcaseReport",
    "benchmark_demo",
    "benchmark_lines",
    "composition_demo",
    "pipeline_demo",
    "reference_demo",
    "run_showcase",
    "sequence_demo",
]
