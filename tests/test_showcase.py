"""Showcase use-case stories: fixed line sequence and structured values."""

from __future__ import annotations

import pytest

from fnpipe.adapters.memory import StepClock
from fnpipe.application import showcase

EXPECTED_LABELS = [
    "lambda",
    "method ref",
    "instance ref",
    "pipeline",
    "compose demo #1",
    "compose demo #2",
    "perf",
    "perf",
    "sequence",
]


@pytest.mark.os_agnostic
def test_run_showcase_emits_nine_lines_in_fixed_order(step_clock: StepClock) -> None:
    report = showcase.run_showcase(step_clock)

    assert [line.label for line in report.lines] == EXPECTED_LABELS


@pytest.mark.os_agnostic
def test_run_showcase_renders_deterministic_lines(step_clock: StepClock) -> None:
    rendered = showcase.run_showcase(step_clock).render()

    assert rendered[:6] == [
        "[lambda] len=5",
        "[method ref] norm=HELLO",
        "[instance ref] prefix=ID:123",
        "[pipeline] sum=6 logged=3",
        "[compose demo #1] 21 vs 17",
        "[compose demo #2] [hi] vs [  hi  ]",
    ]
    assert rendered[-1] == "[sequence] 0 1 2 3 4"


@pytest.mark.os_agnostic
def test_perf_lines_report_equal_sums(step_clock: StepClock) -> None:
    perf = [line for line in showcase.run_showcase(step_clock).lines if line.label == "perf"]

    assert [line.values["variant"] for line in perf] == ["loop", "stream"]
    assert [line.values["sum"] for line in perf] == [62_001, 62_001]
    assert perf[0].message.startswith("loop   sum=62001 time(ns)=")
    assert perf[1].message.startswith("stream sum=62001 time(ns)=")


@pytest.mark.os_agnostic
def test_run_showcase_forwards_observer_to_pipeline(step_clock: StepClock) -> None:
    seen: list[str] = []

    showcase.run_showcase(step_clock, observe=seen.append)

    assert seen == ["a", "bb", "ccc"]


@pytest.mark.os_agnostic
def test_pipeline_demo_counts_observations_for_custom_entries() -> None:
    line = showcase.pipeline_demo(["  X ", None, " ", "yz"])

    assert line.values == {"sum": 3, "logged": 2}
    assert line.render() == "[pipeline] sum=3 logged=2"


@pytest.mark.os_agnostic
def test_pipeline_demo_propagates_observer_fault() -> None:
    def reject(value: str) -> None:
        raise RuntimeError(value)

    with pytest.raises(RuntimeError, match="^a$"):
        showcase.pipeline_demo(observe=reject)


@pytest.mark.os_agnostic
def test_composition_demo_values() -> None:
    first, second = showcase.composition_demo()

    assert first.values == {"and_then": 21, "compose": 17}
    assert second.values == {"and_then": "[hi]", "compose": "[  hi  ]"}


@pytest.mark.os_agnostic
def test_sequence_demo_custom_length() -> None:
    assert showcase.sequence_demo(3).values == {"items": [0, 1, 2]}


@pytest.mark.os_agnostic
def test_demo_line_as_dict_is_json_ready() -> None:
    line = showcase.DemoLine("lambda", "len=5", {"len": 5})

    assert line.as_dict() == {"label": "lambda", "message": "len=5", "values": {"len": 5}}


@pytest.mark.os_agnostic
def test_observation_counter_forwards_to_sink() -> None:
    seen: list[str] = []
    counter = showcase.ObservationCounter(seen.append)

    counter("a")
    counter("b")

    assert counter.count == 2
    assert seen == ["a", "b"]
