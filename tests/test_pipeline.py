"""Pipeline evaluator stories: filtering, normalization, observation order."""

from __future__ import annotations

import pytest

from fnpipe.domain.pipeline import evaluate, is_qualifying, normalize, peek


def _noop(_value: str) -> None:
    return None


@pytest.mark.os_agnostic
def test_mixed_input_sums_normalized_lengths() -> None:
    """'a' + 'bb' + 'ccc' == 6."""
    assert evaluate([" a ", "", " bb", None, "CCC "], _noop) == 6


@pytest.mark.os_agnostic
def test_observer_receives_normalized_values_in_input_order() -> None:
    seen: list[str] = []

    evaluate([" a ", "", " bb", None, "CCC "], seen.append)

    assert seen == ["a", "bb", "ccc"]


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "entries",
    [
        pytest.param([], id="empty"),
        pytest.param([None, None], id="all-none"),
        pytest.param(["", "   ", "\t\n"], id="all-blank"),
    ],
)
def test_nothing_qualifying_yields_zero_without_observation(entries: list[str | None]) -> None:
    seen: list[str] = []

    assert evaluate(entries, seen.append) == 0
    assert seen == []


@pytest.mark.os_agnostic
def test_input_sequence_is_not_mutated() -> None:
    entries = ["  X  ", None, "Y"]
    snapshot = list(entries)

    evaluate(entries, _noop)

    assert entries == snapshot


@pytest.mark.os_agnostic
def test_observer_fault_propagates_to_caller() -> None:
    """Nothing inside the pipeline catches an observer exception."""

    def explode(value: str) -> None:
        raise RuntimeError(f"boom on {value}")

    with pytest.raises(RuntimeError, match="boom on a"):
        evaluate(["A", "B"], explode)


@pytest.mark.os_agnostic
def test_observer_fault_stops_at_first_qualifying_entry() -> None:
    """Later entries are never observed once the observer has raised."""
    seen: list[str] = []

    def record_then_fail(value: str) -> None:
        seen.append(value)
        raise ValueError(value)

    with pytest.raises(ValueError):
        evaluate(["first", "second"], record_then_fail)

    assert seen == ["first"]


@pytest.mark.os_agnostic
def test_observer_return_value_is_ignored() -> None:
    assert evaluate(["abc"], lambda value: 999) == 3


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("entry", "expected"),
    [
        ("a", True),
        (" a ", True),
        ("", False),
        ("   ", False),
        ("\t", False),
        (None, False),
    ],
)
def test_is_qualifying(entry: str | None, expected: bool) -> None:
    assert is_qualifying(entry) is expected


@pytest.mark.os_agnostic
def test_normalize_trims_then_lowercases() -> None:
    assert normalize("  MiXeD Case \n") == "mixed case"


@pytest.mark.os_agnostic
def test_peek_interleaves_observation_with_consumption() -> None:
    """Each element is observed right before it is handed downstream."""
    events: list[str] = []

    for item in peek(iter(["x", "y"]), lambda value: events.append(f"peek {value}")):
        events.append(f"got {item}")

    assert events == ["peek x", "got x", "peek y", "got y"]
