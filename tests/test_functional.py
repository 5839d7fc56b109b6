"""Function-value stories: composition order, closures, lazy sequences."""

from __future__ import annotations

import pytest

from fnpipe.domain import functional


def add2(x: int) -> int:
    return x + 2


def times3(x: int) -> int:
    return x * 3


@pytest.mark.os_agnostic
def test_and_then_applies_first_function_first() -> None:
    """(5 + 2) * 3 == 21."""
    assert functional.and_then(add2, times3)(5) == 21


@pytest.mark.os_agnostic
def test_compose_applies_second_function_first() -> None:
    """(5 * 3) + 2 == 17."""
    assert functional.compose(add2, times3)(5) == 17


@pytest.mark.os_agnostic
def test_and_then_with_strings_trims_before_wrapping() -> None:
    """Trimming first leaves nothing for the brackets to enclose but the word."""
    assert functional.and_then(str.strip, functional.wrap_in_brackets)("  hi  ") == "[hi]"


@pytest.mark.os_agnostic
def test_compose_with_strings_wraps_before_trimming() -> None:
    """Wrapping first protects the inner spaces from trimming."""
    assert functional.compose(str.strip, functional.wrap_in_brackets)("  hi  ") == "[  hi  ]"


@pytest.mark.os_agnostic
def test_compose_equals_and_then_with_arguments_swapped() -> None:
    """compose(f, g) behaves like and_then(g, f)."""
    for value in range(-3, 4):
        assert functional.compose(add2, times3)(value) == functional.and_then(times3, add2)(value)


@pytest.mark.os_agnostic
def test_identity_is_neutral_for_composition() -> None:
    """Composing with identity on either side changes nothing."""
    assert functional.and_then(functional.identity, add2)(1) == 3
    assert functional.compose(add2, functional.identity)(1) == 3


@pytest.mark.os_agnostic
@pytest.mark.parametrize("not_callable", [None, 42, "text"])
def test_and_then_rejects_non_callable_follow_up(not_callable: object) -> None:
    """A non-callable second stage raises TypeError naming the role."""
    with pytest.raises(TypeError, match="after must be callable"):
        functional.and_then(add2, not_callable)  # type: ignore[arg-type]


@pytest.mark.os_agnostic
def test_compose_rejects_non_callable_predecessor() -> None:
    """compose validates its 'before' function eagerly."""
    with pytest.raises(TypeError, match="before must be callable"):
        functional.compose(add2, None)  # type: ignore[arg-type]


@pytest.mark.os_agnostic
def test_bind_prefix_captures_prefix_at_creation() -> None:
    """The closure keeps the prefix it was built with."""
    prefix = "ID:"
    add_id = functional.bind_prefix(prefix)
    prefix = "other"

    assert add_id("123") == "ID:123"


@pytest.mark.os_agnostic
def test_trim_to_upper_uppercases_trimmed_text() -> None:
    assert functional.trim_to_upper("  hello ") == "HELLO"


@pytest.mark.os_agnostic
def test_text_length_counts_characters_not_bytes() -> None:
    """Non-ASCII characters count once each."""
    assert functional.text_length("héllo") == 5


@pytest.mark.os_agnostic
def test_iterate_take_returns_first_naturals() -> None:
    assert functional.take(5, functional.iterate(0, lambda n: n + 1)) == [0, 1, 2, 3, 4]


@pytest.mark.os_agnostic
def test_iterate_is_lazy() -> None:
    """Only the requested elements are computed."""
    calls: list[int] = []

    def step(n: int) -> int:
        calls.append(n)
        return n + 1

    functional.take(3, functional.iterate(0, step))

    assert calls == [0, 1]


@pytest.mark.os_agnostic
def test_take_zero_returns_empty_list() -> None:
    assert functional.take(0, functional.iterate(0, lambda n: n + 1)) == []
