"""Domain enum tests: member values, string equality, and member counts."""

from __future__ import annotations

import pytest

from fnpipe.domain.enums import OutputFormat, Variant


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (OutputFormat.HUMAN, "human"),
        (OutputFormat.JSON, "json"),
    ],
)
def test_output_format_member_values(member: OutputFormat, expected_value: str) -> None:
    assert member.value == expected_value
    assert member == expected_value


@pytest.mark.os_agnostic
def test_output_format_member_count() -> None:
    assert len(OutputFormat) == 2


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (Variant.ITERATIVE, "loop"),
        (Variant.DECLARATIVE, "stream"),
    ],
)
def test_variant_member_values(member: Variant, expected_value: str) -> None:
    assert member.value == expected_value
    assert member == expected_value


@pytest.mark.os_agnostic
def test_variant_member_count() -> None:
    assert len(Variant) == 2
