"""Type-safe domain enums for output formats and benchmark variants."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for showcase, benchmark and config display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Bracket-labelled lines (or TOML-like config output).
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class Variant(str, Enum):
    """The two equivalent implementations compared by the benchmark.

    Attributes:
        ITERATIVE: Explicit ``for`` loop with a running sum.
        DECLARATIVE: Lazy filter/map/sum pipeline.

    Example:
        >>> Variant.ITERATIVE.value
        'loop'
        >>> Variant.DECLARATIVE == "stream"
        True
    """

    ITERATIVE = "loop"
    DECLARATIVE = "stream"


__all__ = [
    "OutputFormat",
    "Variant",
]
