"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Invalid application configuration.

    Raised when the ``[showcase]`` section holds a value the application
    cannot use. Caught at the CLI boundary and mapped to ``EX_CONFIG``.

    Example:
        >>> from fnpipe.domain.errors import ConfigurationError
        >>> err = ConfigurationError("showcase.output_format: expected 'human' or 'json'")
        >>> str(err)
        "showcase.output_format: expected 'human' or 'json'"
    """


class VariantMismatchError(AssertionError):
    """The loop and stream variants produced different totals.

    Both variants implement the same filter-normalize-sum computation, so a
    mismatch is a programming fault. Inherits from AssertionError and is
    never caught inside the application.

    Example:
        >>> err = VariantMismatchError(iterative=10, declarative=11)
        >>> err.iterative, err.declarative
        (10, 11)
        >>> str(err)
        'loop and stream variants disagree: loop=10 stream=11'
    """

    def __init__(self, *, iterative: int, declarative: int) -> None:
        super().__init__(f"loop and stream variants disagree: loop={iterative} stream={declarative}")
        self.iterative = iterative
        self.declarative = declarative


__all__ = [
    "ConfigurationError",
    "VariantMismatchError",
]
