"""Filter, normalize, observe and sum a sequence of optional strings.

The evaluator is a lazy chain: entries that are ``None`` or blank are
dropped, the rest are trimmed and lower-cased, handed to the observer one
at a time in input order, and finally their lengths are summed.

Contents:
    * :data:`Observer` - Side-effecting callback type.
    * :func:`is_qualifying` - Present and non-blank predicate.
    * :func:`normalize` - Trim then lower-case.
    * :func:`peek` - Pass-through generator invoking a callback per element.
    * :func:`evaluate` - The full pipeline.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TypeGuard

from .functional import text_length

Observer = Callable[[str], object]
"""Callback receiving each normalized entry; its return value is ignored."""


def is_qualifying(entry: str | None) -> TypeGuard[str]:
    """Return True when ``entry`` is present and not blank after trimming.

    Example:
        >>> [is_qualifying(e) for e in ("x", "  ", "", None)]
        [True, False, False, False]
    """
    return entry is not None and entry.strip() != ""


def normalize(entry: str) -> str:
    """Trim surrounding whitespace and lower-case.

    Example:
        >>> normalize("  CCC ")
        'ccc'
    """
    return entry.strip().lower()


def peek(items: Iterable[str], observe: Observer) -> Iterator[str]:
    """Yield each item after handing it to ``observe``.

    Calls happen as the consumer pulls elements, so they interleave with
    downstream stages in input order.
    """
    for item in items:
        observe(item)
        yield item


def evaluate(entries: Sequence[str | None], observe: Observer) -> int:
    """Sum the normalized lengths of all qualifying entries.

    Args:
        entries: Input sequence; read, never mutated.
        observe: Invoked exactly once per qualifying entry with the
            normalized value. Exceptions raised by it propagate.

    Returns:
        Sum of character lengths after normalization; 0 when nothing
        qualifies.

    Example:
        >>> seen: list[str] = []
        >>> evaluate([" a ", "", " bb", None, "CCC "], seen.append)
        6
        >>> seen
        ['a', 'bb', 'ccc']
    """
    qualifying = filter(is_qualifying, entries)
    normalized = peek(map(normalize, qualifying), observe)
    return sum(map(text_length, normalized))


__all__ = [
    "Observer",
    "evaluate",
    "is_qualifying",
    "normalize",
    "peek",
]
