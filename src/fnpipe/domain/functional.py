"""Function values as first-class building blocks.

Plain higher-order helpers for sequencing unary callables, binding a
receiver into a closure, and producing lazy infinite sequences. Nothing
here performs I/O.

Contents:
    * :func:`identity` - Return the argument untouched.
    * :func:`and_then` - ``first`` then ``after``.
    * :func:`compose` - ``before`` then ``first``.
    * :func:`bind_prefix` - Closure over a fixed prefix string.
    * :func:`trim_to_upper` / :func:`text_length` - Named string transforms.
    * :func:`iterate` / :func:`take` - Lazy unbounded sequence and its prefix.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import islice
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")
V = TypeVar("V")


def identity(value: T) -> T:
    """Return ``value`` unchanged.

    Example:
        >>> identity("same")
        'same'
    """
    return value


def _require_callable(fn: object, role: str) -> None:
    if not callable(fn):
        raise TypeError(f"{role} must be callable, got {type(fn).__name__}")


def and_then(first: Callable[[T], R], after: Callable[[R], V]) -> Callable[[T], V]:
    """Return a function applying ``first`` and feeding its result to ``after``.

    Args:
        first: Function applied to the original argument.
        after: Function applied to the result of ``first``.

    Returns:
        The sequential composite ``x -> after(first(x))``.

    Raises:
        TypeError: If ``after`` is not callable.

    Example:
        >>> add2 = lambda x: x + 2
        >>> times3 = lambda x: x * 3
        >>> and_then(add2, times3)(5)
        21
    """
    _require_callable(after, "after")

    def _sequenced(value: T) -> V:
        return after(first(value))

    return _sequenced


def compose(first: Callable[[R], V], before: Callable[[T], R]) -> Callable[[T], V]:
    """Return a function applying ``before`` and feeding its result to ``first``.

    The mirror image of :func:`and_then`: ``compose(f, g)`` equals
    ``and_then(g, f)``.

    Raises:
        TypeError: If ``before`` is not callable.

    Example:
        >>> add2 = lambda x: x + 2
        >>> times3 = lambda x: x * 3
        >>> compose(add2, times3)(5)
        17
    """
    _require_callable(before, "before")

    def _reversed(value: T) -> V:
        return first(before(value))

    return _reversed


def bind_prefix(prefix: str) -> Callable[[str], str]:
    """Return a closure that prepends the captured ``prefix``.

    Example:
        >>> add_id = bind_prefix("ID:")
        >>> add_id("123")
        'ID:123'
    """

    def _concat(value: str) -> str:
        return prefix + value

    return _concat


def trim_to_upper(text: str) -> str:
    """Strip surrounding whitespace and upper-case the rest.

    Example:
        >>> trim_to_upper("  hello ")
        'HELLO'
    """
    return text.strip().upper()


def text_length(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def wrap_in_brackets(text: str) -> str:
    """Surround ``text`` with square brackets.

    Example:
        >>> wrap_in_brackets("  hi  ")
        '[  hi  ]'
    """
    return f"[{text}]"


def iterate(seed: T, step: Callable[[T], T]) -> Iterator[T]:
    """Yield ``seed``, ``step(seed)``, ``step(step(seed))``, ... forever.

    The sequence is lazy and single-pass; bound it with :func:`take`.

    Example:
        >>> take(3, iterate(1, lambda n: n * 2))
        [1, 2, 4]
    """
    current = seed
    while True:
        yield current
        current = step(current)


def take(count: int, items: Iterable[T]) -> list[T]:
    """Return the first ``count`` elements of ``items`` as a list."""
    return list(islice(items, count))


__all__ = [
    "and_then",
    "bind_prefix",
    "compose",
    "identity",
    "iterate",
    "take",
    "text_length",
    "trim_to_upper",
    "wrap_in_brackets",
]
