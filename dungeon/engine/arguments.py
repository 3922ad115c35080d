"""
Entry points into a parse chain.

These pull arguments out of the command's tokens (or from something already
known about the world) and wrap them in a parse result. They never touch world
state and never raise.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable, TypeVar

from dungeon.models.parse import ParseResult, fail, succeed

T = TypeVar("T")


def arg(tokens: Sequence[str], index: int) -> ParseResult:
    """The token at `index`, or a silent failure if there isn't one.

    Example:
        >>> arg(["go", "north"], 1).value
        'north'
    """
    if 0 <= index < len(tokens):
        return succeed(tokens[index], tokens)
    return fail(tokens)


def args(tokens: Sequence[str], start: int, end: int) -> ParseResult:
    """Tokens `start` up to (not including) `end` joined into one argument.

    Fails if the joined text is empty.

    Example:
        >>> args(["say", "hello", "there"], 1, 3).value
        'hello there'
    """
    joined = " ".join(tokens[start:end])
    if joined:
        return succeed(joined, tokens)
    return fail(tokens)


def implicit(supplier: Callable[[], T | None]) -> ParseResult:
    """Lift a value that is already known, such as the carried weapon."""
    value = supplier()
    if value is None:
        return fail(None)
    return succeed(value, None)
