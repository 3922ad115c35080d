"""
Small text helpers used when building narration.
"""

from __future__ import annotations

from collections.abc import Sequence


def a(noun: str) -> str:
    """Prefix a noun with the right indefinite article."""
    if not noun:
        return noun
    article = "an" if noun[0].lower() in "aeiou" else "a"
    return f"{article} {noun}"


def commify(items: Sequence[str]) -> str:
    """Join items as an English list.

    Example:
        >>> commify(["axe", "rope", "lamp"])
        'axe, rope, and lamp'
    """
    if len(items) == 0:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return ", ".join(items[:-1]) + f", and {items[-1]}"
