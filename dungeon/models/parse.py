"""
Parse result models for the command parser.

A parse result threads a value through a chain of conversions. Each stage
either succeeds, carrying the converted value plus the value it was converted
from, or fails, carrying the context at the point of failure and an optional
error message. Errors are only materialized at the terminal `to_action` call.

Key concepts:
    - Succeeded: A conversion chain that is still going
    - Failed: A conversion chain that stopped, possibly with a message
    - CommandError: Raised when a Failed result is finally resolved

Example:
    >>> result = succeed("axe", ["take", "axe"])
    >>> result.maybe(player.room_thing).or_else("There is no axe here.")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from dungeon.engine.actions import Command

T = TypeVar("T")
C = TypeVar("C")
X = TypeVar("X")

DEFAULT_ERROR = "I don't understand that."


class CommandError(Exception):
    """A command that could not be turned into an action.

    The message is meant for the player.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Succeeded(BaseModel, Generic[T, C]):
    """A parse stage that produced a value.

    Attributes:
        value: The current value
        context: The value (or tokens) this one was converted from
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: T
    context: C

    def maybe(self, convert: Callable[[T], X | None]) -> "ParseResult[X, T]":
        """Convert the value, failing if the conversion yields None."""
        converted = convert(self.value)
        if converted is None:
            return Failed(context=self.value)
        return Succeeded(value=converted, context=self.value)

    def expect(self, expected: T) -> "ParseResult[T, T]":
        """Keep going only if the value equals `expected`."""
        return self.maybe(lambda value: value if value == expected else None)

    def or_else(self, error: str | Callable[[C], str]) -> "Succeeded[T, C]":
        return self

    def to_action(self, convert: Callable[[T], "Command"]) -> "Command":
        """Convert the value into an action.

        `convert` may raise CommandError itself.
        """
        return convert(self.value)


class Failed(BaseModel, Generic[T, C]):
    """A parse stage that failed.

    Attributes:
        context: The value (or tokens) at the point of first failure
        message: Error for the player, attached by `or_else`
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    context: C
    message: str | None = None

    def maybe(self, convert: Callable[[T], X | None]) -> "Failed[X, T]":
        # Stays failed; the conversion is never run on a failed value.
        return self  # type: ignore[return-value]

    def expect(self, expected: T) -> "Failed[T, T]":
        return self  # type: ignore[return-value]

    def or_else(self, error: str | Callable[[C], str]) -> "Failed[T, C]":
        """Attach an error message unless one is already attached.

        Args:
            error: The message, or a function computing it from the context

        Returns:
            A Failed carrying the first message attached to the chain
        """
        if self.message is not None:
            return self
        message = error(self.context) if callable(error) else error
        return Failed(context=self.context, message=message)

    def to_action(self, convert: Callable[[T], "Command"]) -> "Command":
        raise CommandError(self.message or DEFAULT_ERROR)


# Type alias for either parse stage
ParseResult = Succeeded | Failed


def succeed(value: Any, context: Any) -> Succeeded:
    """Create a successful parse result.

    Example:
        >>> succeed("north", ["go", "north"]).value
        'north'
    """
    return Succeeded(value=value, context=context)


def fail(context: Any, message: str | None = None) -> Failed:
    """Create a failed parse result.

    Example:
        >>> fail(["go"]).or_else("Go where?").message
        'Go where?'
    """
    return Failed(context=context, message=message)
