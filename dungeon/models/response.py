"""
Response models returned to the command loop.

Every command ends in exactly one of three outcomes:
    - NARRATION: the joined narration of everything that happened
    - ERROR: the command could not be parsed; nothing happened
    - RAW: verbatim output that should be printed without wrapping
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ResponseKind(str, Enum):
    """How the command loop should present a response."""

    NARRATION = "narration"
    ERROR = "error"
    RAW = "raw"


class CommandResponse(BaseModel):
    """Result of processing one command.

    Attributes:
        kind: Which of the three outcomes this is
        text: What to show the player
        game_over: Whether the player has died
    """

    kind: ResponseKind
    text: str
    game_over: bool = False
