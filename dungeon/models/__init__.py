"""Data models for parsing, responses and world definitions."""

from dungeon.models.parse import (
    CommandError,
    Failed,
    ParseResult,
    Succeeded,
    fail,
    succeed,
)
from dungeon.models.response import CommandResponse, ResponseKind
from dungeon.models.world import (
    DoorDefinition,
    PlayerSetup,
    RoomDefinition,
    ThingDefinition,
    WorldDefinition,
)

__all__ = [
    # Parse
    "CommandError",
    "Failed",
    "ParseResult",
    "Succeeded",
    "fail",
    "succeed",
    # Response
    "CommandResponse",
    "ResponseKind",
    # World
    "DoorDefinition",
    "PlayerSetup",
    "RoomDefinition",
    "ThingDefinition",
    "WorldDefinition",
]
