"""
Shared pytest fixtures for dungeon tests.

This module provides:
- cell / hall: Two rooms connected by a door (hall is north of cell)
- axe, wall, blob: The things the scenarios are built around
- player: A player standing in the cell
- processor / parser: Engine components bound to that player
- Custom markers for test categorization
"""

from __future__ import annotations

import pytest

from dungeon.engine.items import Axe, Blobbyblob, Item
from dungeon.engine.parser import CommandParser
from dungeon.engine.player import Player
from dungeon.engine.processor import TurnProcessor
from dungeon.engine.room import Direction, Room


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


# =============================================================================
# World Fixtures
# =============================================================================


@pytest.fixture
def cell() -> Room:
    """The starting room."""
    return Room("cell", "You are in a cramped cell.")


@pytest.fixture
def hall(cell: Room) -> Room:
    """A room north of the cell."""
    hall = Room("hall", "You are in a long hall.")
    cell.connect("iron door", hall, Direction.NORTH)
    return hall


@pytest.fixture
def axe() -> Axe:
    return Axe(damage=2)


@pytest.fixture
def wall() -> Item:
    """A thing that cannot be taken."""
    return Item("wall", "damp stone wall", portable=False, where="all around you")


@pytest.fixture
def blob() -> Blobbyblob:
    """A Blobbyblob that dies from two axe blows."""
    return Blobbyblob(hit_points=3, damage=2)


@pytest.fixture
def player(cell: Room, hall: Room, axe: Axe, wall: Item) -> Player:
    """A player in the cell, with the axe and the wall in the room.

    Layout:
        [hall]
          |  (iron door, north)
        [cell]  axe, wall
    """
    cell.place(axe, axe.where())
    cell.place(wall, wall.where())
    return Player(cell, hit_points=10)


@pytest.fixture
def armed_player(player: Player, axe: Axe, blob: Blobbyblob) -> Player:
    """The player holding the axe, facing the Blobbyblob in the cell."""
    player.take(axe)
    player.room.place(blob, blob.where())
    return player


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def parser(player: Player) -> CommandParser:
    return CommandParser(player)


@pytest.fixture
def processor(player: Player) -> TurnProcessor:
    return TurnProcessor(player, max_actions=50)
