"""
Rooms, doors and directions.

Rooms are Locations connected by Doors. Each room has at most one door per
Direction, and a door connects exactly two rooms: going through it from one
side leads to the other.
"""

from __future__ import annotations

from enum import Enum

from dungeon.engine.text import a
from dungeon.engine.things import Location


class Direction(str, Enum):
    """Directions a door can lead in."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    UP = "up"
    DOWN = "down"

    def __str__(self) -> str:
        return self.value

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def heading(self) -> str:
        """Phrase for a door in this direction ("to the north", "leading up")."""
        if self in (Direction.UP, Direction.DOWN):
            return f"leading {self.value}"
        return f"to the {self.value}"

    @classmethod
    def parse(cls, text: str) -> "Direction | None":
        """Resolve a direction from its name or one-letter abbreviation.

        Example:
            >>> Direction.parse("N")
            <Direction.NORTH: 'north'>
        """
        normalized = text.lower().strip()
        for direction in cls:
            if normalized in (direction.value, direction.value[0]):
                return direction
        return None


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class Door:
    """A door between two rooms.

    Attributes:
        description: Noun phrase for the door ("heavy oak door")
    """

    def __init__(self, description: str, one: "Room", other: "Room"):
        self.description = description
        self._one = one
        self._other = other

    def other_side(self, room: "Room") -> "Room":
        """The room reached by going through this door from `room`.

        Raises:
            ValueError: If the door does not connect to `room`
        """
        if room is self._one:
            return self._other
        if room is self._other:
            return self._one
        raise ValueError(f"{self.description} does not lead from {room.name}")


class Room(Location):
    """A room the player can be in."""

    def __init__(self, name: str, description: str):
        super().__init__()
        self.name = name
        self._description = description
        self._doors: dict[Direction, Door] = {}

    def __repr__(self) -> str:
        return f"Room({self.name!r})"

    def connect(self, description: str, other: "Room", direction: Direction) -> Door:
        """Connect this room to `other` with a door in `direction`.

        Raises:
            ValueError: If either room already has a door on that side
        """
        if direction in self._doors:
            raise ValueError(f"{self.name} already has a door to the {direction}")
        if direction.opposite in other._doors:
            raise ValueError(
                f"{other.name} already has a door to the {direction.opposite}"
            )

        door = Door(description, self, other)
        self._doors[direction] = door
        other._doors[direction.opposite] = door
        return door

    def door_to(self, direction: Direction) -> Door | None:
        return self._doors.get(direction)

    def description(self) -> str:
        """Describe the room, what is in it and its exits."""
        parts = [self._description]
        for placed in self.all_placed():
            parts.append(
                f"There is {a(placed.thing.description())} {placed.place}."
            )
        for direction, door in self._doors.items():
            parts.append(f"There is {a(door.description)} {direction.heading}.")
        return " ".join(parts)
