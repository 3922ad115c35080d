"""
The player.

The player is a Location: the things it holds are its inventory. It also
tracks the room it is in and its remaining hit points.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dungeon.engine.text import a, commify
from dungeon.engine.things import Location, Thing

if TYPE_CHECKING:
    from dungeon.engine.room import Door, Room


class Player(Location):
    """The player character.

    Attributes:
        room: The room the player is currently in
        hit_points: Remaining hit points; the player dies at zero
    """

    def __init__(self, room: "Room", hit_points: int):
        super().__init__()
        self.room = room
        self.hit_points = hit_points

    def __repr__(self) -> str:
        return f"Player(room={self.room.name!r}, hit_points={self.hit_points})"

    @property
    def alive(self) -> bool:
        return self.hit_points > 0

    def go(self, door: "Door") -> None:
        self.room = door.other_side(self.room)

    def take(self, thing: Thing) -> None:
        self.place(thing, "in your bag")

    def drop(self, thing: Thing) -> None:
        self.room.place(thing, thing.where())

    def take_damage(self, amount: int) -> None:
        self.hit_points -= amount

    def room_thing(self, name: str) -> Thing | None:
        return self.room.find(name)

    def any_thing(self, name: str) -> Thing | None:
        """Find a thing in the inventory, then in the current room."""
        thing = self.find(name)
        if thing is None:
            thing = self.room_thing(name)
        return thing

    def weapon(self) -> Thing | None:
        """The first carried thing that does damage, if any."""
        for thing in self.things():
            if thing.damage > 0:
                return thing
        return None

    def inventory(self) -> str:
        things = [a(thing.description()) for thing in self.things()]
        if not things:
            return "You aren't carrying anything."
        return f"You have {commify(things)}."

    def status(self) -> str:
        if self.alive:
            return f"You have {self.hit_points} hit points left."
        return "You feel consciousness slipping away."
