"""
Thing and Location capabilities.

Every object in the world is a Thing. A Thing knows its name, whether it can
be carried, where it currently is and how it reacts to each kind of action.
Reacting is opt-in: the default handler for every action type returns no
follow-up actions, and concrete things override only the handlers they care
about.

A Location is anything that holds Things: the player's inventory and rooms.
A Thing is placed in at most one Location at a time; placing it somewhere
removes it from wherever it was before.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dungeon.engine.actions import (
        Action,
        Attack,
        Drop,
        Eat,
        Go,
        Look,
        Move,
        PlayerAttack,
        Say,
        Take,
        Turn,
    )


@dataclass(frozen=True)
class WeaponAttack:
    """The intrinsic attack of a Thing used as a weapon.

    Attributes:
        description: What swinging the weapon looks like
        damage: Hit points taken from the target
    """

    description: str
    damage: int

    def result(self, target: "Thing") -> str:
        """Apply the attack to `target` and return what happened to it."""
        return target.attack_with(self.damage)


class Thing(ABC):
    """Base class for everything that can be placed in the world.

    Attributes:
        name: Name used to refer to the thing in commands
        portable: Whether the player can carry it
        damage: Damage done when used as a weapon (0 for non-weapons)
        location: The Location the thing is currently placed in, if any
    """

    def __init__(self, name: str, portable: bool = True, damage: int = 0):
        self.name = name
        self.portable = portable
        self.damage = damage
        self.location: Location | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @abstractmethod
    def description(self) -> str:
        """Noun phrase describing the thing, without an article."""

    @abstractmethod
    def eat(self) -> str:
        """Narration of the player trying to eat the thing."""

    @abstractmethod
    def attack_with(self, damage: int) -> str:
        """Take `damage` and narrate the result."""

    def can_be_taken(self) -> bool:
        return self.portable

    def where(self) -> str:
        """Default place label when the thing is put in a room."""
        return "on the floor"

    def attack(self) -> WeaponAttack:
        """The attack made when this thing is used as a weapon."""
        return WeaponAttack(f"You swing the {self.name}.", self.damage)

    # Reactions ------------------------------------------------------------

    def on_attack(self, action: "Attack") -> list["Action"]:
        return []

    def on_drop(self, action: "Drop") -> list["Action"]:
        return []

    def on_eat(self, action: "Eat") -> list["Action"]:
        return []

    def on_enter(self, action: "Go") -> list["Action"]:
        return []

    def on_look(self, action: "Look") -> list["Action"]:
        return []

    def on_move(self, action: "Move") -> list["Action"]:
        return []

    def on_player_attack(self, action: "PlayerAttack") -> list["Action"]:
        return []

    def on_say(self, action: "Say") -> list["Action"]:
        return []

    def on_take(self, action: "Take") -> list["Action"]:
        return []

    def on_turn(self, action: "Turn") -> list["Action"]:
        return []


@dataclass(frozen=True)
class PlacedThing:
    """A thing together with the label of where it sits.

    The place label ("in your bag", "across from you") is only used for
    narration.
    """

    thing: Thing
    place: str


class Location:
    """Container of Things addressable by name.

    Subclasses (Player, Room) share this storage; placement order is kept so
    descriptions are stable.
    """

    def __init__(self) -> None:
        self._placed: list[PlacedThing] = []

    def place(self, thing: Thing, place: str) -> None:
        """Place `thing` here, taking it from its previous location."""
        if thing.location is not None:
            thing.location.remove(thing)
        self._placed.append(PlacedThing(thing, place))
        thing.location = self

    def remove(self, thing: Thing) -> None:
        self._placed = [p for p in self._placed if p.thing is not thing]
        if thing.location is self:
            thing.location = None

    def find(self, name: str) -> Thing | None:
        """Find a placed thing by case-insensitive name."""
        wanted = name.lower()
        for placed in self._placed:
            if placed.thing.name.lower() == wanted:
                return placed.thing
        return None

    def all_placed(self) -> list[PlacedThing]:
        return list(self._placed)

    def things(self) -> list[Thing]:
        return [placed.thing for placed in self._placed]
