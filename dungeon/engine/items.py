"""
Concrete things that live in the dungeon.

Item is a generic, data-driven thing used for most of the world's objects.
Creature adds hit points, and Monster is the data-driven creature. Axe and
Blobbyblob are hand-written, and the Blobbyblob reacts to being attacked.
"""

from __future__ import annotations

from dungeon.engine.actions import Action, Attack, PlayerAttack
from dungeon.engine.text import a
from dungeon.engine.things import Thing, WeaponAttack


class Item(Thing):
    """A thing whose narration comes from world data.

    Example:
        >>> wall = Item("wall", "damp stone wall", portable=False)
        >>> wall.can_be_taken()
        False
    """

    def __init__(
        self,
        name: str,
        description: str,
        portable: bool = True,
        damage: int = 0,
        eat_text: str | None = None,
        where: str = "on the floor",
    ):
        super().__init__(name, portable=portable, damage=damage)
        self._description = description
        self._eat_text = eat_text
        self._where = where

    def description(self) -> str:
        return self._description

    def eat(self) -> str:
        if self._eat_text:
            return self._eat_text
        return f"You can't eat {a(self.name)}."

    def attack_with(self, damage: int) -> str:
        return f"The {self.name} is unharmed."

    def where(self) -> str:
        return self._where


class Creature(Thing):
    """A thing with hit points that can be killed."""

    def __init__(self, name: str, hit_points: int, damage: int = 0):
        super().__init__(name, portable=False, damage=damage)
        self.hit_points = hit_points

    @property
    def alive(self) -> bool:
        return self.hit_points > 0

    def attack_with(self, damage: int) -> str:
        self.hit_points -= damage
        if self.alive:
            return f"The {self.name} is wounded but still alive. And now it's mad."
        return f"The {self.name} is dead. Murderer."


class Axe(Thing):
    def __init__(self, damage: int = 2):
        super().__init__("axe", portable=True, damage=damage)

    def description(self) -> str:
        return "axe with a notch in the blade"

    def eat(self) -> str:
        return (
            "Axes are not good for eating. "
            "Now your teeth hurt and you are no less hungry."
        )

    def attack_with(self, damage: int) -> str:
        return "You hit the axe. It is still an axe."

    def attack(self) -> WeaponAttack:
        return WeaponAttack("You swing your axe and connect!", self.damage)


class Monster(Creature):
    """A creature whose narration comes from world data.

    Monsters fight back only if a subclass says so; a plain Monster just
    takes its wounds.
    """

    def __init__(
        self,
        name: str,
        description: str,
        hit_points: int,
        damage: int = 0,
        where: str = "across from you",
        eat_text: str | None = None,
        dead_eat_text: str | None = None,
        dead_description: str | None = None,
    ):
        super().__init__(name, hit_points=hit_points, damage=damage)
        self._description = description
        self._where = where
        self._eat_text = eat_text
        self._dead_eat_text = dead_eat_text
        self._dead_description = dead_description

    def where(self) -> str:
        return self._where

    def description(self) -> str:
        if self.alive:
            return self._description
        return self._dead_description or f"dead {self.name}"

    def eat(self) -> str:
        if self.alive:
            return self._eat_text or (
                f"Are you out of your mind?! This is a live and jiggling {self.name}!"
            )
        return self._dead_eat_text or (
            "Ugh. This is worse than the worst jello casserole you have ever "
            "tasted. But it does slightly sate your hunger."
        )


class Blobbyblob(Monster):
    """A gelatinous monster that strikes back when attacked.

    It can only be eaten once it is dead.
    """

    def __init__(self, hit_points: int = 3, damage: int = 2):
        super().__init__(
            "Blobbyblob",
            "Blobbyblob, a gelatinous mass with too many eyes "
            "and an odor of jello casserole gone bad",
            hit_points=hit_points,
            damage=damage,
            dead_description="dead Blobbyblob decaying into a puddle of goo",
        )

    def on_player_attack(self, action: PlayerAttack) -> list[Action]:
        if action.monster is not self or not self.alive:
            return []
        return [
            Attack(
                damage=self.damage,
                text=f"The {self.name} extrudes a blobby arm and smashes at you!",
                player=action.player,
            )
        ]
