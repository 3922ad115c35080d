"""
Actions that can happen during a turn.

Each action bundles two things:
    - narrate(): apply the action to the world and describe what happened
    - propagate(): ask a Thing whether it reacts, yielding follow-up actions

The set of actions is closed: ActionType lists every verb, each has exactly
one model here and exactly one reaction handler on Thing (REACTION_HANDLERS).
Payloads only hold references to world entities, never copies of world state.

Two pseudo actions sit outside the set:
    - NoEvent: narration only, nothing is told about it
    - RawOutput: ends the command with verbatim output, skipping the rest of
      the turn and the console's usual wrapping

Example:
    >>> action = Take(player=player, things=[axe])
    >>> action.narrate()
    'Okay, took an axe with a notch in the blade.'
    >>> blob.on_take(action)
    []
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict

from dungeon.engine.player import Player
from dungeon.engine.room import Door
from dungeon.engine.text import a, commify
from dungeon.engine.things import Location, Thing


class ActionType(str, Enum):
    """Every verb that can change or broadcast to the world."""

    ATTACK = "attack"  # Something attacks the player
    DROP = "drop"
    EAT = "eat"
    GO = "go"
    LOOK = "look"
    MOVE = "move"  # A thing is relocated within a location
    PLAYER_ATTACK = "player_attack"  # The player attacks something
    SAY = "say"
    TAKE = "take"
    TURN = "turn"  # End-of-turn tick


# Name of the Thing method that reacts to each action type
REACTION_HANDLERS: dict[ActionType, str] = {
    ActionType.ATTACK: "on_attack",
    ActionType.DROP: "on_drop",
    ActionType.EAT: "on_eat",
    ActionType.GO: "on_enter",
    ActionType.LOOK: "on_look",
    ActionType.MOVE: "on_move",
    ActionType.PLAYER_ATTACK: "on_player_attack",
    ActionType.SAY: "on_say",
    ActionType.TAKE: "on_take",
    ActionType.TURN: "on_turn",
}


class GameAction(BaseModel):
    """Base for the actions in the closed set."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: ActionType

    def narrate(self) -> str:
        """Apply the action and describe it. Call exactly once.

        Every action in the closed set overrides this.
        """
        raise NotImplementedError

    def propagate(self, subject: Thing) -> list["Action"]:
        """Collect the follow-up actions `subject` produces in reaction."""
        handler = getattr(subject, REACTION_HANDLERS[self.type])
        return list(handler(self))


class Attack(GameAction):
    """Something attacks the player.

    Attributes:
        damage: Hit points the player loses
        text: Narration of the attack
        player: The player being attacked
    """

    type: Literal[ActionType.ATTACK] = ActionType.ATTACK
    damage: int
    text: str
    player: Player

    def narrate(self) -> str:
        self.player.take_damage(self.damage)
        return self.text


class Drop(GameAction):
    type: Literal[ActionType.DROP] = ActionType.DROP
    player: Player
    thing: Thing

    def narrate(self) -> str:
        self.player.drop(self.thing)
        return f"You drop the {self.thing.name}."


class Eat(GameAction):
    """The player tries to eat something; the food decides whether it can."""

    type: Literal[ActionType.EAT] = ActionType.EAT
    player: Player
    food: Thing

    def narrate(self) -> str:
        return self.food.eat()


class Go(GameAction):
    type: Literal[ActionType.GO] = ActionType.GO
    player: Player
    door: Door

    def narrate(self) -> str:
        self.player.go(self.door)
        return self.player.room.description()


class Look(GameAction):
    type: Literal[ActionType.LOOK] = ActionType.LOOK
    player: Player

    def narrate(self) -> str:
        return self.player.room.description()


class Move(GameAction):
    """A thing is moved to a named place in a location.

    Attributes:
        thing: What is being moved
        location: Where it ends up
        place: Place label within the location ("on the table")
        movement: Narration of the move
    """

    type: Literal[ActionType.MOVE] = ActionType.MOVE
    thing: Thing
    location: Location
    place: str
    movement: str

    def narrate(self) -> str:
        self.location.place(self.thing, self.place)
        return self.movement


class PlayerAttack(GameAction):
    """The player attacks a monster with a weapon."""

    type: Literal[ActionType.PLAYER_ATTACK] = ActionType.PLAYER_ATTACK
    player: Player
    monster: Thing
    weapon: Thing

    def narrate(self) -> str:
        attack = self.weapon.attack()
        return f"{attack.description} {attack.result(self.monster)}"


class Say(GameAction):
    type: Literal[ActionType.SAY] = ActionType.SAY
    speaker: Thing | Player
    what: str

    def narrate(self) -> str:
        if isinstance(self.speaker, Player):
            return f"You say '{self.what}'."
        return f"'{self.what}' says the {self.speaker.name}."


class Take(GameAction):
    """The player tries to take some things.

    Things that can be taken move into the player's inventory; the rest stay
    where they are and are reported by name.
    """

    type: Literal[ActionType.TAKE] = ActionType.TAKE
    player: Player
    things: list[Thing]

    def narrate(self) -> str:
        taken: list[str] = []
        not_taken: list[str] = []
        for thing in self.things:
            if thing.can_be_taken():
                self.player.take(thing)
                taken.append(a(thing.description()))
            else:
                not_taken.append(thing.name)

        clauses: list[str] = []
        if taken:
            clauses.append(f"Okay, took {commify(taken)}.")
        if not_taken:
            clauses.append(f"Can't take {commify(not_taken)}.")
        return " ".join(clauses)


class Turn(GameAction):
    """End-of-turn tick broadcast to everything reachable."""

    type: Literal[ActionType.TURN] = ActionType.TURN
    player: Player

    def narrate(self) -> str:
        return ""


# Type alias for any action in the closed set
Action = Attack | Drop | Eat | Go | Look | Move | PlayerAttack | Say | Take | Turn

ACTION_MODELS: dict[ActionType, type[GameAction]] = {
    ActionType.ATTACK: Attack,
    ActionType.DROP: Drop,
    ActionType.EAT: Eat,
    ActionType.GO: Go,
    ActionType.LOOK: Look,
    ActionType.MOVE: Move,
    ActionType.PLAYER_ATTACK: PlayerAttack,
    ActionType.SAY: Say,
    ActionType.TAKE: Take,
    ActionType.TURN: Turn,
}


class NoEvent(BaseModel):
    """A response that is narrated but not propagated to anything."""

    model_config = ConfigDict(frozen=True)

    text: str

    def narrate(self) -> str:
        return self.text

    def propagate(self, subject: Thing) -> list["Action"]:
        return []


class RawOutput(BaseModel):
    """Verbatim output that ends the current command.

    The processor returns `text` as the whole response without resolving
    anything else and flags it so the console prints it unwrapped.
    """

    model_config = ConfigDict(frozen=True)

    text: str


# Anything the command parser can produce
Command = Action | NoEvent | RawOutput
