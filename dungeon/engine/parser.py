"""
Command parser for the dungeon.

Turns the tokens of a player's command into an Action (or a pseudo action)
by chaining parse results. Expected problems, like a missing argument or an
unknown thing, stay inside the chain as failures with a message attached and
only become a CommandError at the final `to_action` step.

Supported commands:
    look, l                          Describe the current room
    inventory, i                     List what the player carries
    help                             Show the command list
    take <thing>... | take all       Take things from the room
    drop <thing>                     Drop a carried thing
    eat <thing>                      Try to eat something
    go <direction>                   Go through a door
    attack <monster> [with <weapon>] Attack with a carried weapon
    put <thing> <place>              Put a thing somewhere in the room
    say <words>                      Say something out loud
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Callable

from dungeon.engine.actions import (
    Command,
    Drop,
    Eat,
    Go,
    Look,
    Move,
    NoEvent,
    PlayerAttack,
    RawOutput,
    Say,
    Take,
)
from dungeon.engine.arguments import arg, args, implicit
from dungeon.engine.player import Player
from dungeon.engine.room import Direction
from dungeon.engine.text import a
from dungeon.engine.things import Thing
from dungeon.models.parse import CommandError

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  look                              describe where you are
  inventory                         list what you carry
  take <thing> ...                  pick things up (or: take all)
  drop <thing>                      put something down
  eat <thing>                       try to eat something
  go <direction>                    north, south, east, west, up, down
  attack <monster> [with <weapon>]  fight
  put <thing> <place>               put something somewhere
  say <words>                       say something
  quit                              leave the dungeon"""


class CommandParser:
    """Parse command tokens into actions for one player.

    Example:
        >>> parser = CommandParser(player)
        >>> parser.parse(["take", "axe"])
        Take(type=<ActionType.TAKE: 'take'>, player=..., things=[Axe('axe')])
        >>> parser.parse(["go"])
        Traceback (most recent call last):
        ...
        CommandError: Go where?
    """

    def __init__(self, player: Player):
        self.player = player
        self._verbs: dict[str, Callable[[Sequence[str]], Command]] = {
            "look": self._look,
            "l": self._look,
            "inventory": self._inventory,
            "i": self._inventory,
            "help": self._help,
            "take": self._take,
            "drop": self._drop,
            "eat": self._eat,
            "go": self._go,
            "attack": self._attack,
            "put": self._put,
            "say": self._say,
        }

    def parse_line(self, raw_input: str) -> Command:
        """Split a line on whitespace and parse the tokens."""
        return self.parse(raw_input.split())

    def parse(self, tokens: Sequence[str]) -> Command:
        """Parse command tokens into something the processor can run.

        Args:
            tokens: Whitespace-delimited tokens; the first is the verb

        Returns:
            An Action, or a NoEvent/RawOutput pseudo action

        Raises:
            CommandError: If the command cannot be turned into an action
        """
        tokens = tuple(tokens)
        logger.debug(f"Parsing command tokens: {tokens}")
        return (
            arg(tokens, 0)
            .or_else("I beg your pardon?")
            .maybe(lambda verb: self._verbs.get(verb.lower()))
            .or_else(lambda verb: f"I don't know how to {verb}.")
            .to_action(lambda handler: handler(tokens))
        )

    # Verbs ----------------------------------------------------------------

    def _look(self, tokens: Sequence[str]) -> Command:
        return Look(player=self.player)

    def _inventory(self, tokens: Sequence[str]) -> Command:
        return NoEvent(text=f"{self.player.inventory()} {self.player.status()}")

    def _help(self, tokens: Sequence[str]) -> Command:
        return RawOutput(text=HELP_TEXT)

    def _take(self, tokens: Sequence[str]) -> Command:
        return (
            args(tokens, 1, len(tokens))
            .or_else("Take what?")
            .to_action(
                lambda _: Take(player=self.player, things=self._takeable(tokens[1:]))
            )
        )

    def _drop(self, tokens: Sequence[str]) -> Command:
        return (
            arg(tokens, 1)
            .or_else("Drop what?")
            .maybe(self.player.find)
            .or_else(lambda name: f"You don't have {a(name)}.")
            .to_action(lambda thing: Drop(player=self.player, thing=thing))
        )

    def _eat(self, tokens: Sequence[str]) -> Command:
        return (
            arg(tokens, 1)
            .or_else("Eat what?")
            .maybe(self.player.any_thing)
            .or_else(lambda name: f"There is no {name} here.")
            .to_action(lambda food: Eat(player=self.player, food=food))
        )

    def _go(self, tokens: Sequence[str]) -> Command:
        return (
            arg(tokens, 1)
            .or_else("Go where?")
            .maybe(Direction.parse)
            .or_else(lambda text: f"I don't know how to go {text}.")
            .to_action(self._through_door)
        )

    def _attack(self, tokens: Sequence[str]) -> Command:
        monster = (
            arg(tokens, 1)
            .or_else("Attack what?")
            .maybe(self.player.room_thing)
            .or_else(lambda name: f"There is no {name} here.")
        )
        if len(tokens) > 2:
            weapon = (
                arg(tokens, 2)
                .expect("with")
                .or_else("Try 'attack <monster> with <weapon>'.")
                .maybe(lambda _: tokens[3] if len(tokens) > 3 else None)
                .or_else("Attack with what?")
                .maybe(self.player.find)
                .or_else(lambda name: f"You don't have {a(name)}.")
            )
        else:
            weapon = implicit(self.player.weapon).or_else(
                "You have nothing to attack with."
            )
        return monster.to_action(
            lambda target: weapon.to_action(
                lambda w: PlayerAttack(player=self.player, monster=target, weapon=w)
            )
        )

    def _put(self, tokens: Sequence[str]) -> Command:
        return (
            arg(tokens, 1)
            .or_else("Put what?")
            .maybe(self.player.any_thing)
            .or_else(lambda name: f"There is no {name} here.")
            .to_action(lambda thing: self._put_somewhere(thing, tokens))
        )

    def _say(self, tokens: Sequence[str]) -> Command:
        return (
            args(tokens, 1, len(tokens))
            .or_else("Say what?")
            .to_action(lambda what: Say(speaker=self.player, what=what))
        )

    # Helpers --------------------------------------------------------------

    def _takeable(self, names: Sequence[str]) -> list[Thing]:
        """Resolve the things named in a take command.

        The things are only looked up here; whether each can actually be
        taken is decided when the Take action runs.
        """
        if [name.lower() for name in names] == ["all"]:
            everything = self.player.room.things()
            if not everything:
                raise CommandError("There is nothing here to take.")
            return everything

        things: list[Thing] = []
        for name in names:
            thing = self.player.room_thing(name)
            if thing is None:
                raise CommandError(f"There is no {name} here.")
            things.append(thing)
        return things

    def _through_door(self, direction: Direction) -> Command:
        door = self.player.room.door_to(direction)
        if door is None:
            return NoEvent(text=f"No door to the {direction}")
        return Go(player=self.player, door=door)

    def _put_somewhere(self, thing: Thing, tokens: Sequence[str]) -> Command:
        if not thing.can_be_taken():
            raise CommandError(f"You can't move the {thing.name}.")
        return (
            args(tokens, 2, len(tokens))
            .or_else(f"Put the {thing.name} where?")
            .to_action(
                lambda place: Move(
                    thing=thing,
                    location=self.player.room,
                    place=place,
                    movement=f"You put the {thing.name} {place}.",
                )
            )
        )
