"""
Turn processor for the dungeon.

This module runs one command through the complete turn:
    1. Parse: tokens become an Action (or a pseudo action)
    2. Narrate: the action changes the world and describes itself
    3. Propagate: every reachable thing may react with follow-up actions,
       which are narrated and propagated in turn, breadth first
    4. Tick: a Turn action is broadcast after the primary action

Resolution stops when no new actions are produced. RawOutput short-circuits
the whole turn.
"""

from __future__ import annotations

import logging
from collections import deque

from dungeon.config import get_max_actions
from dungeon.engine.actions import Command, RawOutput, Turn
from dungeon.engine.parser import CommandParser
from dungeon.engine.player import Player
from dungeon.engine.things import Thing
from dungeon.models.parse import CommandError
from dungeon.models.response import CommandResponse, ResponseKind

logger = logging.getLogger(__name__)


class TurnProcessor:
    """Processes player commands one turn at a time.

    Example:
        >>> processor = TurnProcessor(player)
        >>> response = processor.process("take axe")
        >>> response.text
        'Okay, took an axe with a notch in the blade.'
    """

    def __init__(self, player: Player, max_actions: int | None = None):
        """Initialize the processor.

        Args:
            player: The player whose commands are processed
            max_actions: Cap on actions resolved per command
                (defaults to DUNGEON_MAX_ACTIONS)
        """
        self.player = player
        self.parser = CommandParser(player)
        self.max_actions = max_actions if max_actions is not None else get_max_actions()
        self.turn_count = 0

    def process(self, raw_input: str) -> CommandResponse:
        """Process one line of player input.

        Args:
            raw_input: The raw command line

        Returns:
            CommandResponse with the narration, error or raw output
        """
        try:
            command = self.parser.parse_line(raw_input)
        except CommandError as e:
            logger.info(f"Rejected command {raw_input!r}: {e.message}")
            return CommandResponse(kind=ResponseKind.ERROR, text=e.message)

        self.turn_count += 1
        return self.resolve(command)

    def resolve(self, command: Command) -> CommandResponse:
        """Narrate `command` and everything it sets off.

        The primary command is followed by a Turn tick. Each action is
        narrated, then offered to every reachable thing; follow-ups go to the
        back of the queue.
        """
        queue: deque[Command] = deque([command, Turn(player=self.player)])
        narration: list[str] = []
        resolved = 0

        while queue:
            if resolved >= self.max_actions:
                logger.warning(
                    f"Stopped resolving after {resolved} actions; "
                    f"{len(queue)} still queued"
                )
                break

            action = queue.popleft()
            if isinstance(action, RawOutput):
                logger.debug("Raw output ends the turn")
                return CommandResponse(
                    kind=ResponseKind.RAW,
                    text=action.text,
                    game_over=not self.player.alive,
                )

            resolved += 1
            text = action.narrate()
            logger.debug(f"Narrated {type(action).__name__}: {text!r}")
            if text:
                narration.append(text)

            for subject in self.reachable():
                follow_ups = action.propagate(subject)
                if follow_ups:
                    logger.debug(f"{subject!r} reacted with {len(follow_ups)} action(s)")
                queue.extend(follow_ups)

        return CommandResponse(
            kind=ResponseKind.NARRATION,
            text="\n".join(narration),
            game_over=not self.player.alive,
        )

    def reachable(self) -> list[Thing]:
        """Everything the player carries, then everything in the room."""
        return self.player.things() + self.player.room.things()
