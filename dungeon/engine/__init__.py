"""
Game engine for the dungeon.

Flow of a command:
    tokens -> CommandParser -> Action -> TurnProcessor
                                            |
                                            v
                              narrate() + propagate() to every reachable
                              Thing, breadth first, until nothing reacts

Example:
    >>> world = WorldLoader().load_world("dungeon")
    >>> processor = TurnProcessor(world.player)
    >>> processor.process("take axe").text
    'Okay, took an axe with a notch in the blade.'
"""

from dungeon.engine.processor import TurnProcessor
from dungeon.engine.world import World, WorldLoader

__all__ = [
    "TurnProcessor",
    "World",
    "WorldLoader",
]
