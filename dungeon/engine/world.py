"""
World loader - Load YAML world files and wire them into rooms, doors and things
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError

from dungeon.config import get_worlds_dir
from dungeon.engine.items import Axe, Blobbyblob, Item, Monster
from dungeon.engine.player import Player
from dungeon.engine.room import Direction, Room
from dungeon.engine.things import Thing
from dungeon.models.world import ThingDefinition, WorldDefinition

logger = logging.getLogger(__name__)


@dataclass
class World:
    """A world ready to play: wired rooms and a placed player"""
    name: str
    intro: str
    player: Player
    rooms: dict[str, Room]


class WorldLoader:
    """Loads game worlds from YAML files"""

    def __init__(self, worlds_dir: str | Path | None = None):
        """Initialize with worlds directory path (DUNGEON_WORLDS_DIR by default)"""
        self.worlds_dir = Path(worlds_dir) if worlds_dir is not None else get_worlds_dir()

    def list_worlds(self) -> list[dict]:
        """List available worlds with their names"""
        worlds = []

        if not self.worlds_dir.exists():
            return worlds

        for world_path in sorted(self.worlds_dir.iterdir()):
            world_yaml = world_path / "world.yaml"
            if world_path.is_dir() and world_yaml.exists():
                with open(world_yaml) as f:
                    data = yaml.safe_load(f) or {}
                worlds.append({"id": world_path.name, "name": data.get("name", world_path.name)})

        return worlds

    def load_world(self, world_id: str) -> World:
        """
        Load a world and build it.

        Args:
            world_id: The world identifier (folder name in the worlds directory)

        Returns:
            World with rooms connected and things placed

        Raises:
            FileNotFoundError: If the world doesn't exist
            ValueError: If the world definition is malformed
        """
        world_yaml = self.worlds_dir / world_id / "world.yaml"
        if not world_yaml.exists():
            raise FileNotFoundError(f"World '{world_id}' not found at {world_yaml}")

        logger.info(f"Loading world '{world_id}' from {world_yaml}")
        with open(world_yaml) as f:
            data = yaml.safe_load(f) or {}

        try:
            definition = WorldDefinition.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"World '{world_id}' is invalid: {e}") from e

        return build_world(definition)


def build_world(definition: WorldDefinition) -> World:
    """
    Wire a world definition into live objects.

    Raises:
        ValueError: On unknown rooms, directions or inventory things, doors
            that clash, or things placed nowhere or in two places at once
    """
    rooms = {
        room_id: Room(room_def.name, room_def.description)
        for room_id, room_def in definition.rooms.items()
    }

    for door in definition.doors:
        direction = Direction.parse(door.direction)
        if direction is None:
            raise ValueError(f"Unknown direction '{door.direction}'")
        _room(rooms, door.from_room).connect(
            door.description, _room(rooms, door.to_room), direction
        )

    player = Player(
        _room(rooms, definition.player.starting_room),
        definition.player.hit_points,
    )

    things = {
        thing_id: build_thing(thing_id, thing_def)
        for thing_id, thing_def in definition.things.items()
    }
    inventory = definition.player.inventory
    for thing_id in inventory:
        if thing_id not in things:
            raise ValueError(f"Unknown thing '{thing_id}' in the player's inventory")

    for thing_id, thing_def in definition.things.items():
        thing = things[thing_id]
        if thing_id in inventory:
            if thing_def.player or thing_def.room:
                raise ValueError(
                    f"Thing '{thing_id}' is in the player's inventory and placed elsewhere"
                )
            continue
        if thing_def.player and thing_def.room:
            raise ValueError(f"Thing '{thing_id}' is placed both in a room and on the player")
        if thing_def.player:
            player.take(thing)
        elif thing_def.room:
            _room(rooms, thing_def.room).place(thing, thing.where())
        else:
            raise ValueError(f"Thing '{thing_id}' is not placed anywhere")

    for thing_id in inventory:
        player.take(things[thing_id])

    logger.info(
        f"Built world '{definition.name}': {len(rooms)} rooms, "
        f"{len(definition.things)} things"
    )
    return World(
        name=definition.name,
        intro=definition.intro,
        player=player,
        rooms=rooms,
    )


def build_thing(thing_id: str, definition: ThingDefinition) -> Thing:
    """Create the Thing for a definition according to its kind"""
    if definition.kind == "axe":
        return Axe(damage=_or_default(definition.damage, 2))
    if definition.kind == "blobbyblob":
        return Blobbyblob(
            hit_points=_or_default(definition.hit_points, 3),
            damage=_or_default(definition.damage, 2),
        )
    if definition.kind == "monster":
        if definition.hit_points is None:
            raise ValueError(f"Monster '{thing_id}' has no hit_points")
        return Monster(
            definition.name or thing_id,
            definition.description or thing_id,
            hit_points=definition.hit_points,
            damage=_or_default(definition.damage, 0),
            where=definition.where or "across from you",
            eat_text=definition.eat,
            dead_eat_text=definition.dead_eat,
            dead_description=definition.dead_description,
        )
    return Item(
        definition.name or thing_id,
        definition.description or thing_id,
        portable=definition.portable,
        damage=_or_default(definition.damage, 0),
        eat_text=definition.eat,
        where=definition.where or "on the floor",
    )


def _or_default(value: int | None, default: int) -> int:
    return value if value is not None else default


def _room(rooms: dict[str, Room], room_id: str) -> Room:
    if room_id not in rooms:
        raise ValueError(f"Unknown room '{room_id}'")
    return rooms[room_id]
