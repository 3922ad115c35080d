"""
World schema models - Pydantic models for YAML world definitions
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PlayerSetup(BaseModel):
    """Initial player configuration"""
    starting_room: str
    hit_points: int = 10
    inventory: list[str] = Field(default_factory=list)  # Thing ids carried at the start


class RoomDefinition(BaseModel):
    """Room definition from the rooms section"""
    name: str
    description: str


class DoorDefinition(BaseModel):
    """A door connecting two rooms"""
    model_config = ConfigDict(populate_by_name=True)

    from_room: str = Field(alias="from")
    to_room: str = Field(alias="to")
    direction: str
    description: str = "door"


class ThingDefinition(BaseModel):
    """Thing definition from the things section.

    `room` places the thing in a room; `player` puts it in the inventory (as
    does listing its id in the player's `inventory`).
    The remaining fields are used by the kinds that need them.
    """
    kind: Literal["item", "axe", "blobbyblob", "monster"] = "item"
    room: str | None = None
    player: bool = False
    name: str | None = None
    description: str = ""
    portable: bool = True
    damage: int | None = None
    hit_points: int | None = None
    eat: str | None = None
    where: str | None = None
    # Monsters only
    dead_description: str | None = None
    dead_eat: str | None = None


class WorldDefinition(BaseModel):
    """Complete world definition from world.yaml"""
    name: str
    intro: str = ""
    player: PlayerSetup
    rooms: dict[str, RoomDefinition]
    doors: list[DoorDefinition] = Field(default_factory=list)
    things: dict[str, ThingDefinition] = Field(default_factory=dict)
