"""components.entities — Props, the player, NPCs and eggs.

All coordinates and dimensions are in world units; (x, y) is the
top-left corner of the entity's box.  Every record here exposes
x / y / width / height so the helpers in ``core.collision`` accept
them directly.
"""

from __future__ import annotations
from dataclasses import dataclass

from core.constants import (
    DOWN, PLAYER_SIZE, NPC_SIZE, EGG_SIZE, SOLID_PROP_TYPES, PROP_TENT,
)


def sprite_key(kind: str, direction: str) -> str:
    """Visual lookup key, e.g. ``"npc.left"``.  Pure derived value."""
    return f"{kind}.{direction}"


@dataclass
class Prop:
    """Static world object.  Never moved or removed after generation.

    Nests are refill stations: the player restocks on contact and the
    nest stays put.
    """
    type: str
    x: float
    y: float
    width: float
    height: float
    id: str | None = None      # tents only — an NPC's home reference
    variant: int = 0           # visual selection only


def is_solid(prop: Prop) -> bool:
    return prop.type in SOLID_PROP_TYPES


@dataclass
class Player:
    x: float = 0.0
    y: float = 0.0
    speed: float = 2.0            # wu/tick
    width: float = PLAYER_SIZE
    height: float = PLAYER_SIZE
    direction: str = DOWN
    egg_count: int = 0
    max_eggs: int = 3
    sprite: str = "player.down"


@dataclass
class Npc:
    """A tent dweller.

    Mood:      ``angry`` + ``angry_timer`` (ticks until calm),
               ``hit`` + ``hit_timer`` (ticks until removal).
    Movement:  ``has_left_tent`` / ``steps_from_tent`` track the short
               grace walk out of the home tent; ``walk_steps_left`` is
               the remaining budget of the current random walk.
    """
    x: float
    y: float
    home_id: str | None = None
    width: float = NPC_SIZE
    height: float = NPC_SIZE
    direction: str = DOWN
    sprite: str = "npc.down"
    angry: bool = False
    angry_timer: int = 0
    hit: bool = False
    hit_timer: int = 0
    reaction_text: str = ""
    has_left_tent: bool = False
    steps_from_tent: int = 0
    walk_steps_left: int = 0

    def is_home(self, prop: Prop) -> bool:
        """True if *prop* is this NPC's own tent."""
        return prop.type == PROP_TENT and prop.id == self.home_id


@dataclass
class Egg:
    """A thrown egg.  Exactly one of vx / vy is non-zero."""
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    width: float = EGG_SIZE
    height: float = EGG_SIZE
    active: bool = True
