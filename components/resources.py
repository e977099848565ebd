"""components.resources — World-level singletons (not per-entity).

``GameState`` replaces module-level rosters: every system receives the
state it mutates, so several games (or test arenas) can coexist.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from core.constants import (
    WORLD_WIDTH, WORLD_HEIGHT, VIEWPORT_WIDTH, VIEWPORT_HEIGHT,
    PROP_TENT,
)
from core.events import EventBus
from core.rng import RNG, new_rng
from components.dev_log import DevLog
from components.entities import Prop, Player, Npc, Egg


@dataclass
class Camera:
    """Top-left of the visible area in world units, plus zoom.

    Derived from the player position every tick by the camera system;
    nothing else writes it.
    """
    x: float = 0.0
    y: float = 0.0
    zoom: float = 1.0


@dataclass
class InputState:
    """Snapshot of the input provider for one tick.

    Directions are held-state; ``throw_pressed`` is a rising edge so
    one press throws exactly one egg.
    """
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    throw_pressed: bool = False


@dataclass
class GameState:
    """Everything one game session owns."""
    world_width: float = WORLD_WIDTH
    world_height: float = WORLD_HEIGHT
    viewport_width: float = VIEWPORT_WIDTH
    viewport_height: float = VIEWPORT_HEIGHT

    props: list[Prop] = field(default_factory=list)
    npcs: list[Npc] = field(default_factory=list)
    eggs: list[Egg] = field(default_factory=list)
    player: Player = field(default_factory=Player)
    camera: Camera = field(default_factory=Camera)

    score: int = 0
    game_over: bool = False
    started: bool = True
    spawn_timer: int = 0
    tick: int = 0

    rng: RNG = field(default_factory=new_rng)
    bus: EventBus = field(default_factory=EventBus)
    log: DevLog = field(default_factory=DevLog)

    def tents(self) -> list[Prop]:
        return [p for p in self.props if p.type == PROP_TENT]
