"""logic/worldgen.py — Procedural prop scatter and player placement.

Props are dropped one at a time at uniformly random positions fully
inside the world.  A candidate is accepted when its box, grown by the
placement buffer, doesn't touch anything placed before it.  Each item
gets a bounded number of tries; when they run out the item is skipped
and the failure is logged — a sparse world is fine, a hung generator
is not.

Usage::

    state = new_game(seed=7)          # generated + player placed
    reset_world(state)                # the "retry" button
"""

from __future__ import annotations

from core.collision import Rect, overlaps_any
from core.constants import (
    PROP_TREE, PROP_TENT, PROP_NEST, PROP_VARIANTS,
    TREE_SIZE, TENT_SIZE, NEST_SIZE, DOWN,
)
from core.events import PlacementFailed
from core.rng import RNG, new_rng
from core.tuning import get as _tun
from components import Prop, Player, Npc, GameState, sprite_key


# ── Factories ────────────────────────────────────────────────────────

def make_player(x: float = 0.0, y: float = 0.0) -> Player:
    """Player record with speed / size / egg capacity from tuning."""
    size = float(_tun("player", "size", 32))
    return Player(
        x=x, y=y,
        speed=float(_tun("player", "speed", 2.0)),
        width=size, height=size,
        direction=DOWN,
        egg_count=int(_tun("player", "start_eggs", 0)),
        max_eggs=int(_tun("player", "max_eggs", 3)),
        sprite=sprite_key("player", DOWN),
    )


def make_npc(tent: Prop) -> Npc:
    """A calm NPC standing in *tent*, about to walk out."""
    size = float(_tun("npc", "size", 32))
    return Npc(
        x=tent.x, y=tent.y,
        home_id=tent.id,
        width=size, height=size,
        direction=DOWN,
        sprite=sprite_key("npc", DOWN),
    )


def new_game(seed: int | None = None, *, rng: RNG | None = None,
             world_size: tuple[float, float] | None = None,
             viewport: tuple[float, float] | None = None,
             zoom: float = 1.0) -> GameState:
    """Create a GameState, generate its world and place the player."""
    state = GameState(rng=rng if rng is not None else new_rng(seed))
    if world_size is None:
        world_size = (float(_tun("world", "width", state.world_width)),
                      float(_tun("world", "height", state.world_height)))
    state.world_width, state.world_height = world_size
    if viewport is not None:
        state.viewport_width, state.viewport_height = viewport
    state.camera.zoom = zoom
    state.player = make_player()
    generate_world(state)
    place_player(state)
    state.spawn_timer = int(_tun("spawner", "initial_delay", 0))
    return state


# ── Placement ────────────────────────────────────────────────────────

def _random_rect(rng: RNG, w: float, h: float,
                 world_w: float, world_h: float) -> Rect:
    x = rng.random() * (world_w - w)
    y = rng.random() * (world_h - h)
    return Rect(x, y, w, h)


def place_prop(state: GameState, ptype: str, size: float,
               prop_id: str | None = None) -> Prop | None:
    """Try to place one prop.  Returns it, or None after exhausting tries."""
    tries = int(_tun("world", "max_tries", 200))
    buffer = float(_tun("world", "placement_buffer", 16))
    rng = state.rng

    if size > state.world_width or size > state.world_height:
        tries = 0

    for _ in range(tries):
        rect = _random_rect(rng, size, size, state.world_width, state.world_height)
        if overlaps_any(rect, buffer, state.props):
            continue
        variant = int(rng.random() * PROP_VARIANTS.get(ptype, 1))
        prop = Prop(type=ptype, x=rect.x, y=rect.y, width=size, height=size,
                    id=prop_id, variant=variant)
        state.props.append(prop)
        return prop

    label = prop_id or ptype
    print(f"[WORLDGEN] could not place {label} after {tries} tries — skipped")
    state.log.record("worldgen", f"placement failed: {label}",
                     who=label, t=state.tick, details={"tries": tries})
    state.bus.emit(PlacementFailed(kind=ptype, tries=tries))
    return None


def generate_world(state: GameState) -> None:
    """Scatter trees, tents and nests, then put one NPC in each tent."""
    counts = (
        (PROP_TREE, int(_tun("world", "trees", 40)), float(_tun("world", "tree_size", TREE_SIZE))),
        (PROP_TENT, int(_tun("world", "tents", 6)), float(_tun("world", "tent_size", TENT_SIZE))),
        (PROP_NEST, int(_tun("world", "nests", 5)), float(_tun("world", "nest_size", NEST_SIZE))),
    )

    tent_no = 0
    for ptype, count, size in counts:
        for _ in range(count):
            prop_id = None
            if ptype == PROP_TENT:
                tent_no += 1
                prop_id = f"tent{tent_no}"
            place_prop(state, ptype, size, prop_id)

    for tent in state.tents():
        state.npcs.append(make_npc(tent))

    state.log.record("worldgen", "world generated", t=state.tick, details={
        "props": len(state.props), "npcs": len(state.npcs),
    })


def place_player(state: GameState) -> bool:
    """Put the player at the world centre, or somewhere random and clear.

    Returns False when every try failed and the player was left at the
    centre overlapping something.
    """
    p = state.player
    buffer = float(_tun("world", "placement_buffer", 16))
    tries = int(_tun("world", "max_tries", 200))

    cx = (state.world_width - p.width) * 0.5
    cy = (state.world_height - p.height) * 0.5
    if not overlaps_any(Rect(cx, cy, p.width, p.height), buffer, state.props):
        p.x, p.y = cx, cy
        return True

    for _ in range(tries):
        rect = _random_rect(state.rng, p.width, p.height,
                            state.world_width, state.world_height)
        if not overlaps_any(rect, buffer, state.props):
            p.x, p.y = rect.x, rect.y
            return True

    p.x, p.y = cx, cy
    print(f"[WORLDGEN] no clear spawn after {tries} tries — using centre")
    state.log.record("worldgen", "player spawn fell back to centre",
                     who="player", t=state.tick, details={"tries": tries})
    state.bus.emit(PlacementFailed(kind="player", tries=tries))
    return False


def reset_world(state: GameState) -> None:
    """Restart: fresh world, fresh player, score and latch cleared."""
    state.score = 0
    state.tick = 0
    state.game_over = False
    state.props.clear()
    state.npcs.clear()
    state.eggs.clear()
    state.bus.clear()
    state.camera.x = 0.0
    state.camera.y = 0.0
    state.player = make_player()
    state.spawn_timer = int(_tun("spawner", "initial_delay", 0))
    generate_world(state)
    place_player(state)
    print(f"[GAME] restart — {len(state.props)} props, {len(state.npcs)} NPCs")
