"""logic/movement.py — Player movement, collision and nest pickup.

One cardinal step per tick.  When several direction intents are held
the first of up > down > left > right wins; there is no diagonal
movement.

The candidate box is tested once against every solid prop.  If it is
clear, each axis is then committed on its own, and only if that axis
keeps the player fully inside the world.  Because a single step only
ever changes one axis, this is the same as testing each axis with its
own collision + bounds check.
"""

from __future__ import annotations

from core.collision import Rect, overlaps, overlaps_any
from core.constants import UP, DOWN, LEFT, RIGHT, DIRECTION_VECTORS, PROP_NEST
from core.events import EggsRefilled
from components import GameState, InputState, is_solid, sprite_key


def pick_direction(inputs: InputState) -> str | None:
    """Return the single direction to apply this tick, or None."""
    if inputs.up:
        return UP
    if inputs.down:
        return DOWN
    if inputs.left:
        return LEFT
    if inputs.right:
        return RIGHT
    return None


def step(x: float, y: float, direction: str, speed: float) -> tuple[float, float]:
    """Offset (x, y) by *speed* along *direction*."""
    try:
        dx, dy = DIRECTION_VECTORS[direction]
    except KeyError:
        raise ValueError(f"unknown direction {direction!r}") from None
    return x + dx * speed, y + dy * speed


def player_system(state: GameState, inputs: InputState) -> None:
    """Move the player for one tick and restock eggs at nests."""
    if state.game_over:
        return

    p = state.player
    nx, ny = p.x, p.y
    direction = pick_direction(inputs)
    if direction is not None:
        nx, ny = step(p.x, p.y, direction, p.speed)
        # Facing follows the input even when the move is blocked
        p.direction = direction

    candidate = Rect(nx, ny, p.width, p.height)
    if not overlaps_any(candidate, 0, state.props, is_solid):
        if nx >= 0 and nx + p.width <= state.world_width:
            p.x = nx
        if ny >= 0 and ny + p.height <= state.world_height:
            p.y = ny

    p.sprite = sprite_key("player", p.direction)

    if p.egg_count <= 0:
        refill_from_nest(state)


def refill_from_nest(state: GameState) -> bool:
    """Restock to ``max_eggs`` if the player stands on any nest."""
    p = state.player
    for prop in state.props:
        if prop.type != PROP_NEST:
            continue
        if overlaps(p, prop):
            p.egg_count = p.max_eggs
            state.bus.emit(EggsRefilled(egg_count=p.egg_count))
            state.log.record("player", f"refilled to {p.egg_count} eggs",
                             who="player", t=state.tick)
            return True
    return False
