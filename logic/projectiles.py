"""logic/projectiles.py — Egg throwing and the per-tick egg system.

Each frame:
  1. Move every active egg along its velocity.
  2. Deactivate eggs that left the world.
  3. Check the still-flying eggs against every non-stunned NPC;
     the first overlap (roster order) stuns that NPC and scores 1.
  4. Drop inactive eggs from the list.

Throws are axis-aligned: the egg flies along the player's facing, so
exactly one of ``vx`` / ``vy`` is non-zero.
"""

from __future__ import annotations

from core.collision import overlaps
from core.constants import DIRECTION_VECTORS, REACTIONS
from core.events import EggThrown, NpcHit
from core.tuning import get as _tun
from components import GameState, Egg


def throw_egg(state: GameState) -> Egg | None:
    """Spawn one egg from the player's centre.  None if nothing to throw."""
    p = state.player
    if state.game_over or p.egg_count <= 0:
        return None

    speed = float(_tun("egg", "speed", 5.0))
    size = float(_tun("egg", "size", 16))
    dx, dy = DIRECTION_VECTORS[p.direction]

    egg = Egg(
        x=p.x + p.width * 0.5 - size * 0.5,
        y=p.y + p.height * 0.5 - size * 0.5,
        vx=dx * speed,
        vy=dy * speed,
        width=size,
        height=size,
    )
    state.eggs.append(egg)
    p.egg_count -= 1

    state.bus.emit(EggThrown(direction=p.direction, eggs_left=p.egg_count))
    state.log.record("egg", f"thrown {p.direction}", who="player",
                     t=state.tick, details={"left": p.egg_count})
    return egg


def egg_system(state: GameState) -> None:
    """Advance all eggs one tick and resolve hits."""
    if state.game_over:
        return

    for egg in state.eggs:
        if not egg.active:
            continue

        egg.x += egg.vx
        egg.y += egg.vy

        if (egg.x < 0 or egg.x > state.world_width
                or egg.y < 0 or egg.y > state.world_height):
            egg.active = False
            continue

        for npc in state.npcs:
            if npc.hit or not overlaps(egg, npc):
                continue
            _on_hit(state, egg, npc)
            break

    state.eggs = [e for e in state.eggs if e.active]


def _on_hit(state: GameState, egg: Egg, npc) -> None:
    egg.active = False
    npc.hit = True
    npc.hit_timer = int(_tun("egg", "stun_ticks", 60))
    npc.angry = False
    npc.reaction_text = state.rng.pick(REACTIONS)
    state.score += 1

    state.bus.emit(NpcHit(home_id=npc.home_id or "",
                          reaction=npc.reaction_text, score=state.score))
    state.log.record("egg", f"hit ({npc.reaction_text})",
                     who=npc.home_id or "", t=state.tick,
                     details={"score": state.score})
