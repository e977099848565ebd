"""logic/npc_ai.py — NPC mood / movement state machine.

States
------
calm-idle     no walk in progress; a new random direction is picked
calm-walking  following a random direction with steps left
angry         chasing the player along the dominant axis
stunned       hit by an egg; frozen until ``hit_timer`` runs out

Each tick, per NPC, in this order:
  1. stunned → count down, drop from the roster at 0, nothing else
  2. calm → angry with a small per-tick chance (difficulty tier)
  3. angry → count down, calm at 0
  4. choose a direction (chase, or a fresh random walk)
  5. try one step; blocked steps end the current walk
  6. an angry NPC touching the player ends the game

The roster is walked back to front so stunned NPCs can be deleted in
place without skipping their neighbours.
"""

from __future__ import annotations

from core.collision import Rect, overlaps, overlaps_any, inside_bounds
from core.constants import UP, DOWN, LEFT, RIGHT, DIRECTIONS
from core.events import NpcRemoved, GameOver
from core.tuning import get as _tun, anger_chance
from components import GameState, Npc, is_solid, sprite_key
from logic.movement import step


def npc_mood(npc: Npc) -> str:
    """Name of the state *npc* is in (debug overlay, tests)."""
    if npc.hit:
        return "stunned"
    if npc.angry:
        return "angry"
    if npc.walk_steps_left > 0:
        return "calm-walking"
    return "calm-idle"


def chase_direction(npc: Npc, target_x: float, target_y: float) -> str:
    """Axis-dominant heading toward the target.  Ties go horizontal."""
    dx = target_x - npc.x
    dy = target_y - npc.y
    if abs(dx) >= abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


def npc_system(state: GameState) -> None:
    """Advance every NPC by one tick."""
    if state.game_over:
        return

    p_angry = anger_chance()
    npcs = state.npcs
    for i in range(len(npcs) - 1, -1, -1):
        npc = npcs[i]

        if npc.hit:
            npc.hit_timer -= 1
            if npc.hit_timer <= 0:
                del npcs[i]
                state.bus.emit(NpcRemoved(home_id=npc.home_id or ""))
                state.log.record("npc", "removed", who=npc.home_id or "",
                                 t=state.tick)
            continue

        _update_mood(state, npc, p_angry)
        speed = _choose_direction(state, npc)
        _try_move(state, npc, speed)
        _check_catch(state, npc)


# ── internal helpers ────────────────────────────────────────────────

def _update_mood(state: GameState, npc: Npc, p_angry: float) -> None:
    rng = state.rng
    if not npc.angry and rng.chance(p_angry):
        lo = int(_tun("npc", "angry_min_ticks", 300))
        hi = int(_tun("npc", "angry_max_ticks", 900))
        npc.angry = True
        npc.angry_timer = rng.int_between(lo, hi)
        state.log.record("npc", "calm → angry", who=npc.home_id or "",
                         t=state.tick, details={"timer": npc.angry_timer})

    if npc.angry:
        npc.angry_timer -= 1
        if npc.angry_timer <= 0:
            npc.angry = False
            state.log.record("npc", "angry → calm", who=npc.home_id or "",
                             t=state.tick)


def _choose_direction(state: GameState, npc: Npc) -> float:
    """Set ``npc.direction`` for this tick and return the step speed."""
    if npc.angry:
        p = state.player
        npc.direction = chase_direction(npc, p.x, p.y)
        return float(_tun("npc", "angry_speed", 2.0))

    if npc.walk_steps_left <= 0:
        lo = int(_tun("npc", "walk_min_steps", 20))
        hi = int(_tun("npc", "walk_max_steps", 50))
        npc.direction = state.rng.pick(DIRECTIONS)
        npc.walk_steps_left = state.rng.int_between(lo, hi)
    return float(_tun("npc", "speed", 1.0))


def _try_move(state: GameState, npc: Npc, speed: float) -> bool:
    nx, ny = step(npc.x, npc.y, npc.direction, speed)
    candidate = Rect(nx, ny, npc.width, npc.height)

    blocked = overlaps_any(
        candidate, 0, state.props,
        lambda prop: is_solid(prop) and not npc.is_home(prop),
    ) or not inside_bounds(nx, ny, npc.width, npc.height,
                           state.world_width, state.world_height)

    if blocked:
        # Forces a fresh random heading next tick
        npc.walk_steps_left = 0
        return False

    npc.x, npc.y = nx, ny
    npc.sprite = sprite_key("npc", npc.direction)
    if not npc.has_left_tent:
        npc.steps_from_tent += 1
        if npc.steps_from_tent > int(_tun("npc", "tent_grace_steps", 10)):
            npc.has_left_tent = True
    else:
        npc.walk_steps_left -= 1
    return True


def _check_catch(state: GameState, npc: Npc) -> None:
    if not npc.angry or state.game_over:
        return
    if overlaps(npc, state.player):
        state.game_over = True
        print(f"[GAME] caught by {npc.home_id or 'an NPC'} — score {state.score}")
        state.log.record("game", "game over", who=npc.home_id or "",
                         t=state.tick, details={"score": state.score})
        state.bus.emit(GameOver(score=state.score))
