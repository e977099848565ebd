"""logic/spawner.py — Periodic NPC respawns at tents.

Every few seconds a random tent tries to produce a fresh NPC.  The
spawn is skipped when any NPC is still standing near that tent, which
keeps tents from piling up occupants while the roster stays bounded.
"""

from __future__ import annotations

from core.events import NpcSpawned
from core.tuning import get as _tun
from components import GameState, Npc
from logic.worldgen import make_npc


def spawn_npc(state: GameState) -> Npc | None:
    """Try to add one NPC at a random tent.  Returns it, or None."""
    tents = state.tents()
    if not tents:
        return None

    tent = state.rng.pick(tents)
    radius = float(_tun("spawner", "crowd_radius", 40))
    crowded = any(
        abs(npc.x - tent.x) < radius and abs(npc.y - tent.y) < radius
        for npc in state.npcs
    )
    if crowded:
        return None

    npc = make_npc(tent)
    state.npcs.append(npc)
    state.bus.emit(NpcSpawned(home_id=tent.id or ""))
    state.log.record("spawner", "npc spawned", who=tent.id or "", t=state.tick)
    return npc


def spawner_system(state: GameState) -> None:
    """Count the spawn timer down; on expiry spawn and re-arm it."""
    if state.game_over:
        return

    state.spawn_timer -= 1
    if state.spawn_timer <= 0:
        spawn_npc(state)
        lo = int(_tun("spawner", "interval_min", 300))
        hi = int(_tun("spawner", "interval_max", 600))
        state.spawn_timer = state.rng.int_between(lo, hi)
