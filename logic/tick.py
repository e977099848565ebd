"""logic/tick.py — Per-frame orchestration.

One call to ``run_frame`` is one tick.  The order is fixed:

    draw props            (with last tick's camera)
    throw                 (rising-edge input)
    player movement
    NPC brains            (see the player's new position)
    eggs                  (see the NPC roster after removals)
    camera
    draw eggs, NPCs, player   (back to front)
    spawn timer
    drain the event bus

Once ``state.game_over`` is set the gameplay steps return early, but
drawing keeps going so the frozen scene stays on screen.

Rendering goes through two small collaborators so this module never
touches pygame:

* a **sink** with ``draw_image / draw_rect / draw_text`` in screen space
* an **asset source** with ``ready(key)`` and ``image(key)``; keys that
  aren't ready are drawn as flat placeholder rectangles
"""

from __future__ import annotations
from typing import Any, Protocol

from core.collision import overlaps, Rect
from core.constants import PLACEHOLDER_COLORS, ANGRY_MARK
from components import GameState, InputState
from logic.movement import player_system
from logic.npc_ai import npc_system
from logic.projectiles import throw_egg, egg_system
from logic.camera import camera_system, world_to_screen, scale_size, visible_rect
from logic.spawner import spawner_system


class RenderSink(Protocol):
    def draw_image(self, image: Any, x: float, y: float, w: float, h: float) -> None: ...
    def draw_rect(self, color: tuple, x: float, y: float, w: float, h: float) -> None: ...
    def draw_text(self, text: str, x: float, y: float, color: tuple = ...) -> None: ...


class AssetSource(Protocol):
    def ready(self, key: str) -> bool: ...
    def image(self, key: str) -> Any: ...


# ── Drawing ──────────────────────────────────────────────────────────

def draw_sprite(sink: RenderSink, assets: AssetSource | None, state: GameState,
                key: str, kind: str, x: float, y: float, w: float, h: float) -> None:
    """Draw *key* at a world box, or its placeholder if not loaded yet."""
    cam = state.camera
    sx, sy = world_to_screen(cam, x, y)
    sw, sh = scale_size(cam, w, h)
    if assets is not None and assets.ready(key):
        sink.draw_image(assets.image(key), sx, sy, sw, sh)
    else:
        sink.draw_rect(PLACEHOLDER_COLORS.get(kind, (128, 128, 128)), sx, sy, sw, sh)


def _on_screen(state: GameState, thing) -> bool:
    vx, vy, vw, vh = visible_rect(state.camera, state.viewport_width,
                                  state.viewport_height)
    return overlaps(Rect(vx, vy, vw, vh), thing)


def draw_props(state: GameState, sink: RenderSink, assets: AssetSource | None = None) -> None:
    for prop in state.props:
        if not _on_screen(state, prop):
            continue
        key = f"{prop.type}.{prop.variant}"
        draw_sprite(sink, assets, state, key, prop.type,
                    prop.x, prop.y, prop.width, prop.height)


def draw_eggs(state: GameState, sink: RenderSink, assets: AssetSource | None = None) -> None:
    for egg in state.eggs:
        draw_sprite(sink, assets, state, "egg", "egg",
                    egg.x, egg.y, egg.width, egg.height)


def draw_npcs(state: GameState, sink: RenderSink, assets: AssetSource | None = None) -> None:
    for npc in state.npcs:
        if not _on_screen(state, npc):
            continue
        draw_sprite(sink, assets, state, npc.sprite, "npc",
                    npc.x, npc.y, npc.width, npc.height)
        sx, sy = world_to_screen(state.camera, npc.x, npc.y)
        if npc.hit and npc.reaction_text:
            sink.draw_text(npc.reaction_text, sx, sy - 16, (255, 255, 255))
        elif npc.angry:
            sink.draw_text(ANGRY_MARK, sx, sy - 16, (230, 40, 40))


def draw_player(state: GameState, sink: RenderSink, assets: AssetSource | None = None) -> None:
    p = state.player
    draw_sprite(sink, assets, state, p.sprite, "player", p.x, p.y, p.width, p.height)
    if p.egg_count > 0:
        sx, sy = world_to_screen(state.camera, p.x, p.y)
        sink.draw_text("o" * p.egg_count, sx, sy - 16, (250, 250, 240))


# ── Frame ────────────────────────────────────────────────────────────

def run_frame(state: GameState, inputs: InputState,
              sink: RenderSink | None = None,
              assets: AssetSource | None = None) -> None:
    """Run one tick of simulation interleaved with drawing."""
    if sink is not None:
        draw_props(state, sink, assets)

    if not state.game_over:
        state.tick += 1
        if inputs.throw_pressed:
            throw_egg(state)
        player_system(state, inputs)

    npc_system(state)
    egg_system(state)
    camera_system(state)

    if sink is not None:
        draw_eggs(state, sink, assets)
        draw_npcs(state, sink, assets)
        draw_player(state, sink, assets)

    spawner_system(state)
    state.bus.drain()
