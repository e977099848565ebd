"""scenes/world_draw.py — Rendering helpers for the game scene.

All pure-draw functions live here so that GameScene.draw() stays thin.
Every function receives the data it needs as parameters — no implicit
coupling to the scene object beyond what is explicitly passed.

``SurfaceSink`` is the pygame side of the simulation's render sink:
``logic.tick`` computes screen-space boxes, this blits them.
"""

from __future__ import annotations
import pygame
from core.app import App
from components import GameState
from logic.camera import screen_to_world
from logic.input_manager import TouchControls
from logic.npc_ai import npc_mood


# ── Render sink ─────────────────────────────────────────────────────

class SurfaceSink:
    """Draw primitives onto a pygame Surface (screen-space coords)."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font):
        self.surface = surface
        self.font = font
        self._scaled: dict[tuple[int, int, int], pygame.Surface] = {}

    def draw_image(self, image: pygame.Surface, x: float, y: float,
                   w: float, h: float) -> None:
        size = (max(1, int(w)), max(1, int(h)))
        if image.get_size() != size:
            key = (id(image), size[0], size[1])
            scaled = self._scaled.get(key)
            if scaled is None:
                scaled = pygame.transform.scale(image, size)
                self._scaled[key] = scaled
            image = scaled
        self.surface.blit(image, (int(x), int(y)))

    def draw_rect(self, color: tuple, x: float, y: float, w: float, h: float) -> None:
        pygame.draw.rect(self.surface, color,
                         pygame.Rect(int(x), int(y), max(1, int(w)), max(1, int(h))))

    def draw_text(self, text: str, x: float, y: float,
                  color: tuple = (255, 255, 255)) -> None:
        img = self.font.render(text, True, color)
        self.surface.blit(img, (int(x), int(y)))


# ── HUD ─────────────────────────────────────────────────────────────

def draw_hud(surface: pygame.Surface, app: App, state: GameState):
    app.draw_text(surface, f"Score: {state.score}", 10, 10, (20, 20, 20),
                  bg=(255, 255, 255, 150))
    p = state.player
    app.draw_text(surface, f"Eggs: {p.egg_count}/{p.max_eggs}", 10, 34,
                  (20, 20, 20), bg=(255, 255, 255, 150))


def draw_touch_controls(surface: pygame.Surface, app: App, touch: TouchControls):
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    labels = {"move_up": "^", "move_down": "v", "move_left": "<",
              "move_right": ">", "throw": "EGG"}
    for intent, rect in touch.buttons.items():
        pygame.draw.rect(overlay, (255, 255, 255, 70), rect, border_radius=8)
        pygame.draw.rect(overlay, (255, 255, 255, 140), rect, 2, border_radius=8)
    surface.blit(overlay, (0, 0))
    for intent, rect in touch.buttons.items():
        img = app.font.render(labels[intent], True, (255, 255, 255))
        surface.blit(img, img.get_rect(center=rect.center))


# ── Overlays ────────────────────────────────────────────────────────

def _dim(surface: pygame.Surface, alpha: int = 150):
    shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    shade.fill((0, 0, 0, alpha))
    surface.blit(shade, (0, 0))


def draw_game_over(surface: pygame.Surface, app: App, score: int):
    _dim(surface)
    h = surface.get_height()
    app.draw_text_centered(surface, "You got caught!", h // 2 - 50,
                           (230, 50, 50), app.font_lg)
    app.draw_text_centered(surface, f"Score: {score}", h // 2)
    app.draw_text_centered(surface, "Press R or tap to retry", h // 2 + 30,
                           (220, 220, 220))


def draw_rotate_prompt(surface: pygame.Surface, app: App):
    surface.fill((0, 0, 0))
    app.draw_text_centered(surface, "Rotate your device to landscape",
                           surface.get_height() // 2, (255, 255, 255))


def draw_debug_overlay(surface: pygame.Surface, app: App, state: GameState,
                       fps: float):
    moods: dict[str, int] = {}
    for npc in state.npcs:
        m = npc_mood(npc)
        moods[m] = moods.get(m, 0) + 1
    mx, my = app.to_virtual(pygame.mouse.get_pos())
    cursor = screen_to_world(state.camera, mx, my)

    lines = [
        f"FPS: {fps:.0f}  tick: {state.tick}",
        f"Player: ({state.player.x:.0f}, {state.player.y:.0f}) "
        f"facing {state.player.direction}",
        f"Camera: ({state.camera.x:.0f}, {state.camera.y:.0f}) zoom {state.camera.zoom:.2f}",
        f"Cursor: ({cursor[0]:.0f}, {cursor[1]:.0f}) in world",
        f"NPCs: {len(state.npcs)} {moods}",
        f"Eggs in flight: {len(state.eggs)}  spawn in {state.spawn_timer}",
        "",
    ]
    for e in state.log.recent(8):
        lines.append(f"[{e['t']:>6}] {e['cat']:<8} {e['who']:<6} {e['msg']}")

    y = 60
    for line in lines:
        app.draw_text(surface, line, 8, y, (0, 255, 0), app.font_sm,
                      bg=(0, 0, 0, 160))
        y += 14
