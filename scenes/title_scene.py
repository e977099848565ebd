"""scenes/title_scene.py — Welcome screen.

Shows the controls and waits for Enter / Space or a tap, then swaps
itself out for the play field.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core.constants import BG_COLOR


_HELP = [
    "Arrows / WASD  move",
    "Space          throw an egg",
    "Walk onto a nest to pick up eggs",
    "Egg the angry ones before they catch you",
]


class TitleScene(Scene):
    def __init__(self, seed: int | None = None):
        self.seed = seed

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN,
                                                          pygame.K_SPACE):
            self._start(app)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
            self._start(app)

    def _start(self, app: App):
        from scenes.game_scene import GameScene
        app.replace_scene(GameScene(seed=self.seed))

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill(BG_COLOR)
        h = surface.get_height()
        app.draw_text_centered(surface, "Egg Toss", h // 3, (250, 250, 240),
                               app.font_lg)
        y = h // 3 + 60
        for line in _HELP:
            app.draw_text_centered(surface, line, y, (230, 230, 230))
            y += 22
        app.draw_text_centered(surface, "Press Enter or tap to start", y + 30,
                               (255, 220, 120))
