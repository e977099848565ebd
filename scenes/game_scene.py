"""
scenes/game_scene.py — The play field

Owns one GameState and drives it one tick per frame through
``logic.tick.run_frame``.  Also plays the part of the session UI:

* shows the score / egg HUD and the on-screen touch controls
* on ``GameOver`` stops the ambience and shows the retry overlay
* R (or a tap away from the touch buttons) after game over
  regenerates the world
* while the window is portrait, gameplay pauses and a rotate prompt
  is shown instead

Tab toggles the debug overlay, F4 reloads ``data/tuning.toml``.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core.assets import AssetProvider
from core.audio import Ambience
from core.constants import BG_COLOR
from core.events import GameOver
from core import tuning as tuning_mod
from components import GameState, InputState
from logic.camera import select_zoom, camera_system
from logic.input_manager import InputManager, TouchControls
from logic.tick import run_frame
from logic.worldgen import new_game, reset_world
from scenes.world_draw import (
    SurfaceSink, draw_hud, draw_touch_controls, draw_game_over,
    draw_rotate_prompt, draw_debug_overlay,
)


class GameScene(Scene):
    def __init__(self, seed: int | None = None, show_touch: bool | None = None):
        self.seed = seed
        self.show_touch = show_touch
        self.state: GameState | None = None
        self.input: InputManager | None = None
        self.assets = AssetProvider()
        self.ambience = Ambience()
        self.show_debug = False
        self.paused_for_orientation = False
        self._retry_tap = False
        self._size = (0, 0)

    # -- lifecycle --

    def on_enter(self, app: App):
        if self.state is not None:
            return
        vw, vh = app.virtual_size
        self._size = (vw, vh)
        # Zoom is chosen once from the real window width
        zoom = select_zoom(app.window_size[0])
        self.state = new_game(self.seed, viewport=(vw, vh), zoom=zoom)
        self.state.bus.subscribe(GameOver, self._on_game_over)
        camera_system(self.state)

        if self.show_touch is None:
            self.show_touch = app.window_size[0] < 768
        touch = TouchControls(vw, vh)
        self.input = InputManager(touch)
        self.assets.preload()
        self.ambience.start()

    def on_exit(self, app: App):
        self.ambience.stop()

    # -- session --

    def _on_game_over(self, event):
        self.ambience.stop()

    def restart(self):
        reset_world(self.state)
        # reset_world drops pending events but keeps subscriptions
        camera_system(self.state)
        self.ambience.start()

    # -- events --

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type == pygame.WINDOWFOCUSLOST:
            self.input.release_all()
            return
        if self.state.game_over:
            if self.show_touch:
                # Taps on the d-pad or throw button don't dismiss the score screen
                tap = self.input.free_tap(event, self._size)
            else:
                tap = event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN)
            self._retry_tap = self._retry_tap or tap
        self.input.feed(event, self._size)

    def update(self, app: App):
        self.input.end_frame()

        if self.input.just("toggle_debug"):
            self.show_debug = not self.show_debug
        if self.input.just("reload_tuning"):
            tuning_mod.reload()

        self.paused_for_orientation = not app.is_landscape()

        if self.state.game_over and (self.input.just("retry") or self._retry_tap):
            self._retry_tap = False
            self.restart()
            self.input.begin_frame()

    def draw(self, surface: pygame.Surface, app: App):
        if self.paused_for_orientation:
            draw_rotate_prompt(surface, app)
            self.input.begin_frame()
            return

        surface.fill(BG_COLOR)
        sink = SurfaceSink(surface, app.font)
        self.assets.begin_frame()
        inputs = self.input.snapshot() if not self.state.game_over else InputState()
        run_frame(self.state, inputs, sink, self.assets)

        draw_hud(surface, app, self.state)
        if self.show_touch:
            draw_touch_controls(surface, app, self.input.touch)
        if self.show_debug:
            draw_debug_overlay(surface, app, self.state, app.clock.get_fps())
        if self.state.game_over:
            draw_game_over(surface, app, self.state.score)

        self.input.begin_frame()
