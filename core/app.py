"""
core/app.py — Pygame application shell

Owns the window, the frame clock and the scene stack.  Gameplay code
never touches the window directly: scenes draw onto a fixed-size
virtual surface that the shell letterboxes into whatever window size
the player picked.

    app = App(title="Egg Toss", width=960, height=640)
    app.push_scene(TitleScene())
    app.run()

One simulation tick runs per rendered frame.  The loop never stops on
its own: scenes decide whether a frame advances gameplay.
"""

from __future__ import annotations
import pygame
from core.scene import Scene


_POINTER_EVENTS = (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION)
_FINGER_EVENTS = (pygame.FINGERDOWN, pygame.FINGERUP, pygame.FINGERMOTION)


class App:
    def __init__(self, title: str = "Egg Toss", width: int = 960, height: int = 640,
                 fps: int = 60):
        pygame.init()
        self.title = title
        self.fps = fps
        self.running = True
        self.fullscreen = False
        self.clock = pygame.time.Clock()

        # Design resolution — scenes always draw at this size
        self._virtual_size = (width, height)
        self._canvas = pygame.Surface((width, height))
        self._windowed_size = (width, height)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)

        self._scenes: list[Scene] = []

        self.font = pygame.font.SysFont("sans", 16)
        self.font_sm = pygame.font.SysFont("monospace", 11)
        self.font_lg = pygame.font.SysFont("sans", 32)

    # -- Scene stack --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    def replace_scene(self, scene: Scene):
        """Swap the top scene without revealing the one underneath."""
        if self._scenes:
            self._scenes.pop().on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    # -- Window geometry --

    @property
    def virtual_size(self) -> tuple[int, int]:
        return self._virtual_size

    @property
    def window_size(self) -> tuple[int, int]:
        return self.screen.get_size()

    def is_landscape(self) -> bool:
        """True while the window is wider than it is tall."""
        w, h = self.screen.get_size()
        return w > h

    def viewport_rect(self) -> pygame.Rect:
        """Where the virtual canvas lands in the window (aspect preserved)."""
        sw, sh = self.screen.get_size()
        vw, vh = self._virtual_size
        scale = min(sw / vw, sh / vh)
        w, h = max(1, int(vw * scale)), max(1, int(vh * scale))
        return pygame.Rect((sw - w) // 2, (sh - h) // 2, w, h)

    def to_virtual(self, pos: tuple[int, int]) -> tuple[int, int]:
        """Map a window pixel to canvas coordinates."""
        view = self.viewport_rect()
        vw, vh = self._virtual_size
        return (int((pos[0] - view.x) * vw / view.w),
                int((pos[1] - view.y) * vh / view.h))

    def _remap_pointer(self, event: pygame.event.Event) -> pygame.event.Event:
        attrs = dict(event.dict)
        attrs["pos"] = self.to_virtual(event.pos)
        return pygame.event.Event(event.type, **attrs)

    def _remap_finger(self, event: pygame.event.Event) -> pygame.event.Event:
        # Finger coords are 0..1 across the window; keep them 0..1 across the canvas
        sw, sh = self.screen.get_size()
        vx, vy = self.to_virtual((event.x * sw, event.y * sh))
        vw, vh = self._virtual_size
        attrs = dict(event.dict)
        attrs["x"], attrs["y"] = vx / vw, vy / vh
        return pygame.event.Event(event.type, **attrs)

    def _resize(self, size: tuple[int, int]):
        self._windowed_size = size
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)

    def toggle_fullscreen(self):
        """F11: fullscreen ↔ the last windowed size."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(self._windowed_size, pygame.RESIZABLE)

    # -- Main loop --

    def run(self):
        while self.running:
            self.clock.tick(self.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
                    self._resize((event.w, event.h))
                elif self.scene:
                    if event.type in _POINTER_EVENTS:
                        event = self._remap_pointer(event)
                    elif event.type in _FINGER_EVENTS:
                        event = self._remap_finger(event)
                    self.scene.handle_event(event, self)

            scene = self.scene
            if scene:
                scene.update(self)
                scene.draw(self._canvas, self)

            self.screen.fill((0, 0, 0))
            view = self.viewport_rect()
            self.screen.blit(pygame.transform.scale(self._canvas, view.size), view.topleft)
            pygame.display.flip()

        pygame.quit()

    # -- Text --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None, bg=None, pad: int = 2):
        """Blit one line of text at (x, y), optionally on a translucent box.

        Returns the text rect for layout chaining.
        """
        img = (font or self.font).render(text, True, color)
        if bg is not None:
            w, h = img.get_size()
            box = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
            box.fill(bg)
            surface.blit(box, (x - pad, y - pad))
        return surface.blit(img, (x, y))

    def draw_text_centered(self, surface: pygame.Surface, text: str, y: int,
                           color=(255, 255, 255), font=None):
        f = font or self.font
        x = (surface.get_width() - f.size(text)[0]) // 2
        return self.draw_text(surface, text, x, y, color, f)
