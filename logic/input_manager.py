"""logic/input_manager.py — Intent-based input layer.

Sits between raw pygame events and the simulation.  The scene feeds in
raw events; the manager maps them to *intents*.  The simulation only
ever sees an ``InputState`` snapshot — never keycodes.

Two sources feed the same intents:

* the keyboard (arrows / WASD to move, Space to throw)
* on-screen touch buttons (a d-pad and a throw button), driven by
  finger events or, on desktop, the mouse

Usage (in game_scene):

    self.input = InputManager()
    # each frame:
    self.input.begin_frame()
    for event in events:
        self.input.feed(event)
    self.input.end_frame()          # captures held-key state

    state_in = self.input.snapshot()   # → InputState
    if self.input.just("retry"):
        ...
"""

from __future__ import annotations
import pygame

from components import InputState


# ── Default key bindings ────────────────────────────────────────────
# Intents:  move_up  move_down  move_left  move_right  throw
#           retry  toggle_debug  reload_tuning

_BINDS: dict[str, list[int]] = {
    # Movement  (held — continuous)
    "move_up":       [pygame.K_w, pygame.K_UP],
    "move_down":     [pygame.K_s, pygame.K_DOWN],
    "move_left":     [pygame.K_a, pygame.K_LEFT],
    "move_right":    [pygame.K_d, pygame.K_RIGHT],
    # Actions  (press — discrete)
    "throw":         [pygame.K_SPACE],
    "retry":         [pygame.K_r],
    # Debug / toggles
    "toggle_debug":  [pygame.K_TAB],
    "reload_tuning": [pygame.K_F4],
}

_MOVE_INTENTS = ("move_up", "move_down", "move_left", "move_right")


class TouchControls:
    """On-screen d-pad + throw button laid out for a viewport size.

    Buttons are plain ``pygame.Rect`` in virtual-surface coordinates.
    """

    def __init__(self, width: int, height: int, size: int = 56):
        self.size = size
        self.layout(width, height)

    def layout(self, width: int, height: int) -> None:
        s = self.size
        pad = 16
        bx = pad + s
        by = height - pad - s * 2
        self.buttons: dict[str, pygame.Rect] = {
            "move_up":    pygame.Rect(bx, by - s, s, s),
            "move_down":  pygame.Rect(bx, by + s, s, s),
            "move_left":  pygame.Rect(bx - s, by, s, s),
            "move_right": pygame.Rect(bx + s, by, s, s),
            "throw":      pygame.Rect(width - pad - s * 2, height - pad - s * 2,
                                      s * 2, s * 2),
        }

    def hit(self, pos: tuple[int, int]) -> str | None:
        for intent, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return intent
        return None


# ── InputManager ────────────────────────────────────────────────────

class InputManager:
    """Keyboard + touch → intent mapper.

    Call ``begin_frame()`` before processing events,
    ``feed(event)`` for each pygame event,
    ``end_frame()`` after all events.

    Then use ``just(intent)`` for discrete presses and
    ``held(intent)`` for continuous holds, or ``snapshot()`` for the
    simulation's ``InputState``.
    """

    def __init__(self, touch: TouchControls | None = None):
        self.touch = touch
        # Intents pressed *this frame* (rising edge)
        self._pressed: set[str] = set()
        # Intents currently held from the keyboard
        self._held: set[str] = set()
        # Intents held by a finger / mouse button, keyed by pointer id
        self._touch_held: dict[int, str] = {}

    # ── frame lifecycle ─────────────────────────────────────────

    def begin_frame(self):
        """Call at the start of each frame before feeding events."""
        self._pressed.clear()

    def feed(self, event: pygame.event.Event, size: tuple[int, int] | None = None):
        """Feed a raw pygame event.

        *size* is the virtual surface size, needed to map normalised
        finger coordinates onto the touch buttons.
        """
        if event.type == pygame.KEYDOWN:
            for intent, keys in _BINDS.items():
                if event.key in keys:
                    self._pressed.add(intent)

        elif event.type == pygame.FINGERDOWN and self.touch and size:
            pos = (int(event.x * size[0]), int(event.y * size[1]))
            self._touch_down(event.finger_id, pos)
        elif event.type == pygame.FINGERUP:
            self._touch_held.pop(event.finger_id, None)

        elif event.type == pygame.MOUSEBUTTONDOWN and self.touch:
            # Touch devices also emit synthetic mouse events
            if getattr(event, "touch", False):
                return
            self._touch_down(-event.button, event.pos)
        elif event.type == pygame.MOUSEBUTTONUP:
            self._touch_held.pop(-event.button, None)

    def end_frame(self):
        """Snapshot held-key state for continuous intents (movement)."""
        self._held.clear()
        keys = pygame.key.get_pressed()
        for intent in _MOVE_INTENTS:
            if any(keys[k] for k in _BINDS[intent]):
                self._held.add(intent)

    # ── queries ─────────────────────────────────────────────────

    def just(self, intent: str) -> bool:
        """True if the intent was triggered this frame (rising edge)."""
        return intent in self._pressed

    def held(self, intent: str) -> bool:
        """True if the intent is continuously held (key or touch)."""
        return intent in self._held or intent in self._touch_held.values()

    def snapshot(self) -> InputState:
        """The simulation-facing view of this frame's input."""
        return InputState(
            up=self.held("move_up"),
            down=self.held("move_down"),
            left=self.held("move_left"),
            right=self.held("move_right"),
            throw_pressed=self.just("throw"),
        )

    def free_tap(self, event: pygame.event.Event,
                 size: tuple[int, int] | None = None) -> bool:
        """True for a finger / mouse press that misses every touch button."""
        if event.type == pygame.FINGERDOWN:
            if not size:
                return False
            pos = (int(event.x * size[0]), int(event.y * size[1]))
        elif event.type == pygame.MOUSEBUTTONDOWN:
            pos = event.pos
        else:
            return False
        return self.touch is None or self.touch.hit(pos) is None

    def release_all(self) -> None:
        """Forget held touches (e.g. when the window loses focus)."""
        self._touch_held.clear()

    # ── internal ────────────────────────────────────────────────

    def _touch_down(self, pointer: int, pos: tuple[int, int]) -> None:
        intent = self.touch.hit(pos) if self.touch else None
        if intent is None:
            return
        if intent == "throw":
            self._pressed.add("throw")
        else:
            self._touch_held[pointer] = intent
