"""logic/camera.py — World ↔ screen transform.

The camera stores the top-left corner of the visible area in world
units plus a zoom factor::

    screen = (world - camera) * zoom
    world  = camera + screen / zoom

Each tick it re-centres on the player and is clamped so the view never
shows anything outside the world.  When the world is smaller than the
view along an axis, that axis pins to 0.

Zoom is picked once from the viewport width (phone-sized vs desktop)
and left alone afterwards.
"""

from __future__ import annotations

from core.tuning import get as _tun
from components import Camera, GameState


def select_zoom(viewport_width: float) -> float:
    """Zoom for a viewport of this pixel width."""
    breakpoint = float(_tun("camera", "mobile_breakpoint", 768))
    if viewport_width < breakpoint:
        return float(_tun("camera", "zoom_mobile", 0.75))
    return float(_tun("camera", "zoom_desktop", 1.0))


def _clamp(v: float, lo: float, hi: float) -> float:
    return lo if v < lo else hi if v > hi else v


def camera_system(state: GameState) -> None:
    """Centre the camera on the player, clamped to the world."""
    if not state.started:
        return

    cam = state.camera
    p = state.player
    view_w = state.viewport_width / cam.zoom
    view_h = state.viewport_height / cam.zoom

    cx = p.x + p.width * 0.5
    cy = p.y + p.height * 0.5

    cam.x = _clamp(cx - view_w * 0.5, 0.0, max(0.0, state.world_width - view_w))
    cam.y = _clamp(cy - view_h * 0.5, 0.0, max(0.0, state.world_height - view_h))


def world_to_screen(cam: Camera, x: float, y: float) -> tuple[float, float]:
    return (x - cam.x) * cam.zoom, (y - cam.y) * cam.zoom


def screen_to_world(cam: Camera, sx: float, sy: float) -> tuple[float, float]:
    return cam.x + sx / cam.zoom, cam.y + sy / cam.zoom


def scale_size(cam: Camera, w: float, h: float) -> tuple[float, float]:
    return w * cam.zoom, h * cam.zoom


def visible_rect(cam: Camera, viewport_w: float,
                 viewport_h: float) -> tuple[float, float, float, float]:
    """(x, y, w, h) of the world area currently on screen, for culling."""
    return cam.x, cam.y, viewport_w / cam.zoom, viewport_h / cam.zoom
