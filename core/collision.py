"""core/collision.py — Low-level AABB primitives.

These live in ``core/`` (not ``logic/``) because world generation,
movement, NPC steering and the egg system all need them.

All rects are half-open: two boxes that merely touch along an edge do
NOT overlap.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Iterable


@dataclass
class Rect:
    """Axis-aligned box in world units.  (x, y) is the top-left corner."""
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Rect size must be positive, got {self.width}×{self.height}")

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width * 0.5, self.y + self.height * 0.5

    def expanded(self, buffer: float) -> "Rect":
        """Return a copy grown by ``buffer / 2`` on every side."""
        half = buffer * 0.5
        return Rect(self.x - half, self.y - half,
                    self.width + buffer, self.height + buffer)


def rect_of(thing: Any) -> Rect:
    """Build a Rect from anything with x / y / width / height."""
    return Rect(thing.x, thing.y, thing.width, thing.height)


def overlaps(a, b) -> bool:
    """Return True if boxes *a* and *b* share any interior area.

    Accepts ``Rect`` or any object exposing x / y / width / height
    (props, NPCs, eggs, the player).
    """
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def overlaps_any(rect, buffer: float, candidates: Iterable,
                 predicate: Callable[[Any], bool] | None = None) -> bool:
    """Return True if *rect* (grown by ``buffer / 2`` per side) hits a candidate.

    Parameters
    ----------
    rect : Rect-like
        Box to test.
    buffer : float
        Total extra clearance along each axis.  ``0`` for movement checks,
        the placement buffer for world generation.
    candidates : iterable
        Boxes to test against.
    predicate : callable, optional
        Only candidates for which ``predicate(c)`` is truthy are tested.
    """
    probe = rect_of(rect).expanded(buffer) if buffer else rect
    for c in candidates:
        if predicate is not None and not predicate(c):
            continue
        if overlaps(probe, c):
            return True
    return False


def inside_bounds(x: float, y: float, w: float, h: float,
                  world_w: float, world_h: float) -> bool:
    """True if the box (x, y, w, h) lies fully inside the world.

    Edges are inclusive: a box flush against the border is inside.
    """
    return x >= 0 and y >= 0 and x + w <= world_w and y + h <= world_h
