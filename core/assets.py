"""core/assets.py — Sprite lookup with placeholder fallback.

Sprite keys (``"player.left"``, ``"tree.2"``, ``"egg"``) map to PNG
files under ``assets/``.  Images load lazily on first use.  A key whose
file is missing or broken is not ready: the renderer draws a flat
placeholder instead, and the load is retried every ``retry_frames``
frames (``begin_frame`` once per frame) so dropping the file in later
heals it without a restart.

    assets = AssetProvider()
    if assets.ready("npc.down"):
        surface.blit(assets.image("npc.down"), ...)
"""

from __future__ import annotations
from pathlib import Path
import pygame


# key → file name under assets/
SPRITE_FILES: dict[str, str] = {
    "player.down":  "sprite_0_0.png",
    "player.left":  "sprite_0_1.png",
    "player.right": "sprite_0_2.png",
    "player.up":    "sprite_0_3.png",
    "npc.down":     "sprite_1_0.png",
    "npc.left":     "sprite_1_1.png",
    "npc.right":    "sprite_1_2.png",
    "npc.up":       "sprite_1_3.png",
    "nest.0":       "sprite_2_1.png",
    "tree.0":       "sprite_3_0.png",
    "tree.1":       "sprite_3_1.png",
    "tree.2":       "sprite_3_3.png",
    "tent.0":       "sprite_3_2.png",
    "tent.1":       "sprite_3_4.png",
    "egg":          "egg.png",
}


class AssetProvider:
    """Lazy image cache.  Stored on the game scene."""

    def __init__(self, root: str | Path | None = None, retry_frames: int = 120):
        if root is None:
            root = Path(__file__).resolve().parent.parent / "assets"
        self.root = Path(root)
        self.retry_frames = retry_frames
        self._images: dict[str, pygame.Surface] = {}
        # key → frames left before the next load attempt
        self._cooldown: dict[str, int] = {}
        self._reported: set[str] = set()

    def ready(self, key: str) -> bool:
        """True once *key* has a drawable image."""
        if key in self._images:
            return True
        if self._cooldown.get(key, 0) > 0:
            return False
        return self._load(key)

    def begin_frame(self) -> None:
        """Count every pending retry down by one frame."""
        for key, wait in self._cooldown.items():
            if wait > 0:
                self._cooldown[key] = wait - 1

    def image(self, key: str) -> pygame.Surface:
        return self._images[key]

    def preload(self) -> int:
        """Try every known key once.  Returns how many loaded."""
        return sum(1 for key in SPRITE_FILES if self.ready(key))

    # ── internal ────────────────────────────────────────────────

    def _load(self, key: str) -> bool:
        name = SPRITE_FILES.get(key)
        if name is None:
            self._cooldown[key] = self.retry_frames
            return False
        path = self.root / name
        try:
            img = pygame.image.load(str(path))
            if pygame.display.get_surface() is not None:
                img = img.convert_alpha()
        except (pygame.error, FileNotFoundError) as exc:
            if key not in self._reported:
                self._reported.add(key)
                print(f"[ASSETS] {key} not ready ({path.name}): {exc} — using placeholder")
            self._cooldown[key] = self.retry_frames
            return False
        self._images[key] = img
        self._cooldown.pop(key, None)
        if key in self._reported:
            print(f"[ASSETS] {key} loaded")
        return True
