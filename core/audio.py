"""core/audio.py — Ambient music on/off.

The environment may refuse playback (no audio device, missing file,
mixer not initialised).  That never affects gameplay: the failure is
logged once and the game carries on in silence.
"""

from __future__ import annotations
from pathlib import Path
import pygame

from core.tuning import get as _tun


class Ambience:
    def __init__(self, path: str | Path | None = None):
        if path is None:
            root = Path(__file__).resolve().parent.parent
            path = root / _tun("audio", "music", "assets/ambience.ogg")
        self.path = Path(path)
        self.playing = False
        self.blocked = False

    def start(self) -> bool:
        """Begin looping the ambient track.  Returns False if blocked."""
        if self.playing:
            return True
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.music.load(str(self.path))
            pygame.mixer.music.set_volume(float(_tun("audio", "volume", 0.5)))
            pygame.mixer.music.play(-1)
        except (pygame.error, FileNotFoundError) as exc:
            if not self.blocked:
                print(f"[AUDIO] ambient playback blocked: {exc}")
            self.blocked = True
            return False
        self.playing = True
        self.blocked = False
        return True

    def stop(self) -> None:
        if not self.playing:
            return
        try:
            pygame.mixer.music.stop()
        except pygame.error as exc:
            print(f"[AUDIO] stop failed: {exc}")
        self.playing = False
