"""components.dev_log — Tick-stamped record of what the simulation did.

Owned by the ``GameState``.  World generation, NPC brains, the egg
system and the spawner note their decisions here; the Tab overlay shows
the newest lines and tests query it instead of scraping stdout.

    state.log.record("npc", "calm → angry", who="tent3",
                     t=state.tick, details={"timer": 420})

An entry is a dict ``{"t", "who", "cat", "msg", "details"}``.
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field


@dataclass
class DevLog:
    max_entries: int = 500
    # Non-empty → keep only these categories / actors
    cat_filter: set[str] = field(default_factory=set)
    who_filter: set[str] = field(default_factory=set)
    paused: bool = False
    _ring: deque = field(init=False, repr=False)

    def __post_init__(self):
        self._ring = deque(maxlen=self.max_entries)

    @property
    def entries(self) -> list[dict]:
        return list(self._ring)

    def record(self, cat: str, msg: str, *, who: str = "",
               t: int = 0, details: dict | None = None) -> None:
        if self.paused:
            return
        if (self.cat_filter and cat not in self.cat_filter) or \
                (self.who_filter and who not in self.who_filter):
            return
        self._ring.append({"t": t, "who": who, "cat": cat,
                           "msg": msg, "details": details})

    def clear(self):
        self._ring.clear()

    def pause(self):
        self.paused = True

    def resume(self):
        self.paused = False

    def recent(self, n: int = 50) -> list[dict]:
        """Newest *n* entries, oldest first."""
        return self.entries[-n:]

    def for_who(self, who: str, n: int = 30) -> list[dict]:
        return [e for e in self._ring if e["who"] == who][-n:]

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        return [e for e in self._ring if e["cat"] == cat][-n:]

    def __len__(self) -> int:
        return len(self._ring)
