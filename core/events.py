"""core/events.py — Simulation → presentation signals.

Systems *emit* plain dataclass events onto the ``GameState`` bus; the
scene and tests *subscribe* to the ones they care about.  Nothing is
delivered until the frame orchestrator drains the queue at the end of
the tick, so handlers always see a finished frame::

    state.bus.emit(NpcHit(home_id="tent3", reaction="x_x", score=4))
    state.bus.subscribe(GameOver, on_game_over)     # class or "GameOver"
    state.bus.drain()

Handlers may emit further events; they are delivered in the same drain.
A handler that raises is reported and skipped, never propagated.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable
from collections import Counter, defaultdict
import traceback

# ═══════════════════════════════════════════════════════════════════
#  Event definitions
# ═══════════════════════════════════════════════════════════════════

@dataclass
class EggThrown:
    """The player threw an egg."""
    direction: str = "down"
    eggs_left: int = 0


@dataclass
class EggsRefilled:
    """The player restocked at a nest."""
    egg_count: int = 0


@dataclass
class NpcHit:
    """An egg struck an NPC."""
    home_id: str = ""
    reaction: str = ""
    score: int = 0


@dataclass
class NpcRemoved:
    """A stunned NPC finished its countdown and left the roster."""
    home_id: str = ""


@dataclass
class NpcSpawned:
    """The spawner created a fresh NPC at a tent."""
    home_id: str = ""


@dataclass
class GameOver:
    """An angry NPC caught the player.  Emitted once per round."""
    score: int = 0


@dataclass
class PlacementFailed:
    """World generation ran out of tries for a prop or the player."""
    kind: str = ""
    tries: int = 0


# ═══════════════════════════════════════════════════════════════════
#  Bus
# ═══════════════════════════════════════════════════════════════════

def _key(event_type: type | str) -> str:
    return event_type if isinstance(event_type, str) else event_type.__name__


class EventBus:
    """FIFO queue of events plus name → handlers table."""

    # Upper bound on handler-emits-event chains within one drain
    max_passes = 100

    def __init__(self):
        self._queue: list[Any] = []
        self._handlers: dict[str, list[Callable]] = defaultdict(list)
        self._counts: Counter[str] = Counter()

    def emit(self, event) -> None:
        self._queue.append(event)

    def subscribe(self, event_type: type | str, handler: Callable) -> None:
        self._handlers[_key(event_type)].append(handler)

    def unsubscribe(self, event_type: type | str, handler: Callable) -> None:
        handlers = self._handlers.get(_key(event_type), [])
        if handler in handlers:
            handlers.remove(handler)

    def drain(self) -> int:
        """Deliver everything queued, including events emitted by handlers.

        Returns the number of events delivered.
        """
        delivered = 0
        for _ in range(self.max_passes):
            if not self._queue:
                break
            batch, self._queue = self._queue, []
            for event in batch:
                self._deliver(event)
            delivered += len(batch)
        return delivered

    def _deliver(self, event) -> None:
        name = type(event).__name__
        self._counts[name] += 1
        for handler in list(self._handlers.get(name, ())):
            try:
                handler(event)
            except Exception as exc:
                print(f"[EVENT] handler error for {name}: {exc}")
                traceback.print_exc()

    def clear(self) -> None:
        """Drop queued events.  Subscriptions stay."""
        self._queue.clear()

    def stats(self) -> dict[str, int]:
        """Events delivered so far, by type name."""
        return dict(self._counts)

    def pending(self) -> list[Any]:
        return list(self._queue)

    def pending_count(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return f"EventBus(pending={len(self._queue)}, types={len(self._handlers)})"
