"""components — State dataclasses, organised by domain.

Submodules
----------
entities       Prop, Player, Npc, Egg, sprite_key
resources      Camera, InputState, GameState
dev_log        DevLog

All public names are re-exported here so code can do
``from components import Npc``.
"""

# ── Entities ─────────────────────────────────────────────────────────
from components.entities import Prop, Player, Npc, Egg, sprite_key, is_solid

# ── World resources / singletons ─────────────────────────────────────
from components.resources import Camera, InputState, GameState

# ── Diagnostics ──────────────────────────────────────────────────────
from components.dev_log import DevLog

__all__ = [
    # entities
    "Prop", "Player", "Npc", "Egg", "sprite_key", "is_solid",
    # resources
    "Camera", "InputState", "GameState",
    # diagnostics
    "DevLog",
]
