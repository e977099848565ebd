"""core/constants.py — Shared constants used across the codebase.

Centralises the fixed (non-tunable) numbers so there's exactly one
place to change them.  Tunable gameplay numbers live in
``data/tuning.toml`` instead (see ``core/tuning.py``).

Unit System
-----------
All gameplay distances are measured in **world units**.  The world is a
fixed logical coordinate space; the camera maps world units to screen
pixels via its zoom.  Speeds are world units per tick and timers count
ticks — one tick per rendered frame.

    Distance / position     wu      (world units)
    Speed                   wu/tick
    Timers                  ticks   (60 ticks ≈ 1 s at 60 FPS)
    Score                   —       (hits)
"""

# ── Directions ──────────────────────────────────────────────────────
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Unit step per direction, screen-style (y grows downward)
DIRECTION_VECTORS: dict[str, tuple[int, int]] = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

# ── Prop types ──────────────────────────────────────────────────────
PROP_TREE = "tree"
PROP_TENT = "tent"
PROP_NEST = "nest"
SOLID_PROP_TYPES = frozenset({PROP_TREE, PROP_TENT})

# ── Default world / entity sizes (world units) ──────────────────────
WORLD_WIDTH = 1600
WORLD_HEIGHT = 1200

PLAYER_SIZE = 32
NPC_SIZE = 32
TREE_SIZE = 32
TENT_SIZE = 48
NEST_SIZE = 32
EGG_SIZE = 16

# Visual variants per prop type (semantically inert to the simulation)
PROP_VARIANTS = {PROP_TREE: 3, PROP_TENT: 2, PROP_NEST: 1}

# Cosmetic tags shown above a stunned NPC
REACTIONS = ("@_@", "x_x", "ouch!")
ANGRY_MARK = ">:("

# ── Render ──────────────────────────────────────────────────────────
VIEWPORT_WIDTH = 960
VIEWPORT_HEIGHT = 640
BG_COLOR = (112, 160, 84)

# Placeholder colours used while a sprite isn't ready
PLACEHOLDER_COLORS = {
    "player": (200, 60, 60),
    "npc":    (230, 150, 40),
    "tree":   (30, 110, 40),
    "tent":   (60, 90, 200),
    "nest":   (170, 120, 60),
    "egg":    (250, 250, 240),
}
