"""core/tuning.py — Gameplay numbers from ``data/tuning.toml``.

Read anywhere with a fallback::

    from core.tuning import get
    speed = get("npc", "angry_speed", 2.0)

Every call site carries its own default, so the game still runs with
the file missing.  F4 in game calls ``reload()``.  Tests pin values
with ``override()`` and drop back to plain defaults with ``reset()``.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib


DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / "tuning.toml"

DIFFICULTY_TIERS = ("easy", "normal", "hard")
_DEFAULT_ANGER = {"easy": 0.0003, "normal": 0.0008, "hard": 0.0015}

_data: dict = {}
_path: Path = DEFAULT_PATH


def load(path: str | Path | None = None) -> int:
    """Replace the loaded values with the contents of *path*.

    Returns how many leaf values were read (0 when the file is absent).
    """
    global _data, _path
    _path = Path(path) if path is not None else DEFAULT_PATH

    if not _path.exists():
        print(f"[TUNING] {_path} not found — using defaults")
        _data = {}
        return 0

    with open(_path, "rb") as f:
        _data = tomllib.load(f)
    count = _count_leaves(_data)
    print(f"[TUNING] {count} values from {_path.name}")
    return count


def reload() -> int:
    return load(_path)


def reset() -> None:
    """Forget every loaded value."""
    global _data
    _data = {}


def _table(section_path: str) -> dict | None:
    node = _data
    for part in section_path.split("."):
        node = node.get(part) if isinstance(node, dict) else None
        if node is None:
            return None
    return node if isinstance(node, dict) else None


def get(section: str, key: str, default=None):
    """``[section] key``, or *default*.  Dots address nested tables:
    ``get("npc.anger_chance", "hard")``.
    """
    table = _table(section)
    if table is None:
        return default
    return table.get(key, default)


def section(section_path: str) -> dict:
    """Shallow copy of a whole table ({} if missing)."""
    return dict(_table(section_path) or {})


def override(section_path: str, key: str, value) -> None:
    node = _data
    for part in section_path.split("."):
        node = node.setdefault(part, {})
    node[key] = value


def anger_chance(tier: str | None = None) -> float:
    """Per-tick chance a calm NPC turns angry.

    *tier* defaults to ``[npc] difficulty`` and then ``"normal"``.
    """
    if tier is None:
        tier = get("npc", "difficulty", "normal")
    if tier not in DIFFICULTY_TIERS:
        raise ValueError(f"unknown difficulty tier {tier!r}")
    return float(get("npc.anger_chance", tier, _DEFAULT_ANGER[tier]))


def _count_leaves(d: dict) -> int:
    return sum(_count_leaves(v) if isinstance(v, dict) else 1 for v in d.values())
