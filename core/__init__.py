"""core package initialization.

Making `core` an explicit package so imports like `import core.collision`
work reliably when running `main.py` from the project root.
"""

__all__ = ["app", "assets", "audio", "collision", "constants", "events",
           "rng", "scene", "tuning"]
