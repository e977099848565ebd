"""test_projectiles.py — Egg throwing, flight, hits and scoring.

Run:  python test_projectiles.py
"""
from __future__ import annotations
import sys, traceback

from core.tuning import load as _load_tuning
_load_tuning()

from core.constants import LEFT, UP, REACTIONS
from core.rng import new_rng
from components import GameState, Player, Npc, Egg, Prop
from logic.projectiles import throw_egg, egg_system


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    msg = f"  [FAIL] {label}"
    if detail:
        msg += f" — {detail}"
    print(msg)

def check(cond: bool, label: str, detail: str = ""):
    if cond:
        ok(label)
    else:
        fail(label, detail)
    assert cond, f"{label} {detail}"


def _state(*npcs: Npc) -> GameState:
    state = GameState(world_width=400, world_height=300, rng=new_rng(3))
    state.player = Player(x=100, y=100)
    state.npcs.extend(npcs)
    return state


# ═══════════════════════════════════════════════════════════════════════
#  Throwing
# ═══════════════════════════════════════════════════════════════════════

def test_throw_needs_eggs():
    _load_tuning()
    state = _state()
    check(throw_egg(state) is None and state.eggs == [], "empty hands throw nothing")


def test_throw_from_centre_along_facing():
    _load_tuning()
    state = _state()
    state.player.egg_count = 3
    state.player.direction = LEFT
    egg = throw_egg(state)
    check(egg is not None and state.eggs == [egg], "egg added to the world")
    check((egg.x, egg.y) == (108, 108), "egg centred on the player", f"{egg.x}, {egg.y}")
    check((egg.vx, egg.vy) == (-5, 0), "flies along facing at speed 5")
    check(state.player.egg_count == 2, "one egg spent")

    state.player.direction = UP
    egg = throw_egg(state)
    check((egg.vx, egg.vy) == (0, -5), "exactly one velocity component is non-zero")

    thrown = [e for e in state.bus.pending() if type(e).__name__ == "EggThrown"]
    check([e.eggs_left for e in thrown] == [2, 1], "EggThrown carries the remaining count")


def test_no_throw_after_game_over():
    _load_tuning()
    state = _state()
    state.player.egg_count = 3
    state.game_over = True
    check(throw_egg(state) is None and state.player.egg_count == 3, "latched game throws nothing")


# ═══════════════════════════════════════════════════════════════════════
#  Flight
# ═══════════════════════════════════════════════════════════════════════

def test_leaving_the_world():
    _load_tuning()
    state = _state()
    state.eggs.append(Egg(x=0, y=50, vx=-5))
    egg_system(state)
    check(state.eggs == [], "egg past the left edge is dropped")

    edge = Egg(x=395, y=50, vx=5)
    state.eggs.append(edge)
    egg_system(state)
    check(state.eggs == [edge] and edge.x == 400, "exactly on the edge is still in flight")

    egg_system(state)
    check(state.eggs == [], "past the right edge is dropped")


def test_eggs_fly_through_props():
    _load_tuning()
    state = _state()
    state.props.append(Prop("tree", 150, 40, 32, 32))
    egg = Egg(x=140, y=50, vx=5)
    state.eggs.append(egg)
    egg_system(state)
    check(egg.active and egg.x == 145, "props don't stop eggs")


# ═══════════════════════════════════════════════════════════════════════
#  Hits
# ═══════════════════════════════════════════════════════════════════════

def test_one_hit_per_egg():
    _load_tuning()
    first = Npc(x=200, y=200, home_id="tent1", angry=True, angry_timer=50)
    second = Npc(x=204, y=200, home_id="tent2")
    state = _state(first, second)
    state.eggs.append(Egg(x=195, y=205, vx=5))
    egg_system(state)

    check(first.hit and not second.hit, "only the first overlapping NPC is hit")
    check(state.eggs == [], "egg consumed by the hit")
    check(state.score == 1, "score +1")
    check(first.hit_timer == 60 and not first.angry, "stunned for 60 ticks and calmed")
    check(first.reaction_text in REACTIONS, "reaction picked", first.reaction_text)

    hits = [e for e in state.bus.pending() if type(e).__name__ == "NpcHit"]
    check(len(hits) == 1 and hits[0].home_id == "tent1" and hits[0].score == 1,
          "NpcHit emitted")


def test_stunned_npcs_are_not_targets():
    _load_tuning()
    dazed = Npc(x=200, y=200, hit=True, hit_timer=30)
    fresh = Npc(x=204, y=200)
    state = _state(dazed, fresh)
    state.eggs.append(Egg(x=195, y=205, vx=5))
    egg_system(state)
    check(fresh.hit and dazed.hit_timer == 30, "egg passes a stunned NPC and hits the next")
    check(state.score == 1, "stunned NPC scores nothing")


def test_two_eggs_two_hits():
    _load_tuning()
    a = Npc(x=100, y=200)
    b = Npc(x=300, y=200)
    state = _state(a, b)
    state.eggs.extend([Egg(x=95, y=205, vx=5), Egg(x=295, y=205, vx=5)])
    egg_system(state)
    check(a.hit and b.hit and state.score == 2, "each egg scores once")


def test_frozen_after_game_over():
    _load_tuning()
    state = _state()
    egg = Egg(x=50, y=50, vx=5)
    state.eggs.append(egg)
    state.game_over = True
    egg_system(state)
    check(egg.x == 50, "eggs stop moving after game over")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Throw needs eggs", test_throw_needs_eggs),
        ("Throw direction", test_throw_from_centre_along_facing),
        ("Throw after game over", test_no_throw_after_game_over),
        ("Leaving the world", test_leaving_the_world),
        ("Through props", test_eggs_fly_through_props),
        ("One hit per egg", test_one_hit_per_egg),
        ("Stunned skipped", test_stunned_npcs_are_not_targets),
        ("Two eggs", test_two_eggs_two_hits),
        ("Game over freeze", test_frozen_after_game_over),
    ]

    for name, fn in sections:
        print(f"\n=== {name} ===")
        try:
            fn()
        except AssertionError:
            pass
        except Exception:
            _failed += 1
            print(f"\n  [CRASH] {name} — unhandled exception:")
            traceback.print_exc()

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  Projectile Tests: {_passed} passed, {_failed} failed  (total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
