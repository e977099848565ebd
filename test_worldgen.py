"""test_worldgen.py — Prop scatter, player spawn and world reset.

Run:  python test_worldgen.py
"""
from __future__ import annotations
import sys, traceback

from core.tuning import load as _load_tuning
_load_tuning()

from core.collision import rect_of, overlaps, overlaps_any
from core.constants import PROP_TREE, PROP_TENT, PROP_NEST
from core.rng import new_rng
from components import Egg, GameState, Prop
from logic.worldgen import new_game, reset_world, place_prop, place_player


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


def _count(state, ptype: str) -> int:
    return sum(1 for p in state.props if p.type == ptype)


# ═══════════════════════════════════════════════════════════════════════
#  TEST 1 — Placement never overlaps (buffered), stays inside the world
# ═══════════════════════════════════════════════════════════════════════

def test_props_never_overlap():
    _load_tuning()
    for seed in (1, 2, 3, 17, 99):
        state = new_game(seed)
        props = state.props
        clash = None
        for j in range(len(props)):
            grown = rect_of(props[j]).expanded(16)
            for i in range(j):
                if overlaps(grown, props[i]):
                    clash = (i, j)
                    break
            if clash:
                break
        check(clash is None, f"seed {seed}: no buffered overlap", str(clash))

        outside = [p for p in props
                   if p.x < 0 or p.y < 0
                   or p.x + p.width > state.world_width
                   or p.y + p.height > state.world_height]
        check(not outside, f"seed {seed}: every prop inside the world")


def test_counts_and_npcs():
    _load_tuning()
    state = new_game(5)
    check(_count(state, PROP_TREE) == 40, "40 trees")
    check(_count(state, PROP_TENT) == 6, "6 tents")
    check(_count(state, PROP_NEST) == 5, "5 nests")

    tents = state.tents()
    ids = [t.id for t in tents]
    check(ids == [f"tent{i}" for i in range(1, 7)], "tent ids numbered in order", str(ids))
    check(all(p.id is None for p in state.props if p.type != PROP_TENT),
          "only tents carry an id")
    check(all(0 <= p.variant < 3 for p in state.props), "variants in range")

    check(len(state.npcs) == len(tents), "one NPC per tent")
    for npc, tent in zip(state.npcs, tents):
        check(npc.home_id == tent.id and (npc.x, npc.y) == (tent.x, tent.y),
              f"{tent.id}: NPC starts in its tent")
        check(not npc.angry and not npc.hit and not npc.has_left_tent,
              f"{tent.id}: NPC starts calm and home")


def test_player_spawn():
    _load_tuning()
    for seed in (4, 8, 15):
        state = new_game(seed)
        p = state.player
        check(0 <= p.x and p.x + p.width <= state.world_width
              and 0 <= p.y and p.y + p.height <= state.world_height,
              f"seed {seed}: player inside the world")
        check(not overlaps_any(p, 16, state.props),
              f"seed {seed}: player spawn clear of every prop")
        check(p.egg_count == 0 and p.max_eggs == 3, f"seed {seed}: starts with no eggs")
        check(state.score == 0 and not state.game_over, f"seed {seed}: fresh session")


def test_player_spawn_when_centre_blocked():
    _load_tuning()
    state = GameState(world_width=400, world_height=400, rng=new_rng(5))
    tree = Prop(type=PROP_TREE, x=184, y=184, width=32, height=32)
    state.props.append(tree)

    check(place_player(state), "a random try finds a clear spot")
    p = state.player
    check((p.x, p.y) != (184, 184), "player moved off the blocked centre", f"({p.x}, {p.y})")
    check(not overlaps_any(rect_of(p), 16, state.props), "spawn keeps the buffer clear")
    check(0 <= p.x <= 400 - p.width and 0 <= p.y <= 400 - p.height, "spawn inside the world")
    check(not [e for e in state.bus.pending() if type(e).__name__ == "PlacementFailed"],
          "no placement failure reported")


def test_same_seed_same_world():
    _load_tuning()
    a = new_game(123)
    b = new_game(123)
    check([(p.type, p.x, p.y) for p in a.props] == [(p.type, p.x, p.y) for p in b.props],
          "seeded generation is reproducible")


# ═══════════════════════════════════════════════════════════════════════
#  TEST 2 — Placement failure is logged, never fatal
# ═══════════════════════════════════════════════════════════════════════

def test_placement_failure_on_tiny_world():
    _load_tuning()
    state = new_game(3, world_size=(40, 40))

    check(len(state.props) == 1 and state.props[0].type == PROP_TREE,
          "only the first tree fits", str([p.type for p in state.props]))
    check(state.npcs == [], "no tents, no NPCs")

    failures = [e for e in state.bus.pending()
                if type(e).__name__ == "PlacementFailed"]
    kinds = [e.kind for e in failures]
    check(kinds.count(PROP_TREE) == 39, "39 trees reported", str(kinds.count(PROP_TREE)))
    check(kinds.count(PROP_TENT) == 6, "6 tents reported")
    check(kinds.count(PROP_NEST) == 5, "5 nests reported")
    check(all(e.tries == 0 for e in failures if e.kind == PROP_TENT),
          "tents larger than the world don't even try")
    check(kinds.count("player") == 1, "player fell back to centre")
    check((state.player.x, state.player.y) == (4.0, 4.0), "centre fallback position")
    logged = [e for e in state.log.entries if e["cat"] == "worldgen"]
    check(len(logged) >= 51, "failures in the dev log", str(len(logged)))


def test_place_prop_returns_none_when_full():
    _load_tuning()
    state = new_game(9, world_size=(40, 40))
    check(place_prop(state, PROP_NEST, 32) is None, "no room left → None")


# ═══════════════════════════════════════════════════════════════════════
#  TEST 3 — Reset
# ═══════════════════════════════════════════════════════════════════════

def test_reset_world():
    _load_tuning()
    state = new_game(21)
    old_layout = [(p.x, p.y) for p in state.props]
    state.score = 5
    state.tick = 1234
    state.game_over = True
    state.eggs.append(Egg(x=10, y=10, vx=5))
    state.npcs.clear()
    state.player.egg_count = 2

    reset_world(state)
    check(state.score == 0 and not state.game_over, "score and latch cleared")
    check(state.tick == 0, "tick counter restarts", str(state.tick))
    check(state.eggs == [], "eggs cleared")
    check(len(state.props) == 51, "world regenerated", str(len(state.props)))
    check(len(state.npcs) == len(state.tents()), "NPCs restocked")
    check(state.player.egg_count == 0, "fresh player")
    check([(p.x, p.y) for p in state.props] != old_layout, "new layout")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Props never overlap", test_props_never_overlap),
        ("Counts and NPCs", test_counts_and_npcs),
        ("Player spawn", test_player_spawn),
        ("Spawn with centre blocked", test_player_spawn_when_centre_blocked),
        ("Reproducible", test_same_seed_same_world),
        ("Placement failure", test_placement_failure_on_tiny_world),
        ("place_prop → None", test_place_prop_returns_none_when_full),
        ("Reset", test_reset_world),
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
    print(f"  Worldgen Tests: {_passed} passed, {_failed} failed  (total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
