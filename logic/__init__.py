"""logic — Game systems package.

Top-level modules
-----------------
tick            — per-frame orchestrator (+ render sink / asset protocols)
worldgen        — prop scatter, player spawn, world reset
movement        — player steering, collision, nest refill
npc_ai          — NPC mood / movement state machine
projectiles     — egg throwing and hits
camera          — world ↔ screen transform, zoom selection
spawner         — periodic NPC respawns at tents
input_manager   — raw input → intent mapping (the only pygame import)
"""
