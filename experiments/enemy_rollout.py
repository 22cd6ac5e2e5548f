# /experiments/enemy_rollout.py
"""
Headless rollouts of the enemy core:
- Builds a World per level and drives it for N frames with an idle player
  standing on the spawn platform (no input)
- Counts frame events and enemy/projectile population over time
- Writes an episodes CSV; the same level always produces the same numbers

Usage examples (from repo root):
  python -m experiments.enemy_rollout
  python -m experiments.enemy_rollout --levels 4,8 --frames 1800 --out-dir /tmp/rollouts
"""

from __future__ import annotations
import argparse
import csv
from collections import Counter
from pathlib import Path
from typing import Dict, List

import numpy as np

from src.platformer.config import MAX_LEVEL
from src.platformer.player import Player
from src.platformer.world import EventKind, World, host_frame


def rollout(level_number: int, frames: int) -> Dict[str, float]:
    world = World.from_level(level_number)
    player = Player()
    tally: Counter = Counter()
    alive_enemies = np.zeros(frames, dtype=np.int32)
    live_bolts = np.zeros(frames, dtype=np.int32)

    for t in range(frames):
        for ev in host_frame(world, player):
            tally[ev.kind] += 1
        alive_enemies[t] = len(world.enemies)
        live_bolts[t] = len(world.projectiles)

    return {
        "level": level_number,
        "frames": frames,
        "enemies_start": len(world.blueprint.enemies),
        "enemies_end": int(alive_enemies[-1]) if frames else len(world.enemies),
        "max_bolts": int(live_bolts.max()) if frames else 0,
        "mean_bolts": float(live_bolts.mean()) if frames else 0.0,
        "damaged": tally[EventKind.PLAYER_DAMAGED],
        "defeated": tally[EventKind.ENEMY_DEFEATED],
        "coins": tally[EventKind.COIN_COLLECTED],
    }


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--levels", type=str, default=None, help="Comma-separated level numbers")
    ap.add_argument("--frames", type=int, default=600, help="Frames per rollout")
    ap.add_argument("--out-dir", type=str, default="experiments/runs", help="Where to write rollouts.csv")
    args = ap.parse_args()

    levels: List[int] = ([int(s) for s in args.levels.split(",")] if args.levels
                         else list(range(1, MAX_LEVEL + 1)))
    rows = [rollout(lvl, args.frames) for lvl in levels]

    out = Path(args.out_dir)
    out.mkdir(parents=True, exist_ok=True)
    csv_path = out / "rollouts.csv"
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        w.writeheader()
        w.writerows(rows)

    for r in rows:
        print(f"[level {r['level']}] enemies {r['enemies_start']}->{r['enemies_end']} "
              f"max_bolts={r['max_bolts']} damaged={r['damaged']} defeated={r['defeated']}")
    print(f"[OK] wrote {csv_path}")


if __name__ == "__main__":
    main()
