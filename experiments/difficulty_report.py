# /experiments/difficulty_report.py
"""
Difficulty report over generated levels:
- Builds the numpy feature profile for each level (src.analysis.level_stats)
- Prints a table and checks the difficulty curve (gap up, enemies up, platforms down)
- Optionally writes a CSV for notebook analysis

Usage examples (from repo root):
  # All levels, print only:
  python -m experiments.difficulty_report

  # Custom levels, write CSV:
  python -m experiments.difficulty_report --levels 1,4,8 --out-csv /tmp/difficulty.csv
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path
from typing import List, Optional

import numpy as np

from src.analysis.level_stats import FEATURE_NAMES, column, difficulty_profile
from src.platformer.config import MAX_LEVEL


def _parse_levels(spec: Optional[str]) -> List[int]:
    if not spec:
        return list(range(1, MAX_LEVEL + 1))
    return [int(s) for s in spec.split(",") if s.strip()]


def curve_checks(levels: List[int], profile: np.ndarray) -> List[str]:
    """Human-readable failures of the difficulty curve; empty when it holds."""
    problems: List[str] = []
    order = np.argsort(levels)
    gaps = column(profile, "average_gap")[order]
    enemies = column(profile, "enemy_count")[order]
    plats = column(profile, "platform_count")[order]
    if np.any(np.diff(gaps) <= 0):
        problems.append("average gap is not strictly increasing")
    if np.any(np.diff(enemies) < 0):
        problems.append("enemy count decreases")
    if np.any(np.diff(plats) > 0):
        problems.append("platform count increases")
    return problems


def write_csv(path: Path, levels: List[int], profile: np.ndarray):
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["level", *FEATURE_NAMES])
        for lvl, row in zip(levels, profile):
            w.writerow([lvl, *[f"{v:.4f}" for v in row]])


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--levels", type=str, default=None, help="Comma-separated level numbers")
    ap.add_argument("--out-csv", type=str, default=None, help="Optional CSV output path")
    args = ap.parse_args()

    levels = _parse_levels(args.levels)
    profile = difficulty_profile(levels)

    header = "level " + " ".join(f"{n:>16}" for n in FEATURE_NAMES)
    print(header)
    for lvl, row in zip(levels, profile):
        print(f"{lvl:>5} " + " ".join(f"{v:>16.3f}" for v in row))

    problems = curve_checks(levels, profile)
    if problems:
        for p in problems:
            print(f"✗ {p}")
    else:
        print("✓ difficulty curve holds")

    if args.out_csv:
        write_csv(Path(args.out_csv), levels, profile)
        print(f"[OK] wrote {args.out_csv}")


if __name__ == "__main__":
    main()
