#!/usr/bin/env python3

"""Spin a wheel many times with fixed seeds and report the winner distribution."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

if __package__ is None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

from tivoliwheel.analysis.fairness import FairnessConfig, run_fairness


def _parse_seeds(raw: str) -> tuple[int, ...]:
    try:
        return tuple(int(item) for item in raw.split(",") if item.strip())
    except ValueError as exc:  # pragma: no cover - validation path
        raise argparse.ArgumentTypeError(f"invalid seed list '{raw}'") from exc


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check that every sector wins equally often")
    parser.add_argument("--sectors", type=int, default=8, help="Number of sectors on the wheel")
    parser.add_argument("--spins", type=int, default=2_000, help="Spins per seed")
    parser.add_argument(
        "--seeds",
        type=_parse_seeds,
        default=(101,),
        help="Comma-separated list of integer seeds (default: 101)",
    )
    args = parser.parse_args(argv)

    runs = []
    for seed in args.seeds:
        result = run_fairness(FairnessConfig(sectors=args.sectors, spins=args.spins, seed=seed))
        runs.append(
            {
                "seed": seed,
                "counts": list(result.counts),
                "chi_square": result.chi_square,
                "max_deviation_pct": result.max_deviation_pct,
            }
        )
    json.dump({"sectors": args.sectors, "spins": args.spins, "runs": runs}, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
