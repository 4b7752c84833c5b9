#!/usr/bin/env python3
from __future__ import annotations

import argparse
import hashlib
import json
import pathlib
from datetime import datetime, timezone
from typing import Iterable

import numpy as np


def create_instance(num_points: int, rng: np.random.Generator, scale: float) -> dict:
    points = np.round(rng.random((num_points, 2)) * scale, 2)
    digest = hashlib.sha1(points.tobytes()).hexdigest()
    return {
        "num_points": num_points,
        "problem_id": digest,
        "points": points.tolist(),
        "scale": scale,
    }


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate random planar point sets.")
    parser.add_argument(
        "--counts",
        nargs="+",
        type=int,
        default=[4, 6, 8, 10, 12, 15, 20, 50, 100, 200],
        help="Point counts to generate.",
    )
    parser.add_argument(
        "--instances-per-count",
        type=int,
        default=10,
        help="How many point sets to generate per count.",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=500.0,
        help="Coordinates drawn uniformly in [0, scale), rounded to two decimals.",
    )
    parser.add_argument(
        "--output",
        type=pathlib.Path,
        default=pathlib.Path("data/problems.jsonl"),
        help="Destination JSONL file.",
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42).")
    return parser.parse_args(raw_args)


def main(raw_args: Iterable[str] | None = None) -> None:
    args = parse_args(raw_args)
    rng = np.random.default_rng(args.seed)

    timestamp = datetime.now(timezone.utc).isoformat()
    args.output.parent.mkdir(parents=True, exist_ok=True)

    written = 0
    with args.output.open("w", encoding="utf-8") as fh:
        for count in args.counts:
            for _ in range(args.instances_per_count):
                instance = create_instance(count, rng, args.scale)
                record = {
                    "created_at": timestamp,
                    "seed": args.seed,
                    **instance,
                }
                fh.write(json.dumps(record))
                fh.write("\n")
                written += 1
    print(f"Wrote {written} problems to {args.output}")


if __name__ == "__main__":
    main()
