#!/usr/bin/env python3
"""Run PlanarTSP solvers over a JSONL file of point sets and record each tour.

Every run happens in a child process joined with a timeout; a run that does
not finish, or an exact solver above its point ceiling, is recorded as
``infeasible`` rather than aborting the batch. Each record carries the ratio
of the tour cost to the MST weight of the same points.
"""
from __future__ import annotations

import argparse
import hashlib
import json
import logging
import multiprocessing as mp
import pathlib
import sys
import time
from typing import Iterable, Iterator, Tuple

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from PlanarTSP import (  # noqa: E402
    PlanarTSPError,
    ResourceExceededError,
    SOLVER_FAMILIES,
    SOLVER_SPECS,
    SolverLimits,
    as_points,
    get_solver,
    minimum_spanning_tree,
    mst_weight,
)
from PlanarTSP.utils.taxonomy import AlgorithmFamily  # noqa: E402

logger = logging.getLogger("run_algorithms")

DISCREPANCY_TOLERANCE = 1e-6


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run TSP algorithms on generated point sets.")
    parser.add_argument(
        "--problems",
        type=pathlib.Path,
        default=pathlib.Path("data/problems.jsonl"),
        help="JSONL file containing point sets.",
    )
    parser.add_argument(
        "--results",
        type=pathlib.Path,
        default=pathlib.Path("data/results.jsonl"),
        help="Destination JSONL file for algorithm outcomes.",
    )
    parser.add_argument(
        "--algorithms",
        nargs="+",
        choices=sorted(SOLVER_SPECS.keys()),
        help="Subset of algorithms to execute (default: all except aliases).",
    )
    parser.add_argument(
        "--time-limit",
        type=float,
        default=10.0,
        help="Per-run wall clock budget in seconds, enforced by killing the worker.",
    )
    parser.add_argument(
        "--branch-and-bound-max-points",
        type=int,
        default=SolverLimits.branch_and_bound_max_points,
        help="Skip branch-and-bound above this point count.",
    )
    parser.add_argument(
        "--held-karp-max-points",
        type=int,
        default=SolverLimits.held_karp_max_points,
        help="Skip Held-Karp above this point count.",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Re-run algorithms even if results already exist for a problem.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(raw_args)


def iter_jsonl(path: pathlib.Path) -> Iterator[dict]:
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            yield json.loads(line)


def load_existing_results(path: pathlib.Path) -> dict[tuple[str, str], dict]:
    records: dict[tuple[str, str], dict] = {}
    if not path.exists():
        return records
    for row in iter_jsonl(path):
        pid = row.get("problem_id")
        algo = row.get("algorithm")
        if not pid or not algo:
            continue
        records[(pid, algo)] = row
    return records


def ensure_problem_id(problem: dict) -> str:
    if "problem_id" in problem:
        return problem["problem_id"]
    digest = hashlib.sha1(json.dumps(problem.get("points")).encode("utf-8")).hexdigest()
    problem["problem_id"] = digest
    return digest


def _run_solver_worker(algo_name: str, points: list, queue: mp.Queue) -> None:
    try:
        solver = get_solver(algo_name)
        start_time = time.perf_counter()
        result = solver.solve(points)
        result.elapsed = time.perf_counter() - start_time
        queue.put(("ok", result))
    except Exception as exc:  # noqa: BLE001
        queue.put(("error", {"type": type(exc).__name__, "message": str(exc)}))


def execute_with_limits(points: list, algo_name: str, time_limit: float) -> Tuple[object | None, dict | None]:
    queue: mp.Queue = mp.Queue()
    process = mp.Process(target=_run_solver_worker, args=(algo_name, points, queue))
    process.start()
    process.join(timeout=time_limit)

    if process.is_alive():
        process.terminate()
        process.join()
        exc = ResourceExceededError(algo_name, "time", time_limit)
        return None, {"status": "infeasible", "reason": "timeout", "error": str(exc)}

    if queue.empty():
        return None, {"status": "infeasible", "reason": "unknown_failure", "error": "Worker exited without result"}

    status, payload = queue.get()
    if status == "ok":
        return payload, None
    return None, {"status": "infeasible", "reason": payload.get("type"), "error": payload.get("message")}


def serialize_result(problem: dict, algorithm: str, result, tree_weight: float) -> dict:
    return {
        "algorithm": algorithm,
        "algorithm_category": SOLVER_FAMILIES[algorithm].value,
        "problem_id": problem["problem_id"],
        "num_points": problem["num_points"],
        "status": "complete",
        "path": result.path,
        "cost": result.cost,
        "elapsed": result.elapsed,
        "mst_weight": tree_weight,
        "mst_ratio": result.cost / tree_weight if tree_weight > 0 else None,
        "metadata": result.metadata,
    }


def check_discrepancies(problem_id: str, records: list[dict]) -> None:
    """Warn when an exact solver reports a longer tour than any other solver."""
    complete = [r for r in records if r.get("status") == "complete" and r.get("cost") is not None]
    exact = [r for r in complete if r.get("algorithm_category") == AlgorithmFamily.EXACT.value]
    for exact_record in exact:
        for other in complete:
            if exact_record["cost"] - other["cost"] > DISCREPANCY_TOLERANCE:
                logger.warning(
                    "Discrepancy on %s: %s=%.6f is longer than %s=%.6f",
                    problem_id,
                    exact_record["algorithm"],
                    exact_record["cost"],
                    other["algorithm"],
                    other["cost"],
                )


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not args.problems.exists():
        raise SystemExit(f"Problem file not found: {args.problems}")

    limits = SolverLimits(
        branch_and_bound_max_points=args.branch_and_bound_max_points,
        held_karp_max_points=args.held_karp_max_points,
    )
    selected_algorithms = args.algorithms or [name for name in SOLVER_SPECS if name != "brute_force"]
    existing = load_existing_results(args.results)
    appended = 0
    reused = 0
    args.results.parent.mkdir(parents=True, exist_ok=True)

    with args.results.open("a", encoding="utf-8") as out:
        for problem in iter_jsonl(args.problems):
            problem_id = ensure_problem_id(problem)
            try:
                points = [list(p) for p in as_points(problem.get("points") or [])]
            except PlanarTSPError as exc:
                logger.error("Skipping problem %s: %s", problem_id, exc)
                continue
            problem.setdefault("num_points", len(points))
            tree_weight = mst_weight(minimum_spanning_tree(points))
            problem_records: list[dict] = []

            for algo_name in selected_algorithms:
                key = (problem_id, algo_name)
                if not args.overwrite and key in existing:
                    reused += 1
                    problem_records.append(existing[key])
                    print(f"{algo_name} on problem {problem_id} -> cached ({existing[key].get('status')})")
                    continue

                limit = limits.limit_for(algo_name)
                if limit is not None and len(points) > limit:
                    exc = ResourceExceededError(algo_name, "points", limit, len(points))
                    record = {
                        "algorithm": algo_name,
                        "algorithm_category": SOLVER_FAMILIES[algo_name].value,
                        "problem_id": problem_id,
                        "num_points": len(points),
                        "status": "infeasible",
                        "reason": "point_limit",
                        "error": str(exc),
                    }
                else:
                    result_obj, failure = execute_with_limits(points, algo_name, args.time_limit)
                    if result_obj is not None:
                        record = serialize_result(problem, algo_name, result_obj, tree_weight)
                    else:
                        record = {
                            "algorithm": algo_name,
                            "algorithm_category": SOLVER_FAMILIES[algo_name].value,
                            "problem_id": problem_id,
                            "num_points": len(points),
                            **(failure or {"status": "infeasible", "reason": "unknown_failure"}),
                        }

                out.write(json.dumps(record))
                out.write("\n")
                existing[key] = record
                problem_records.append(record)
                appended += 1
                print(f"{algo_name} on problem {problem_id} (points={len(points)}) -> {record.get('status')}")

            check_discrepancies(problem_id, problem_records)

    print(f"Completed {appended} new runs. Reused {reused} cached results.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
