from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

from PlanarTSP.geometry import Point, distance_matrix
from PlanarTSP.solvers.base import AlgorithmResult, BaseSolver
from PlanarTSP.solvers.heuristics.convex_hull_insertion import convex_hull_insertion_path
from PlanarTSP.solvers.heuristics.nearest_neighbor import nearest_neighbor_path
from PlanarTSP.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)

IMPROVEMENT_TOLERANCE = 1e-9


def two_opt_improve(
    path: Sequence[int],
    dist_matrix: np.ndarray,
    tolerance: float = IMPROVEMENT_TOLERANCE,
) -> Tuple[List[int], int]:
    """Reverse segments while doing so shortens the tour.

    On Euclidean inputs the result has no crossing edges. ``path[0]`` never
    moves. Returns the improved path and the number of moves applied.
    """
    dist = np.asarray(dist_matrix, dtype=float).tolist()
    path = list(path)
    n = len(path)
    moves = 0
    if n < 4:
        return path, moves

    improved = True
    while improved:
        improved = False
        for i in range(n - 2):
            for j in range(i + 2, n):
                a, b = path[i], path[i + 1]
                c, d = path[j], path[(j + 1) % n]
                if d == a:
                    continue
                delta = dist[a][c] + dist[b][d] - dist[a][b] - dist[c][d]
                if delta < -tolerance:
                    path[i + 1 : j + 1] = reversed(path[i + 1 : j + 1])
                    moves += 1
                    improved = True
    return path, moves


def or_opt_improve(
    path: Sequence[int],
    dist_matrix: np.ndarray,
    segment_lengths: Sequence[int] = (3, 2, 1),
    tolerance: float = IMPROVEMENT_TOLERANCE,
) -> Tuple[List[int], int]:
    """Relocate short segments, optionally reversed, to their cheapest slot.

    Segments never include ``path[0]``, so the starting city stays fixed.
    Returns the improved path and the number of moves applied.
    """
    dist = np.asarray(dist_matrix, dtype=float).tolist()
    path = list(path)
    n = len(path)
    moves = 0

    improved = True
    while improved:
        improved = False
        for length in segment_lengths:
            if n < length + 3:
                continue
            i = 1
            while i + length <= n:
                segment = path[i : i + length]
                first, last = segment[0], segment[-1]
                prev, nxt = path[i - 1], path[(i + length) % n]
                removal_gain = dist[prev][first] + dist[last][nxt] - dist[prev][nxt]

                reduced = path[:i] + path[i + length :]
                m = len(reduced)
                best_gain = tolerance
                best_slot = None
                best_reversed = False
                for k in range(m):
                    if k == i - 1:
                        continue  # segment's current slot
                    p, q = reduced[k], reduced[(k + 1) % m]
                    base = dist[p][q]
                    forward = removal_gain - (dist[p][first] + dist[last][q] - base)
                    backward = removal_gain - (dist[p][last] + dist[first][q] - base)
                    if forward > best_gain:
                        best_gain, best_slot, best_reversed = forward, k, False
                    if backward > best_gain:
                        best_gain, best_slot, best_reversed = backward, k, True

                if best_slot is not None:
                    moved = segment[::-1] if best_reversed else segment
                    path = reduced[: best_slot + 1] + moved + reduced[best_slot + 1 :]
                    moves += 1
                    improved = True
                i += 1
    return path, moves


class TwoOptSolver(BaseSolver):
    """Nearest neighbour tour followed by 2-opt until no crossing remains."""

    name = "two_opt"
    family = AlgorithmFamily.LOCAL_SEARCH

    def solve_matrix(self, dist_matrix: np.ndarray) -> AlgorithmResult:
        dist_matrix = np.asarray(dist_matrix, dtype=float)
        path, moves = two_opt_improve(nearest_neighbor_path(dist_matrix), dist_matrix)
        return self._result(dist_matrix, path, two_opt_moves=moves)


class HullOrOptSolver(BaseSolver):
    """Convex hull insertion refined by alternating Or-opt and 2-opt passes."""

    name = "hull_or_opt"
    family = AlgorithmFamily.LOCAL_SEARCH

    def solve_points(self, points: List[Point]) -> AlgorithmResult:
        coords = np.asarray(points, dtype=float).reshape(-1, 2)
        dist_matrix = distance_matrix(points)
        path = convex_hull_insertion_path(coords, dist_matrix)

        or_moves = two_opt_moves = rounds = 0
        while True:
            rounds += 1
            path, or_step = or_opt_improve(path, dist_matrix)
            path, two_opt_step = two_opt_improve(path, dist_matrix)
            or_moves += or_step
            two_opt_moves += two_opt_step
            if or_step == 0 and two_opt_step == 0:
                break

        logger.debug("hull_or_opt n=%d rounds=%d or_opt=%d two_opt=%d", len(points), rounds, or_moves, two_opt_moves)
        return self._result(
            dist_matrix,
            path,
            rounds=rounds,
            or_opt_moves=or_moves,
            two_opt_moves=two_opt_moves,
        )


__all__ = ["HullOrOptSolver", "TwoOptSolver", "or_opt_improve", "two_opt_improve"]
