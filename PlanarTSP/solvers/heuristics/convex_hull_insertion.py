from __future__ import annotations

from typing import List

import numpy as np

from PlanarTSP.geometry import Point, distance_matrix
from PlanarTSP.solvers.base import AlgorithmResult, BaseSolver
from PlanarTSP.utils.taxonomy import AlgorithmFamily


def _cross(o: np.ndarray, a: np.ndarray, b: np.ndarray) -> float:
    return float((a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0]))


def convex_hull_indices(coords: np.ndarray) -> List[int]:
    """Andrew's monotone chain; counter-clockwise hull indices, collinear points dropped.

    Inputs whose hull is degenerate (all points equal or collinear) return the
    extreme indices only.
    """
    coords = np.asarray(coords, dtype=float).reshape(-1, 2)
    n = coords.shape[0]
    if n <= 2:
        return list(range(n))

    order = sorted(range(n), key=lambda i: (coords[i, 0], coords[i, 1], i))

    def half(indices: List[int]) -> List[int]:
        chain: List[int] = []
        for idx in indices:
            while len(chain) >= 2 and _cross(coords[chain[-2]], coords[chain[-1]], coords[idx]) <= 0:
                chain.pop()
            chain.append(idx)
        return chain

    lower = half(order)
    upper = half(list(reversed(order)))
    hull = lower[:-1] + upper[:-1]

    # Duplicates of the first/last sorted point can survive as zero-area hulls.
    unique: List[int] = []
    seen = set()
    for idx in hull:
        key = (coords[idx, 0], coords[idx, 1])
        if key not in seen:
            seen.add(key)
            unique.append(idx)
    if len(unique) < 3:
        first, last = order[0], order[-1]
        if (coords[first] == coords[last]).all():
            return [first]
        return [first, last]
    return unique


def cheapest_insertion(dist_matrix: np.ndarray, tour: List[int]) -> List[int]:
    """Grow ``tour`` by inserting the remaining city with the cheapest detour each round.

    Candidates are ranked by ``d(a, p) + d(p, b) - d(a, b)`` alone. This is not
    the angle-weighted score with a remove-and-reinsert pass over the worst
    placed points that hull-insertion solvers sometimes use; the Or-opt and
    2-opt passes in ``hull_or_opt`` take over that repair step.
    """
    dist = np.asarray(dist_matrix, dtype=float)
    n = dist.shape[0]
    tour = list(tour)
    in_tour = set(tour)
    remaining = [city for city in range(n) if city not in in_tour]

    while remaining:
        tour_arr = np.asarray(tour)
        following = np.roll(tour_arr, -1)
        rem = np.asarray(remaining)
        detour = (
            dist[np.ix_(rem, tour_arr)]
            + dist[np.ix_(rem, following)]
            - dist[tour_arr, following][None, :]
        )
        r, e = divmod(int(np.argmin(detour)), len(tour))
        tour.insert(e + 1, remaining.pop(r))
    return tour


def convex_hull_insertion_path(coords: np.ndarray, dist_matrix: np.ndarray, hull: List[int] | None = None) -> List[int]:
    if hull is None:
        hull = convex_hull_indices(coords)
    if not hull:
        return []
    path = cheapest_insertion(dist_matrix, hull)
    # Rotate so the tour starts at city 0 like the other solvers.
    start = path.index(0)
    return path[start:] + path[:start]


class ConvexHullInsertionSolver(BaseSolver):
    """Start from the convex hull and insert interior points by cheapest detour."""

    name = "convex_hull_insertion"
    family = AlgorithmFamily.HEURISTIC

    def solve_points(self, points: List[Point]) -> AlgorithmResult:
        coords = np.asarray(points, dtype=float).reshape(-1, 2)
        dist_matrix = distance_matrix(points)
        hull = convex_hull_indices(coords)
        path = convex_hull_insertion_path(coords, dist_matrix, hull)
        return self._result(dist_matrix, path, hull_size=len(hull))


__all__ = [
    "ConvexHullInsertionSolver",
    "cheapest_insertion",
    "convex_hull_indices",
    "convex_hull_insertion_path",
]
