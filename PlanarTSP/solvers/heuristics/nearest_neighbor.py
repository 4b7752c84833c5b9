from __future__ import annotations

from typing import List

import numpy as np

from PlanarTSP.solvers.base import AlgorithmResult, BaseSolver
from PlanarTSP.utils.taxonomy import AlgorithmFamily


def nearest_neighbor_path(dist_matrix: np.ndarray, start: int = 0) -> List[int]:
    """Greedy walk to the closest unvisited city; ties go to the lowest index."""
    dist = np.asarray(dist_matrix, dtype=float)
    n = dist.shape[0]
    if n == 0:
        return []

    visited = np.zeros(n, dtype=bool)
    visited[start] = True
    path = [start]
    for _ in range(1, n):
        last = path[-1]
        next_city = int(np.argmin(np.where(visited, np.inf, dist[last])))
        visited[next_city] = True
        path.append(next_city)
    return path


class NearestNeighborSolver(BaseSolver):
    name = "nearest_neighbor"
    family = AlgorithmFamily.HEURISTIC

    def solve_matrix(self, dist_matrix: np.ndarray) -> AlgorithmResult:
        dist_matrix = np.asarray(dist_matrix, dtype=float)
        path = nearest_neighbor_path(dist_matrix)
        return self._result(dist_matrix, path, nodes_visited=len(path))


__all__ = ["NearestNeighborSolver", "nearest_neighbor_path"]
