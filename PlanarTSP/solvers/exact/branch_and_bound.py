from __future__ import annotations

import logging
from typing import List

import numpy as np

from PlanarTSP.solvers.base import AlgorithmResult, BaseSolver, compute_cycle_cost
from PlanarTSP.solvers.heuristics.nearest_neighbor import nearest_neighbor_path
from PlanarTSP.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


class BranchAndBoundSolver(BaseSolver):
    """Depth-first search over tours starting at city 0, pruned by a lower bound.

    The bound for a partial path is its cost, plus the cheapest edge from the
    current city into the unvisited set, plus half of each unvisited city's
    cheapest edge to another unvisited city or back to the start. Every
    unvisited city is left by one edge of any completion, so the bound never
    exceeds the cost of a completion and pruning keeps the search exact.
    """

    name = "branch_and_bound"
    family = AlgorithmFamily.EXACT

    def solve_matrix(self, dist_matrix: np.ndarray) -> AlgorithmResult:
        dist_matrix = np.asarray(dist_matrix, dtype=float)
        n = dist_matrix.shape[0]
        if n <= 2:
            return self._result(dist_matrix, list(range(n)), nodes_explored=0, pruned=0)

        dist = dist_matrix.tolist()

        # Nearest neighbour gives a starting incumbent; it is only an upper bound.
        best_path: List[int] = nearest_neighbor_path(dist_matrix)
        best_cost = compute_cycle_cost(dist_matrix, best_path)
        nodes_explored = 0
        pruned = 0

        path = [0]
        visited = [False] * n
        visited[0] = True

        def lower_bound(current: int, cost_so_far: float) -> float:
            unvisited = [city for city in range(n) if not visited[city]]
            bound = cost_so_far + min(dist[current][city] for city in unvisited)
            for city in unvisited:
                cheapest = dist[city][0]
                for other in unvisited:
                    if other != city and dist[city][other] < cheapest:
                        cheapest = dist[city][other]
                bound += cheapest / 2.0
            return bound

        def dfs(cost_so_far: float) -> None:
            nonlocal best_cost, best_path, nodes_explored, pruned
            nodes_explored += 1
            current = path[-1]

            if len(path) == n:
                total_cost = cost_so_far + dist[current][0]
                if total_cost < best_cost:
                    best_cost = total_cost
                    best_path = list(path)
                return

            if lower_bound(current, cost_so_far) >= best_cost:
                pruned += 1
                return

            for next_city in range(n):
                if visited[next_city]:
                    continue
                visited[next_city] = True
                path.append(next_city)
                dfs(cost_so_far + dist[current][next_city])
                path.pop()
                visited[next_city] = False

        dfs(0.0)

        logger.debug("branch_and_bound n=%d explored=%d pruned=%d", n, nodes_explored, pruned)
        return AlgorithmResult(
            name=self.name,
            path=best_path,
            cost=best_cost,
            metadata={"nodes_explored": nodes_explored, "pruned": pruned},
        )


__all__ = ["BranchAndBoundSolver"]
