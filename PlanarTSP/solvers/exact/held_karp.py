from __future__ import annotations

import logging

import numpy as np

from PlanarTSP.solvers.base import AlgorithmResult, BaseSolver
from PlanarTSP.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


class HeldKarpSolver(BaseSolver):
    """Bitmask dynamic program over subsets that contain city 0.

    ``dp[mask, last]`` is the cheapest path from city 0 through exactly the
    cities in ``mask`` ending at ``last``; ``parent`` holds the predecessor
    for reconstruction. Time ``O(n^2 2^n)``, memory ``O(n 2^n)``.
    """

    name = "held_karp"
    family = AlgorithmFamily.EXACT

    def solve_matrix(self, dist_matrix: np.ndarray) -> AlgorithmResult:
        dist_matrix = np.asarray(dist_matrix, dtype=float)
        n = dist_matrix.shape[0]
        if n <= 2:
            return self._result(dist_matrix, list(range(n)), states=0)

        size = 1 << n
        dp = np.full((size, n), np.inf)
        parent = np.full((size, n), -1, dtype=np.int64)
        dp[1, 0] = 0.0
        bits = 1 << np.arange(n)

        # Masks only grow, so every predecessor mask is already final.
        for mask in range(3, size, 2):
            members = np.nonzero(mask & bits)[0]
            nexts = members[members != 0]
            prev_masks = mask ^ bits[nexts]
            # candidates[k, last] = dp[prev_mask_k, last] + dist[last, next_k]
            candidates = dp[prev_masks] + dist_matrix[:, nexts].T
            best_last = np.argmin(candidates, axis=1)
            dp[mask, nexts] = candidates[np.arange(len(nexts)), best_last]
            parent[mask, nexts] = best_last

        full_mask = size - 1
        closing = dp[full_mask, 1:] + dist_matrix[1:, 0]
        last = int(np.argmin(closing)) + 1
        best_cost = float(closing[last - 1])

        path = []
        mask = full_mask
        while last != 0:
            path.append(last)
            prev = int(parent[mask, last])
            mask &= ~(1 << last)
            last = prev
        path.append(0)
        path.reverse()

        logger.debug("held_karp n=%d cost=%.6f", n, best_cost)
        return AlgorithmResult(
            name=self.name,
            path=path,
            cost=best_cost,
            metadata={"states": int(np.isfinite(dp).sum())},
        )


__all__ = ["HeldKarpSolver"]
