from __future__ import annotations

import logging

import numpy as np

from PlanarTSP.graph.eulerian import build_multigraph, eulerian_circuit, shortcut_circuit
from PlanarTSP.graph.matching import MATCHING_POLICIES
from PlanarTSP.graph.mst import mst_weight, prim_mst
from PlanarTSP.solvers.base import AlgorithmResult, BaseSolver
from PlanarTSP.utils.taxonomy import AlgorithmFamily

logger = logging.getLogger(__name__)


class ChristofidesSolver(BaseSolver):
    """MST + odd-vertex matching + Eulerian shortcutting.

    ``matching="greedy"`` (the default) pairs odd vertices by nearest available
    partner; ``matching="exact"`` uses a minimum-weight perfect matching.
    """

    name = "christofides"
    family = AlgorithmFamily.APPROXIMATION

    def __init__(self, matching: str = "greedy"):
        if matching not in MATCHING_POLICIES:
            raise ValueError(f"Unknown matching policy: {matching}")
        self.matching = matching

    def solve_matrix(self, dist_matrix: np.ndarray) -> AlgorithmResult:
        dist_matrix = np.asarray(dist_matrix, dtype=float)
        n = dist_matrix.shape[0]
        mst = prim_mst(dist_matrix)
        if n <= 2:
            return self._result(
                dist_matrix,
                list(range(n)),
                mst_weight=mst_weight(mst),
                odd_vertices=0,
                matching_size=0,
                circuit_length=n,
            )

        matching = MATCHING_POLICIES[self.matching](dist_matrix, mst)
        multigraph = build_multigraph(n, mst, matching)
        circuit = eulerian_circuit(multigraph, source=0)
        path = shortcut_circuit(circuit)

        logger.debug(
            "christofides n=%d matching=%s pairs=%d circuit=%d",
            n,
            self.matching,
            len(matching),
            len(circuit),
        )
        return self._result(
            dist_matrix,
            path,
            mst_weight=mst_weight(mst),
            odd_vertices=2 * len(matching),
            matching_size=len(matching),
            circuit_length=len(circuit),
        )


__all__ = ["ChristofidesSolver"]
