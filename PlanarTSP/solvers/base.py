from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Type

import numpy as np

from PlanarTSP.geometry import Point, as_points, distance_matrix
from PlanarTSP.utils.taxonomy import AlgorithmFamily


@dataclass
class AlgorithmResult:
    """Container capturing the outcome of running a TSP solver.

    ``path`` is an open tour of point indices; the closing edge back to
    ``path[0]`` is implied. ``elapsed`` is filled in by whoever timed the call.
    """

    name: str
    path: List[int]
    cost: float
    elapsed: float | None = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def tour(self, points: Sequence[Point]) -> List[Point]:
        return [points[i] for i in self.path]


def compute_cycle_cost(dist_matrix: np.ndarray, cycle: Sequence[int]) -> float:
    """Compute tour cost (including return leg)."""
    if len(cycle) <= 1:
        return 0.0
    cost = 0.0
    for i in range(len(cycle)):
        a = cycle[i]
        b = cycle[(i + 1) % len(cycle)]
        cost += float(dist_matrix[a, b])
    return cost


@dataclass(frozen=True)
class SolverSpec:
    """Metadata describing a solver implementation."""

    name: str
    cls: Type["BaseSolver"]
    family: AlgorithmFamily
    options: Dict[str, Any] = field(default_factory=dict)


class BaseSolver:
    """Common interface for PlanarTSP solvers.

    :meth:`solve` validates raw points and hands them to :meth:`solve_points`,
    which by default builds the distance matrix once and calls
    :meth:`solve_matrix`. Solvers that need coordinates override
    :meth:`solve_points` instead.
    """

    name: str
    family: AlgorithmFamily

    def solve(self, points: Sequence) -> AlgorithmResult:
        return self.solve_points(as_points(points))

    def solve_points(self, points: List[Point]) -> AlgorithmResult:
        return self.solve_matrix(distance_matrix(points))

    def solve_matrix(self, dist_matrix: np.ndarray) -> AlgorithmResult:  # noqa: D401
        """Solve a TSP instance represented as a distance matrix."""
        raise NotImplementedError

    def _result(self, dist_matrix: np.ndarray, path: List[int], **metadata: Any) -> AlgorithmResult:
        return AlgorithmResult(
            name=self.name,
            path=path,
            cost=compute_cycle_cost(dist_matrix, path),
            metadata=metadata,
        )

    def __call__(self, points: Sequence) -> AlgorithmResult:
        return self.solve(points)


__all__ = [
    "AlgorithmResult",
    "AlgorithmFamily",
    "BaseSolver",
    "SolverSpec",
    "compute_cycle_cost",
]
