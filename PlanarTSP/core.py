from __future__ import annotations

import logging
import time
from typing import List, Sequence

from PlanarTSP.config import DEFAULT_LIMITS, SolverLimits
from PlanarTSP.errors import ResourceExceededError
from PlanarTSP.geometry import Point, as_points
from PlanarTSP.selector import BaseSelector, RuleBasedSelector
from PlanarTSP.solvers import AlgorithmResult, get_solver

logger = logging.getLogger(__name__)


class PlanarTSP:
    """Caller-side pipeline: validate -> select -> enforce limits -> solve -> time.

    Solvers themselves carry no ceilings or timers; this facade applies the
    point-count policy from :class:`SolverLimits` and measures wall clock time.
    """

    def __init__(self, limits: SolverLimits = DEFAULT_LIMITS, selector: BaseSelector | None = None):
        self.limits = limits
        self.selector = selector if selector is not None else RuleBasedSelector(limits)

    def solve(self, points: Sequence, method: str = "auto") -> AlgorithmResult:
        pts = as_points(points)
        solver_name = self.selector.predict(len(pts)) if method == "auto" else method
        self.check_limits(solver_name, len(pts))
        solver = get_solver(solver_name)

        start_time = time.perf_counter()
        result = solver.solve_points(pts)
        result.elapsed = time.perf_counter() - start_time

        result.metadata["selected_solver"] = solver_name
        result.metadata["num_points"] = len(pts)
        logger.info(
            "Solved %d points with %s: cost=%.6f elapsed=%.4fs",
            len(pts),
            solver_name,
            result.cost,
            result.elapsed,
        )
        return result

    def tour(self, points: Sequence, method: str = "auto") -> List[Point]:
        pts = as_points(points)
        return self.solve(pts, method=method).tour(pts)

    def check_limits(self, solver_name: str, num_points: int) -> None:
        limit = self.limits.limit_for(solver_name)
        if limit is not None and num_points > limit:
            logger.warning("Refusing %s on %d points (limit %d)", solver_name, num_points, limit)
            raise ResourceExceededError(solver_name, "points", limit, num_points)


__all__ = ["PlanarTSP"]
