from __future__ import annotations

from PlanarTSP.config import DEFAULT_LIMITS, SolverLimits


class BaseSelector:
    """Interface for picking a solver name from an instance size."""

    def predict(self, num_points: int) -> str:
        raise NotImplementedError


class RuleBasedSelector(BaseSelector):
    """Hard-coded solver selection by point count."""

    def __init__(self, limits: SolverLimits = DEFAULT_LIMITS):
        self.limits = limits

    def predict(self, num_points: int) -> str:
        # Small instances: exact answer is cheap enough.
        if num_points <= min(self.limits.auto_exact_max_points, self.limits.held_karp_max_points):
            return "held_karp"
        if num_points <= self.limits.auto_local_search_max_points:
            return "hull_or_opt"
        return "christofides"


__all__ = ["BaseSelector", "RuleBasedSelector"]
