from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverLimits:
    # Exact solvers: refuse to run above these point counts.
    branch_and_bound_max_points: int = 12
    held_karp_max_points: int = 18

    # Rule-based selection thresholds.
    auto_exact_max_points: int = 10
    auto_local_search_max_points: int = 200

    def limit_for(self, solver_name: str) -> int | None:
        if solver_name in {"branch_and_bound", "brute_force"}:
            return self.branch_and_bound_max_points
        if solver_name == "held_karp":
            return self.held_karp_max_points
        return None


DEFAULT_LIMITS = SolverLimits()


__all__ = ["DEFAULT_LIMITS", "SolverLimits"]
