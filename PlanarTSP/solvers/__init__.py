from __future__ import annotations

from PlanarTSP.solvers.approx import ChristofidesSolver
from PlanarTSP.solvers.base import AlgorithmResult, BaseSolver, SolverSpec, compute_cycle_cost
from PlanarTSP.solvers.exact import BranchAndBoundSolver, HeldKarpSolver
from PlanarTSP.solvers.heuristics import (
    ConvexHullInsertionSolver,
    HullOrOptSolver,
    NearestNeighborSolver,
    TwoOptSolver,
)
from PlanarTSP.utils.taxonomy import AlgorithmFamily

SOLVER_SPECS: dict[str, SolverSpec] = {
    BranchAndBoundSolver.name: SolverSpec(
        name=BranchAndBoundSolver.name,
        cls=BranchAndBoundSolver,
        family=BranchAndBoundSolver.family,
    ),
    # The original system called its branch-and-bound search "brute force".
    "brute_force": SolverSpec(
        name="brute_force",
        cls=BranchAndBoundSolver,
        family=BranchAndBoundSolver.family,
    ),
    HeldKarpSolver.name: SolverSpec(
        name=HeldKarpSolver.name,
        cls=HeldKarpSolver,
        family=HeldKarpSolver.family,
    ),
    ChristofidesSolver.name: SolverSpec(
        name=ChristofidesSolver.name,
        cls=ChristofidesSolver,
        family=ChristofidesSolver.family,
    ),
    "christofides_exact_matching": SolverSpec(
        name="christofides_exact_matching",
        cls=ChristofidesSolver,
        family=ChristofidesSolver.family,
        options={"matching": "exact"},
    ),
    NearestNeighborSolver.name: SolverSpec(
        name=NearestNeighborSolver.name,
        cls=NearestNeighborSolver,
        family=NearestNeighborSolver.family,
    ),
    ConvexHullInsertionSolver.name: SolverSpec(
        name=ConvexHullInsertionSolver.name,
        cls=ConvexHullInsertionSolver,
        family=ConvexHullInsertionSolver.family,
    ),
    TwoOptSolver.name: SolverSpec(
        name=TwoOptSolver.name,
        cls=TwoOptSolver,
        family=TwoOptSolver.family,
    ),
    HullOrOptSolver.name: SolverSpec(
        name=HullOrOptSolver.name,
        cls=HullOrOptSolver,
        family=HullOrOptSolver.family,
    ),
}

SOLVER_REGISTRY: dict[str, type[BaseSolver]] = {name: spec.cls for name, spec in SOLVER_SPECS.items()}
SOLVER_FAMILIES: dict[str, AlgorithmFamily] = {name: spec.family for name, spec in SOLVER_SPECS.items()}


def get_solver(name: str) -> BaseSolver:
    spec = SOLVER_SPECS.get(name)
    if spec is None:
        raise KeyError(f"Unknown solver: {name}")
    return spec.cls(**spec.options)


__all__ = [
    "AlgorithmResult",
    "BaseSolver",
    "SOLVER_FAMILIES",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "AlgorithmFamily",
    "SolverSpec",
    "compute_cycle_cost",
    "get_solver",
    "BranchAndBoundSolver",
    "HeldKarpSolver",
    "ChristofidesSolver",
    "NearestNeighborSolver",
    "ConvexHullInsertionSolver",
    "TwoOptSolver",
    "HullOrOptSolver",
]
