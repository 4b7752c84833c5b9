from PlanarTSP.solvers.exact.branch_and_bound import BranchAndBoundSolver
from PlanarTSP.solvers.exact.held_karp import HeldKarpSolver

__all__ = [
    "BranchAndBoundSolver",
    "HeldKarpSolver",
]
