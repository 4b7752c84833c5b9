from PlanarTSP.solvers.heuristics.convex_hull_insertion import ConvexHullInsertionSolver
from PlanarTSP.solvers.heuristics.local_search import HullOrOptSolver, TwoOptSolver
from PlanarTSP.solvers.heuristics.nearest_neighbor import NearestNeighborSolver

__all__ = [
    "ConvexHullInsertionSolver",
    "HullOrOptSolver",
    "NearestNeighborSolver",
    "TwoOptSolver",
]
