from PlanarTSP.api import (
    branch_and_bound,
    brute_force,
    christofides,
    convex_hull_insertion,
    held_karp,
    hull_or_opt,
    nearest_neighbor,
    odd_degree_matching,
    two_opt,
)
from PlanarTSP.config import DEFAULT_LIMITS, SolverLimits
from PlanarTSP.core import PlanarTSP
from PlanarTSP.errors import InvalidInputError, PlanarTSPError, ResourceExceededError
from PlanarTSP.geometry import Edge, Point, as_points, distance, distance_matrix, tour_length
from PlanarTSP.graph import minimum_spanning_tree, mst_weight
from PlanarTSP.selector import BaseSelector, RuleBasedSelector
from PlanarTSP.solvers import (
    AlgorithmResult,
    BaseSolver,
    SOLVER_FAMILIES,
    SOLVER_REGISTRY,
    SOLVER_SPECS,
    get_solver,
)
from PlanarTSP.utils.taxonomy import AlgorithmFamily

__all__ = [
    "PlanarTSP",
    "AlgorithmResult",
    "AlgorithmFamily",
    "BaseSelector",
    "BaseSolver",
    "DEFAULT_LIMITS",
    "Edge",
    "InvalidInputError",
    "PlanarTSPError",
    "Point",
    "ResourceExceededError",
    "RuleBasedSelector",
    "SOLVER_FAMILIES",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "SolverLimits",
    "as_points",
    "branch_and_bound",
    "brute_force",
    "christofides",
    "convex_hull_insertion",
    "distance",
    "distance_matrix",
    "get_solver",
    "held_karp",
    "hull_or_opt",
    "minimum_spanning_tree",
    "mst_weight",
    "nearest_neighbor",
    "odd_degree_matching",
    "tour_length",
    "two_opt",
]
