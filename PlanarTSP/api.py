"""Functional entry points: each takes a point sequence and returns points or edges.

These run the solver directly with no point-count ceiling; use
:class:`PlanarTSP.core.PlanarTSP` when the caller needs limits enforced.
"""
from __future__ import annotations

from typing import List, Sequence

from PlanarTSP.geometry import Edge, Point, as_points, distance_matrix
from PlanarTSP.graph.matching import MATCHING_POLICIES
from PlanarTSP.graph.mst import prim_mst
from PlanarTSP.solvers import (
    BaseSolver,
    BranchAndBoundSolver,
    ChristofidesSolver,
    ConvexHullInsertionSolver,
    HeldKarpSolver,
    HullOrOptSolver,
    NearestNeighborSolver,
    TwoOptSolver,
)


def _run(solver: BaseSolver, points: Sequence) -> List[Point]:
    pts = as_points(points)
    return solver.solve_points(pts).tour(pts)


def nearest_neighbor(points: Sequence) -> List[Point]:
    return _run(NearestNeighborSolver(), points)


def christofides(points: Sequence, matching: str = "greedy") -> List[Point]:
    return _run(ChristofidesSolver(matching=matching), points)


def branch_and_bound(points: Sequence) -> List[Point]:
    return _run(BranchAndBoundSolver(), points)


brute_force = branch_and_bound


def held_karp(points: Sequence) -> List[Point]:
    return _run(HeldKarpSolver(), points)


def convex_hull_insertion(points: Sequence) -> List[Point]:
    return _run(ConvexHullInsertionSolver(), points)


def two_opt(points: Sequence) -> List[Point]:
    return _run(TwoOptSolver(), points)


def hull_or_opt(points: Sequence) -> List[Point]:
    return _run(HullOrOptSolver(), points)


def odd_degree_matching(points: Sequence, edges: Sequence[Edge] | None = None, policy: str = "greedy") -> List[Edge]:
    """Matching over the odd-degree vertices of ``edges`` (the MST when omitted)."""
    dist = distance_matrix(as_points(points))
    if edges is None:
        edges = prim_mst(dist)
    if policy not in MATCHING_POLICIES:
        raise ValueError(f"Unknown matching policy: {policy}")
    return MATCHING_POLICIES[policy](dist, edges)


__all__ = [
    "branch_and_bound",
    "brute_force",
    "christofides",
    "convex_hull_insertion",
    "held_karp",
    "hull_or_opt",
    "nearest_neighbor",
    "odd_degree_matching",
    "two_opt",
]
