from PlanarTSP.graph.eulerian import build_multigraph, eulerian_circuit, shortcut_circuit
from PlanarTSP.graph.matching import (
    MATCHING_POLICIES,
    exact_odd_matching,
    greedy_odd_matching,
    odd_degree_vertices,
    vertex_degrees,
)
from PlanarTSP.graph.mst import minimum_spanning_tree, mst_weight, prim_mst

__all__ = [
    "MATCHING_POLICIES",
    "build_multigraph",
    "eulerian_circuit",
    "exact_odd_matching",
    "greedy_odd_matching",
    "minimum_spanning_tree",
    "mst_weight",
    "odd_degree_vertices",
    "prim_mst",
    "shortcut_circuit",
    "vertex_degrees",
]
