"""Odd-degree vertex matching for the Christofides construction.

The default policy pairs odd vertices greedily by nearest available partner.
It runs in quadratic time but is not a minimum-weight perfect matching, so the
textbook 3/2 approximation bound does not hold for tours built from it.
``exact_odd_matching`` computes the true minimum-weight matching and is only
used when a caller asks for it explicitly.
"""
from __future__ import annotations

import logging
from typing import Iterable, List

import networkx as nx
import numpy as np

from PlanarTSP.geometry import Edge

logger = logging.getLogger(__name__)


def vertex_degrees(n: int, edges: Iterable[Edge]) -> List[int]:
    degree = [0] * n
    for edge in edges:
        degree[edge.u] += 1
        degree[edge.v] += 1
    return degree


def odd_degree_vertices(n: int, edges: Iterable[Edge]) -> List[int]:
    return [vertex for vertex, degree in enumerate(vertex_degrees(n, edges)) if degree % 2 == 1]


def greedy_odd_matching(dist_matrix: np.ndarray, edges: Iterable[Edge]) -> List[Edge]:
    dist = np.asarray(dist_matrix, dtype=float)
    unmatched = odd_degree_vertices(dist.shape[0], edges)
    matching: List[Edge] = []

    while unmatched:
        u = unmatched.pop()
        if not unmatched:
            # Unreachable for a real edge list: the odd-degree count is always even.
            logger.warning("Odd vertex %d left without a partner", u)
            break
        best_pos = min(range(len(unmatched)), key=lambda pos: dist[u, unmatched[pos]])
        v = unmatched.pop(best_pos)
        matching.append(Edge(u, v, float(dist[u, v])))

    logger.debug("Greedy matching paired %d odd vertices", 2 * len(matching))
    return matching


def exact_odd_matching(dist_matrix: np.ndarray, edges: Iterable[Edge]) -> List[Edge]:
    dist = np.asarray(dist_matrix, dtype=float)
    odd_vertices = odd_degree_vertices(dist.shape[0], edges)
    if not odd_vertices:
        return []

    graph_nx = nx.Graph()
    for i, u in enumerate(odd_vertices):
        for v in odd_vertices[i + 1 :]:
            graph_nx.add_edge(u, v, weight=float(dist[u, v]))

    pairs = nx.algorithms.matching.min_weight_matching(graph_nx, weight="weight")
    matching = [Edge(min(u, v), max(u, v), float(dist[u, v])) for u, v in pairs]
    matching.sort()
    return matching


MATCHING_POLICIES = {
    "greedy": greedy_odd_matching,
    "exact": exact_odd_matching,
}


__all__ = [
    "MATCHING_POLICIES",
    "exact_odd_matching",
    "greedy_odd_matching",
    "odd_degree_vertices",
    "vertex_degrees",
]
