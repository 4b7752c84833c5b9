from __future__ import annotations

from typing import Iterable, List, Sequence

import numpy as np

from PlanarTSP.geometry import Edge, as_points, distance_matrix


def prim_mst(dist_matrix: np.ndarray) -> List[Edge]:
    """Prim's algorithm over the complete graph rooted at index 0.

    The unvisited vertex with the smallest key is taken each round; ties go to
    the lowest index, so the tree is deterministic for a fixed input order.
    Edges are returned as ``(parent[v], v)`` ordered by ``v``.
    """
    dist = np.asarray(dist_matrix, dtype=float)
    n = dist.shape[0]
    if n <= 1:
        return []

    visited = np.zeros(n, dtype=bool)
    key = np.full(n, np.inf)
    parent = np.full(n, -1, dtype=int)
    key[0] = 0.0

    for _ in range(n):
        u = int(np.argmin(np.where(visited, np.inf, key)))
        visited[u] = True
        closer = ~visited & (dist[u] < key)
        key[closer] = dist[u][closer]
        parent[closer] = u

    return [Edge(int(parent[v]), v, float(dist[parent[v], v])) for v in range(1, n)]


def minimum_spanning_tree(points: Sequence) -> List[Edge]:
    return prim_mst(distance_matrix(as_points(points)))


def mst_weight(edges: Iterable[Edge]) -> float:
    return float(sum(edge.weight for edge in edges))


__all__ = ["minimum_spanning_tree", "mst_weight", "prim_mst"]
