from __future__ import annotations

from typing import Iterable, List

import networkx as nx

from PlanarTSP.geometry import Edge


def build_multigraph(n: int, *edge_sets: Iterable[Edge]) -> nx.MultiGraph:
    """Union of edge sets over vertices ``0..n-1``; parallel edges are kept."""
    multigraph = nx.MultiGraph()
    multigraph.add_nodes_from(range(n))
    for edges in edge_sets:
        for edge in edges:
            multigraph.add_edge(edge.u, edge.v, weight=edge.weight)
    return multigraph


def eulerian_circuit(graph: nx.MultiGraph, source: int = 0) -> List[int]:
    """Hierholzer's algorithm with an explicit stack.

    Returns the vertex sequence of a closed walk using every edge once; the
    first and last entries are both ``source``. ``graph`` is left untouched.
    """
    if graph.number_of_nodes() == 0:
        return []

    odd = [node for node, degree in graph.degree() if degree % 2 == 1]
    if odd:
        raise ValueError(f"Graph has {len(odd)} odd-degree vertices; no Eulerian circuit exists")

    remaining = graph.copy()
    stack = [source]
    circuit: List[int] = []
    while stack:
        vertex = stack[-1]
        if remaining.degree(vertex) > 0:
            _, neighbor, key = next(iter(remaining.edges(vertex, keys=True)))
            remaining.remove_edge(vertex, neighbor, key)
            stack.append(neighbor)
        else:
            circuit.append(stack.pop())

    if remaining.number_of_edges():
        raise ValueError("Graph is not connected; edges unreachable from the source remain")

    circuit.reverse()
    return circuit


def shortcut_circuit(circuit: Iterable[int]) -> List[int]:
    """Keep each vertex at its first visit, turning an Eulerian walk into a tour."""
    seen = set()
    path = []
    for vertex in circuit:
        if vertex not in seen:
            path.append(vertex)
            seen.add(vertex)
    return path


__all__ = ["build_multigraph", "eulerian_circuit", "shortcut_circuit"]
