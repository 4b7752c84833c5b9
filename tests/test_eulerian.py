from __future__ import annotations

from collections import Counter

import networkx as nx
import pytest

from PlanarTSP.geometry import Edge, distance_matrix
from PlanarTSP.graph.eulerian import build_multigraph, eulerian_circuit, shortcut_circuit
from PlanarTSP.graph.matching import greedy_odd_matching
from PlanarTSP.graph.mst import prim_mst

from helpers import random_points


def _walk_edges(circuit):
    return Counter(frozenset((a, b)) if a != b else frozenset((a,)) for a, b in zip(circuit, circuit[1:]))


def test_multigraph_keeps_parallel_edges() -> None:
    mst = [Edge(0, 1, 1.0)]
    matching = [Edge(1, 0, 1.0)]
    graph = build_multigraph(2, mst, matching)
    assert graph.number_of_edges() == 2
    assert graph.number_of_edges(0, 1) == 2


def test_circuit_uses_every_edge_once_on_doubled_edge() -> None:
    graph = build_multigraph(2, [Edge(0, 1, 1.0)], [Edge(0, 1, 1.0)])
    assert eulerian_circuit(graph) == [0, 1, 0]


@pytest.mark.parametrize("n", [3, 5, 8, 20, 45])
def test_circuit_over_mst_plus_matching(n: int) -> None:
    dist = distance_matrix(random_points(n, seed=200 + n))
    mst = prim_mst(dist)
    matching = greedy_odd_matching(dist, mst)
    graph = build_multigraph(n, mst, matching)
    assert nx.is_eulerian(graph)

    circuit = eulerian_circuit(graph, source=0)
    assert circuit[0] == circuit[-1] == 0
    assert len(circuit) == graph.number_of_edges() + 1
    expected = Counter(frozenset((e.u, e.v)) for e in list(mst) + matching)
    assert _walk_edges(circuit) == expected
    assert set(circuit) == set(range(n))


def test_circuit_leaves_input_graph_untouched() -> None:
    graph = build_multigraph(3, [Edge(0, 1, 1.0), Edge(1, 2, 1.0), Edge(2, 0, 1.0)])
    eulerian_circuit(graph)
    assert graph.number_of_edges() == 3


def test_single_vertex_circuit() -> None:
    assert eulerian_circuit(build_multigraph(1)) == [0]
    assert eulerian_circuit(build_multigraph(0)) == []


def test_odd_degree_graph_is_rejected() -> None:
    graph = build_multigraph(3, [Edge(0, 1, 1.0), Edge(1, 2, 1.0)])
    with pytest.raises(ValueError, match="odd-degree"):
        eulerian_circuit(graph)


def test_disconnected_graph_is_rejected() -> None:
    triangle = [Edge(0, 1, 1.0), Edge(1, 2, 1.0), Edge(2, 0, 1.0)]
    other = [Edge(3, 4, 1.0), Edge(4, 5, 1.0), Edge(5, 3, 1.0)]
    with pytest.raises(ValueError, match="not connected"):
        eulerian_circuit(build_multigraph(6, triangle, other))


def test_shortcut_keeps_first_visits() -> None:
    assert shortcut_circuit([0, 2, 1, 2, 3, 1, 0]) == [0, 2, 1, 3]
    assert shortcut_circuit([]) == []
