from __future__ import annotations

import networkx as nx
import pytest

from PlanarTSP.geometry import Edge, distance_matrix
from PlanarTSP.graph.mst import minimum_spanning_tree, mst_weight, prim_mst

from helpers import random_points


@pytest.mark.parametrize("points", [[], [(1.0, 1.0)]])
def test_mst_is_empty_for_fewer_than_two_points(points) -> None:
    assert minimum_spanning_tree(points) == []


@pytest.mark.parametrize("n", [2, 3, 5, 10, 25, 60])
def test_mst_is_spanning_tree_of_minimum_weight(n: int) -> None:
    points = random_points(n, seed=n)
    edges = minimum_spanning_tree(points)
    assert len(edges) == n - 1

    tree = nx.Graph()
    tree.add_nodes_from(range(n))
    tree.add_edges_from((e.u, e.v) for e in edges)
    assert nx.is_tree(tree)

    complete = nx.Graph()
    dist = distance_matrix(points)
    for i in range(n):
        for j in range(i + 1, n):
            complete.add_edge(i, j, weight=float(dist[i, j]))
    reference = nx.minimum_spanning_tree(complete, weight="weight").size(weight="weight")
    assert mst_weight(edges) == pytest.approx(reference)


def test_mst_edges_carry_distances_and_are_ordered_by_child() -> None:
    points = [(0, 0), (0, 1), (5, 1), (5, 0)]
    edges = minimum_spanning_tree(points)
    assert edges == [Edge(0, 1, 1.0), Edge(1, 2, 5.0), Edge(2, 3, 1.0)]
    assert mst_weight(edges) == pytest.approx(7.0)


def test_ties_go_to_lowest_index() -> None:
    # Points 1..3 are all at distance 1 from the root.
    points = [(0, 0), (1, 0), (0, 1), (-1, 0)]
    edges = minimum_spanning_tree(points)
    assert [(e.u, e.v) for e in edges] == [(0, 1), (0, 2), (0, 3)]


def test_duplicate_coordinates_are_distinct_vertices() -> None:
    points = [(2, 2), (2, 2), (2, 2)]
    edges = prim_mst(distance_matrix(points))
    assert len(edges) == 2
    assert mst_weight(edges) == 0.0
    assert {e.v for e in edges} == {1, 2}


def test_mst_is_deterministic() -> None:
    points = random_points(30, seed=99)
    assert minimum_spanning_tree(points) == minimum_spanning_tree(points)
