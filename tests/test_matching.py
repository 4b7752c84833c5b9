from __future__ import annotations

import pytest

from PlanarTSP.api import odd_degree_matching
from PlanarTSP.geometry import Edge, distance_matrix
from PlanarTSP.graph.matching import (
    exact_odd_matching,
    greedy_odd_matching,
    odd_degree_vertices,
    vertex_degrees,
)
from PlanarTSP.graph.mst import prim_mst

from helpers import random_points


def test_vertex_degrees_counts_endpoints() -> None:
    edges = [Edge(0, 1, 1.0), Edge(1, 2, 1.0), Edge(1, 3, 1.0)]
    assert vertex_degrees(4, edges) == [1, 3, 1, 1]
    assert odd_degree_vertices(4, edges) == [0, 1, 2, 3]


@pytest.mark.parametrize("n", [2, 3, 4, 7, 12, 31, 64])
def test_odd_vertex_count_is_even_and_greedy_covers_them(n: int) -> None:
    points = random_points(n, seed=100 + n)
    dist = distance_matrix(points)
    mst = prim_mst(dist)
    odd = odd_degree_vertices(n, mst)
    assert len(odd) % 2 == 0

    matching = greedy_odd_matching(dist, mst)
    matched = [v for e in matching for v in (e.u, e.v)]
    assert sorted(matched) == odd
    assert len(matching) == len(odd) // 2

    degrees = vertex_degrees(n, list(mst) + matching)
    assert all(d % 2 == 0 for d in degrees)


def test_greedy_pairs_last_odd_vertex_with_its_nearest() -> None:
    # A star centred at 0 has leaves 1..3 plus the centre as odd vertices.
    dist = distance_matrix([(0, 0), (1, 0), (10, 0), (11, 0)])
    star = [Edge(0, 1, 1.0), Edge(0, 2, 10.0), Edge(0, 3, 11.0)]
    matching = greedy_odd_matching(dist, star)
    assert matching == [Edge(3, 2, 1.0), Edge(1, 0, 1.0)]


def test_greedy_matching_on_even_degrees_is_empty() -> None:
    dist = distance_matrix([(0, 0), (1, 0), (0, 1)])
    triangle = [Edge(0, 1, 1.0), Edge(1, 2, 1.0), Edge(2, 0, 1.0)]
    assert greedy_odd_matching(dist, triangle) == []
    assert exact_odd_matching(dist, triangle) == []


@pytest.mark.parametrize("n", [6, 15, 40])
def test_exact_matching_is_never_heavier_than_greedy(n: int) -> None:
    points = random_points(n, seed=7 * n)
    dist = distance_matrix(points)
    mst = prim_mst(dist)
    greedy = greedy_odd_matching(dist, mst)
    exact = exact_odd_matching(dist, mst)
    assert len(exact) == len(greedy)
    assert sum(e.weight for e in exact) <= sum(e.weight for e in greedy) + 1e-9


def test_odd_degree_matching_defaults_to_mst(rectangle) -> None:
    # MST of the rectangle is the path 0-1-2-3 (weights 3, 4, 3): leaves 0 and 3.
    matching = odd_degree_matching(rectangle)
    assert matching == [Edge(3, 0, 4.0)]


def test_odd_degree_matching_rejects_unknown_policy(rectangle) -> None:
    with pytest.raises(ValueError):
        odd_degree_matching(rectangle, policy="optimal")
