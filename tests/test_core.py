from __future__ import annotations

import logging

import pytest

from PlanarTSP import (
    DEFAULT_LIMITS,
    InvalidInputError,
    PlanarTSP,
    ResourceExceededError,
    RuleBasedSelector,
    SOLVER_FAMILIES,
    SOLVER_SPECS,
    SolverLimits,
    get_solver,
    tour_length,
)
from PlanarTSP.utils.taxonomy import AlgorithmFamily

from helpers import RECTANGLE, assert_permutation, random_points


def test_auto_uses_exact_solver_for_small_inputs() -> None:
    result = PlanarTSP().solve(RECTANGLE)
    assert result.metadata["selected_solver"] == "held_karp"
    assert result.cost == pytest.approx(14.0)
    assert result.elapsed is not None and result.elapsed >= 0.0


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, "held_karp"),
        (DEFAULT_LIMITS.auto_exact_max_points, "held_karp"),
        (DEFAULT_LIMITS.auto_exact_max_points + 1, "hull_or_opt"),
        (DEFAULT_LIMITS.auto_local_search_max_points + 1, "christofides"),
    ],
)
def test_rule_based_selector(n: int, expected: str) -> None:
    assert RuleBasedSelector().predict(n) == expected


def test_tour_returns_points(rectangle) -> None:
    tour = PlanarTSP().tour(rectangle, method="nearest_neighbor")
    assert tour == rectangle
    assert tour_length(tour) == pytest.approx(14.0)


@pytest.mark.parametrize("method", ["branch_and_bound", "brute_force", "held_karp"])
def test_exact_ceiling_raises_resource_exceeded(method: str) -> None:
    limits = SolverLimits(branch_and_bound_max_points=5, held_karp_max_points=5)
    with pytest.raises(ResourceExceededError) as excinfo:
        PlanarTSP(limits=limits).solve(random_points(6, seed=1), method=method)
    assert excinfo.value.resource == "points"
    assert excinfo.value.limit == 5
    assert excinfo.value.actual == 6


def test_ceiling_logs_warning(caplog) -> None:
    limits = SolverLimits(held_karp_max_points=3)
    with caplog.at_level(logging.WARNING, logger="PlanarTSP.core"):
        with pytest.raises(ResourceExceededError):
            PlanarTSP(limits=limits).solve(RECTANGLE, method="held_karp")
    assert "Refusing held_karp" in caplog.text


def test_heuristics_have_no_ceiling() -> None:
    limits = SolverLimits(branch_and_bound_max_points=2, held_karp_max_points=2)
    result = PlanarTSP(limits=limits).solve(random_points(30, seed=2), method="christofides")
    assert_permutation(result.path, 30)


def test_invalid_point_rejected_before_solving() -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        PlanarTSP().solve([(0, 0), (1, float("nan")), (2, 2)])
    assert excinfo.value.index == 1


def test_unknown_method_raises_key_error() -> None:
    with pytest.raises(KeyError):
        PlanarTSP().solve(RECTANGLE, method="simulated_annealing")


def test_registry_families() -> None:
    assert SOLVER_FAMILIES["held_karp"] is AlgorithmFamily.EXACT
    assert SOLVER_FAMILIES["branch_and_bound"] is AlgorithmFamily.EXACT
    assert SOLVER_FAMILIES["christofides"] is AlgorithmFamily.APPROXIMATION
    assert SOLVER_FAMILIES["nearest_neighbor"] is AlgorithmFamily.HEURISTIC
    for name in SOLVER_SPECS:
        assert get_solver(name).family is SOLVER_FAMILIES[name]


def test_exact_matching_variant_is_registered() -> None:
    solver = get_solver("christofides_exact_matching")
    assert solver.matching == "exact"


@pytest.mark.parametrize("name", sorted(SOLVER_SPECS))
def test_every_registered_solver_repeats_its_answer(name: str) -> None:
    points = random_points(9, seed=9)
    first = PlanarTSP().solve(points, method=name)
    second = PlanarTSP().solve(points, method=name)
    assert_permutation(first.path, 9)
    assert first.cost == second.cost
    assert first.metadata["selected_solver"] == name
