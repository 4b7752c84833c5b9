from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Iterable, List, NamedTuple, Sequence

import numpy as np

from PlanarTSP.errors import InvalidInputError


class Point(NamedTuple):
    x: float
    y: float


class Edge(NamedTuple):
    """Unordered pair of point indices with its Euclidean weight."""

    u: int
    v: int
    weight: float


def as_points(raw: Iterable[Any]) -> List[Point]:
    """Validate caller input into a list of finite points.

    Items may be ``(x, y)`` pairs, numpy rows or mappings with ``x``/``y`` keys.
    """
    points: List[Point] = []
    for index, item in enumerate(raw):
        try:
            if isinstance(item, (str, bytes)):
                raise TypeError("text is not a coordinate pair")
            if isinstance(item, Mapping):
                x, y = item["x"], item["y"]
            else:
                x, y = item
            point = Point(float(x), float(y))
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidInputError(index, f"expected an (x, y) pair, got {item!r}") from exc
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            raise InvalidInputError(index, f"coordinates must be finite, got ({point.x}, {point.y})")
        points.append(point)
    return points


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def tour_length(points: Sequence[Sequence[float]]) -> float:
    """Length of the closed loop through ``points`` in order."""
    n = len(points)
    if n <= 1:
        return 0.0
    total = 0.0
    for i in range(n):
        total += distance(points[i], points[(i + 1) % n])
    return total


def distance_matrix(points: Sequence[Sequence[float]]) -> np.ndarray:
    coords = np.asarray(points, dtype=float).reshape(-1, 2)
    diff = coords[:, None, :] - coords[None, :, :]
    return np.linalg.norm(diff, axis=-1)


__all__ = ["Edge", "Point", "as_points", "distance", "distance_matrix", "tour_length"]
