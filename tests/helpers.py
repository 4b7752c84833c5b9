from __future__ import annotations

from typing import List

import numpy as np

RECTANGLE = [(0.0, 0.0), (0.0, 3.0), (4.0, 3.0), (4.0, 0.0)]


def random_points(n: int, seed: int, scale: float = 100.0) -> List[tuple[float, float]]:
    rng = np.random.default_rng(seed)
    return [tuple(row) for row in (rng.random((n, 2)) * scale).tolist()]


def assert_permutation(path, n: int) -> None:
    assert sorted(path) == list(range(n))
