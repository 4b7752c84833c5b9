from __future__ import annotations

from enum import Enum


class AlgorithmFamily(str, Enum):
    EXACT = "exact"
    APPROXIMATION = "approximation"
    HEURISTIC = "heuristic"
    LOCAL_SEARCH = "local_search"


__all__ = ["AlgorithmFamily"]
