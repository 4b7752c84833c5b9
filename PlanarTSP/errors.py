from __future__ import annotations


class PlanarTSPError(Exception):
    """Base class for errors raised by PlanarTSP."""


class InvalidInputError(PlanarTSPError, ValueError):
    """Raised when a point cannot be read as a finite (x, y) pair."""

    def __init__(self, index: int, reason: str):
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid point at index {index}: {reason}")


class ResourceExceededError(PlanarTSPError):
    """Raised when a solve would exceed a caller-imposed ceiling.

    ``resource`` is ``"points"`` for point-count ceilings and ``"time"`` for
    wall clock budgets enforced outside the solver.
    """

    def __init__(self, solver: str, resource: str, limit: float, actual: float | None = None):
        self.solver = solver
        self.resource = resource
        self.limit = limit
        self.actual = actual
        detail = f" (got {actual})" if actual is not None else ""
        super().__init__(f"{solver}: {resource} limit of {limit} exceeded{detail}")


__all__ = ["InvalidInputError", "PlanarTSPError", "ResourceExceededError"]
