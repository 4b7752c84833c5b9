from PlanarTSP.solvers.approx.christofides import ChristofidesSolver

__all__ = ["ChristofidesSolver"]
