"""Structured-grid solvers: Euler flow, conjugate gradient and Jacobi relaxation."""

__version__ = "0.1.0"
__all__ = ["euler", "cg", "laplace"]