"""Conjugate gradient solver on a CSR matrix for a 2-D heat problem."""

from __future__ import annotations

import argparse
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np


@dataclass
class CSRMatrix:
    """Square sparse matrix in compressed sparse row form."""

    values: np.ndarray
    col_indices: np.ndarray
    row_start: np.ndarray

    def __post_init__(self) -> None:
        self.values = np.asarray(self.values, dtype=float)
        self.col_indices = np.asarray(self.col_indices, dtype=np.int64)
        self.row_start = np.asarray(self.row_start, dtype=np.int64)
        if self.row_start.size < 1 or self.values.size != self.col_indices.size:
            raise ValueError("inconsistent CSR arrays")
        if self.row_start[-1] != self.values.size:
            raise ValueError("row_start does not match number of values")

    @property
    def n(self) -> int:
        return self.row_start.size - 1

    def matvec(self, x) -> np.ndarray:
        """Return the product of the matrix with vector ``x``."""
        x = np.asarray(x, dtype=float)
        if x.shape != (self.n,):
            raise ValueError(f"vector must have length {self.n}")
        rows = np.repeat(np.arange(self.n), np.diff(self.row_start))
        products = self.values * x[self.col_indices]
        return np.bincount(rows, weights=products, minlength=self.n)


@dataclass
class CGResult:
    """Outcome of a conjugate gradient solve."""

    x: np.ndarray
    iterations: int
    residual: float
    converged: bool


def build_laplacian(grid_size: int) -> CSRMatrix:
    """Five-point Laplacian (4 on the diagonal, -1 for neighbours) on a square grid."""
    if grid_size < 1:
        raise ValueError("grid_size must be at least 1")
    n = grid_size * grid_size
    i = np.arange(n)
    cols = np.stack([i, i - grid_size, i - 1, i + 1, i + grid_size], axis=1)
    vals = np.tile([4.0, -1.0, -1.0, -1.0, -1.0], (n, 1))
    mask = np.stack(
        [
            np.ones(n, dtype=bool),
            i >= grid_size,
            i % grid_size != 0,
            (i + 1) % grid_size != 0,
            i < n - grid_size,
        ],
        axis=1,
    )
    row_start = np.concatenate([[0], np.cumsum(mask.sum(axis=1))])
    return CSRMatrix(vals[mask], cols[mask], row_start)


def conjugate_gradient(
    matrix: CSRMatrix,
    b,
    x=None,
    max_iterations: int = 1000,
    tolerance: float = 1e-8,
    report: Optional[Callable[[str], None]] = None,
) -> CGResult:
    """Solve ``matrix @ x = b``; progress lines go to ``report`` if given."""
    b = np.asarray(b, dtype=float)
    x = np.zeros(matrix.n) if x is None else np.array(x, dtype=float)
    r = b - matrix.matvec(x)
    p = r.copy()
    rsold = float(r @ r)
    if rsold == 0.0:
        return CGResult(x, 0, 0.0, True)

    residual = math.sqrt(rsold)
    iterations = 0
    converged = False
    for i in range(max_iterations):
        iterations = i + 1
        ap = matrix.matvec(p)
        alpha = rsold / float(p @ ap)
        x += alpha * p
        r -= alpha * ap
        rsnew = float(r @ r)
        residual = math.sqrt(rsnew)
        if residual < tolerance:
            converged = True
            if report:
                report(f"Final residual {residual:g}")
            break
        if i % 100 == 0 and report:
            report(f"{i} residual {residual:g}")
        p = r + (rsnew / rsold) * p
        rsold = rsnew
    return CGResult(x, iterations, residual, converged)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Steady heat distribution by CG.")
    parser.add_argument("--grid-size", type=int, default=2000)
    parser.add_argument("--max-iterations", type=int, default=1000)
    parser.add_argument("--tolerance", type=float, default=1e-8)
    args = parser.parse_args(argv)

    grid = args.grid_size
    matrix = build_laplacian(grid)
    n = matrix.n
    b = np.ones(n)
    start = time.perf_counter()
    result = conjugate_gradient(
        matrix, b, np.zeros(n), args.max_iterations, args.tolerance, print
    )
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    print(f"{elapsed_ms:g}ms")
    print("Temperature distribution:")
    i = n // 2
    print(f"Temperature at ({i // grid}, {i % grid}) = {result.x[i]:g}")
    if (i + 1) % grid == 0:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())