"""Jacobi relaxation for the 2-D Laplace equation."""

from __future__ import annotations

import argparse
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

EXPECTED_ERROR = 2.421354960840227e-03


@dataclass
class JacobiResult:
    """Final grid, iteration count, last error and elapsed time."""

    grid: np.ndarray
    iterations: int
    error: float
    elapsed_ms: float


def initial_grid(imax: int, jmax: int) -> np.ndarray:
    """Grid of shape (jmax+2, imax+2) with sine boundary values on the sides."""
    if imax < 1 or jmax < 1:
        raise ValueError("grid must have at least one interior cell")
    a = np.zeros((jmax + 2, imax + 2))
    profile = np.sin(math.pi * np.arange(jmax + 2) / (jmax + 1))
    a[:, 0] = profile
    a[:, imax + 1] = profile * math.exp(-math.pi)
    return a


def jacobi(
    imax: int = 4096,
    jmax: int = 4096,
    iter_max: int = 100,
    tol: float = 1.0e-6,
    report: Optional[Callable[[int, float], None]] = None,
) -> JacobiResult:
    """Relax until the largest change is at most ``tol`` or ``iter_max`` is hit."""
    a = initial_grid(imax, jmax)
    error = 1.0
    iteration = 0
    start = time.perf_counter()
    while error > tol and iteration < iter_max:
        new = 0.25 * (a[1:-1, 2:] + a[1:-1, :-2] + a[:-2, 1:-1] + a[2:, 1:-1])
        error = float(np.max(np.abs(new - a[1:-1, 1:-1])))
        a[1:-1, 1:-1] = new
        if iteration % 10 == 0 and report:
            report(iteration, error)
        iteration += 1
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return JacobiResult(a, iteration, error, elapsed_ms)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Jacobi relaxation on a square mesh.")
    parser.add_argument("--imax", type=int, default=4096)
    parser.add_argument("--jmax", type=int, default=4096)
    parser.add_argument("--iter-max", type=int, default=100)
    parser.add_argument("--tol", type=float, default=1.0e-6)
    args = parser.parse_args(argv)

    print(f"Jacobi relaxation Calculation: {args.imax + 2} x {args.jmax + 2} mesh")

    def show(iteration: int, error: float) -> None:
        print(f"{iteration:5d}, {error:0.6f}")

    result = jacobi(args.imax, args.jmax, args.iter_max, args.tol, show)
    show(result.iterations, result.error)

    err_diff = abs(100.0 * (result.error / EXPECTED_ERROR) - 100.0)
    print(f"Total error is within {err_diff:3.15E} % of the expected error")
    if err_diff < 0.001:
        print("This run is considered PASSED")
    else:
        print("This test is considered FAILED")
    print(f"{result.elapsed_ms:g}ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())