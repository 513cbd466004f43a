import math

import numpy as np
import pytest

from gridsolvers.laplace import initial_grid, jacobi, main


def test_initial_grid_shape_and_boundaries():
    a = initial_grid(4, 6)
    assert a.shape == (8, 6)
    assert np.allclose(a[:, 0], np.sin(math.pi * np.arange(8) / 7))
    assert np.allclose(a[:, 5], a[:, 0] * math.exp(-math.pi))
    assert np.all(a[1:-1, 1:-1] == 0.0)
    assert np.allclose(a[0, :], 0.0)
    assert np.allclose(a[-1, :], 0.0)


def test_initial_grid_rejects_empty():
    with pytest.raises(ValueError):
        initial_grid(0, 4)


def test_zero_iterations_keeps_start_error():
    result = jacobi(4, 4, 0)
    assert result.iterations == 0
    assert result.error == 1.0


def test_boundaries_unchanged_after_relaxation():
    result = jacobi(8, 8, 20)
    start = initial_grid(8, 8)
    assert np.array_equal(result.grid[:, 0], start[:, 0])
    assert np.array_equal(result.grid[:, -1], start[:, -1])
    assert np.array_equal(result.grid[0, :], start[0, :])


def test_iteration_limit_respected():
    result = jacobi(16, 16, 7, 1e-12)
    assert result.iterations == 7
    assert result.error > 1e-12


def test_converges_below_tolerance():
    result = jacobi(6, 6, 10000, 1e-8)
    assert result.error <= 1e-8
    assert result.iterations < 10000
    interior = result.grid[1:-1, 1:-1]
    assert np.all(interior >= 0.0)
    assert np.all(interior <= 1.0)


def test_report_every_ten_iterations():
    seen = []
    jacobi(8, 8, 25, 1e-12, lambda i, e: seen.append(i))
    assert seen == [0, 10, 20]


def test_main_prints_mesh_size(capsys):
    assert main(["--imax", "8", "--jmax", "8", "--iter-max", "5"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Jacobi relaxation Calculation: 10 x 10 mesh")
    assert "of the expected error" in out
    assert "    5, " in out