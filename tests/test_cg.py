import numpy as np
import pytest

from gridsolvers.cg import CSRMatrix, build_laplacian, conjugate_gradient, main


def _dense(m: CSRMatrix) -> np.ndarray:
    out = np.zeros((m.n, m.n))
    for row in range(m.n):
        for k in range(m.row_start[row], m.row_start[row + 1]):
            out[row, m.col_indices[k]] += m.values[k]
    return out


def test_single_cell_laplacian():
    m = build_laplacian(1)
    assert list(m.values) == [4.0]
    assert list(m.col_indices) == [0]
    assert list(m.row_start) == [0, 1]


def test_two_by_two_layout():
    m = build_laplacian(2)
    assert list(m.row_start) == [0, 3, 6, 9, 12]
    assert list(m.col_indices[:3]) == [0, 1, 2]
    assert list(m.col_indices[3:6]) == [1, 0, 3]
    assert list(m.values[:3]) == [4.0, -1.0, -1.0]


def test_laplacian_is_symmetric_and_row_sums_nonnegative():
    dense = _dense(build_laplacian(5))
    assert np.array_equal(dense, dense.T)
    assert np.all(dense.sum(axis=1) >= 0)
    assert np.all(np.diag(dense) == 4.0)


def test_matvec_matches_dense():
    m = build_laplacian(4)
    x = np.arange(16, dtype=float)
    assert np.allclose(m.matvec(x), _dense(m) @ x)


def test_matvec_rejects_wrong_length():
    with pytest.raises(ValueError):
        build_laplacian(3).matvec(np.ones(4))


def test_invalid_grid_size():
    with pytest.raises(ValueError):
        build_laplacian(0)


def test_inconsistent_csr_rejected():
    with pytest.raises(ValueError):
        CSRMatrix([1.0, 2.0], [0, 1], [0, 1])


def test_cg_solves_system():
    m = build_laplacian(6)
    b = np.ones(m.n)
    result = conjugate_gradient(m, b, None, 1000, 1e-10)
    assert result.converged
    assert result.residual < 1e-10
    assert np.allclose(result.x, np.linalg.solve(_dense(m), b))


def test_cg_does_not_modify_initial_guess():
    m = build_laplacian(3)
    x0 = np.zeros(m.n)
    conjugate_gradient(m, np.ones(m.n), x0, 100, 1e-10)
    assert np.all(x0 == 0.0)


def test_cg_iteration_limit():
    m = build_laplacian(10)
    result = conjugate_gradient(m, np.ones(m.n), None, 2, 1e-12)
    assert result.iterations == 2
    assert not result.converged


def test_cg_reports_final_residual():
    lines = []
    m = build_laplacian(4)
    conjugate_gradient(m, np.ones(m.n), None, 100, 1e-8, lines.append)
    assert lines[0].startswith("0 residual ")
    assert lines[-1].startswith("Final residual ")


def test_cg_zero_rhs_converges_immediately():
    m = build_laplacian(3)
    result = conjugate_gradient(m, np.zeros(m.n))
    assert result.converged
    assert result.iterations == 0


def test_main_prints_temperature(capsys):
    assert main(["--grid-size", "4"]) == 0
    out = capsys.readouterr().out
    assert "Temperature distribution:" in out
    assert "Temperature at (2, 0) = " in out