# gridsolvers

Three small numerical solvers on structured grids, built on NumPy:

- **Euler flow** (`gridsolvers.euler`): the compressible 2D Euler equations advanced with a
  Lax-Friedrichs scheme. The domain is a channel with a cylindrical obstacle, free-stream
  inflow on the left, outflow on the right and reflective walls at the top and bottom.
  Cells inside the cylinder are held fixed.
- **Conjugate gradient** (`gridsolvers.cg`): a CG solver for a square sparse matrix in CSR
  form (`CSRMatrix`). `build_laplacian` makes the 5-point Laplacian (4 on the diagonal,
  -1 for each neighbour) on a square grid; solving it against a vector of ones gives a
  steady heat distribution.
- **Jacobi relaxation** (`gridsolvers.laplace`): Laplace's equation on a rectangular mesh
  with sinusoidal values on the left and right edges and zeros on the top and bottom.

## Installation

```
pip install .
```

Add the `test` extra (`pip install .[test]`) to install pytest as well.

## Command line

Each solver has a command:

```
gridsolvers-euler     [--steps N] [--nx NX] [--ny NY] [--report-every K]
gridsolvers-cg        [--grid-size G] [--max-iterations M] [--tolerance T]
gridsolvers-laplace   [--imax I] [--jmax J] [--iter-max M] [--tol T]
```

- `gridsolvers-euler` runs 2000 steps on a 200 x 100 grid by default and prints the total
  kinetic energy at step 0 and every 50 steps after it.
- `gridsolvers-cg` solves on a 2000 x 2000 grid by default, printing the residual every
  100 iterations and the final residual on convergence, then the elapsed time in
  milliseconds and the temperature at the middle unknown.
- `gridsolvers-laplace` relaxes a 4096 x 4096 interior for at most 100 iterations by
  default, printing the error every 10 iterations and at the end. It then compares the
  final error with a reference value, printing a PASSED or FAILED line, and the elapsed
  time in milliseconds.

The default problem sizes are large; pass smaller sizes for a quick run.

## Library use

```python
import numpy as np

from gridsolvers.euler import EulerConfig, EulerSolver
from gridsolvers.cg import build_laplacian, conjugate_gradient
from gridsolvers.laplace import jacobi

solver = EulerSolver(EulerConfig(nx=100, ny=50))
energies = solver.run(100)          # kinetic energy after each step
print(solver.total_kinetic_energy())

matrix = build_laplacian(50)
b = np.ones(50 * 50)
result = conjugate_gradient(matrix, b, np.zeros_like(b), 1000, 1e-8, None)
print(result.converged, result.iterations, result.residual)

outcome = jacobi(64, 64, 100, 1e-6, None)
print(outcome.iterations, outcome.error, outcome.grid.shape)
```

- `EulerSolver.step()` fills the ghost cells (`apply_boundaries`), advances one time step
  with the time step set by the CFL condition, and returns the total kinetic energy of the
  interior cells.
- `conjugate_gradient` returns a `CGResult` with the solution `x`, the number of
  `iterations`, the last `residual` and whether it `converged`. If `report` is a callable,
  it receives the progress lines as strings.
- `jacobi` returns a `JacobiResult` with the final `grid`, `iterations`, `error` and
  `elapsed_ms`. If `report` is a callable, it is called with the iteration number and error
  every 10 iterations. `initial_grid` gives the starting grid on its own.

The `pressure`, `flux_x` and `flux_y` functions in `gridsolvers.euler` work on scalars and
on NumPy arrays alike.

## What it does not do

The solvers only compute and print numbers. They do not write flow fields or solutions to
files, and they do not plot anything. To keep or view results, use the arrays that the
library functions return.