"""Two-dimensional compressible Euler flow past a cylinder (Lax-Friedrichs)."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass

import numpy as np

GAMMA = 1.4
CFL = 0.5


def pressure(rho, rhou, rhov, energy):
    """Pressure from the conservative variables."""
    u = rhou / rho
    v = rhov / rho
    kinetic = 0.5 * rho * (u * u + v * v)
    return (GAMMA - 1.0) * (energy - kinetic)


def flux_x(rho, rhou, rhov, energy):
    """Flux of the conservative variables in the x-direction."""
    u = rhou / rho
    p = pressure(rho, rhou, rhov, energy)
    return rhou, rhou * u + p, rhov * u, (energy + p) * u


def flux_y(rho, rhou, rhov, energy):
    """Flux of the conservative variables in the y-direction."""
    v = rhov / rho
    p = pressure(rho, rhou, rhov, energy)
    return rhov, rhou * v, rhov * v + p, (energy + p) * v


@dataclass(frozen=True)
class EulerConfig:
    """Grid, obstacle and free-stream parameters."""

    nx: int = 200
    ny: int = 100
    lx: float = 2.0
    ly: float = 1.0
    cx: float = 0.5
    cy: float = 0.5
    radius: float = 0.1
    rho0: float = 1.0
    u0: float = 1.0
    v0: float = 0.0
    p0: float = 1.0

    def __post_init__(self) -> None:
        if self.nx < 1 or self.ny < 1:
            raise ValueError("grid must have at least one cell in each direction")
        if self.lx <= 0 or self.ly <= 0:
            raise ValueError("domain lengths must be positive")
        if self.rho0 <= 0:
            raise ValueError("free-stream density must be positive")

    @property
    def dx(self) -> float:
        return self.lx / self.nx

    @property
    def dy(self) -> float:
        return self.ly / self.ny

    @property
    def e0(self) -> float:
        """Free-stream total energy density."""
        return self.p0 / (GAMMA - 1.0) + 0.5 * self.rho0 * (self.u0**2 + self.v0**2)

    @property
    def dt(self) -> float:
        """Time step from the CFL condition."""
        c0 = math.sqrt(GAMMA * self.p0 / self.rho0)
        return CFL * min(self.dx, self.dy) / (abs(self.u0) + c0) / 2.0


class EulerSolver:
    """Holds the flow state, including one layer of ghost cells, and advances it."""

    def __init__(self, config: EulerConfig | None = None) -> None:
        self.config = config if config is not None else EulerConfig()
        c = self.config
        shape = (c.nx + 2, c.ny + 2)
        x = (np.arange(shape[0]) - 0.5) * c.dx
        y = (np.arange(shape[1]) - 0.5) * c.dy
        xx, yy = np.meshgrid(x, y, indexing="ij")
        self.solid = (xx - c.cx) ** 2 + (yy - c.cy) ** 2 <= c.radius * c.radius

        self.rho = np.full(shape, c.rho0)
        self.rhou = np.where(self.solid, 0.0, c.rho0 * c.u0)
        self.rhov = np.where(self.solid, 0.0, c.rho0 * c.v0)
        self.energy = np.where(self.solid, c.p0 / (GAMMA - 1.0), c.e0)

    def apply_boundaries(self) -> None:
        """Fill the ghost cells: inflow left, outflow right, reflective walls."""
        c = self.config
        self.rho[0, :] = c.rho0
        self.rhou[0, :] = c.rho0 * c.u0
        self.rhov[0, :] = c.rho0 * c.v0
        self.energy[0, :] = c.e0

        for field in (self.rho, self.rhou, self.rhov, self.energy):
            field[-1, :] = field[-2, :]

        for field in (self.rho, self.rhou, self.energy):
            field[:, 0] = field[:, 1]
        self.rhov[:, 0] = -self.rhov[:, 1]

        for field in (self.rho, self.rhou, self.energy):
            field[:, -1] = field[:, -2]
        self.rhov[:, -1] = -self.rhov[:, -2]

    def step(self) -> float:
        """Advance one time step and return the total kinetic energy."""
        c = self.config
        self.apply_boundaries()
        fields = (self.rho, self.rhou, self.rhov, self.energy)
        fx = flux_x(*fields)
        fy = flux_y(*fields)
        dtdx = c.dt / (2 * c.dx)
        dtdy = c.dt / (2 * c.dy)
        solid = self.solid[1:-1, 1:-1]

        updated = []
        for q, fxq, fyq in zip(fields, fx, fy):
            avg = 0.25 * (q[2:, 1:-1] + q[:-2, 1:-1] + q[1:-1, 2:] + q[1:-1, :-2])
            new = avg - (
                dtdx * (fxq[2:, 1:-1] - fxq[:-2, 1:-1])
                + dtdy * (fyq[1:-1, 2:] - fyq[1:-1, :-2])
            )
            updated.append(np.where(solid, q[1:-1, 1:-1], new))

        for q, new in zip(fields, updated):
            q[1:-1, 1:-1] = new
        return self.total_kinetic_energy()

    def total_kinetic_energy(self) -> float:
        """Sum of kinetic energy over the interior cells."""
        rho = self.rho[1:-1, 1:-1]
        u = self.rhou[1:-1, 1:-1] / rho
        v = self.rhov[1:-1, 1:-1] / rho
        return float(np.sum(0.5 * rho * (u * u + v * v)))

    def run(self, steps: int) -> list[float]:
        """Advance several steps; return the kinetic energy after each."""
        if steps < 0:
            raise ValueError("steps must be non-negative")
        return [self.step() for _ in range(steps)]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Euler flow past a cylinder.")
    parser.add_argument("--steps", type=int, default=2000)
    parser.add_argument("--nx", type=int, default=200)
    parser.add_argument("--ny", type=int, default=100)
    parser.add_argument("--report-every", type=int, default=50)
    args = parser.parse_args(argv)

    solver = EulerSolver(EulerConfig(nx=args.nx, ny=args.ny))
    for n in range(args.steps):
        kinetic = solver.step()
        if n % args.report_every == 0:
            print(f"Step {n} completed, total kinetic energy: {kinetic:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())