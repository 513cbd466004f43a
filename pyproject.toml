[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridsolvers"
version = "0.1.0"
description = "Small structured-grid solvers: 2D Euler flow past a cylinder, CSR conjugate gradient, and Jacobi relaxation for Laplace's equation"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["cfd", "euler", "conjugate-gradient", "jacobi", "laplace", "numerical"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gridsolvers-euler = "gridsolvers.euler:main"
gridsolvers-cg = "gridsolvers.cg:main"
gridsolvers-laplace = "gridsolvers.laplace:main"

[tool.hatch.build.targets.wheel]
packages = ["gridsolvers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
