[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cgbench"
version = "3.1.0"
description = "Building blocks of a conjugate gradient benchmark: 27-point 3D stencil problem, sparse and vector kernels, and a multigrid V-cycle preconditioner"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "benchmark",
    "conjugate-gradient",
    "multigrid",
    "sparse-matrix",
    "gauss-seidel",
    "stencil",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cgbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
