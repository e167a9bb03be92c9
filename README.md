# cgbench

The building blocks of a conjugate gradient benchmark, in pure Python with
no dependencies. The package builds a sparse linear system from a 27-point
stencil on a 3D grid, checks it, and provides the kernels needed to solve it:
vector operations, the sparse matrix-vector product, symmetric Gauss-Seidel
smoothing and a multigrid V-cycle preconditioner.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `cgbench.geometry`: `generate_geometry(size, rank, num_threads, pz, zl, zu, nx, ny, nz, npx, npy, npz)`
  returns a frozen `Geometry`. It holds the local block sizes, the process
  grid, this rank's position in that grid, and the global mesh offsets. If the
  given process grid is empty or larger than `size`, a near-cubic one is
  computed. A non-zero `pz` splits the process layers along z into a lower
  group of depth `zl` and an upper group of depth `zu`.
- `cgbench.optimal_shape`: `compute_optimal_shape(xyz, cubic_search=False)`
  splits a process count into `(x, y, z)` with `x * y * z == xyz`. By default
  it uses the prime factorisation, returned by `prime_factors`, and picks the
  shape of smallest surface area. With `cubic_search=True` it uses
  `cubic_radical_search` instead.
- `cgbench.mixed_base_counter`: `MixedBaseCounter` counts through every
  combination of digits, each digit with its own upper bound. It is used to
  enumerate distributions of prime factors.
- `cgbench.aspect_ratio`: `check_aspect_ratio(smallest_ratio, x, y, z, what, out=None)`
  returns `min/max` of the three sizes. If that ratio is below
  `smallest_ratio`, it raises `AspectRatioError`, which carries `ratio` and
  `exit_code = 127`. When `out` is given, the explanation is also written
  to it.
- `cgbench.problem`: `generate_problem(geom)` returns a `Problem` with four
  parts:
  - `matrix`, a `SparseMatrix` with 26 on the diagonal and -1 off it;
  - `b`, the right-hand side;
  - `x`, a zero initial guess;
  - `xexact`, the exact solution, all ones.

  `SparseMatrix.diagonal(row)` gives a row's diagonal value.
- `cgbench.check_problem`: `check_problem(matrix, b=None, x=None, xexact=None)`
  verifies every entry against the stencil and returns the number of
  nonzeros. On any mismatch it raises `ProblemCheckError`.
- `cgbench.kernels`: `dot_product(n, x, y)`, `waxpby(n, alpha, x, beta, y)`
  and `residual_norm(n, v1, v2)`, which gives the infinity norm of `v1 - v2`.
- `cgbench.spmv`: `spmv(matrix, x)` returns `matrix @ x` for the local rows.
- `cgbench.symgs`: `symgs(matrix, r, x)` returns `x` after one forward and one
  backward Gauss-Seidel sweep. The input list is left unchanged.
- `cgbench.multigrid`:
  - `generate_coarse_problem(matrix, presmoother_steps=1, postsmoother_steps=1)`
    attaches a coarse level with each dimension halved, together with its
    `MGData`. Every dimension of the fine block must be even.
  - `build_hierarchy(matrix, levels)` attaches the coarse levels in one call.
  - `restrict` and `prolongate` move data between a level and the one below.
  - `multigrid_vcycle(matrix, r)` applies one V-cycle starting from zero.
- `cgbench.optimize`:
  - `greedy_coloring(matrix)` colours the rows so that no row shares a colour
    with an earlier neighbour.
  - `coloring_permutation(colors)` and `optimize_problem(matrix)` give the
    permutation that groups rows by colour. The matrix is not changed.
  - `optimize_problem_memory_use(matrix)` reports the bytes retained, which
    is always 0.0.
- `cgbench.output_file`: `OutputFile` collects results as a tree and renders
  it as `key::subkey=value` lines. `add` appends a child and returns it,
  `get` finds a child by key, and `generate` renders the text.
  `write(directory=".", now=None)` saves the text to a file named
  `<name>_<version>_<YYYY-MM-DD_HH-MM-SS>.txt`.

## Example

A preconditioned conjugate gradient solve assembled from the kernels:

```python
from cgbench.geometry import generate_geometry
from cgbench.problem import generate_problem
from cgbench.check_problem import check_problem
from cgbench.multigrid import build_hierarchy, multigrid_vcycle
from cgbench.kernels import dot_product, waxpby, residual_norm
from cgbench.spmv import spmv

geom = generate_geometry(1, 0, 1, 0, 0, 0, 16, 16, 16, 1, 1, 1)
problem = generate_problem(geom)
check_problem(problem.matrix, problem.b, problem.x, problem.xexact)

A = problem.matrix
build_hierarchy(A, 3)
n = A.local_number_of_rows

x = list(problem.x)
r = waxpby(n, 1.0, problem.b, -1.0, spmv(A, x))
normr0 = dot_product(n, r, r) ** 0.5
rtz = 0.0
p = []
for k in range(1, 51):
    z = multigrid_vcycle(A, r)
    rtz_new = dot_product(n, r, z)
    p = z[:n] if k == 1 else waxpby(n, 1.0, z, rtz_new / rtz, p)
    rtz = rtz_new
    ap = spmv(A, p)
    alpha = rtz / dot_product(n, p, ap)
    x = waxpby(n, 1.0, x, alpha, p)
    r = waxpby(n, 1.0, r, -alpha, ap)
    if dot_product(n, r, r) ** 0.5 / normr0 < 1e-9:
        break

print(k, residual_norm(n, x, problem.xexact))
```

## What the package does not do

- There is no conjugate gradient driver. The iteration has to be written from
  the kernels, as in the example above, and timing is up to the caller.
- There is no command-line program and no benchmark run that reports results.
- Everything runs in a single process. The geometry describes a process grid,
  but no halo values are exchanged between processes. Columns that belong to
  other ranks are only listed in `SparseMatrix.external_columns`.