"""Multigrid hierarchy and the V-cycle preconditioner built on it."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import product

from .geometry import generate_geometry
from .problem import SparseMatrix, generate_problem
from .spmv import spmv
from .symgs import symgs


@dataclass(eq=False)
class MGData:
    """Links a fine grid matrix to its coarse level.

    ``f2c_operator[i]`` is the fine local row injected into coarse row ``i``.
    ``rc`` and ``xc`` are the coarse residual and correction, ``axf`` the fine
    grid product ``A @ x`` from the most recent V-cycle.
    """

    f2c_operator: list[int]
    rc: list[float]
    xc: list[float]
    axf: list[float]
    presmoother_steps: int = 1
    postsmoother_steps: int = 1
    extra: dict[str, object] = field(default_factory=dict)


def _mg_data(matrix: SparseMatrix) -> MGData:
    data = matrix.mg_data
    if data is None or matrix.coarse is None:
        raise ValueError("the matrix has no coarse level")
    return data


def generate_coarse_problem(
    matrix: SparseMatrix,
    presmoother_steps: int = 1,
    postsmoother_steps: int = 1,
) -> SparseMatrix:
    """Build the next coarser level of ``matrix`` and attach it; return the coarse matrix.

    Every local dimension of the fine block must be even; the coarse block
    halves each of them.
    """
    geom = matrix.geom
    nxf, nyf, nzf = geom.nx, geom.ny, geom.nz
    if nxf % 2 or nyf % 2 or nzf % 2:
        raise ValueError(
            f"fine grid dimensions ({nxf},{nyf},{nzf}) must all be divisible by 2"
        )
    nxc, nyc, nzc = nxf // 2, nyf // 2, nzf // 2
    if nxc * nyc * nzc <= 0:
        raise ValueError(f"coarse grid ({nxc},{nyc},{nzc}) would hold no rows")

    f2c = [
        2 * izc * nxf * nyf + 2 * iyc * nxf + 2 * ixc
        for izc, iyc, ixc in product(range(nzc), range(nyc), range(nxc))
    ]

    zlc = zuc = 0
    if geom.pz > 0:
        zlc = geom.partz_nz[0] // 2
        zuc = geom.partz_nz[1] // 2
    coarse_geom = generate_geometry(
        geom.size,
        geom.rank,
        geom.num_threads,
        geom.pz,
        zlc,
        zuc,
        nxc,
        nyc,
        nzc,
        geom.npx,
        geom.npy,
        geom.npz,
    )
    coarse = generate_problem(coarse_geom).matrix

    matrix.coarse = coarse
    matrix.mg_data = MGData(
        f2c_operator=f2c,
        rc=[0.0] * coarse.local_number_of_rows,
        xc=[0.0] * coarse.local_number_of_columns,
        axf=[0.0] * matrix.local_number_of_columns,
        presmoother_steps=presmoother_steps,
        postsmoother_steps=postsmoother_steps,
    )
    return coarse


def build_hierarchy(matrix: SparseMatrix, levels: int) -> list[SparseMatrix]:
    """Attach ``levels - 1`` coarse levels below ``matrix``; return all levels, finest first."""
    if levels < 1:
        raise ValueError(f"a hierarchy needs at least one level, got {levels}")
    hierarchy = [matrix]
    for _ in range(levels - 1):
        hierarchy.append(generate_coarse_problem(hierarchy[-1]))
    return hierarchy


def restrict(matrix: SparseMatrix, rf: Sequence[float]) -> list[float]:
    """Inject the fine residual ``rf - A @ x`` onto the coarse grid.

    Uses the product stored in ``mg_data.axf``; the result is stored in
    ``mg_data.rc`` and returned.
    """
    data = _mg_data(matrix)
    if len(rf) < matrix.local_number_of_rows:
        raise ValueError(
            f"vector rf has {len(rf)} entries, at least {matrix.local_number_of_rows} are required"
        )
    data.rc = [rf[f] - data.axf[f] for f in data.f2c_operator]
    return data.rc


def prolongate(matrix: SparseMatrix, xf: Sequence[float]) -> list[float]:
    """Return ``xf`` with the coarse correction ``mg_data.xc`` added at the injected points."""
    data = _mg_data(matrix)
    result = list(xf)
    if len(result) < matrix.local_number_of_rows:
        raise ValueError(
            f"vector xf has {len(result)} entries, at least "
            f"{matrix.local_number_of_rows} are required"
        )
    for f, correction in zip(data.f2c_operator, data.xc):
        result[f] += correction
    return result


def multigrid_vcycle(matrix: SparseMatrix, r: Sequence[float]) -> list[float]:
    """Approximate the solution of ``matrix @ x == r`` with one V-cycle from ``x = 0``.

    The returned vector has one entry per local column of ``matrix``.
    """
    x = [0.0] * matrix.local_number_of_columns
    data = matrix.mg_data
    if data is None or matrix.coarse is None:
        return symgs(matrix, r, x)

    for _ in range(data.presmoother_steps):
        x = symgs(matrix, r, x)
    axf = spmv(matrix, x)
    data.axf = axf + [0.0] * (matrix.local_number_of_columns - len(axf))
    rc = restrict(matrix, r)
    data.xc = multigrid_vcycle(matrix.coarse, rc)
    x = prolongate(matrix, x)
    for _ in range(data.postsmoother_steps):
        x = symgs(matrix, r, x)
    return x