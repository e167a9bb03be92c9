"""Generation of the 27-point stencil system, its right-hand side and exact solution."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import product
from typing import Any

from .geometry import Geometry

DIAGONAL_VALUE = 26.0
OFF_DIAGONAL_VALUE = -1.0
NONZEROS_PER_ROW = 27


@dataclass(eq=False)
class SparseMatrix:
    """Row-wise sparse matrix of one process's block of the global mesh.

    ``mtx_ind_g`` holds global column indices and ``mtx_ind_l`` local ones.
    Columns owned by other processes get local indices after the local rows,
    in order of first appearance; they are listed in ``external_columns``.
    """

    geom: Geometry
    total_number_of_rows: int
    total_number_of_nonzeros: int
    local_number_of_rows: int
    local_number_of_columns: int
    local_number_of_nonzeros: int
    nonzeros_in_row: list[int]
    mtx_ind_g: list[list[int]]
    mtx_ind_l: list[list[int]]
    matrix_values: list[list[float]]
    diagonal_index: list[int]
    global_to_local: dict[int, int]
    local_to_global: list[int]
    external_columns: list[int] = field(default_factory=list)
    title: str | None = None
    coarse: SparseMatrix | None = None
    mg_data: Any = None

    def diagonal(self, row: int) -> float:
        """The diagonal value of local ``row``."""
        return self.matrix_values[row][self.diagonal_index[row]]


@dataclass(eq=False)
class Problem:
    """A generated system ``matrix @ xexact == b`` with the initial guess ``x``."""

    matrix: SparseMatrix
    b: list[float]
    x: list[float]
    xexact: list[float]


def _grid_rows(geom: Geometry) -> Iterator[tuple[int, int, int, int, int]]:
    """Yield ``(local_row, global_row, gix, giy, giz)`` for every local grid point."""
    points = product(range(geom.nz), range(geom.ny), range(geom.nx))
    for local_row, (iz, iy, ix) in enumerate(points):
        giz = geom.giz0 + iz
        giy = geom.giy0 + iy
        gix = geom.gix0 + ix
        global_row = giz * geom.gnx * geom.gny + giy * geom.gnx + gix
        yield local_row, global_row, gix, giy, giz


def _stencil(geom: Geometry, gix: int, giy: int, giz: int) -> Iterator[int]:
    """Global columns of the in-bounds stencil neighbours, in ascending order."""
    global_row = giz * geom.gnx * geom.gny + giy * geom.gnx + gix
    for sz in (-1, 0, 1):
        if not 0 <= giz + sz < geom.gnz:
            continue
        for sy in (-1, 0, 1):
            if not 0 <= giy + sy < geom.gny:
                continue
            for sx in (-1, 0, 1):
                if 0 <= gix + sx < geom.gnx:
                    yield global_row + sz * geom.gnx * geom.gny + sy * geom.gnx + sx


def generate_problem(geom: Geometry) -> Problem:
    """Build the matrix, right-hand side, zero initial guess and all-ones exact solution."""
    local_rows = geom.nx * geom.ny * geom.nz
    if local_rows <= 0:
        raise ValueError(f"the local block must hold at least one row, got {local_rows}")
    total_rows = geom.gnx * geom.gny * geom.gnz
    if total_rows <= 0:
        raise ValueError(f"the global mesh must hold at least one row, got {total_rows}")

    nonzeros_in_row: list[int] = []
    mtx_ind_g: list[list[int]] = []
    matrix_values: list[list[float]] = []
    diagonal_index: list[int] = []
    global_to_local: dict[int, int] = {}
    local_to_global: list[int] = []

    for local_row, global_row, gix, giy, giz in _grid_rows(geom):
        global_to_local[global_row] = local_row
        local_to_global.append(global_row)
        columns = list(_stencil(geom, gix, giy, giz))
        values = [
            DIAGONAL_VALUE if col == global_row else OFF_DIAGONAL_VALUE for col in columns
        ]
        diagonal_index.append(columns.index(global_row))
        mtx_ind_g.append(columns)
        matrix_values.append(values)
        nonzeros_in_row.append(len(columns))

    externals: dict[int, int] = {}
    mtx_ind_l: list[list[int]] = []
    for columns in mtx_ind_g:
        local_columns = []
        for col in columns:
            local = global_to_local.get(col)
            if local is None:
                local = externals.setdefault(col, local_rows + len(externals))
            local_columns.append(local)
        mtx_ind_l.append(local_columns)

    local_nonzeros = sum(nonzeros_in_row)
    if local_nonzeros <= 0:
        raise ValueError("the generated matrix has no nonzeros")

    matrix = SparseMatrix(
        geom=geom,
        total_number_of_rows=total_rows,
        total_number_of_nonzeros=local_nonzeros,
        local_number_of_rows=local_rows,
        local_number_of_columns=local_rows + len(externals),
        local_number_of_nonzeros=local_nonzeros,
        nonzeros_in_row=nonzeros_in_row,
        mtx_ind_g=mtx_ind_g,
        mtx_ind_l=mtx_ind_l,
        matrix_values=matrix_values,
        diagonal_index=diagonal_index,
        global_to_local=global_to_local,
        local_to_global=local_to_global,
        external_columns=list(externals),
    )
    b = [DIAGONAL_VALUE - (count - 1) for count in nonzeros_in_row]
    return Problem(matrix=matrix, b=b, x=[0.0] * local_rows, xexact=[1.0] * local_rows)