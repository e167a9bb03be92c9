"""Verification that a generated problem has exactly the expected contents."""

from __future__ import annotations

from collections.abc import Sequence

from .problem import DIAGONAL_VALUE, OFF_DIAGONAL_VALUE, SparseMatrix, _grid_rows, _stencil


class ProblemCheckError(ValueError):
    """Raised when a matrix or vector differs from the generated problem."""


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ProblemCheckError(message)


def check_problem(
    matrix: SparseMatrix,
    b: Sequence[float] | None = None,
    x: Sequence[float] | None = None,
    xexact: Sequence[float] | None = None,
) -> int:
    """Check ``matrix`` and any given vectors against the stencil; return the nonzero count."""
    geom = matrix.geom
    local_rows = geom.nx * geom.ny * geom.nz
    total_rows = geom.gnx * geom.gny * geom.gnz

    for name, seq in (
        ("local_to_global", matrix.local_to_global),
        ("matrix_values", matrix.matrix_values),
        ("mtx_ind_g", matrix.mtx_ind_g),
        ("nonzeros_in_row", matrix.nonzeros_in_row),
        ("diagonal_index", matrix.diagonal_index),
    ):
        _require(len(seq) >= local_rows, f"{name} has {len(seq)} rows, {local_rows} expected")
    for name, vector in (("b", b), ("x", x), ("xexact", xexact)):
        if vector is not None:
            _require(
                len(vector) >= local_rows,
                f"vector {name} has {len(vector)} entries, {local_rows} expected",
            )

    local_nonzeros = 0
    for local_row, global_row, gix, giy, giz in _grid_rows(geom):
        _require(
            matrix.local_to_global[local_row] == global_row,
            f"row {local_row} maps to global {matrix.local_to_global[local_row]}, "
            f"expected {global_row}",
        )
        values = matrix.matrix_values[local_row]
        columns = matrix.mtx_ind_g[local_row]
        count = 0
        for col in _stencil(geom, gix, giy, giz):
            _require(
                count < len(values) and count < len(columns),
                f"row {local_row} is missing entries",
            )
            if col == global_row:
                _require(
                    matrix.diagonal_index[local_row] == count,
                    f"row {local_row} has its diagonal at the wrong position",
                )
                expected = DIAGONAL_VALUE
            else:
                expected = OFF_DIAGONAL_VALUE
            _require(
                values[count] == expected,
                f"row {local_row} entry {count} is {values[count]}, expected {expected}",
            )
            _require(
                columns[count] == col,
                f"row {local_row} entry {count} has column {columns[count]}, expected {col}",
            )
            count += 1
        _require(
            matrix.nonzeros_in_row[local_row] == count,
            f"row {local_row} claims {matrix.nonzeros_in_row[local_row]} nonzeros, has {count}",
        )
        local_nonzeros += count
        if b is not None:
            _require(
                b[local_row] == DIAGONAL_VALUE - (count - 1),
                f"b[{local_row}] is {b[local_row]}",
            )
        if x is not None:
            _require(x[local_row] == 0.0, f"x[{local_row}] is {x[local_row]}")
        if xexact is not None:
            _require(xexact[local_row] == 1.0, f"xexact[{local_row}] is {xexact[local_row]}")

    _require(
        matrix.total_number_of_rows == total_rows,
        f"total rows {matrix.total_number_of_rows}, expected {total_rows}",
    )
    _require(
        matrix.total_number_of_nonzeros == local_nonzeros,
        f"total nonzeros {matrix.total_number_of_nonzeros}, expected {local_nonzeros}",
    )
    _require(
        matrix.local_number_of_rows == local_rows,
        f"local rows {matrix.local_number_of_rows}, expected {local_rows}",
    )
    _require(
        matrix.local_number_of_nonzeros == local_nonzeros,
        f"local nonzeros {matrix.local_number_of_nonzeros}, expected {local_nonzeros}",
    )
    return local_nonzeros