"""Sparse matrix-vector product over one process's block."""

from __future__ import annotations

from collections.abc import Sequence

from .problem import SparseMatrix


def spmv(matrix: SparseMatrix, x: Sequence[float]) -> list[float]:
    """Return ``y = matrix @ x`` for the local rows of ``matrix``.

    ``x`` must hold a value for every local column, halo columns included.
    """
    if len(x) < matrix.local_number_of_columns:
        raise ValueError(
            f"vector x has {len(x)} entries, at least "
            f"{matrix.local_number_of_columns} are required"
        )
    rows = zip(matrix.matrix_values, matrix.mtx_ind_l, matrix.nonzeros_in_row)
    result: list[float] = []
    for values, columns, nnz in rows:
        total = 0.0
        for value, col in zip(values[:nnz], columns[:nnz]):
            total += value * x[col]
        result.append(total)
        if len(result) == matrix.local_number_of_rows:
            break
    return result