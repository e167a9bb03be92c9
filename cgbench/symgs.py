"""One symmetric Gauss-Seidel sweep: a forward pass followed by a backward pass."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .problem import SparseMatrix


def _sweep(matrix: SparseMatrix, r: Sequence[float], xv: list[float], rows: Iterable[int]) -> None:
    for i in rows:
        diagonal = matrix.diagonal(i)
        nnz = matrix.nonzeros_in_row[i]
        total = r[i]
        for value, col in zip(matrix.matrix_values[i][:nnz], matrix.mtx_ind_l[i][:nnz]):
            total -= value * xv[col]
        # the loop above also subtracted the diagonal term; put it back
        total += xv[i] * diagonal
        xv[i] = total / diagonal


def symgs(matrix: SparseMatrix, r: Sequence[float], x: Sequence[float]) -> list[float]:
    """Apply one symmetric Gauss-Seidel step to ``x`` with right-hand side ``r``.

    ``x`` must have exactly one entry per local column. The updated vector is
    returned; ``x`` itself is left unchanged.
    """
    if len(x) != matrix.local_number_of_columns:
        raise ValueError(
            f"vector x has {len(x)} entries, exactly "
            f"{matrix.local_number_of_columns} are required"
        )
    nrow = matrix.local_number_of_rows
    if len(r) < nrow:
        raise ValueError(f"vector r has {len(r)} entries, at least {nrow} are required")
    xv = list(x)
    _sweep(matrix, r, xv, range(nrow))
    _sweep(matrix, r, xv, reversed(range(nrow)))
    return xv