"""Optional reorganisation of the problem: greedy multicoloring of the rows."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate

from .problem import SparseMatrix

# Per-row storage that optimize_problem leaves attached to the matrix. The
# permutation is handed back to the caller, so nothing stays with the matrix.
_RETAINED_VALUES_PER_ROW = 0
_BYTES_PER_VALUE = 8


def greedy_coloring(matrix: SparseMatrix) -> list[int]:
    """Colour the local rows so that no row shares a colour with an earlier neighbour.

    Rows are visited in order and each takes the smallest colour not used by
    a lower-numbered neighbour; a new colour is opened only when all are used.
    """
    nrow = matrix.local_number_of_rows
    if nrow == 0:
        return []
    colors = [0]
    total_colors = 1
    for i in range(1, nrow):
        nnz = matrix.nonzeros_in_row[i]
        used = {colors[col] for col in matrix.mtx_ind_l[i][:nnz] if col < i}
        if len(used) < total_colors:
            colors.append(next(c for c in range(total_colors) if c not in used))
        else:
            colors.append(total_colors)
            total_colors += 1
    return colors


def coloring_permutation(colors: Sequence[int]) -> list[int]:
    """New position of every row when rows are grouped by colour, keeping order within a colour."""
    if not colors:
        return []
    counts = Counter(colors)
    sizes = [counts.get(c, 0) for c in range(max(colors) + 1)]
    offsets = [0, *accumulate(sizes)][:-1]
    permutation = []
    for color in colors:
        permutation.append(offsets[color])
        offsets[color] += 1
    return permutation


def optimize_problem(matrix: SparseMatrix) -> list[int]:
    """Compute the colour-grouping permutation of ``matrix``'s rows; the matrix is unchanged."""
    return coloring_permutation(greedy_coloring(matrix))


def optimize_problem_memory_use(matrix: SparseMatrix) -> float:
    """Bytes that :func:`optimize_problem` leaves retained with ``matrix``.

    Nothing is stored on the matrix, so the result is 0.0 for every matrix.
    """
    retained_values = matrix.local_number_of_rows * _RETAINED_VALUES_PER_ROW
    return float(retained_values * _BYTES_PER_VALUE)