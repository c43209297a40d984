"""
Shared elimination primitive for the reduction engine.

Row-echelon form, determinant, inverse and rank are all built from the
same handful of row operations on a private 2D numpy array:

    find a pivot    first nonzero entry in a column, or the entry of
                    largest magnitude (partial pivoting)
    swap rows       move the pivot row into place
    normalize       divide the pivot row by its pivot
    eliminate       subtract multiples of the pivot row from target rows

Zero tests go through ScalarKind.is_zero, so tol == 0 means exact
comparison with zero and the same code serves real and complex data.
Every function mutates the array it is given; callers own the copy.

References:
    Golub, G. H., & Van Loan, C. F. (2013). Matrix Computations (4th ed.).
    Johns Hopkins University Press. Section 3.2 (Gaussian elimination) and
    Section 3.4 (pivoting).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.scalar import ScalarKind


@dataclass(frozen=True)
class EliminationTrace:
    """
    Outcome of an elimination pass.

    Attributes:
        reduced: The reduced array (the same object that was passed in)
        swaps: Number of row interchanges performed
    """
    reduced: NDArray[Any]
    swaps: int


def find_pivot(
    a: NDArray[Any],
    col: int,
    start: int,
    kind: ScalarKind,
    tol: float = 0.0,
    partial: bool = False,
) -> int | None:
    """
    Row index >= start of the pivot for column ``col``, or None.

    By default the first row whose entry is nonzero is chosen. With
    ``partial=True`` the row of largest magnitude is chosen instead (first
    on ties). Either way None means every candidate is zero within tol.
    """
    column = a[start:, col]
    if partial:
        if column.size == 0:
            return None
        best = int(np.argmax(kind.magnitude(column)))
        if kind.is_zero(column[best], tol):
            return None
        return start + best
    hits = np.flatnonzero(~kind.is_zero(column, tol))
    if hits.size == 0:
        return None
    return start + int(hits[0])


def swap_rows(a: NDArray[Any], i: int, j: int) -> None:
    if i != j:
        a[[i, j], :] = a[[j, i], :]


def normalize_row(a: NDArray[Any], row: int, col: int) -> None:
    """Divide ``row`` by its entry in ``col`` so the pivot becomes one."""
    a[row, :] = a[row, :] / a[row, col]


def eliminate(
    a: NDArray[Any],
    pivot_row: int,
    col: int,
    targets: slice | NDArray[np.intp],
    kind: ScalarKind,
    fused: bool = False,
) -> None:
    """
    Zero column ``col`` in the target rows using the pivot row.

    Each target row t becomes ``t - (t[col] / p[col]) * p``. With
    ``fused=True`` the update is computed as fma(-factor, p, t).
    """
    factors = a[targets, col] / a[pivot_row, col]
    if factors.size == 0:
        return
    pivot = a[np.newaxis, pivot_row, :]
    if fused:
        a[targets, :] = kind.fma(-factors[:, np.newaxis], pivot, a[targets, :])
    else:
        a[targets, :] -= factors[:, np.newaxis] * pivot


def reduce_rows(a: NDArray[Any], kind: ScalarKind, tol: float) -> EliminationTrace:
    """
    Bring ``a`` to reduced row-echelon form in place.

    Forward pass: for each row, the leading column advances past columns
    that are zero in all remaining rows; the first nonzero entry below is
    swapped up, its row normalized, and the column cleared below it.
    Backward pass: every pivot column is cleared above its pivot.
    """
    n_rows, n_cols = a.shape
    pivots: list[int] = []
    swaps = 0
    lead = 0

    for r in range(n_rows):
        pivot_row = None
        while lead < n_cols:
            pivot_row = find_pivot(a, lead, r, kind, tol)
            if pivot_row is not None:
                break
            lead += 1
        if pivot_row is None:
            break

        if pivot_row != r:
            swap_rows(a, r, pivot_row)
            swaps += 1
        normalize_row(a, r, lead)
        eliminate(a, r, lead, slice(r + 1, n_rows), kind)
        pivots.append(lead)
        lead += 1

    for r in reversed(range(len(pivots))):
        eliminate(a, r, pivots[r], slice(0, r), kind)

    return EliminationTrace(reduced=a, swaps=swaps)


def triangularize(a: NDArray[Any], kind: ScalarKind, tol: float) -> EliminationTrace | None:
    """
    Gaussian elimination to upper triangular form for a square array.

    The diagonal entry is used as pivot unless it is zero, in which case
    the first nonzero entry below it is swapped up. Entries below the
    diagonal are cleared with fused multiply-add.

    Returns None when a column has no nonzero pivot candidate (the matrix
    is singular and its determinant is zero).
    """
    n = a.shape[0]
    swaps = 0
    for i in range(n):
        if kind.is_zero(a[i, i], tol):
            j = find_pivot(a, i, i + 1, kind, tol)
            if j is None:
                return None
            swap_rows(a, i, j)
            swaps += 1
        eliminate(a, i, i, slice(i + 1, n), kind, fused=True)
    return EliminationTrace(reduced=a, swaps=swaps)
