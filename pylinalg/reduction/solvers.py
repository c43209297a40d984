"""
Public entry points of the reduction engine.

Provides row_echelon(), determinant(), inverse() and rank(). None of them
mutate their argument: each works on a private copy of the matrix data.

Pivot policy: by default a pivot candidate is zero only when it compares
equal to zero. Passing ``tol > 0`` treats every entry with magnitude
<= tol as zero instead, which makes rank and row_echelon robust to
round-off on nearly singular input at the cost of changing their results
on genuinely ill-conditioned matrices.
"""

from __future__ import annotations

from typing import Any
import warnings
import numpy as np

from pylinalg.containers.matrix import Matrix
from pylinalg.core.exceptions import SingularMatrixError
from pylinalg.core.tolerances import EXACT_PIVOT, ILL_CONDITIONED_PIVOT_RATIO, check_tolerance
from pylinalg.core.validation import check_square
from pylinalg.reduction._elimination import (
    eliminate,
    find_pivot,
    normalize_row,
    reduce_rows,
    swap_rows,
    triangularize,
)


def row_echelon(matrix: Matrix, *, tol: float = EXACT_PIVOT.atol) -> Matrix:
    """
    Reduced row-echelon form of a matrix of any shape.

    Each nonzero row starts with a 1 strictly right of the row above's
    leading 1, and every other entry in a pivot column is zero. Zero rows
    collect at the bottom. Empty and all-zero matrices are returned
    unchanged (as a new matrix).

    Parameters
    ----------
    matrix : Matrix
        Input matrix; not modified.
    tol : float
        Pivot tolerance. 0.0 (default) is the exact-zero test.

    Returns
    -------
    Matrix of the same shape.
    """
    tol = check_tolerance(tol)
    trace = reduce_rows(matrix.to_numpy(), matrix.kind, tol)
    return Matrix._wrap(trace.reduced)


def determinant(matrix: Matrix, *, tol: float = EXACT_PIVOT.atol) -> Any:
    """
    Determinant of a square matrix.

    Orders 1 and 2 use the closed form; order 0 is the empty product, one.
    Larger matrices are reduced to upper triangular form by Gaussian
    elimination (row swap only when a diagonal entry is zero); the result
    is (-1)^swaps times the product of the diagonal.

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    """
    check_square(matrix.shape, 'matrix')
    tol = check_tolerance(tol)
    kind = matrix.kind
    n = matrix.rows

    if n == 0:
        return kind.one
    if n == 1:
        return matrix[0, 0]
    if n == 2:
        return kind.cast(matrix[0, 0] * matrix[1, 1] - matrix[0, 1] * matrix[1, 0])

    trace = triangularize(matrix.to_numpy(), kind, tol)
    if trace is None:
        return kind.zero

    det = kind.one if trace.swaps % 2 == 0 else -kind.one
    for i in range(n):
        det = det * trace.reduced[i, i]
    return kind.cast(det)


def inverse(matrix: Matrix, *, tol: float = EXACT_PIVOT.atol) -> Matrix:
    """
    Inverse of a square matrix by Gauss-Jordan elimination.

    The augmented matrix [A | I] is reduced with partial pivoting: at step
    i the row with the largest magnitude in column i (among rows >= i) is
    swapped up, normalized, and column i is cleared in every other row.
    The right half then holds A^-1.

    Emits a RuntimeWarning when the smallest pivot is tiny relative to the
    largest, as the result is then dominated by round-off.

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    SingularMatrixError
        If the determinant is zero, or a zero pivot appears during
        elimination.
    """
    check_square(matrix.shape, 'matrix')
    tol = check_tolerance(tol)
    kind = matrix.kind
    n = matrix.rows

    if kind.is_zero(determinant(matrix)):
        raise SingularMatrixError(
            "Matrix is singular (determinant is zero) and cannot be inverted",
            matrix_name='matrix',
            rank=rank(matrix),
        )

    aug = (matrix | Matrix.identity(n, dtype=kind.dtype)).to_numpy()
    pivot_magnitudes = []
    for i in range(n):
        pivot_row = find_pivot(aug, i, i, kind, tol, partial=True)
        if pivot_row is None:
            raise SingularMatrixError(
                f"Matrix is singular: zero pivot at elimination step {i}",
                matrix_name='matrix',
                pivot_index=i,
            )
        swap_rows(aug, i, pivot_row)
        pivot_magnitudes.append(float(kind.magnitude(aug[i, i])))
        normalize_row(aug, i, i)
        others = np.array([r for r in range(n) if r != i], dtype=np.intp)
        eliminate(aug, i, i, others, kind)

    if pivot_magnitudes:
        ratio = min(pivot_magnitudes) / max(pivot_magnitudes)
        if ratio < ILL_CONDITIONED_PIVOT_RATIO:
            warnings.warn(
                f"Matrix is ill-conditioned (pivot magnitude ratio {ratio:.3g}); "
                f"the inverse may be inaccurate.",
                RuntimeWarning,
                stacklevel=2,
            )

    return Matrix._wrap(aug[:, n:].copy())


def rank(matrix: Matrix, *, tol: float = EXACT_PIVOT.atol) -> int:
    """
    Rank: number of rows of the row-echelon form with a nonzero entry.

    Parameters
    ----------
    matrix : Matrix
        Input matrix of any shape; not modified.
    tol : float
        Entries with magnitude <= tol count as zero. Default 0.0.
    """
    tol = check_tolerance(tol)
    reduced = row_echelon(matrix, tol=tol).to_numpy()
    nonzero_rows = np.any(~matrix.kind.is_zero(reduced, tol), axis=1)
    return int(np.count_nonzero(nonzero_rows))
