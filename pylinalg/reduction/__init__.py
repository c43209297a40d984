"""
Reduction engine.

Gaussian and Gauss-Jordan elimination over real or complex matrices.

Public API:
    row_echelon(matrix)  - Reduced row-echelon form
    determinant(matrix)  - Determinant by elimination
    inverse(matrix)      - Inverse by Gauss-Jordan with partial pivoting
    rank(matrix)         - Number of nonzero rows of the row-echelon form
"""

from pylinalg.reduction.solvers import (
    row_echelon,
    determinant,
    inverse,
    rank,
)

__all__ = [
    "row_echelon",
    "determinant",
    "inverse",
    "rank",
]
