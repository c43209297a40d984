"""Free-function spellings of the matrix products."""

from __future__ import annotations

from pylinalg.containers.matrix import Matrix, _coerce_matrix
from pylinalg.containers.vector import Vector


def matvec(a: Matrix, v: Vector) -> Vector:
    """Matrix-vector product a @ v. See Matrix.mul_vec."""
    return _coerce_matrix(a, 'a').mul_vec(v)


def matmul(a: Matrix, b: Matrix) -> Matrix:
    """Matrix product a @ b. See Matrix.mul_mat."""
    return _coerce_matrix(a, 'a').mul_mat(b)
