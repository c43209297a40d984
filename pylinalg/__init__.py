"""
PyLinalg: dense linear algebra primitives for Python.

Fixed-shape vectors and column-major matrices over real or complex
scalars, with Gaussian / Gauss-Jordan elimination for row-echelon form,
determinant, inverse and rank.

Submodules:
    core: Exceptions, validators, scalar kinds, tolerances
    containers: Vector and Matrix
    reduction: Elimination-based row_echelon, determinant, inverse, rank
    functions: linear_combination, lerp, angle_cos, cross_product, products
"""

__version__ = "0.1.0"

from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    NotSquareError,
    InvalidValueError,
    ScalarTypeError,
    NumericalError,
    SingularMatrixError,
)
from pylinalg.containers import Vector, Matrix
from pylinalg.reduction import row_echelon, determinant, inverse, rank
from pylinalg.functions import (
    linear_combination,
    lerp,
    angle_cos,
    cross_product,
    matvec,
    matmul,
    projection,
)

__all__ = [
    "__version__",
    # Containers
    "Vector",
    "Matrix",
    # Reduction
    "row_echelon",
    "determinant",
    "inverse",
    "rank",
    # Free functions
    "linear_combination",
    "lerp",
    "angle_cos",
    "cross_product",
    "matvec",
    "matmul",
    "projection",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "InvalidValueError",
    "ScalarTypeError",
    "NumericalError",
    "SingularMatrixError",
]
