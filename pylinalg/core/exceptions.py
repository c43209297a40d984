"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Operation-specific exceptions inherit from the
appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Raised before any mutation of the receiver
"""


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or incompatible.

    Raised when vector lengths or matrix shapes don't match what the
    operation requires (add/sub/products/concatenation on differing shapes).

    Attributes:
        expected: Expected length or shape, if known
        actual: Actual length or shape, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Raised by trace, determinant and inverse on rectangular input.

    Attributes:
        shape: Shape (rows, cols) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message, actual=shape)
        self.shape = shape


class InvalidValueError(ValidationError):
    """
    A value is outside the domain of the operation.

    Raised for zero divisors, zero-length vectors in angle computations,
    and out-of-range parameters.
    """
    pass


class ScalarTypeError(InvalidValueError):
    """
    Scalar type is not supported by the operation.

    Raised when data is not real or complex floating point (after integer
    promotion), or when an operation defined only for real scalars receives
    complex ones.

    Attributes:
        dtype: Name of the rejected dtype, if known
    """

    def __init__(self, message: str, dtype: str | None = None):
        super().__init__(message)
        self.dtype = dtype


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when an inverse is requested for a matrix with zero determinant,
    or when elimination meets a zero pivot.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Rank, if computed
        pivot_index: Elimination step at which the zero pivot was found
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        pivot_index: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.pivot_index = pivot_index
