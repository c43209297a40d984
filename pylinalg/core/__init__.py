"""
Core infrastructure for PyLinalg.

This module provides shared abstractions and utilities used by the
containers, the reduction engine and the free functions.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    scalar: Real/complex scalar kinds (magnitude, conjugate, fma)
    tolerances: Tolerance tiers for equality and pivot tests
"""

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
from pylinalg.core.scalar import (
    ScalarKind,
    RealKind,
    ComplexKind,
    scalar_kind,
    result_kind,
)
from pylinalg.core.tolerances import ToleranceTier, EQUALITY, EXACT_PIVOT

__all__ = [
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "InvalidValueError",
    "ScalarTypeError",
    "NumericalError",
    "SingularMatrixError",
    # Scalars
    "ScalarKind",
    "RealKind",
    "ComplexKind",
    "scalar_kind",
    "result_kind",
    # Tolerances
    "ToleranceTier",
    "EQUALITY",
    "EXACT_PIVOT",
]
