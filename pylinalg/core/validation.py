"""
Input validation utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Containers call them before
touching their own storage, so a failed check never leaves a receiver
half-modified.

Design principles:
    - No silent type coercion (except integer -> float64 promotion)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylinalg.core.exceptions import (
    DimensionError,
    InvalidValueError,
    NotSquareError,
    ScalarTypeError,
    ValidationError,
)
from pylinalg.core.scalar import ScalarKind, promote_dtype


def check_scalars(
    values: ArrayLike,
    name: str,
    dtype: DTypeLike | None = None,
) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Accepts any array-like and converts it to a freshly allocated array.
    Integer and boolean data is promoted to float64. Rejects inputs that
    result in object dtype (ragged nesting, mixed types) or non-numeric data.

    Args:
        values: Input to validate
        name: Parameter name for error messages
        dtype: Requested storage dtype; the data must be castable to it
            without losing its kind (complex data cannot become real)

    Returns:
        numpy.ndarray with real or complex floating dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
        ScalarTypeError: If the data or the requested dtype is not supported
    """
    try:
        result = np.array(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged nesting "
            f"or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ScalarTypeError(
            f"{name}: non-numeric dtype {result.dtype}, expected real or complex numbers",
            dtype=result.dtype.name,
        )

    source = promote_dtype(result.dtype)
    target = source if dtype is None else promote_dtype(dtype)
    check_castable(source, target, name)
    return result.astype(target, copy=False)


def check_castable(source: DTypeLike, target: DTypeLike, name: str) -> None:
    """
    Verify data of dtype ``source`` can be stored in dtype ``target``.

    Real data fits anywhere; complex data only fits complex storage.

    Raises:
        ScalarTypeError: If the cast would discard imaginary parts
    """
    src = np.dtype(source)
    dst = np.dtype(target)
    if not np.can_cast(src, dst, casting='same_kind'):
        raise ScalarTypeError(
            f"{name}: cannot store {src.name} values in {dst.name} storage",
            dtype=src.name,
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_same_length(a: NDArray[Any], b: NDArray[Any], names: tuple[str, str]) -> None:
    """
    Verify two 1D arrays have the same length.

    Raises:
        DimensionError: If lengths differ
    """
    if a.shape[0] != b.shape[0]:
        raise DimensionError(
            f"Inconsistent lengths: {names[0]}={a.shape[0]}, {names[1]}={b.shape[0]}",
            expected=a.shape[0],
            actual=b.shape[0],
        )


def check_length(array: NDArray[Any], length: int, name: str) -> None:
    """
    Verify a 1D array has exactly ``length`` entries.

    Raises:
        DimensionError: If the length differs
    """
    if array.shape[0] != length:
        raise DimensionError(
            f"{name}: expected length {length}, got {array.shape[0]}",
            expected=length,
            actual=array.shape[0],
        )


def check_same_shape(
    a_shape: tuple[int, int],
    b_shape: tuple[int, int],
    names: tuple[str, str],
) -> None:
    """
    Verify two matrices have the same (rows, cols) shape.

    Raises:
        DimensionError: If shapes differ
    """
    if tuple(a_shape) != tuple(b_shape):
        raise DimensionError(
            f"Inconsistent shapes: {names[0]}={tuple(a_shape)}, {names[1]}={tuple(b_shape)}",
            expected=tuple(a_shape),
            actual=tuple(b_shape),
        )


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a matrix shape is square.

    Raises:
        NotSquareError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise NotSquareError(
            f"{name}: expected a square matrix, got shape ({rows}, {cols})",
            shape=(rows, cols),
        )


def check_nonzero(value: Any, kind: ScalarKind, name: str) -> None:
    """
    Verify a scalar is not exactly zero.

    Raises:
        InvalidValueError: If value == 0
    """
    if kind.magnitude(value) == 0:
        raise InvalidValueError(f"{name}: must be nonzero, got {value!r}")
