"""
Vector: fixed-length sequence of real or complex scalars.

A Vector owns a 1D numpy array whose length is fixed at construction.
Arithmetic comes in two flavours, and every method states which one it is:

    in place:      add, sub, scale, divide (return None, mutate self)
    new result:    dot, norms, reshape, copy (never alias self)

Accumulating operations (dot, norm) go through the vector's ScalarKind, so
real data is accumulated with fused multiply-add and complex data with the
Hermitian inner product.
"""

from __future__ import annotations

from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylinalg.core.exceptions import DimensionError, InvalidValueError
from pylinalg.core.scalar import RealKind, ComplexKind, scalar_kind, result_kind
from pylinalg.core.tolerances import EQUALITY
from pylinalg.core.validation import (
    check_castable,
    check_ndim,
    check_nonzero,
    check_same_length,
    check_scalars,
)
from pylinalg.containers._format import format_scalar, format_sequence

if TYPE_CHECKING:
    from pylinalg.containers.matrix import Matrix


class Vector:
    """
    Ordered sequence of N scalars, N fixed at construction.

    Construction:
        Vector([1, 2, 3])
        Vector([1 + 2j, 3], dtype=np.complex128)
        Vector.zeros(4)

    Integer input is promoted to float64. The input is always copied.
    """

    __slots__ = ('_data', '_kind')

    def __init__(self, values: ArrayLike = (), dtype: DTypeLike | None = None):
        if isinstance(values, Vector):
            values = values._data
        data = check_scalars(values, 'values', dtype)
        check_ndim(data, 1, 'values')
        self._data: NDArray[Any] = data
        self._kind = scalar_kind(data.dtype)

    @classmethod
    def zeros(cls, size: int, dtype: DTypeLike = np.float64) -> Vector:
        """Zero-initialized vector of the given length."""
        if size < 0:
            raise InvalidValueError(f"size: must be non-negative, got {size}")
        return cls(np.zeros(size), dtype=dtype)

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> Vector:
        """Adopt an already validated 1D array without copying."""
        obj = cls.__new__(cls)
        obj._data = data
        obj._kind = scalar_kind(data.dtype)
        return obj

    # --- Properties ---

    @property
    def size(self) -> int:
        """Number of elements."""
        return self._data.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def kind(self) -> RealKind | ComplexKind:
        """Scalar kind of the stored data."""
        return self._kind

    # --- In-place arithmetic ---

    def add(self, other: Vector) -> None:
        """
        Add ``other`` elementwise, in place.

        Raises:
            DimensionError: If lengths differ
            ScalarTypeError: If other's values cannot be stored in self
        """
        other = _coerce(other, 'other')
        check_same_length(self._data, other._data, ('self', 'other'))
        check_castable(other.dtype, self.dtype, 'other')
        self._data += other._data

    def sub(self, other: Vector) -> None:
        """
        Subtract ``other`` elementwise, in place.

        Raises:
            DimensionError: If lengths differ
            ScalarTypeError: If other's values cannot be stored in self
        """
        other = _coerce(other, 'other')
        check_same_length(self._data, other._data, ('self', 'other'))
        check_castable(other.dtype, self.dtype, 'other')
        self._data -= other._data

    def scale(self, scalar: Any) -> None:
        """Multiply every element by ``scalar``, in place."""
        check_castable(result_kind(self, scalar).dtype, self.dtype, 'scalar')
        self._data *= scalar

    def divide(self, scalar: Any) -> None:
        """
        Divide every element by ``scalar``, in place.

        Raises:
            InvalidValueError: If scalar is zero
        """
        check_castable(result_kind(self, scalar).dtype, self.dtype, 'scalar')
        check_nonzero(scalar, self._kind, 'scalar')
        self._data /= scalar

    # --- Products and norms ---

    def dot(self, other: Vector) -> Any:
        """
        Inner product sum(conj(u_i) * v_i).

        For real data the conjugate is the identity and the sum is
        accumulated with fused multiply-add. For complex data the left
        operand is conjugated (Hermitian inner product).

        Raises:
            DimensionError: If lengths differ
        """
        other = _coerce(other, 'other')
        check_same_length(self._data, other._data, ('self', 'other'))
        kind = result_kind(self, other)
        left = kind.conjugate(kind.cast(self._data))
        right = kind.cast(other._data)
        acc = kind.zero
        for x, y in zip(left, right):
            acc = kind.fma(x, y, acc)
        return acc

    def norm_1(self) -> Any:
        """Manhattan norm: sum of magnitudes."""
        real = scalar_kind(self._kind.real_dtype)
        return real.cast(np.sum(self._kind.magnitude(self._data), dtype=real.dtype))

    def norm(self) -> Any:
        """
        Euclidean norm: sqrt(sum |x_i|^2).

        Squares are accumulated with fused multiply-add on the magnitudes,
        so the result is valid for complex data.
        """
        real = scalar_kind(self._kind.real_dtype)
        acc = real.zero
        for m in self._kind.magnitude(self._data):
            acc = real.fma(m, m, acc)
        return real.cast(np.sqrt(acc))

    norm_2 = norm

    def norm_inf(self) -> Any:
        """Supremum norm: largest magnitude (0 for an empty vector)."""
        real = scalar_kind(self._kind.real_dtype)
        if self.size == 0:
            return real.zero
        return real.cast(np.max(self._kind.magnitude(self._data)))

    # --- Reshaping ---

    def reshape(self, rows: int, cols: int) -> Matrix:
        """
        New matrix filled row by row: ``M[i, j] == self[i * cols + j]``.

        Raises:
            DimensionError: If rows * cols != len(self)
        """
        from pylinalg.containers.matrix import Matrix

        if rows < 0 or cols < 0 or rows * cols != self.size:
            raise DimensionError(
                f"Cannot reshape vector of length {self.size} into ({rows}, {cols})",
                expected=self.size,
                actual=(rows, cols),
            )
        return Matrix._wrap(self._data.reshape(rows, cols).copy())

    # --- Conversion ---

    def copy(self) -> Vector:
        return Vector._wrap(self._data.copy())

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the underlying data as a 1D numpy array."""
        return self._data.copy()

    def __array__(self, dtype: DTypeLike | None = None, copy: bool | None = None) -> NDArray[Any]:
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    # --- Sequence protocol ---

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return Vector._wrap(self._data[index].copy())
        return self._data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        check_castable(result_kind(self, value).dtype, self.dtype, 'value')
        self._data[index] = value

    def __eq__(self, other: object) -> bool:
        """Equal length and every |u_i - v_i| <= EQUALITY.atol."""
        if not isinstance(other, Vector):
            return NotImplemented
        if self.size != other.size:
            return False
        diff = np.abs(self._data - other._data)
        return bool(np.all(diff <= EQUALITY.atol))

    def __str__(self) -> str:
        return format_sequence(self._data)

    def __repr__(self) -> str:
        body = ", ".join(format_scalar(v) for v in self._data)
        return f"Vector([{body}], dtype={self.dtype.name})"


def _coerce(value: Any, name: str) -> Vector:
    """Accept a Vector as-is; build one from any other array-like."""
    if isinstance(value, Vector):
        return value
    try:
        return Vector(value)
    except DimensionError as e:
        raise DimensionError(f"{name}: {e}") from e
