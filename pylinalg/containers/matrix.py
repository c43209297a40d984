"""
Matrix: rectangular grid of real or complex scalars, stored by columns.

A Matrix owns a 2D numpy array of shape (rows, cols) in column-major
(Fortran) order, so each column is one contiguous sequence. rows, cols and
shape are derived from that array; a matrix without columns has shape
(0, 0).

    in place:      add, sub, scale, item assignment
    new result:    mul_vec, mul_mat, transpose, |, flatten, row/column,
                   row_echelon, inverse (never alias self)
"""

from __future__ import annotations

from typing import Any, Iterable
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylinalg.core.exceptions import DimensionError, InvalidValueError
from pylinalg.core.scalar import RealKind, ComplexKind, scalar_kind, result_kind
from pylinalg.core.tolerances import EQUALITY, EXACT_PIVOT
from pylinalg.core.validation import (
    check_castable,
    check_length,
    check_ndim,
    check_same_shape,
    check_scalars,
    check_square,
)
from pylinalg.containers._format import format_sequence
from pylinalg.containers.vector import Vector, _coerce


def _check_rectangular(items: list[Any], name: str) -> None:
    """Every nested item must have the same length as the first."""
    lengths = [len(item) for item in items if hasattr(item, '__len__')]
    if lengths and any(n != lengths[0] for n in lengths):
        raise DimensionError(
            f"{name}: all entries must have the same length, got lengths {lengths}",
            expected=lengths[0],
            actual=tuple(lengths),
        )


def _materialize(items: Iterable[Any], name: str) -> Any:
    if isinstance(items, np.ndarray):
        return items
    out = [item.to_numpy() if isinstance(item, Vector) else item for item in items]
    _check_rectangular(out, name)
    return out


def _as_2d(data: NDArray[Any]) -> NDArray[Any]:
    """Column-major copy-free view; zero columns collapse to (0, 0)."""
    if data.ndim == 1 and data.size == 0:
        data = data.reshape(0, 0)
    if data.ndim == 2 and data.shape[1] == 0:
        data = data.reshape(0, 0)
    return np.asfortranarray(data)


class Matrix:
    """
    Rectangular grid of scalars stored as a sequence of columns.

    Construction:
        Matrix([[1, 2], [3, 4]])              # nested rows
        Matrix.from_columns([[1, 3], [2, 4]])  # same matrix, by columns
        Matrix.zeros(2, 3)
        Matrix.identity(4)

    Integer input is promoted to float64. The input is always copied.
    """

    __slots__ = ('_data', '_kind')

    def __init__(self, rows: ArrayLike = (), dtype: DTypeLike | None = None):
        if isinstance(rows, Matrix):
            rows = rows._data
        data = check_scalars(_materialize(rows, 'rows'), 'rows', dtype)
        data = _as_2d(data)
        check_ndim(data, 2, 'rows')
        self._data: NDArray[Any] = data
        self._kind = scalar_kind(data.dtype)

    @classmethod
    def from_columns(cls, columns: Iterable[ArrayLike], dtype: DTypeLike | None = None) -> Matrix:
        """
        Build a matrix from a sequence of equal-length columns.

        Raises:
            DimensionError: If columns differ in length
        """
        data = check_scalars(_materialize(columns, 'columns'), 'columns', dtype)
        if data.ndim == 1 and data.size == 0:
            data = data.reshape(0, 0)
        check_ndim(data, 2, 'columns')
        return cls._wrap(data.T.copy())

    @classmethod
    def from_array(cls, array: ArrayLike, dtype: DTypeLike | None = None) -> Matrix:
        """Build a matrix from a 2D array (rows x cols)."""
        data = check_scalars(array, 'array', dtype)
        check_ndim(data, 2, 'array')
        return cls._wrap(data)

    @classmethod
    def zeros(cls, rows: int, cols: int, dtype: DTypeLike = np.float64) -> Matrix:
        """Zero-initialized matrix of the given shape."""
        if rows < 0 or cols < 0:
            raise InvalidValueError(f"shape: must be non-negative, got ({rows}, {cols})")
        return cls.from_array(np.zeros((rows, cols)), dtype=dtype)

    @classmethod
    def identity(cls, n: int, value: Any = 1, dtype: DTypeLike | None = None) -> Matrix:
        """n x n matrix with ``value`` on the diagonal and zeros elsewhere."""
        if n < 0:
            raise InvalidValueError(f"n: must be non-negative, got {n}")
        if dtype is None:
            dtype = result_kind(np.float64, value).dtype
        data = np.zeros((n, n), dtype=scalar_kind(dtype).dtype)
        np.fill_diagonal(data, value)
        return cls._wrap(data)

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> Matrix:
        """Adopt an already validated 2D array without copying."""
        obj = cls.__new__(cls)
        obj._data = _as_2d(data)
        obj._kind = scalar_kind(data.dtype)
        return obj

    # --- Properties ---

    @property
    def rows(self) -> int:
        """Number of rows (length of every column)."""
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def kind(self) -> RealKind | ComplexKind:
        """Scalar kind of the stored data."""
        return self._kind

    # --- In-place arithmetic ---

    def add(self, other: Matrix) -> None:
        """
        Add ``other`` elementwise, in place.

        Raises:
            DimensionError: If shapes differ
        """
        other = _coerce_matrix(other, 'other')
        check_same_shape(self.shape, other.shape, ('self', 'other'))
        check_castable(other.dtype, self.dtype, 'other')
        self._data += other._data

    def sub(self, other: Matrix) -> None:
        """
        Subtract ``other`` elementwise, in place.

        Raises:
            DimensionError: If shapes differ
        """
        other = _coerce_matrix(other, 'other')
        check_same_shape(self.shape, other.shape, ('self', 'other'))
        check_castable(other.dtype, self.dtype, 'other')
        self._data -= other._data

    def scale(self, scalar: Any) -> None:
        """Multiply every entry by ``scalar``, in place."""
        check_castable(result_kind(self, scalar).dtype, self.dtype, 'scalar')
        self._data *= scalar

    # --- Products ---

    def mul_vec(self, vector: Vector) -> Vector:
        """
        Matrix-vector product A @ v, as a new vector of length ``rows``.

        Column c contributes v[c] * A[:, c], accumulated with the scalar
        kind's fused multiply-add.

        Raises:
            DimensionError: If cols != len(vector)
        """
        vector = _coerce(vector, 'vector')
        check_length(vector._data, self.cols, 'vector')
        kind = result_kind(self, vector)
        a = kind.cast(self._data)
        v = kind.cast(vector._data)
        result = np.zeros(self.rows, dtype=kind.dtype)
        for c in range(self.cols):
            result = kind.fma(a[:, c], v[c], result)
        return Vector._wrap(result)

    def mul_mat(self, other: Matrix) -> Matrix:
        """
        Matrix product A @ B, as a new (A.rows x B.cols) matrix.

        Entry (r, c) is sum_k A[r, k] * B[k, c], accumulated in k order
        with the scalar kind's fused multiply-add.

        Raises:
            DimensionError: If A.cols != B.rows
        """
        other = _coerce_matrix(other, 'other')
        if self.cols != other.rows:
            raise DimensionError(
                f"Cannot multiply ({self.rows}, {self.cols}) by ({other.rows}, {other.cols}): "
                f"left cols must equal right rows",
                expected=self.cols,
                actual=other.rows,
            )
        kind = result_kind(self, other)
        a = kind.cast(self._data)
        b = kind.cast(other._data)
        result = np.zeros((self.rows, other.cols), dtype=kind.dtype)
        for k in range(self.cols):
            result = kind.fma(a[:, k, np.newaxis], b[np.newaxis, k, :], result)
        return Matrix._wrap(result)

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, Matrix):
            return self.mul_mat(other)
        if isinstance(other, Vector):
            return self.mul_vec(other)
        return NotImplemented

    # --- Structure ---

    def trace(self) -> Any:
        """
        Sum of the main diagonal.

        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(self.shape, 'matrix')
        result = self._kind.zero
        for i in range(self.rows):
            result += self._data[i, i]
        return self._kind.cast(result)

    def transpose(self) -> Matrix:
        """New (cols x rows) matrix with rows and columns swapped."""
        return Matrix._wrap(self._data.T.copy())

    def flatten(self) -> Vector:
        """All entries as a vector, column by column."""
        return Vector._wrap(self._data.ravel(order='F').copy())

    def __or__(self, other: Matrix) -> Matrix:
        """
        Horizontal concatenation [self | other].

        Raises:
            DimensionError: If row counts differ
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.rows != other.rows:
            raise DimensionError(
                f"Cannot concatenate: left has {self.rows} rows, right has {other.rows}",
                expected=self.rows,
                actual=other.rows,
            )
        kind = result_kind(self, other)
        return Matrix._wrap(np.hstack([kind.cast(self._data), kind.cast(other._data)]))

    def row(self, index: int) -> Vector:
        """Copy of row ``index``."""
        return Vector._wrap(self._data[index, :].copy())

    def column(self, index: int) -> Vector:
        """Copy of column ``index``."""
        return Vector._wrap(self._data[:, index].copy())

    # --- Reduction (see pylinalg.reduction) ---

    def row_echelon(self, *, tol: float = EXACT_PIVOT.atol) -> Matrix:
        """Reduced row-echelon form, as a new matrix."""
        from pylinalg.reduction import row_echelon
        return row_echelon(self, tol=tol)

    def determinant(self, *, tol: float = EXACT_PIVOT.atol) -> Any:
        """Determinant by Gaussian elimination."""
        from pylinalg.reduction import determinant
        return determinant(self, tol=tol)

    def inverse(self, *, tol: float = EXACT_PIVOT.atol) -> Matrix:
        """Inverse by Gauss-Jordan elimination, as a new matrix."""
        from pylinalg.reduction import inverse
        return inverse(self, tol=tol)

    def rank(self, *, tol: float = EXACT_PIVOT.atol) -> int:
        """Number of nonzero rows of the row-echelon form."""
        from pylinalg.reduction import rank
        return rank(self, tol=tol)

    # --- Conversion ---

    def copy(self) -> Matrix:
        return Matrix._wrap(self._data.copy(order='F'))

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the underlying data as a (rows x cols) numpy array."""
        return self._data.copy(order='F')

    def __array__(self, dtype: DTypeLike | None = None, copy: bool | None = None) -> NDArray[Any]:
        if dtype is None:
            return self._data.copy(order='F')
        return self._data.astype(dtype)

    # --- Element access ---

    def __getitem__(self, key: tuple[int, int]) -> Any:
        r, c = _element_key(key)
        return self._data[r, c]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        r, c = _element_key(key)
        check_castable(result_kind(self, value).dtype, self.dtype, 'value')
        self._data[r, c] = value

    def __eq__(self, other: object) -> bool:
        """Same shape and every |a_rc - b_rc| <= EQUALITY.atol."""
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        diff = np.abs(self._data - other._data)
        return bool(np.all(diff <= EQUALITY.atol))

    def __str__(self) -> str:
        return "{" + ", ".join(format_sequence(row) for row in self._data) + "}"

    def __repr__(self) -> str:
        return f"Matrix({self.rows}x{self.cols}, dtype={self.dtype.name})"


def _element_key(key: Any) -> tuple[int, int]:
    if not (isinstance(key, tuple) and len(key) == 2):
        raise TypeError(f"Matrix entries are indexed as m[row, col], got {key!r}")
    r, c = key
    if isinstance(r, slice) or isinstance(c, slice):
        raise TypeError("Matrix does not support slicing; use row() or column()")
    return r, c


def _coerce_matrix(value: Any, name: str) -> Matrix:
    """Accept a Matrix as-is; build one from nested rows otherwise."""
    if isinstance(value, Matrix):
        return value
    try:
        return Matrix(value)
    except DimensionError as e:
        raise DimensionError(f"{name}: {e}") from e
