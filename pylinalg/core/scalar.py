"""
Scalar abstraction for PyLinalg.

Every container stores one NumPy dtype, either real floating point or
complex. Algorithms never branch on the dtype themselves: they ask the
container's ScalarKind for the capability they need (magnitude, conjugate,
fused multiply-add, zero test).

Design Principles:
    - Structural interface (Protocol) with one implementation per scalar kind
    - Every operation works on scalars and on NumPy arrays alike
    - Integer and boolean data is promoted to float64 before a kind is chosen
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable
import math

import numpy as np
from numpy.typing import DTypeLike

from pylinalg.core.exceptions import ScalarTypeError


_fma_ufunc = np.frompyfunc(math.fma, 3, 1)

# Widest storage per dtype kind; fma results pass through a Python float
_MAX_ITEMSIZE = {"f": 8, "c": 16}


@runtime_checkable
class ScalarKind(Protocol):
    """
    Capabilities the containers and the reduction engine need from a scalar.

    Implemented once for real floating point (RealKind) and once for complex
    numbers (ComplexKind).
    """

    @property
    def dtype(self) -> np.dtype:
        """Storage dtype of this kind."""
        ...

    @property
    def real_dtype(self) -> np.dtype:
        """Dtype of magnitudes (float64 for complex128, float32 for complex64)."""
        ...

    @property
    def is_complex(self) -> bool:
        """True for complex scalars."""
        ...

    def magnitude(self, x: Any) -> Any:
        """Absolute value (reals) or modulus (complex)."""
        ...

    def conjugate(self, x: Any) -> Any:
        """Complex conjugate; identity for reals."""
        ...

    def fma(self, a: Any, b: Any, c: Any) -> Any:
        """a*b + c, elementwise with broadcasting."""
        ...


@dataclass(frozen=True)
class _BaseKind:
    _dtype: np.dtype

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def zero(self) -> Any:
        return self._dtype.type(0)

    @property
    def one(self) -> Any:
        return self._dtype.type(1)

    def magnitude(self, x: Any) -> Any:
        return np.abs(x)

    def is_zero(self, x: Any, tol: float = 0.0) -> Any:
        """
        Zero test by magnitude.

        With tol == 0 this is exact equality to zero. NaN is never zero.
        """
        return self.magnitude(x) <= tol

    def cast(self, x: Any) -> Any:
        """Convert a scalar or array to this kind's dtype."""
        if isinstance(x, np.ndarray):
            return x.astype(self._dtype, copy=False)
        return self._dtype.type(x)


@dataclass(frozen=True)
class RealKind(_BaseKind):
    """Real floating point scalars (float16, float32, float64)."""

    @property
    def real_dtype(self) -> np.dtype:
        return self._dtype

    @property
    def is_complex(self) -> bool:
        return False

    def conjugate(self, x: Any) -> Any:
        return x

    def fma(self, a: Any, b: Any, c: Any) -> Any:
        """Fused multiply-add: a*b + c rounded once, then stored in dtype."""
        out = _fma_ufunc(a, b, c)
        if isinstance(out, np.ndarray):
            return out.astype(self._dtype)
        return self._dtype.type(out)

    def __repr__(self) -> str:
        return f"RealKind({self._dtype.name})"


@dataclass(frozen=True)
class ComplexKind(_BaseKind):
    """Complex scalars (complex64, complex128)."""

    @property
    def real_dtype(self) -> np.dtype:
        return np.empty(0, dtype=self._dtype).real.dtype

    @property
    def is_complex(self) -> bool:
        return True

    def conjugate(self, x: Any) -> Any:
        return np.conj(x)

    def fma(self, a: Any, b: Any, c: Any) -> Any:
        # No fused operation exists for complex products
        return self.cast(np.multiply(a, b) + c)

    def __repr__(self) -> str:
        return f"ComplexKind({self._dtype.name})"


def promote_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Map a dtype to the storage dtype used by the containers.

    Integers and booleans become float64; real and complex floating
    dtypes up to double precision are kept as they are.

    Raises:
        ScalarTypeError: If the dtype is not numeric, or is an extended
            precision type (fused multiply-add rounds through float64)
    """
    dt = np.dtype(dtype)
    if np.issubdtype(dt, np.floating) or np.issubdtype(dt, np.complexfloating):
        if dt.itemsize > _MAX_ITEMSIZE[dt.kind]:
            raise ScalarTypeError(
                f"Unsupported scalar type {dt.name}: extended precision is not supported",
                dtype=dt.name,
            )
        return dt
    if np.issubdtype(dt, np.integer) or np.issubdtype(dt, np.bool_):
        return np.dtype(np.float64)
    raise ScalarTypeError(
        f"Unsupported scalar type {dt.name}: expected real or complex numbers",
        dtype=dt.name,
    )


def scalar_kind(dtype: DTypeLike) -> RealKind | ComplexKind:
    """
    Resolve the ScalarKind for a dtype.

    Raises:
        ScalarTypeError: If the dtype is not numeric
    """
    dt = promote_dtype(dtype)
    if np.issubdtype(dt, np.complexfloating):
        return ComplexKind(dt)
    return RealKind(dt)


def result_kind(*operands: Any) -> RealKind | ComplexKind:
    """
    Kind of the result of combining operands under NumPy promotion.

    Operands may be dtypes, arrays, NumPy scalars, anything exposing
    ``dtype``, or Python numbers. Python numbers promote weakly, so scaling a
    float32 vector by ``2.0`` stays float32.
    """
    args: list[Any] = []
    for op in operands:
        if isinstance(op, (np.dtype, type)):
            args.append(np.dtype(op))
        elif hasattr(op, 'dtype'):
            args.append(np.dtype(op.dtype))
        elif isinstance(op, (int, float, complex)):
            args.append(op)
        else:
            args.append(np.asarray(op).dtype)
    if not args:
        return scalar_kind(np.float64)
    return scalar_kind(np.result_type(*args))
