"""
Weighted sums of vectors: linear combination and linear interpolation.

Both accumulate with the scalar kind's fused multiply-add.
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np

from pylinalg.containers.vector import Vector, _coerce
from pylinalg.core.exceptions import DimensionError
from pylinalg.core.scalar import result_kind
from pylinalg.core.validation import check_length, check_same_length


def linear_combination(vectors: Sequence[Vector], scalars: Sequence[Any]) -> Vector:
    """
    Weighted sum ``sum_i scalars[i] * vectors[i]``.

    Parameters
    ----------
    vectors : sequence of Vector
        Vectors to combine, all of the same length.
    scalars : sequence of scalars
        One coefficient per vector.

    Returns
    -------
    New Vector. Empty input returns an empty Vector.

    Raises
    ------
    DimensionError
        If the two sequences differ in count, or a vector's length differs
        from the first one's.
    """
    vectors = [_coerce(v, f"vectors[{i}]") for i, v in enumerate(vectors)]
    scalars = list(scalars)
    if len(vectors) != len(scalars):
        raise DimensionError(
            f"Inconsistent counts: vectors={len(vectors)}, scalars={len(scalars)}",
            expected=len(vectors),
            actual=len(scalars),
        )
    if not vectors:
        return Vector()

    size = len(vectors[0])
    for i, v in enumerate(vectors):
        check_length(v.to_numpy(), size, f"vectors[{i}]")

    kind = result_kind(*vectors, *scalars)
    result = np.zeros(size, dtype=kind.dtype)
    for v, s in zip(vectors, scalars):
        result = kind.fma(kind.cast(s), kind.cast(v.to_numpy()), result)
    return Vector(result)


def lerp(u: Vector, v: Vector, t: Any) -> Vector:
    """
    Linear interpolation ``u + t * (v - u)``, computed as fma(t, v - u, u).

    ``t = 0`` gives u and ``t = 1`` gives v; t outside [0, 1] extrapolates.

    Raises
    ------
    DimensionError
        If u and v differ in length.
    """
    u = _coerce(u, 'u')
    v = _coerce(v, 'v')
    a = u.to_numpy()
    b = v.to_numpy()
    check_same_length(a, b, ('u', 'v'))
    kind = result_kind(u, v, t)
    a = kind.cast(a)
    b = kind.cast(b)
    return Vector(kind.fma(kind.cast(t), b - a, a))
