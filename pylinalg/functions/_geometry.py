"""
Geometric helpers: cosine of the angle between vectors, the 3D cross
product, and the perspective projection matrix.
"""

from __future__ import annotations

from typing import Any
import math

from pylinalg.containers.matrix import Matrix
from pylinalg.containers.vector import Vector, _coerce
from pylinalg.core.exceptions import InvalidValueError, ScalarTypeError
from pylinalg.core.scalar import result_kind
from pylinalg.core.validation import check_length, check_same_length


def angle_cos(u: Vector, v: Vector) -> Any:
    """
    Cosine of the angle between u and v: dot(u, v) / (|u| |v|).

    1 means same direction, -1 opposite, 0 perpendicular.

    Raises
    ------
    DimensionError
        If u and v differ in length.
    InvalidValueError
        If either vector has zero norm.
    """
    u = _coerce(u, 'u')
    v = _coerce(v, 'v')
    check_same_length(u.to_numpy(), v.to_numpy(), ('u', 'v'))
    u_norm = u.norm()
    v_norm = v.norm()
    if u_norm == 0 or v_norm == 0:
        raise InvalidValueError("Cannot compute angle with a zero-length vector")
    return u.dot(v) / (u_norm * v_norm)


def cross_product(u: Vector, v: Vector) -> Vector:
    """
    Cross product of two real 3-vectors (right-hand rule).

    Each component is a difference of two products, computed as
    fma(a, b, -(c * d)).

    Raises
    ------
    ScalarTypeError
        If either vector is complex.
    DimensionError
        If either vector does not have exactly 3 entries.
    """
    u = _coerce(u, 'u')
    v = _coerce(v, 'v')
    if u.kind.is_complex or v.kind.is_complex:
        raise ScalarTypeError(
            "Cross product is defined for real-valued vectors only",
            dtype=result_kind(u, v).dtype.name,
        )
    check_length(u.to_numpy(), 3, 'u')
    check_length(v.to_numpy(), 3, 'v')

    kind = result_kind(u, v)
    a = kind.cast(u.to_numpy())
    b = kind.cast(v.to_numpy())
    return Vector([
        kind.fma(a[1], b[2], -(a[2] * b[1])),
        kind.fma(a[2], b[0], -(a[0] * b[2])),
        kind.fma(a[0], b[1], -(a[1] * b[0])),
    ], dtype=kind.dtype)


def projection(fov: float, ratio: float, near: float, far: float) -> Matrix:
    """
    Perspective projection matrix (right-handed, clip-space z in [-1, 1]).

    Parameters
    ----------
    fov : float
        Vertical field of view in radians, 0 < fov < pi.
    ratio : float
        Viewport aspect ratio width / height, > 0.
    near, far : float
        Distances to the clipping planes, 0 < near < far.

    Returns
    -------
    4x4 Matrix mapping eye coordinates to clip coordinates.

    Raises
    ------
    InvalidValueError
        If any parameter is out of range.
    """
    if not 0.0 < fov < math.pi:
        raise InvalidValueError(f"fov: must be in (0, pi) radians, got {fov!r}")
    if not ratio > 0.0:
        raise InvalidValueError(f"ratio: must be positive, got {ratio!r}")
    if not 0.0 < near < far:
        raise InvalidValueError(
            f"near/far: need 0 < near < far, got near={near!r}, far={far!r}"
        )

    f = 1.0 / math.tan(fov / 2.0)
    depth = near - far
    return Matrix([
        [f / ratio, 0.0, 0.0, 0.0],
        [0.0, f, 0.0, 0.0],
        [0.0, 0.0, (far + near) / depth, 2.0 * far * near / depth],
        [0.0, 0.0, -1.0, 0.0],
    ])
