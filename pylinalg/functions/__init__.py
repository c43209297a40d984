"""
Free numeric functions.

Standalone utilities layered on the containers' public interface.

Public API:
    linear_combination(vectors, scalars) - Weighted sum of vectors
    lerp(u, v, t)                        - Linear interpolation
    angle_cos(u, v)                      - Cosine similarity
    cross_product(u, v)                  - 3D cross product
    matvec(a, v)                         - Matrix-vector product
    matmul(a, b)                         - Matrix-matrix product
    projection(fov, ratio, near, far)    - Perspective projection matrix
"""

from pylinalg.functions._combination import linear_combination, lerp
from pylinalg.functions._geometry import angle_cos, cross_product, projection
from pylinalg.functions._products import matvec, matmul

__all__ = [
    "linear_combination",
    "lerp",
    "angle_cos",
    "cross_product",
    "matvec",
    "matmul",
    "projection",
]
