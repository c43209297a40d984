"""
Containers module.

Fixed-shape numeric containers over real or complex scalars.

Public API:
    Vector  - fixed-length sequence of scalars
    Matrix  - rectangular grid of scalars, stored by columns
"""

from pylinalg.containers.vector import Vector
from pylinalg.containers.matrix import Matrix

__all__ = [
    "Vector",
    "Matrix",
]
