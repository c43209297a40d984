"""
Tolerance tiers for numerical comparison.

Defines the comparison policies used across the package:
- EQUALITY: absolute tolerance used by Vector/Matrix ``==``
- EXACT_PIVOT: exact-zero pivot test used by the reduction engine

Used by the containers, the reduction engine and the test suite.
"""

from dataclasses import dataclass

from pylinalg.core.exceptions import InvalidValueError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    atol: float
    name: str
    description: str


# Elementwise equality of containers, by magnitude of the difference
EQUALITY = ToleranceTier(
    atol=1e-5,
    name='equality',
    description='Container equality: |a - b| <= 1e-5 per entry',
)

# Default pivot policy: a pivot is zero only if it compares equal to zero
EXACT_PIVOT = ToleranceTier(
    atol=0.0,
    name='exact_pivot',
    description='Exact-zero pivot test, no tolerance',
)

# Smallest/largest pivot magnitude ratio below which inverse() warns.
# Near float64 epsilon the inverse carries no reliable digits.
ILL_CONDITIONED_PIVOT_RATIO = 1e-12


def check_tolerance(tol: float, name: str = 'tol') -> float:
    """Validate a user-supplied tolerance and return it as float."""
    value = float(tol)
    if not value >= 0.0:
        raise InvalidValueError(f"{name}: must be a non-negative number, got {tol!r}")
    return value
