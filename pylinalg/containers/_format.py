"""Text rendering shared by Vector and Matrix."""

from __future__ import annotations

from typing import Any, Iterable
import numpy as np


def format_scalar(value: Any) -> str:
    """Shortest readable form: 1 -> '1', 0.5 -> '0.5', 1+2j -> '(1+2j)'."""
    if np.iscomplexobj(value):
        c = complex(value)
        return f"({c.real:g}{c.imag:+g}j)"
    return f"{float(value):g}"


def format_sequence(values: Iterable[Any]) -> str:
    return "[" + ", ".join(format_scalar(v) for v in values) + "]"
