"""
Core math module для mstd

Скалярные примитивы и transformers.
"""

from mstd.core.math.numeric import (
    Scalar,
    absolute,
    as_count,
    cube,
    decrement,
    factorial,
    increment,
    is_even,
    is_odd,
    maximum,
    minimum,
    negate,
    power,
    sqrt,
    square,
)

__all__ = [
    # Types
    "Scalar",
    # Functions
    "absolute",
    "as_count",
    "factorial",
    "is_even",
    "is_odd",
    "maximum",
    "minimum",
    "power",
    # Transformers
    "cube",
    "decrement",
    "increment",
    "negate",
    "sqrt",
    "square",
]
