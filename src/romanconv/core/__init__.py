"""Core layer — the Boundary Table and the pure conversion functions.

Rules
-----
* No ``print()`` calls.
* No input, filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from romanconv.core.boundaries import BOUNDARIES, floor_boundary, symbol_value
from romanconv.core.converter import (
    MAX_VALUE,
    MIN_VALUE,
    is_roman_numeral,
    parse_arabic,
    sum_roman,
    to_arabic,
    to_roman,
    validate_roman,
)
from romanconv.core.models import Boundary, Direction

__all__: list[str] = [
    "BOUNDARIES",
    "MAX_VALUE",
    "MIN_VALUE",
    "Boundary",
    "Direction",
    "floor_boundary",
    "is_roman_numeral",
    "parse_arabic",
    "sum_roman",
    "symbol_value",
    "to_arabic",
    "to_roman",
    "validate_roman",
]
