"""The Boundary Table: the canonical subtractive-form Roman alphabet.

The table is built once at import time and never mutated, so it can be
shared freely between callers and threads.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from romanconv.core.models import Boundary

BOUNDARIES: tuple[Boundary, ...] = (
    Boundary(1000, "M"),
    Boundary(900, "CM"),
    Boundary(500, "D"),
    Boundary(400, "CD"),
    Boundary(100, "C"),
    Boundary(90, "XC"),
    Boundary(50, "L"),
    Boundary(40, "XL"),
    Boundary(10, "X"),
    Boundary(9, "IX"),
    Boundary(5, "V"),
    Boundary(4, "IV"),
    Boundary(1, "I"),
)
"""Boundary values, strictly descending."""

SYMBOL_VALUES: Mapping[str, int] = MappingProxyType(
    {boundary.symbol: boundary.value for boundary in BOUNDARIES}
)
"""Read-only ``symbol -> value`` view of :data:`BOUNDARIES`."""


def floor_boundary(n: int) -> Boundary:
    """Return the boundary with the largest value not exceeding *n*.

    Only defined for ``n >= 1``; the smallest boundary is ``I``.
    """
    for boundary in BOUNDARIES:
        if boundary.value <= n:
            return boundary
    raise ValueError(f"no boundary value <= {n}")


def symbol_value(symbol: str) -> int:
    """Return the integer value of a tabulated *symbol*.

    Raises
    ------
    KeyError
        If *symbol* is not in the table.
    """
    return SYMBOL_VALUES[symbol]
