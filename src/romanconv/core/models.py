"""Domain models for romanconv.

All models are immutable value objects with no behaviour beyond data
access.  They carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


# ---------------------------------------------------------------------------
# Boundary value
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Boundary:
    """One canonical (value, symbol) pair of the Roman numeral alphabet.

    Single letters (``"X"``) and subtractive pairs (``"IX"``) are both
    boundaries.
    """

    value: int
    """Integer value of the symbol (e.g. ``9``)."""

    symbol: str
    """Upper-case numeral text (e.g. ``"IX"``)."""


# ---------------------------------------------------------------------------
# Conversion direction
# ---------------------------------------------------------------------------

class Direction(IntEnum):
    """Conversion direction, numbered as the interactive menu shows it."""

    TO_ROMAN = 1
    TO_ARABIC = 2
