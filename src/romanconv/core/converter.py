"""Pure Arabic ⇄ Roman numeral conversion.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.  Expected bad input raises a
:class:`~romanconv.exceptions.ConversionError` subclass.

Roman → Arabic runs in two separate steps:

1. **Validate** — :func:`validate_roman` checks the numeral grammar.
2. **Decompose** — :func:`sum_roman` folds a well-formed numeral into
   an integer and has no error paths of its own.
"""

from __future__ import annotations

import re

from romanconv.core.boundaries import floor_boundary, symbol_value
from romanconv.exceptions import FormatError, ParseError, RangeError

MIN_VALUE: int = 1
"""Smallest representable Arabic number."""

MAX_VALUE: int = 3999
"""Largest representable Arabic number (no symbol exists for 5000)."""

ROMAN_PATTERN: re.Pattern[str] = re.compile(
    r"M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})"
)
"""Grammar of canonical upper-case Roman numerals.  Matches ``""`` too."""

_INTEGER_PATTERN: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")

_MAX_LITERAL_DIGITS: int = 4300
"""Default ``sys.get_int_max_str_digits`` limit; longer literals make ``int`` raise."""


# ---------------------------------------------------------------------------
# Arabic → Roman
# ---------------------------------------------------------------------------

def to_roman(n: int) -> str:
    """Convert *n* to its canonical Roman numeral.

    Greedy decomposition: take the largest boundary not exceeding the
    remainder, emit its symbol, subtract, repeat until nothing remains.

    Raises
    ------
    TypeError
        If *n* is not an ``int`` (``bool`` is rejected too).
    RangeError
        If *n* is outside ``[MIN_VALUE, MAX_VALUE]``.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if not MIN_VALUE <= n <= MAX_VALUE:
        raise RangeError(
            f"{n} is out of range; expected an integer between "
            f"{MIN_VALUE} and {MAX_VALUE}.",
            value=n,
        )

    symbols: list[str] = []
    remainder = n
    while remainder > 0:
        boundary = floor_boundary(remainder)
        symbols.append(boundary.symbol)
        remainder -= boundary.value
    return "".join(symbols)


# ---------------------------------------------------------------------------
# Roman → Arabic
# ---------------------------------------------------------------------------

def is_roman_numeral(text: str) -> bool:
    """Return ``True`` when *text* is a non-empty ASCII numeral, in any case."""
    if not text or not text.isascii():
        return False
    return ROMAN_PATTERN.fullmatch(text.upper()) is not None


def validate_roman(text: str) -> str:
    """Return the canonical upper-case form of *text*.

    Surrounding whitespace is ignored.  Only ASCII letters are accepted,
    so letters such as ``"ı"`` that upper-case to ``"I"`` are rejected.

    Raises
    ------
    FormatError
        If *text* is empty, not ASCII, or does not match :data:`ROMAN_PATTERN`.
    """
    stripped = text.strip()
    candidate = stripped.upper()
    if not is_roman_numeral(stripped):
        raise FormatError(
            f"{text!r} is not a valid Roman numeral.",
            text=text,
            hint="Use the letters M, D, C, L, X, V and I in canonical order.",
        )
    return candidate


def sum_roman(numeral: str) -> int:
    """Fold a well-formed upper-case *numeral* into its integer value.

    Scans right to left: a symbol smaller than the one to its right is
    the first half of a subtractive pair and is subtracted, otherwise it
    is added.
    """
    total = 0
    previous = 0
    for char in reversed(numeral):
        value = symbol_value(char)
        if value < previous:
            total -= value
        else:
            total += value
        previous = value
    return total


def to_arabic(text: str) -> int:
    """Convert a Roman numeral (case-insensitive) to an integer.

    Raises
    ------
    FormatError
        If *text* is not a valid Roman numeral.
    """
    return sum_roman(validate_roman(text))


# ---------------------------------------------------------------------------
# Arabic literal parsing
# ---------------------------------------------------------------------------

def parse_arabic(text: str) -> int:
    """Parse a base-10 integer literal with an optional sign.

    The range is not checked here; see :func:`to_roman`.

    Raises
    ------
    ParseError
        If *text* is not an integer literal, or has more digits than
        ``int`` converts by default.
    """
    candidate = text.strip()
    if _INTEGER_PATTERN.fullmatch(candidate) is None:
        raise ParseError(f"{text!r} is not a valid integer.", text=text)
    if len(candidate.lstrip("+-")) > _MAX_LITERAL_DIGITS:
        raise ParseError(f"{text!r} is too long to be an integer.", text=text)
    return int(candidate)
