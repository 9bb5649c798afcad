"""Custom exception hierarchy for romanconv.

Every expected bad-input condition maps to a subclass of
:class:`RomanConvError`.  The core layer raises these and never prints
them; the CLI layer decides how each one is rendered.

Hierarchy
---------
RomanConvError
├── ConversionError
│   ├── RangeError
│   ├── FormatError
│   └── ParseError
├── CommandError
└── EnvironmentError
"""

from __future__ import annotations


class RomanConvError(Exception):
    """Base exception for all romanconv errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Conversion ------------------------------------------------------------

class ConversionError(RomanConvError):
    """Base class for errors raised by the conversion core."""


class RangeError(ConversionError):
    """Raised when an Arabic number lies outside the representable range."""

    def __init__(self, message: str, *, value: int, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.value: int = value
        """The rejected integer."""


class FormatError(ConversionError):
    """Raised when a string is not a well-formed Roman numeral."""

    def __init__(self, message: str, *, text: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.text: str = text
        """The rejected input, exactly as supplied."""


class ParseError(ConversionError):
    """Raised when text is not a valid integer literal."""

    def __init__(self, message: str, *, text: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.text: str = text
        """The rejected input, exactly as supplied."""


# --- Interactive session ---------------------------------------------------

class CommandError(RomanConvError):
    """Raised when a menu command is not one of the known directions."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(RomanConvError):
    """Raised when an optional UI dependency is not available."""
