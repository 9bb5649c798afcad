"""Interactive conversion session for the CLI layer.

This module is responsible for:

* Showing the menu and reading commands until ``exit`` is entered.
* Prompting for the value to convert in the chosen direction.
* Turning every conversion error into a single-line message.

Input is read through questionary by default; tests inject a plain
callable instead.  Conversion lines go to stdout like one-shot results;
the menu and prompts go through the console on stderr.  No conversion
logic lives here.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from romanconv.cli import exit_codes
from romanconv.cli.console import console
from romanconv.core.converter import MAX_VALUE, parse_arabic, to_arabic, to_roman
from romanconv.core.models import Direction
from romanconv.exceptions import (
    CommandError,
    ConversionError,
    EnvironmentError,
    FormatError,
    ParseError,
    RangeError,
)

LineReader = Callable[[str], "str | None"]
"""Reads one line after showing a prompt; ``None`` means end of input."""

EXIT_COMMAND: str = "exit"
PROMPT: str = ">"

WELCOME_LINES: tuple[str, ...] = (
    "Welcome to the Arabic to Roman converter!",
    f"Type '{EXIT_COMMAND}' to exit.",
)
MENU_LINES: tuple[str, ...] = (
    f"Enter {Direction.TO_ROMAN.value} to convert a number to a Roman Numeral.",
    f"Enter {Direction.TO_ARABIC.value} to convert a Roman Numeral to a number.",
)
DIRECTION_PROMPTS: dict[Direction, str] = {
    Direction.TO_ROMAN: (
        "Enter an Arabic number below to see it converted to Roman numerals."
    ),
    Direction.TO_ARABIC: (
        "Enter a Roman Numeral below to see it converted to an Arabic number."
    ),
}
GOODBYE: str = "Exiting."


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def questionary_reader(message: str) -> str | None:
    """Read one line with questionary.  Returns ``None`` on Ctrl+C / Esc."""
    questionary = _import_questionary()
    return questionary.text(message).ask()


# ---------------------------------------------------------------------------
# Message formatting (pure)
# ---------------------------------------------------------------------------

def format_error(exc: ConversionError) -> str:
    """Render a conversion error as the single line shown to the user."""
    if isinstance(exc, RangeError):
        return f"Enter a valid integer > 0 and <= {MAX_VALUE}."
    if isinstance(exc, FormatError):
        return (
            f"Unable to convert '{exc.text}' into an Arabic number. "
            "Did you enter a valid roman numeral?"
        )
    if isinstance(exc, ParseError):
        return f"Unable to parse '{exc.text}' into a valid number."
    return str(exc)


def is_exit_command(text: str) -> bool:
    """Return ``True`` when *text* asks to leave the session."""
    return text.strip().lower() == EXIT_COMMAND


def parse_command(text: str) -> Direction:
    """Map a menu entry to a :class:`Direction`.

    Raises
    ------
    CommandError
        If *text* is not an integer, or not one of the menu numbers.
    """
    choices = " or ".join(str(direction.value) for direction in Direction)
    try:
        number = parse_arabic(text)
    except ParseError as exc:
        raise CommandError(f"Unable to parse input '{text}' into {choices}.") from exc
    try:
        return Direction(number)
    except ValueError as exc:
        raise CommandError(f"Invalid command '{text}' entered.") from exc


def convert_line(direction: Direction, text: str) -> str:
    """Convert *text* in *direction* and return the line to display.

    Conversion errors are rendered with :func:`format_error`, never raised.
    """
    try:
        if direction is Direction.TO_ROMAN:
            return to_roman(parse_arabic(text))
        return str(to_arabic(text))
    except ConversionError as exc:
        return format_error(exc)


# ---------------------------------------------------------------------------
# Read loop
# ---------------------------------------------------------------------------

def run_session(read_line: LineReader | None = None) -> int:
    """Run the interactive loop until ``exit`` or end of input.

    Parameters
    ----------
    read_line:
        Callable that shows a prompt and returns the entered line, or
        ``None`` at end of input.  Defaults to :func:`questionary_reader`.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS`.
    """
    reader: LineReader = read_line if read_line is not None else questionary_reader

    for line in WELCOME_LINES:
        console.print(line)

    while True:
        for line in MENU_LINES:
            console.print(line)
        command = reader(PROMPT)
        if command is None or is_exit_command(command):
            break

        try:
            direction = parse_command(command)
        except CommandError as exc:
            console.print(str(exc), markup=False)
            continue

        console.print(DIRECTION_PROMPTS[direction])
        value = reader(PROMPT)
        if value is None:
            break
        print(convert_line(direction, value))

    console.print(GOODBYE)
    return exit_codes.SUCCESS
