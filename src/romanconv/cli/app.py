"""CLI application entry point and command routing for romanconv.

This module is the **sole error boundary** for the entire application.
It catches :class:`~romanconv.exceptions.RomanConvError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No conversion logic lives here — all work is delegated to the core
  layer and the interactive session.
* One-shot results are written to stdout so they can be piped;
  everything else goes through the Rich console on stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from romanconv.cli import exit_codes
from romanconv.cli.console import console, escape_markup
from romanconv.core.converter import (
    MAX_VALUE,
    MIN_VALUE,
    parse_arabic,
    to_arabic,
    to_roman,
)
from romanconv.core.models import Direction
from romanconv.exceptions import ParseError, RangeError, RomanConvError
from romanconv.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``romanconv``                    — interactive session
    * ``romanconv <value>``            — convert, direction guessed
    * ``romanconv --to-roman N``       — convert an Arabic number
    * ``romanconv --to-arabic S``      — convert a Roman numeral
    * ``romanconv --version``
    """
    parser = argparse.ArgumentParser(
        prog="romanconv",
        description=(
            f"Convert between Arabic numbers ({MIN_VALUE}-{MAX_VALUE}) "
            "and Roman numerals."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Arabic number or Roman numeral to convert. "
        "Omit to start the interactive session.",
    )
    group.add_argument(
        "-r",
        "--to-roman",
        metavar="NUMBER",
        default=None,
        help="Convert an Arabic number to a Roman numeral.",
    )
    group.add_argument(
        "-a",
        "--to-arabic",
        metavar="NUMERAL",
        default=None,
        help="Convert a Roman numeral to an Arabic number.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _guess_direction(text: str) -> Direction:
    """Integers go to Roman; anything else is treated as a numeral."""
    try:
        parse_arabic(text)
    except ParseError:
        return Direction.TO_ARABIC
    return Direction.TO_ROMAN


def _handle_convert(text: str, direction: Direction) -> int:
    """Convert a single value and print the result to stdout."""
    if direction is Direction.TO_ROMAN:
        try:
            result = to_roman(parse_arabic(text))
        except RangeError as exc:
            exc.hint = f"Enter a valid integer > 0 and <= {MAX_VALUE}."
            raise
    else:
        result = str(to_arabic(text))

    print(result)
    return exit_codes.SUCCESS


def _handle_session() -> int:
    """Dispatch the interactive read loop."""
    from romanconv.cli.session import run_session

    return run_session()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the romanconv CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.to_roman is not None:
        return _handle_convert(args.to_roman, Direction.TO_ROMAN)
    if args.to_arabic is not None:
        return _handle_convert(args.to_arabic, Direction.TO_ARABIC)
    if args.target is not None:
        return _handle_convert(args.target, _guess_direction(args.target))

    return _handle_session()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except RomanConvError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
