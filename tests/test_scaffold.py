"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from romanconv import __version__
from romanconv.cli import exit_codes
from romanconv.cli.app import main
from romanconv.exceptions import (
    CommandError,
    ConversionError,
    EnvironmentError,
    FormatError,
    ParseError,
    RangeError,
    RomanConvError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [ConversionError, CommandError, EnvironmentError],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[RomanConvError]
    ) -> None:
        assert issubclass(exc_class, RomanConvError)

    @pytest.mark.parametrize("exc_class", [RangeError, FormatError, ParseError])
    def test_conversion_errors(self, exc_class: type[RomanConvError]) -> None:
        assert issubclass(exc_class, ConversionError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(RomanConvError, Exception)

    def test_hint_is_stored(self) -> None:
        err = RomanConvError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = RomanConvError("boom")
        assert err.hint is None

    def test_range_error_keeps_value(self) -> None:
        assert RangeError("too big", value=4000).value == 4000

    def test_format_error_keeps_text(self) -> None:
        assert FormatError("bad", text="VX").text == "VX"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_starts_session(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from romanconv.cli import app as app_module

        monkeypatch.setattr(app_module, "_handle_session", lambda: exit_codes.SUCCESS)
        assert main([]) == exit_codes.SUCCESS

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_target_and_flag_are_exclusive(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["XIV", "--to-roman", "5"])
        assert exc_info.value.code == 2
