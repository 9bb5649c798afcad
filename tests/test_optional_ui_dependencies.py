"""Regression tests for optional CLI UI dependencies (rich/questionary).

These tests verify bootstrap commands and one-shot conversions are
resilient when optional UI packages are missing, and the interactive
session fails cleanly only when the prompt is actually needed.
"""

from __future__ import annotations

import sys

import pytest

from romanconv.cli import exit_codes
from romanconv.cli.app import main
from romanconv.cli.console import console, escape_markup
from romanconv.cli.session import run_session
from romanconv.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_one_shot_works_without_rich_or_questionary(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    assert main(["1994"]) == exit_codes.SUCCESS
    assert capsys.readouterr().out == "MCMXCIV\n"


def test_console_falls_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.print("plain text")
    assert capsys.readouterr().err == "plain text\n"


def test_escape_markup_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert escape_markup("[bold]x") == "[bold]x"


def test_session_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    lines = iter(["1", "40", "exit"])

    code = run_session(lambda _prompt: next(lines, None))
    assert code == exit_codes.SUCCESS
    assert capsys.readouterr().out == "XL\n"


def test_session_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_questionary(monkeypatch)

    with pytest.raises(EnvironmentError, match="questionary is not installed"):
        main([])
