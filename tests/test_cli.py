"""Tests for the ``name`` and ``import`` commands and the error boundary.

Commands run through :func:`main`; the error boundary is exercised via
:func:`cli` with a patched ``sys.argv``.
"""

from __future__ import annotations

import logging
import sys

import pytest

from teambook.cli import exit_codes
from teambook.cli.app import cli, main
from teambook.exceptions import FormatError, InvalidNameError


def _run_cli(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["teambook", *argv])
    with pytest.raises(SystemExit) as exc_info:
        cli()
    return int(exc_info.value.code)


# ---------------------------------------------------------------------------
# name
# ---------------------------------------------------------------------------

class TestNameCommand:
    def test_valid_name(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["name", "F12-3"]) == exit_codes.SUCCESS
        assert "F12-3 is a valid team name." in capsys.readouterr().err

    def test_empty_name(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["name", ""]) == exit_codes.SUCCESS
        assert "no team" in capsys.readouterr().err

    def test_invalid_name_raises(self) -> None:
        with pytest.raises(InvalidNameError):
            main(["name", "bad-name"])


# ---------------------------------------------------------------------------
# import
# ---------------------------------------------------------------------------

class TestImportCommand:
    def test_reports_path(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["import", "file=data/contacts.json"]) == exit_codes.SUCCESS
        assert "data/contacts.json" in capsys.readouterr().err

    def test_path_with_spaces(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["import", "file=my", "contacts.json"]) == exit_codes.SUCCESS
        assert "my contacts.json" in capsys.readouterr().err

    def test_missing_prefix_raises(self) -> None:
        with pytest.raises(FormatError):
            main(["import", "data.json"])

    def test_no_arguments_raises(self) -> None:
        with pytest.raises(FormatError):
            main(["import"])


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_success_exit_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert _run_cli(monkeypatch, "name", "W08-1") == exit_codes.SUCCESS

    def test_invalid_name_shows_hint(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert _run_cli(monkeypatch, "name", "Z99-9") == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Invalid team name" in err
        assert "Hint:" in err

    def test_format_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        code = _run_cli(monkeypatch, "import", "file=a.json", "file=b.json")
        assert code == exit_codes.GENERAL_ERROR

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from teambook.cli import app as app_module

        def _interrupt(argv: list[str] | None = None) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", _interrupt)
        assert _run_cli(monkeypatch) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from teambook.cli import app as app_module

        def _explode(argv: list[str] | None = None) -> int:
            raise RuntimeError("boom")

        monkeypatch.setattr(app_module, "main", _explode)
        assert _run_cli(monkeypatch) == exit_codes.UNEXPECTED_ERROR

    def test_unexpected_error_with_markup_in_message(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from teambook.cli import app as app_module

        def _explode(argv: list[str] | None = None) -> int:
            raise RuntimeError("closing tag [/old] left open")

        monkeypatch.setattr(app_module, "main", _explode)
        assert _run_cli(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        assert "[/old]" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Markup in user-supplied text
# ---------------------------------------------------------------------------

class TestMarkupInUserText:
    def test_bracketed_import_path(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch, "import", "file=backup[/old].json")
        assert code == exit_codes.SUCCESS
        assert "backup[/old].json" in capsys.readouterr().err

    def test_tag_like_path_is_shown_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["import", "file=data/[bold]x.json"]) == exit_codes.SUCCESS
        assert "data/[bold]x.json" in capsys.readouterr().err

    def test_closing_tag_as_team_name(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert _run_cli(monkeypatch, "name", "[/x]") == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Invalid team name" in err
        assert "[/x]" in err

    def test_escape_leaves_plain_text_alone(self) -> None:
        from teambook.cli.console import escape

        assert escape("F12-3") == "F12-3"
        assert escape("[/x]") == "\\[/x]"


# ---------------------------------------------------------------------------
# Verbose logging
# ---------------------------------------------------------------------------

class TestVerbose:
    def test_installs_rich_handler(self, restore_package_logger: logging.Logger) -> None:
        from rich.logging import RichHandler

        assert main(["-v", "name", "F12-3"]) == exit_codes.SUCCESS
        assert restore_package_logger.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in restore_package_logger.handlers)

    def test_handler_installed_once(self, restore_package_logger: logging.Logger) -> None:
        from rich.logging import RichHandler

        main(["-v", "name", "F12-3"])
        main(["-v", "name", "W08-1"])
        rich_handlers = [
            h for h in restore_package_logger.handlers if isinstance(h, RichHandler)
        ]
        assert len(rich_handlers) == 1

    def test_quiet_by_default(self, restore_package_logger: logging.Logger) -> None:
        from rich.logging import RichHandler

        main(["name", "F12-3"])
        assert not any(isinstance(h, RichHandler) for h in restore_package_logger.handlers)
