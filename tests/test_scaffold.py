"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* Sub-commands route to their handlers, with trailing extras intact.
"""

from __future__ import annotations

import signal
from typing import Any
from unittest.mock import patch

import pytest

from talos import __version__
from talos.cli import exit_codes
from talos.cli.app import cli, main
from talos.exceptions import (
    CommandNotFoundError,
    EnvironmentError,
    InvalidCommandNameError,
    NoVersionsError,
    PromptCancelledError,
    RegistryError,
    RegistryFormatError,
    RegistryStorageError,
    StepExecutionError,
    TalosError,
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
        [
            InvalidCommandNameError,
            RegistryError,
            NoVersionsError,
            StepExecutionError,
            PromptCancelledError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(self, exc_class: type[TalosError]) -> None:
        assert issubclass(exc_class, TalosError)

    @pytest.mark.parametrize(
        "exc_class",
        [CommandNotFoundError, RegistryStorageError, RegistryFormatError],
    )
    def test_lookup_errors_share_a_base(self, exc_class: type[TalosError]) -> None:
        assert issubclass(exc_class, RegistryError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(TalosError, Exception)

    def test_hint_is_stored(self) -> None:
        err = TalosError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert TalosError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2

    def test_cancel_is_a_clean_exit(self) -> None:
        assert exit_codes.CANCELLED == 0


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self) -> None:
        """No arguments should print help and exit 0."""
        assert main([]) == exit_codes.SUCCESS

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_hello_default_name(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["hello"]) == exit_codes.SUCCESS
        assert "Hello, World" in capsys.readouterr().err

    def test_hello_with_name(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["hello", "--name", "Miguel"]) == exit_codes.SUCCESS
        assert "Hello, Miguel" in capsys.readouterr().err

    def test_execute_requires_a_name(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["e"])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize(
        ("argv", "expected_name", "expected_extras"),
        [
            (["e", "deploy"], "deploy", []),
            (["e", "deploy", "--port", "8080", "-x"], "deploy", ["--port", "8080", "-x"]),
            (["e", "deploy", "-h"], "deploy", ["-h"]),
            (["e", "deploy", "target", "--verbose"], "deploy", ["target", "--verbose"]),
            (["-v", "exec", "deploy", "--version"], "deploy", ["--version"]),
            (["e", "deploy", "--", "-x"], "deploy", ["--", "-x"]),
            (["e", "deploy", "log", "--", "README.md"], "deploy", ["log", "--", "README.md"]),
        ],
    )
    def test_execute_passes_extras_verbatim(
        self,
        monkeypatch: pytest.MonkeyPatch,
        argv: list[str],
        expected_name: str,
        expected_extras: list[str],
    ) -> None:
        from talos.cli import app as app_module

        seen: dict[str, Any] = {}

        def _fake_execute(name: str, extras: list[str], settings: object) -> int:
            seen["name"] = name
            seen["extras"] = list(extras)
            return exit_codes.SUCCESS

        monkeypatch.setattr(app_module, "_handle_execute", _fake_execute)

        assert main(argv) == exit_codes.SUCCESS
        assert seen == {"name": expected_name, "extras": expected_extras}


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run_cli(self, error: BaseException) -> int:
        with patch("talos.cli.app.main", side_effect=error), patch("talos.cli.app.signal.signal"):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        return int(exc_info.value.code)

    def test_talos_error_exits_general_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = self._run_cli(RegistryStorageError("no storage", hint="make the folder"))
        err = capsys.readouterr().err
        assert code == exit_codes.GENERAL_ERROR
        assert "no storage" in err
        assert "make the folder" in err

    def test_keyboard_interrupt_is_a_clean_exit(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert self._run_cli(KeyboardInterrupt()) == exit_codes.CANCELLED
        assert "Aborted by user." in capsys.readouterr().err

    def test_cancelled_prompt_is_a_clean_exit(self) -> None:
        assert self._run_cli(PromptCancelledError("No value entered.")) == exit_codes.CANCELLED

    def test_unexpected_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert self._run_cli(ValueError("weird")) == exit_codes.UNEXPECTED_ERROR
        assert "ValueError: weird" in capsys.readouterr().err

    def test_installs_sigterm_handler(self) -> None:
        from talos.cli.app import _terminate

        with patch("talos.cli.app.main", return_value=exit_codes.SUCCESS):
            with patch("talos.cli.app.signal.signal") as mock_signal:
                with pytest.raises(SystemExit):
                    cli()
        mock_signal.assert_called_once_with(signal.SIGTERM, _terminate)

    def test_sigterm_handler_unwinds_like_ctrl_c(self) -> None:
        from talos.cli.app import _terminate

        with pytest.raises(KeyboardInterrupt):
            _terminate(signal.SIGTERM, None)
