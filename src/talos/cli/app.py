"""CLI application entry point and command routing for talos.

This module is the **sole error boundary** for the entire application.
It catches :class:`~talos.exceptions.TalosError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* ``print()`` is forbidden outside the CLI layer; the Rich console proxy is
  used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from collections.abc import Sequence
from types import FrameType

from talos.cli import exit_codes
from talos.cli.console import console
from talos.config import Settings, load_settings
from talos.exceptions import PromptCancelledError, TalosError
from talos.version import __version__

LOG_FORMAT: str = "%(levelname)s: %(message)s"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``talos e <name> [extras...]`` — run a registered command
    * ``talos hello [-n NAME]``      — greet the user
    * ``talos doctor``               — environment diagnostics
    """
    parser = argparse.ArgumentParser(
        prog="talos",
        description="Manage everything.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging on stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    execute = subparsers.add_parser(
        "e",
        aliases=["exec"],
        help="Execute a registered command.",
        description="Execute a registered command.",
        allow_abbrev=False,
    )
    execute.add_argument("name", help="Name of the command.")
    # REMAINDER keeps unknown -x / --x tokens instead of rejecting them.
    execute.add_argument(
        "extras",
        nargs=argparse.REMAINDER,
        help="Additional arguments and options passed to the command's steps.",
    )

    hello = subparsers.add_parser(
        "hello",
        help="Say hello to the user!",
        description="Say hello to the user!",
    )
    hello.add_argument("-n", "--name", default="World", help="Name to greet.")

    subparsers.add_parser(
        "doctor",
        help="Check the environment and the registry folders.",
        description="Check the environment and the registry folders.",
    )
    return parser


def _raw_extras(argv: Sequence[str], name: str, extras: Sequence[str]) -> list[str]:
    """Return *extras* as typed, restoring a leading ``--`` that argparse consumed."""
    tail = list(extras)
    start = len(argv) - len(tail)
    if start >= 2 and argv[start - 1] == "--" and argv[start - 2] == name:
        return ["--", *tail]
    return tail


def _configure_logging(verbose: bool) -> None:
    """Send diagnostics to stderr — DEBUG with ``--verbose``, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_execute(name: str, extras: Sequence[str], settings: Settings) -> int:
    """Dispatch a registered command.

    Flow:
    1. Instantiate infra adapters + the core command service.
    2. Look the command up locally behind a spinner.
    3. Select a version, reconcile arguments and run every step.
    4. Exit non-zero when any step failed.
    """
    from talos.cli.progress import ConsoleExecutionReporter, StatusSpinner
    from talos.cli.prompts import QuestionaryPrompter
    from talos.core.command_service import CommandService
    from talos.exceptions import CommandNotFoundError, NoVersionsError
    from talos.infra.process_runner import SubprocessRunner
    from talos.infra.registry_store import FileRegistryStore

    service = CommandService(
        FileRegistryStore(settings.commands_dir),
        QuestionaryPrompter(),
        SubprocessRunner(),
    )

    with StatusSpinner("Looking for command locally...") as spinner:
        try:
            registry = service.find(name)
        except CommandNotFoundError:
            spinner.fail("Command not found locally.")
            return exit_codes.GENERAL_ERROR
        except TalosError:
            spinner.fail("Could not load the command.")
            raise
        spinner.succeed("Command found locally.")

    try:
        report = service.execute(registry, extras, ConsoleExecutionReporter())
    except NoVersionsError:
        console.print("[red]✖[/red] No versions found for this command.")
        return exit_codes.GENERAL_ERROR

    if not report.outcomes:
        console.print("[dim]No steps to execute.[/dim]")
        return exit_codes.SUCCESS

    if report.failed:
        console.print(
            f"\n[bold red]{len(report.failed)} of {len(report)} step(s) failed.[/bold red]"
        )
        return exit_codes.GENERAL_ERROR

    return exit_codes.SUCCESS


def _handle_hello(name: str) -> int:
    """Dispatch the ``hello`` greeting command."""
    console.print(f"Hello, {name}", markup=False, highlight=False)
    return exit_codes.SUCCESS


def _handle_doctor(settings: Settings) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from talos.cli.doctor import run_doctor

    return run_doctor(settings)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the talos CLI.

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
    if argv is None:
        argv = sys.argv[1:]
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    _configure_logging(args.verbose)
    settings = load_settings()

    if args.command == "hello":
        return _handle_hello(args.name)

    if args.command == "doctor":
        return _handle_doctor(settings)

    return _handle_execute(args.name, _raw_extras(argv, args.name, args.extras), settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _terminate(_signum: int, _frame: FrameType | None) -> None:
    """SIGTERM handler — unwind exactly like Ctrl+C."""
    raise KeyboardInterrupt


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.  Cancellation
    (Ctrl+C, SIGTERM, a dismissed prompt) exits with status 0.
    """
    signal.signal(signal.SIGTERM, _terminate)
    try:
        code = main()
        sys.exit(code)
    except (PromptCancelledError, KeyboardInterrupt):
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.CANCELLED)
    except TalosError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
