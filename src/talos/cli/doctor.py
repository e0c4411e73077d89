"""``talos doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising whether
the runtime environment satisfies talos's requirements: interpreter
version, UI libraries, and the registry folders.

This module lives in the CLI layer — it may import from ``infra`` and
``core``, and it renders via Rich.  It purely collects and displays
diagnostic data.
"""

from __future__ import annotations

import importlib.util
import platform
import sys

from talos.cli import exit_codes
from talos.cli.console import console
from talos.config import Settings
from talos.infra.registry_home import RegistryHomeStatus, detect_registry_home
from talos.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _talos_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the talos version row."""
    return "talos", __version__, "[green]OK[/green]"


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = major >= 3 and minor >= 10
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _library_check(module: str) -> tuple[str, str, str]:
    """Return (label, value, status) for an interactive UI library."""
    if importlib.util.find_spec(module) is None:
        return module, "NOT INSTALLED", "[red]FAIL[/red]"
    return module, "installed", "[green]OK[/green]"


def _home_check(status: RegistryHomeStatus) -> tuple[str, str, str]:
    """Return (label, value, status) for the registry home row."""
    if status.home_found:
        return "Home", str(status.home), "[green]OK[/green]"
    return "Home", f"{status.home} (missing)", "[yellow]WARN[/yellow]"


def _commands_check(status: RegistryHomeStatus) -> tuple[str, str, str]:
    """Return (label, value, status) for the commands folder row."""
    if status.commands_found:
        count = len(status.command_names)
        noun = "command" if count == 1 else "commands"
        return "Commands", f"{count} {noun}", "[green]OK[/green]"
    return "Commands", "folder not found", "[yellow]WARN[/yellow]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\ntalos doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        plain_status = _status_plain(status)
        print(f"{label:<12} {value:<32} {plain_status:<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(settings: Settings) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    home_status = detect_registry_home(settings)
    checks = [
        _talos_version_check(),
        _python_version_check(),
        _library_check("rich"),
        _library_check("questionary"),
        _home_check(home_status),
        _commands_check(home_status),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="talos doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    # Show setup guidance when the commands folder is missing.
    if home_status.setup_commands:
        if rich_available:
            console.print("[yellow]The commands folder does not exist.[/yellow]")
            console.print("Create it with:\n")
            for cmd in home_status.setup_commands:
                console.print(f"  [bold]{cmd}[/bold]")
            console.print()
        else:
            print("The commands folder does not exist.", file=sys.stderr)
            print("Create it with:\n", file=sys.stderr)
            for cmd in home_status.setup_commands:
                print(f"  {cmd}", file=sys.stderr)
            print(file=sys.stderr)

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
