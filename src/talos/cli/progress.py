"""Rich-based status display for lookup and step execution.

* :class:`StatusSpinner` shows an indeterminate spinner while talos looks
  for a command, then collapses into a single ✔ / ✖ line.
* :class:`ConsoleExecutionReporter` satisfies the
  :class:`~talos.core.protocols.ExecutionReporter` protocol and prints the
  command line before each step and its outcome after it.

No ``print()`` — Rich handles all rendering through the console proxy.
"""

from __future__ import annotations

from typing import Any

from talos.cli.console import console, get_rich_console, stdout_console
from talos.core.models import ResolvedInvocation, StepOutcome
from talos.exceptions import EnvironmentError

SPINNER_NAME: str = "circleHalves"


class StatusSpinner:
    """Spinner with ``succeed`` / ``fail`` terminal states.

    Usage::

        with StatusSpinner("Looking for command locally...") as spinner:
            registry = service.find(name)
            spinner.succeed("Command found locally.")
    """

    def __init__(self, text: str) -> None:
        try:
            from rich.progress import Progress, SpinnerColumn, TextColumn
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        self._text: str = text
        self._progress: Any = Progress(
            SpinnerColumn(SPINNER_NAME),
            TextColumn("{task.description}"),
            console=get_rich_console(),
            transient=True,
        )
        self._started: bool = False

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> StatusSpinner:
        self.start()
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start the spinner."""
        if not self._started:
            self._progress.start()
            self._progress.add_task(self._text, total=None)
            self._started = True

    def stop(self) -> None:
        """Stop the spinner (idempotent)."""
        if self._started:
            self._progress.stop()
            self._started = False

    def succeed(self, text: str) -> None:
        """Stop and print a success line."""
        self.stop()
        console.print(f"[green]✔[/green] {text}")

    def fail(self, text: str) -> None:
        """Stop and print a failure line."""
        self.stop()
        console.print(f"[red]✖[/red] {text}")


class ConsoleExecutionReporter:
    """Prints per-step progress of a run to the console."""

    def on_start(self, invocation: ResolvedInvocation) -> None:
        stdout_console.print(f"\n$ {invocation.command_line}\n", markup=False, highlight=False)

    def on_success(self, outcome: StepOutcome) -> None:
        console.print(f"✔ Executed command: {outcome.step_name}", style="green", markup=False)

    def on_failure(self, outcome: StepOutcome) -> None:
        console.print(
            f"✖ Failed to execute command: {outcome.step_name}",
            style="red",
            markup=False,
        )
        if outcome.message:
            console.print(f"Error: {outcome.message}", markup=False)
