"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure and CLI adapters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — so that the reconciliation algorithm can be driven by a
scripted prompter and a fake process runner in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

from talos.core.models import Registry, ResolvedInvocation, StepOutcome

T = TypeVar("T")


class RegistryStore(Protocol):
    """Contract for registry storage backends."""

    def lookup(self, name: str) -> Registry | None:
        """Return the validated registry for *name*, or ``None`` if absent.

        Raises
        ------
        RegistryStorageError
            When the storage cannot be reached at all.
        RegistryFormatError
            When the stored document is malformed.
        """
        ...  # pragma: no cover


class Prompter(Protocol):
    """Contract for interactive prompt providers.

    Implementations raise :class:`~talos.exceptions.PromptCancelledError`
    when the user dismisses a prompt.
    """

    def choose_one(self, message: str, choices: Sequence[tuple[str, T]]) -> T:
        """Let the user pick one of *choices* (``(title, value)`` pairs)."""
        ...  # pragma: no cover

    def ask_text(self, message: str, default: str = "") -> str:
        """Ask for a free-text answer, pre-filled with *default*."""
        ...  # pragma: no cover


class ProcessRunner(Protocol):
    """Contract for external program execution."""

    def run(self, program: str, args: Sequence[str]) -> None:
        """Run *program* with *args*, inheriting the caller's streams.

        Raises
        ------
        StepExecutionError
            When the program cannot be started or exits non-zero.
        """
        ...  # pragma: no cover


class ExecutionReporter(Protocol):
    """Receives per-step notifications from the execution sequencer."""

    def on_start(self, invocation: ResolvedInvocation) -> None:
        ...  # pragma: no cover

    def on_success(self, outcome: StepOutcome) -> None:
        ...  # pragma: no cover

    def on_failure(self, outcome: StepOutcome) -> None:
        ...  # pragma: no cover
