"""Core command service — lookup, version selection, reconciliation, execution.

This is the central service class consumed by the CLI layer.  It depends
on a :class:`~talos.core.protocols.RegistryStore`, a
:class:`~talos.core.protocols.Prompter` and a
:class:`~talos.core.protocols.ProcessRunner` injected at construction time,
keeping the core free of filesystem, terminal and subprocess imports.

Lookup and execution are separate calls so the caller can display the
lookup result before the first prompt appears.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* Only :class:`~talos.exceptions.TalosError` subclasses escape from
  :meth:`CommandService.find`.
* Per-step failures never escape :meth:`CommandService.execute`; they are
  returned in the :class:`~talos.core.models.RunReport`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from talos.core.models import Registry, RunReport
from talos.core.protocols import ExecutionReporter, ProcessRunner, Prompter, RegistryStore
from talos.core.reconciler import ArgumentReconciler
from talos.core.selector import select_version
from talos.core.sequencer import ExecutionSequencer
from talos.exceptions import (
    CommandNotFoundError,
    InvalidCommandNameError,
    RegistryStorageError,
    TalosError,
)

logger = logging.getLogger(__name__)

_FORBIDDEN_NAME_CHARS: tuple[str, ...] = ("/", "\\", "\0")


class CommandService:
    """Resolves a logical command name and runs its steps.

    Parameters
    ----------
    store:
        Registry backend used by :meth:`find`.
    prompter:
        Interactive prompt provider used for version selection and
        argument reconciliation.
    runner:
        Process runner used to execute each resolved step.
    """

    def __init__(
        self,
        store: RegistryStore,
        prompter: Prompter,
        runner: ProcessRunner,
    ) -> None:
        self._store: RegistryStore = store
        self._prompter: Prompter = prompter
        self._runner: ProcessRunner = runner

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def find(self, name: str) -> Registry:
        """Load the registry for *name*.

        Raises
        ------
        InvalidCommandNameError
            If *name* is empty or cannot name a registry file.
        CommandNotFoundError
            If the store has no registry for *name*.
        RegistryStorageError
            If the store cannot be reached.
        RegistryFormatError
            If the stored document is malformed.
        """
        self._validate_name(name)
        registry = self._lookup(name)
        if registry is None:
            raise CommandNotFoundError(
                f"Command '{name}' not found locally.",
                hint=f"Create a registry file named '{name}.json' in the commands folder.",
            )
        logger.debug("Found registry %r with %d version(s)", registry.name, len(registry.body))
        return registry

    def execute(
        self,
        registry: Registry,
        extras: Sequence[str],
        reporter: ExecutionReporter | None = None,
    ) -> RunReport:
        """Select a version of *registry* and run its steps with *extras*.

        Raises
        ------
        NoVersionsError
            If the registry declares no versions.
        PromptCancelledError
            If the user dismisses a prompt.
        """
        body = select_version(registry, self._prompter)
        logger.debug("Selected version %s (%d step(s))", body.display_name, len(body.commands))

        reconciler = ArgumentReconciler(self._prompter)
        sequencer = ExecutionSequencer(self._runner, reporter)
        return sequencer.run(reconciler.iter_invocations(body, extras))

    # ------------------------------------------------------------------
    # Name validation
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_name(name: str) -> None:
        """Raise :class:`InvalidCommandNameError` for names that are not a plain file stem."""
        if not name.strip():
            raise InvalidCommandNameError("Command name must not be empty.")
        if name != name.strip():
            raise InvalidCommandNameError(
                f"Invalid command name: {name!r}",
                hint="Command names must not start or end with whitespace.",
            )
        if name in (".", "..") or any(char in name for char in _FORBIDDEN_NAME_CHARS):
            raise InvalidCommandNameError(
                f"Invalid command name: {name}",
                hint="Command names must not contain path separators.",
            )

    # ------------------------------------------------------------------
    # Store delegation (safe boundary)
    # ------------------------------------------------------------------

    def _lookup(self, name: str) -> Registry | None:
        """Call the store and ensure only our exceptions escape."""
        try:
            return self._store.lookup(name)
        except TalosError:
            raise
        except Exception as exc:
            raise RegistryStorageError(
                f"Unexpected registry store error: {exc}",
            ) from exc
