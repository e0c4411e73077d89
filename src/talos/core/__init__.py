"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem, terminal or subprocess I/O — collaborators are injected
  through :mod:`talos.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from talos.core.command_service import CommandService
from talos.core.models import (
    CommandBody,
    FlagValue,
    ParsedExtras,
    Registry,
    ResolvedInvocation,
    RunReport,
    Step,
    StepOutcome,
)
from talos.core.protocols import ExecutionReporter, ProcessRunner, Prompter, RegistryStore
from talos.core.reconciler import ArgumentReconciler
from talos.core.sequencer import ExecutionSequencer

__all__: list[str] = [
    "ArgumentReconciler",
    "CommandBody",
    "CommandService",
    "ExecutionReporter",
    "ExecutionSequencer",
    "FlagValue",
    "ParsedExtras",
    "ProcessRunner",
    "Prompter",
    "Registry",
    "RegistryStore",
    "ResolvedInvocation",
    "RunReport",
    "Step",
    "StepOutcome",
]
