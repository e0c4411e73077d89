"""Custom exception hierarchy for talos.

All exceptions that cross layer boundaries must inherit from
:class:`TalosError`.  Raw ``OSError``/``json`` / ``subprocess`` exceptions
must never propagate beyond the infrastructure layer — they are caught
there and re-raised as a typed subclass defined here.

Hierarchy
---------
TalosError
├── InvalidCommandNameError
├── RegistryError
│   ├── CommandNotFoundError
│   ├── RegistryStorageError
│   └── RegistryFormatError
├── NoVersionsError
├── StepExecutionError
├── PromptCancelledError
└── EnvironmentError
"""

from __future__ import annotations


class TalosError(Exception):
    """Base exception for all talos errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command name ----------------------------------------------------------

class InvalidCommandNameError(TalosError):
    """Raised when a command name cannot be mapped to a registry file."""


# --- Registry lookup -------------------------------------------------------

class RegistryError(TalosError):
    """Base class for registry lookup failures."""


class CommandNotFoundError(RegistryError):
    """Raised when no registry document exists for the requested name."""


class RegistryStorageError(RegistryError):
    """Raised when the registry storage itself cannot be reached."""


class RegistryFormatError(RegistryError):
    """Raised when a registry document is not valid JSON or fails the schema."""


# --- Version selection -----------------------------------------------------

class NoVersionsError(TalosError):
    """Raised when a registry was found but declares no versions."""


# --- Execution -------------------------------------------------------------

class StepExecutionError(TalosError):
    """Raised when a step's process fails to start or exits non-zero."""


# --- Interaction -----------------------------------------------------------

class PromptCancelledError(TalosError):
    """Raised when the user dismisses an interactive prompt."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TalosError):
    """Raised when a required runtime dependency is not available."""


