"""Domain models for talos.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and a few derived views.  They carry zero
I/O and zero dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Registry document
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Step:
    """A single external-program invocation inside a command version."""

    name: str
    """Human-readable step name used in status messages."""

    options: tuple[str, ...]
    """Declared flag names (e.g. ``"--host"``).  The first is the primary option."""

    args: tuple[str, ...]
    """Argument templates — literal defaults or ``<...>``/``[...]`` placeholders."""

    action: str
    """The external program to invoke."""

    @property
    def primary_option(self) -> str | None:
        """First declared option, or ``None`` when the step declares none."""
        return self.options[0] if self.options else None


@dataclass(frozen=True, slots=True)
class CommandBody:
    """One selectable version of a logical command.

    ``commands`` is an ordered pipeline: its order is execution order.
    """

    version: str
    commands: tuple[Step, ...]
    label: str | None = None

    @property
    def display_name(self) -> str:
        """``"<version>"`` or ``"<version> - <label>"`` when labelled."""
        if self.label:
            return f"{self.version} - {self.label}"
        return self.version


@dataclass(frozen=True, slots=True)
class Registry:
    """All known versions of a logical command."""

    name: str
    body: tuple[CommandBody, ...]


# ---------------------------------------------------------------------------
# Tokenized trailing arguments
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagValue:
    """A known flag and the value token it consumed, if any."""

    flag: str
    value: str | None


@dataclass(frozen=True, slots=True)
class ParsedExtras:
    """Raw trailing tokens split into flags, unknown tokens and positionals."""

    flags: tuple[FlagValue, ...]
    unknown_tokens: tuple[str, ...]
    positionals: tuple[str, ...]

    @property
    def supplied_flags(self) -> frozenset[str]:
        """Names of the known flags present in the raw input."""
        return frozenset(item.flag for item in self.flags)


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResolvedInvocation:
    """A step's program together with its final argument vector."""

    step_name: str
    action: str
    argv: tuple[str, ...]

    @property
    def command_line(self) -> str:
        """Program and arguments joined by single spaces, for display."""
        return " ".join((self.action, *self.argv))


@dataclass(frozen=True, slots=True)
class StepOutcome:
    """Result of running one :class:`ResolvedInvocation`."""

    step_name: str
    command_line: str
    succeeded: bool
    message: str | None = None
    """Failure message; ``None`` for successful steps."""


@dataclass(frozen=True, slots=True)
class RunReport:
    """Ordered per-step outcomes of one run.

    Truthy when every attempted step succeeded (vacuously true for an
    empty run).
    """

    outcomes: tuple[StepOutcome, ...]

    @property
    def succeeded(self) -> tuple[StepOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if outcome.succeeded)

    @property
    def failed(self) -> tuple[StepOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.succeeded)

    def __len__(self) -> int:
        return len(self.outcomes)

    def __bool__(self) -> bool:
        return not self.failed
