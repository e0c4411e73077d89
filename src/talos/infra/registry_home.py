"""Infrastructure: registry home detection and setup guidance.

Locates the talos home folder and its ``commands`` sub-folder and
provides platform-specific commands to create them when missing.

Rules
-----
* Detection only — never creates folders.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass
from pathlib import Path

from talos.config import Settings
from talos.infra.registry_store import FileRegistryStore


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RegistryHomeStatus:
    """Result of a registry home probe.

    Attributes
    ----------
    home : Path
        The configured registry home directory.
    home_found : bool
        Whether *home* exists as a directory.
    commands_found : bool
        Whether the ``commands`` sub-folder exists.
    command_names : tuple[str, ...]
        Names of the registry documents found in the commands folder.
    setup_commands : tuple[str, ...]
        Shell commands that create the missing folders.  Empty when the
        commands folder already exists.
    """

    home: Path
    home_found: bool
    commands_found: bool
    command_names: tuple[str, ...]
    setup_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_registry_home(settings: Settings) -> RegistryHomeStatus:
    """Probe the folders configured in *settings*.

    Returns a :class:`RegistryHomeStatus` regardless of what exists — the
    caller decides whether to abort or merely warn.
    """
    home_found = settings.home.is_dir()
    commands_found = settings.commands_dir.is_dir()

    if commands_found:
        names = tuple(FileRegistryStore(settings.commands_dir).list_names())
        return RegistryHomeStatus(
            home=settings.home,
            home_found=home_found,
            commands_found=True,
            command_names=names,
            setup_commands=(),
        )

    return RegistryHomeStatus(
        home=settings.home,
        home_found=home_found,
        commands_found=False,
        command_names=(),
        setup_commands=_platform_setup_commands(settings.commands_dir),
    )


# ---------------------------------------------------------------------------
# Platform-specific setup guidance
# ---------------------------------------------------------------------------

def _platform_setup_commands(commands_dir: Path) -> tuple[str, ...]:
    """Return folder-creation commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            f'New-Item -ItemType Directory -Force -Path "{commands_dir}"',
            f'mkdir "{commands_dir}"',
        )
    return (f'mkdir -p "{commands_dir}"',)
