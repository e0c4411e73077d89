"""Runtime settings resolved from the environment.

talos keeps its registry under a single home directory.  The location
defaults to ``~/.talos`` and may be overridden with ``TALOS_HOME``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

HOME_ENV_VAR: str = "TALOS_HOME"
"""Environment variable that overrides the registry home directory."""

DEFAULT_HOME_NAME: str = ".talos"

COMMANDS_FOLDER_NAME: str = "commands"


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved runtime settings."""

    home: Path
    """Registry home directory (``~/.talos`` unless overridden)."""

    @property
    def commands_dir(self) -> Path:
        """Folder holding one ``<name>.json`` registry document per command."""
        return self.home / COMMANDS_FOLDER_NAME


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    override = env.get(HOME_ENV_VAR, "").strip()
    if override:
        home = Path(override).expanduser()
    else:
        home = Path.home() / DEFAULT_HOME_NAME
    return Settings(home=home)
