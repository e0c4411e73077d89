"""File-backed implementation of :class:`~talos.core.protocols.RegistryStore`.

Each logical command lives in ``<commands_dir>/<name>.json``.  This module
is the only place that reads registry files; ``OSError``, text decoding
and JSON decoding errors are caught here and re-raised as typed
:class:`~talos.exceptions.RegistryError` subclasses.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from talos.core.models import Registry
from talos.core.schema import parse_registry
from talos.exceptions import RegistryFormatError, RegistryStorageError

logger = logging.getLogger(__name__)

REGISTRY_SUFFIX: str = ".json"


class FileRegistryStore:
    """Concrete :class:`RegistryStore` reading JSON documents from a folder.

    Usage::

        store = FileRegistryStore(Path.home() / ".talos" / "commands")
        registry = store.lookup("deploy")

    This class satisfies the :class:`~talos.core.protocols.RegistryStore`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, commands_dir: Path) -> None:
        self._commands_dir: Path = commands_dir

    @property
    def commands_dir(self) -> Path:
        return self._commands_dir

    def path_for(self, name: str) -> Path:
        """Return the registry file path used for *name*."""
        return self._commands_dir / f"{name}{REGISTRY_SUFFIX}"

    def list_names(self) -> list[str]:
        """Return the sorted names of every registry file in the folder."""
        if not self._commands_dir.is_dir():
            return []
        return sorted(
            path.stem
            for path in self._commands_dir.glob(f"*{REGISTRY_SUFFIX}")
            if path.is_file()
        )

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def lookup(self, name: str) -> Registry | None:
        """Read and validate the registry document for *name*.

        Returns ``None`` when no document exists for *name*.

        Raises
        ------
        RegistryStorageError
            When the commands folder is missing or unreadable.
        RegistryFormatError
            When the document is not valid JSON or fails validation.
        """
        if not self._commands_dir.is_dir():
            raise RegistryStorageError(
                f"Commands folder not found: {self._commands_dir}",
                hint=f"Create it with: mkdir -p {self._commands_dir}",
            )

        path = self.path_for(name)
        logger.debug("Looking up registry file %s", path)

        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as exc:
            raise RegistryFormatError(
                f"{path.name} is not valid UTF-8: {exc}",
                hint="Fix the command file and try again.",
            ) from exc
        except OSError as exc:
            raise RegistryStorageError(
                f"Could not read {path}: {exc}",
            ) from exc

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise RegistryFormatError(
                f"{path.name} is not valid JSON: {exc}",
                hint="Fix the command file and try again.",
            ) from exc

        return parse_registry(document)
