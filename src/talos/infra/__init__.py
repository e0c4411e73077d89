"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem and the operating
system's process machinery.  Every raw exception must be caught here and
re-raised as a :class:`~talos.exceptions.TalosError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from talos.infra.process_runner import SubprocessRunner
from talos.infra.registry_home import (
    RegistryHomeStatus,
    detect_registry_home,
)
from talos.infra.registry_store import FileRegistryStore

__all__: list[str] = [
    "FileRegistryStore",
    "RegistryHomeStatus",
    "SubprocessRunner",
    "detect_registry_home",
]
