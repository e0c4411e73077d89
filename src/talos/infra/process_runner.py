"""``subprocess``-backed implementation of :class:`~talos.core.protocols.ProcessRunner`.

This module is the **only** place in the codebase that spawns processes.
``subprocess`` and ``OSError`` exceptions are caught here and re-raised as
:class:`~talos.exceptions.StepExecutionError` — nothing raw escapes the
infrastructure boundary.  ``KeyboardInterrupt`` is deliberately left alone
so that Ctrl+C still ends the whole run.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence

from talos.exceptions import StepExecutionError

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Concrete :class:`ProcessRunner` using :func:`subprocess.run`.

    The child process inherits stdin, stdout and stderr from talos.  No
    timeout is imposed.
    """

    def run(self, program: str, args: Sequence[str]) -> None:
        """Run *program* with *args* and wait for it to exit.

        Raises
        ------
        StepExecutionError
            When the program cannot be started or exits with a non-zero
            status.
        """
        command = [program, *args]
        logger.debug("Spawning %s", command)

        try:
            subprocess.run(command, check=True)
        except subprocess.CalledProcessError as exc:
            raise StepExecutionError(
                f"Command failed with exit code {exc.returncode}: {shlex.join(command)}",
            ) from exc
        except FileNotFoundError as exc:
            raise StepExecutionError(
                f"Command not found: {program}",
                hint="Check the step's \"action\" and your PATH.",
            ) from exc
        except OSError as exc:
            raise StepExecutionError(
                f"Could not start {program}: {exc}",
            ) from exc
