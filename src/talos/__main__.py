"""Allow ``python -m talos`` invocation.

Delegates to the CLI error-boundary entry point so that ``python -m talos``
behaves identically to the ``talos`` console script.
"""

from __future__ import annotations

from talos.cli.app import cli

if __name__ == "__main__":
    cli()
