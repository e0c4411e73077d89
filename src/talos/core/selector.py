"""Version selection for a loaded registry."""

from __future__ import annotations

from talos.core.models import CommandBody, Registry
from talos.core.protocols import Prompter
from talos.exceptions import NoVersionsError

VERSION_PROMPT: str = "Select a command version to execute:"


def select_version(registry: Registry, prompter: Prompter) -> CommandBody:
    """Pick the :class:`CommandBody` to run.

    A single version is selected without prompting; several versions are
    offered to the user, labelled ``"<version>"`` or
    ``"<version> - <label>"``.

    Raises
    ------
    NoVersionsError
        If the registry declares no versions at all.
    """
    if not registry.body:
        raise NoVersionsError(
            f"No versions found for command '{registry.name}'.",
            hint="Add at least one entry to the command's \"body\" list.",
        )

    if len(registry.body) == 1:
        return registry.body[0]

    choices = [(body.display_name, body) for body in registry.body]
    return prompter.choose_one(VERSION_PROMPT, choices)
