"""Raw registry document → domain model conversion.

Every function in this module is pure: it receives already-decoded JSON
data and either returns an immutable :class:`~talos.core.models.Registry`
or raises :class:`~talos.exceptions.RegistryFormatError` naming the
offending path (e.g. ``body[0].commands[1].options[0]``).

Expected document shape::

    {
      "name": "deploy",
      "body": [
        {
          "version": "1.0.0",
          "label": "optional",
          "commands": [
            {"name": "...", "options": ["--host"], "args": ["<host>"], "action": "ssh"}
          ]
        }
      ]
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from talos.core.models import CommandBody, Registry, Step
from talos.exceptions import RegistryFormatError


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

def _invalid(path: str, expected: str) -> RegistryFormatError:
    return RegistryFormatError(
        f"Invalid registry document: {path} must be {expected}.",
        hint="Fix the command file and try again.",
    )


def _require_mapping(raw: object, path: str) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise _invalid(path, "an object")
    return raw


def _require_str(raw: Mapping[str, Any], key: str, path: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str):
        raise _invalid(f"{path}.{key}" if path else key, "a string")
    return value


def _optional_str(raw: Mapping[str, Any], key: str, path: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise _invalid(f"{path}.{key}", "a string")
    return value


def _require_list(raw: Mapping[str, Any], key: str, path: str) -> list[Any]:
    value = raw.get(key)
    if not isinstance(value, list):
        raise _invalid(f"{path}.{key}" if path else key, "an array")
    return value


def _require_str_list(raw: Mapping[str, Any], key: str, path: str) -> tuple[str, ...]:
    items = _require_list(raw, key, path)
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise _invalid(f"{path}.{key}[{index}]", "a string")
    return tuple(items)


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------

def parse_step(raw: object, path: str) -> Step:
    """Convert one raw step object to a :class:`Step`."""
    data = _require_mapping(raw, path)
    return Step(
        name=_require_str(data, "name", path),
        options=_require_str_list(data, "options", path),
        args=_require_str_list(data, "args", path),
        action=_require_str(data, "action", path),
    )


def parse_command_body(raw: object, path: str) -> CommandBody:
    """Convert one raw version object to a :class:`CommandBody`."""
    data = _require_mapping(raw, path)
    commands = _require_list(data, "commands", path)
    return CommandBody(
        version=_require_str(data, "version", path),
        label=_optional_str(data, "label", path),
        commands=tuple(
            parse_step(step, f"{path}.commands[{index}]")
            for index, step in enumerate(commands)
        ),
    )


def parse_registry(raw: object) -> Registry:
    """Validate a decoded registry document and build a :class:`Registry`.

    Raises
    ------
    RegistryFormatError
        When any part of the document does not match the expected shape.
    """
    data = _require_mapping(raw, "document")
    body = _require_list(data, "body", "")
    return Registry(
        name=_require_str(data, "name", ""),
        body=tuple(
            parse_command_body(entry, f"body[{index}]")
            for index, entry in enumerate(body)
        ),
    )
