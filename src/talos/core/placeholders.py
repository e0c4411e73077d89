"""Placeholder detection for step argument templates.

A template is a placeholder when it is wrapped, as a whole, in a single
``<...>`` or ``[...]`` pair with non-empty content.  Anything else is a
literal default passed through unchanged — including malformed templates
such as ``"<host"`` or ``"<a><b>"``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

_PLACEHOLDER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"<[^>]+>"),
    re.compile(r"\[[^\]]+\]"),
)

_WRAPPER_CHARS = re.compile(r"[\[\]<>]")

FALLBACK_LABEL: str = "value"


def is_placeholder(template: str) -> bool:
    """Return ``True`` when *template* must be supplied by the user."""
    return any(pattern.fullmatch(template) for pattern in _PLACEHOLDER_PATTERNS)


def placeholder_label(template: str) -> str:
    """Human label for a placeholder: brackets stripped, whitespace trimmed."""
    return _WRAPPER_CHARS.sub("", template).strip() or FALLBACK_LABEL


def split_args(args: Sequence[str]) -> tuple[list[str], list[str]]:
    """Partition *args* into ``(placeholders, defaults)``, keeping relative order."""
    placeholders: list[str] = []
    defaults: list[str] = []
    for template in args:
        if is_placeholder(template):
            placeholders.append(template)
        else:
            defaults.append(template)
    return placeholders, defaults
