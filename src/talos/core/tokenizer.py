"""Split raw trailing command-line tokens into flags, unknowns and positionals.

Pure transformation — no I/O, no side effects, fully deterministic.

Classification rules:

* A token starting with ``-`` is a flag.  The token right after it is the
  flag's value when it exists and does not start with ``-`` itself.
* A flag listed in *known_options* lands in ``flags`` as a
  :class:`~talos.core.models.FlagValue`.
* Any other flag lands in ``unknown_tokens``, followed by its value when it
  consumed one.  Unknown pairs stay together and are never split.
* Everything else is a positional.

Every input token ends up in exactly one bucket, and order is preserved
within each bucket.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence

from talos.core.models import FlagValue, ParsedExtras

FLAG_PREFIX: str = "-"


def is_flag(token: str) -> bool:
    """Return ``True`` when *token* looks like an option flag."""
    return token.startswith(FLAG_PREFIX)


def tokenize(
    extras: Sequence[str],
    known_options: Collection[str],
) -> ParsedExtras:
    """Classify *extras* against *known_options*.

    An explicit index is used so that a consumed value token is skipped on
    the next iteration.
    """
    flags: list[FlagValue] = []
    unknown_tokens: list[str] = []
    positionals: list[str] = []

    index = 0
    while index < len(extras):
        token = extras[index]

        if not is_flag(token):
            positionals.append(token)
            index += 1
            continue

        value: str | None = None
        if index + 1 < len(extras) and not is_flag(extras[index + 1]):
            value = extras[index + 1]

        if token in known_options:
            flags.append(FlagValue(flag=token, value=value))
        else:
            unknown_tokens.append(token)
            if value is not None:
                unknown_tokens.append(value)

        index += 2 if value is not None else 1

    return ParsedExtras(
        flags=tuple(flags),
        unknown_tokens=tuple(unknown_tokens),
        positionals=tuple(positionals),
    )
