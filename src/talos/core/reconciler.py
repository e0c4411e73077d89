"""Argument reconciliation — from raw trailing tokens to per-step argv.

For a selected :class:`~talos.core.models.CommandBody` the reconciler:

1. Collects the *known options*: the union of ``options`` across every
   step of the version.
2. Tokenizes the raw extras once against that set.
3. Builds a base argument list shared by all steps: known flags (each
   followed by its value, if any), then unknown tokens, then positionals.
4. Per step, prompts for every placeholder template, then — only when none
   of the step's options was supplied — for the step's primary option.
5. Emits ``defaults + prompted placeholder values + base list`` as the
   step's argument vector.

Defaults always precede prompted placeholder values, whatever their
position relative to each other in the step's ``args``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from talos.core.models import CommandBody, ParsedExtras, ResolvedInvocation, Step
from talos.core.placeholders import placeholder_label, split_args
from talos.core.protocols import Prompter
from talos.core.tokenizer import tokenize

logger = logging.getLogger(__name__)


def known_options(body: CommandBody) -> frozenset[str]:
    """Union of declared options over every step of *body*."""
    return frozenset(option for step in body.commands for option in step.options)


def build_base_args(parsed: ParsedExtras) -> list[str]:
    """Flatten *parsed* into the argument list carried into every step."""
    base: list[str] = []
    for item in parsed.flags:
        base.append(item.flag)
        if item.value is not None:
            base.append(item.value)
    base.extend(parsed.unknown_tokens)
    base.extend(parsed.positionals)
    return base


def placeholder_prompt(template: str) -> str:
    return f"What argument are you gonna send? ({placeholder_label(template)})"


def option_prompt(option: str) -> str:
    return f'What do you want to use for "{option}" argument?'


class ArgumentReconciler:
    """Resolves each step of a command version into a concrete invocation.

    Parameters
    ----------
    prompter:
        Any object satisfying the :class:`~talos.core.protocols.Prompter`
        protocol.  It is consulted for placeholder values and for the
        primary option of steps whose options were not supplied.
    """

    def __init__(self, prompter: Prompter) -> None:
        self._prompter: Prompter = prompter

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def iter_invocations(
        self,
        body: CommandBody,
        extras: Sequence[str],
    ) -> Iterator[ResolvedInvocation]:
        """Yield one :class:`ResolvedInvocation` per step, in declared order.

        Resolution is lazy: a step's prompts are shown only when the
        consumer asks for that step, i.e. after the previous step ran.
        """
        parsed = tokenize(extras, known_options(body))
        logger.debug(
            "Tokenized extras: flags=%s unknown=%s positionals=%s",
            parsed.flags,
            parsed.unknown_tokens,
            parsed.positionals,
        )
        base_args = build_base_args(parsed)

        for step in body.commands:
            yield self.resolve_step(step, parsed, base_args)

    def resolve_step(
        self,
        step: Step,
        parsed: ParsedExtras,
        base_args: Sequence[str],
    ) -> ResolvedInvocation:
        """Prompt for whatever *step* is missing and assemble its argv."""
        filled_args = self.fill_args(step)

        step_args = list(base_args)
        option_value = self._ask_primary_option(step, parsed)
        if option_value is not None:
            step_args.extend(option_value)

        argv = tuple(filled_args + step_args)
        logger.debug("Resolved step %r: %s %s", step.name, step.action, argv)
        return ResolvedInvocation(step_name=step.name, action=step.action, argv=argv)

    def fill_args(self, step: Step) -> list[str]:
        """Return the step's literal defaults followed by prompted placeholder values."""
        placeholders, defaults = split_args(step.args)
        values = [
            self._prompter.ask_text(placeholder_prompt(template))
            for template in placeholders
        ]
        return defaults + values

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _ask_primary_option(
        self,
        step: Step,
        parsed: ParsedExtras,
    ) -> tuple[str, str] | None:
        """Prompt for the primary option unless one of the step's options was given."""
        primary = step.primary_option
        if primary is None:
            return None

        supplied = parsed.supplied_flags
        if any(option in supplied for option in step.options):
            return None

        value = self._prompter.ask_text(option_prompt(primary), default="")
        if value == "":
            return None
        return primary, value
