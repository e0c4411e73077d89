"""Interactive prompts for the CLI layer.

:class:`QuestionaryPrompter` satisfies the
:class:`~talos.core.protocols.Prompter` protocol using questionary:

* ``choose_one`` — arrow-key single-choice selection.
* ``ask_text`` — free-text input with an optional default.

No business logic lives here: the core decides *when* to prompt and with
what message; this module only renders the question.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from talos.exceptions import EnvironmentError, PromptCancelledError

T = TypeVar("T")


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class QuestionaryPrompter:
    """Concrete :class:`Prompter` backed by questionary.

    questionary's ``ask()`` returns ``None`` on Ctrl+C / Esc; both methods
    turn that into :class:`~talos.exceptions.PromptCancelledError`.
    """

    def choose_one(self, message: str, choices: Sequence[tuple[str, T]]) -> T:
        """Let the user pick one of *choices* with the arrow keys.

        Raises
        ------
        PromptCancelledError
            If the user cancels the prompt.
        """
        questionary = _import_questionary()

        # Index values keep arbitrary (unhashable) choice values out of questionary.
        options = [
            questionary.Choice(title=title, value=index)
            for index, (title, _value) in enumerate(choices)
        ]

        selected: int | None = questionary.select(
            message,
            choices=options,
            use_arrow_keys=True,
            use_shortcuts=False,
        ).ask()

        if selected is None:
            raise PromptCancelledError("No option selected.")

        return choices[selected][1]

    def ask_text(self, message: str, default: str = "") -> str:
        """Ask for a free-text answer, pre-filled with *default*.

        Raises
        ------
        PromptCancelledError
            If the user cancels the prompt.
        """
        questionary = _import_questionary()

        answer: str | None = questionary.text(message, default=default).ask()

        if answer is None:
            raise PromptCancelledError("No value entered.")

        return answer
