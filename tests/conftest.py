"""Shared pytest fixtures and configuration for the talos test suite.

Guidelines
----------
* No real terminal interaction — prompts are scripted.
* No real processes — the process runner is faked at the protocol
  boundary (``subprocess.run`` is mocked where the real runner is tested).
* No access to the user's home directory — ``TALOS_HOME`` points at
  ``tmp_path`` whenever the registry folder is involved.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import pytest

from talos.exceptions import StepExecutionError


class ScriptedPrompter:
    """Prompter returning pre-recorded answers and recording every question.

    ``texts`` answers ``ask_text`` calls in order; ``choices`` holds the
    index picked for each ``choose_one`` call.
    """

    def __init__(
        self,
        texts: Sequence[str] = (),
        choices: Sequence[int] = (),
    ) -> None:
        self._texts: list[str] = list(texts)
        self._choices: list[int] = list(choices)
        self.calls: list[tuple[str, str, Any]] = []

    def choose_one(self, message: str, choices: Sequence[tuple[str, Any]]) -> Any:
        self.calls.append(("choose_one", message, [title for title, _ in choices]))
        return choices[self._choices.pop(0)][1]

    def ask_text(self, message: str, default: str = "") -> str:
        self.calls.append(("ask_text", message, default))
        return self._texts.pop(0)


class RecordingRunner:
    """ProcessRunner that records invocations and fails for chosen programs."""

    def __init__(self, failing: Sequence[str] = ()) -> None:
        self._failing: set[str] = set(failing)
        self.calls: list[tuple[str, tuple[str, ...]]] = []

    def run(self, program: str, args: Sequence[str]) -> None:
        self.calls.append((program, tuple(args)))
        if program in self._failing:
            raise StepExecutionError(f"Command failed with exit code 1: {program}")


@pytest.fixture
def make_prompter() -> Callable[..., ScriptedPrompter]:
    """Factory fixture: ``make_prompter(texts=[...], choices=[...])``."""
    return ScriptedPrompter


@pytest.fixture
def make_runner() -> Callable[..., RecordingRunner]:
    """Factory fixture: ``make_runner(failing=[...])``."""
    return RecordingRunner
