"""Confirmation gate in front of every index write and file deletion."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

import typer

__all__ = ["AFFIRMATIVE_ANSWERS", "ConfirmGate", "PromptConfirm", "ScriptedConfirm"]

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})


class ConfirmGate(Protocol):
    def confirm(self, prompt: str) -> bool:
        """Return True only if the user explicitly approved."""
        ...


class PromptConfirm:
    """Blocks on interactive input.

    Only ``y``/``yes`` approve. Anything else declines, including an empty
    answer and end of input; the prompt is never repeated.
    """

    def confirm(self, prompt: str) -> bool:
        try:
            answer: str = typer.prompt(f"{prompt} [y/N]", default="", show_default=False)
        except typer.Abort:
            # EOF or interrupt at the prompt
            typer.echo()
            return False
        return answer.strip().lower() in AFFIRMATIVE_ANSWERS


class ScriptedConfirm:
    """Answers from a fixed script, recording every prompt shown.

    Once the script runs out, ``default`` is returned.
    """

    def __init__(self, answers: Iterable[bool] = (), *, default: bool = False) -> None:
        self._answers = list(answers)
        self._default = default
        self.prompts: list[str] = []

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        if self._answers:
            return self._answers.pop(0)
        return self._default
