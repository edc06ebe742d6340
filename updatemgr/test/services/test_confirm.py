from __future__ import annotations

import pytest
import typer
from typer.testing import CliRunner

from updatemgr.services.confirm import PromptConfirm, ScriptedConfirm


def _app(results: list[bool]) -> typer.Typer:
    app = typer.Typer()

    @app.command()
    def ask() -> None:
        results.append(PromptConfirm().confirm("Do you want to write this index?"))

    return app


@pytest.mark.parametrize(
    ("answer", "expected"),
    [
        ("y\n", True),
        ("YES\n", True),
        ("  yes \n", True),
        ("n\n", False),
        ("\n", False),
        ("sure\n", False),
        ("yess\n", False),
        ("", False),
    ],
)
def test_prompt_confirm(answer: str, expected: bool) -> None:
    results: list[bool] = []

    outcome = CliRunner().invoke(_app(results), [], input=answer)

    assert outcome.exit_code == 0
    assert results == [expected]
    assert "Do you want to write this index? [y/N]" in outcome.output


def test_scripted_confirm_replays_answers() -> None:
    gate = ScriptedConfirm([True, False])
    assert gate.confirm("first") is True
    assert gate.confirm("second") is False
    assert gate.confirm("third") is False
    assert gate.prompts == ["first", "second", "third"]


def test_scripted_confirm_default() -> None:
    gate = ScriptedConfirm(default=True)
    assert gate.confirm("anything") is True
