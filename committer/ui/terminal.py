"""Terminal implementation of Interaction built on typer prompts."""

import os
from typing import Optional

import click
import typer

from committer.global_config import get_editor_preference
from committer.ui.base import Interaction

EDITOR_TEMPLATE = (
    "\n"
    "# Write the commit message above.\n"
    "# Lines starting with '#' are ignored. Quit without saving to abort.\n"
)


def _strip_comments(text: str) -> str:
    lines = [line for line in text.splitlines() if not line.startswith("#")]
    return "\n".join(lines).strip()


class TerminalInteraction(Interaction):
    """Prompts on stdin/stdout, editor through $EDITOR or the configured one."""

    def __init__(self, editor: Optional[str] = None):
        """Initialize the interaction.

        Args:
            editor: Editor command. Defaults to the `editor` global config
                value, then $EDITOR, then click's platform default.
        """
        self.editor = editor or get_editor_preference() or os.environ.get("EDITOR")

    def show(self, text: str) -> None:
        typer.echo(text)

    def choose(self, question: str, choices: list[str]) -> str:
        typer.echo(question)
        for index, choice in enumerate(choices, start=1):
            typer.echo(f"  {index}. {choice}")
        selected = typer.prompt(
            "Select an option",
            type=click.IntRange(1, len(choices)),
            default=1,
        )
        return choices[selected - 1]

    def confirm(self, question: str, default: bool) -> bool:
        return typer.confirm(question, default=default)

    def ask(self, prompt: str) -> str:
        return typer.prompt(prompt).strip()

    def edit(self, initial: str = "") -> Optional[str]:
        text = typer.edit(initial + EDITOR_TEMPLATE, editor=self.editor, require_save=True)
        if text is None:
            return None
        return _strip_comments(text)
