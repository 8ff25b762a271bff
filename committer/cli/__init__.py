"""CLI entry point for committer.

This module combines the commit flow, the documentation command and the
configuration subcommands into a single typer application.
"""

import typer

from committer.cli.config import config_app
from committer.cli.document import document_command
from committer.cli.main import main_command, run_commit_flow

# Main application
app = typer.Typer(
    name="committer",
    help="committer: AI-generated commit messages and documentation",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("document")(document_command)

# Set the main callback for default behavior
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "document_command",
    "main_command",
    "run_commit_flow",
]
