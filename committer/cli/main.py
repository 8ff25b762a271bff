"""Main CLI command: generate, review and commit a message for staged changes."""

from typing import Optional

import typer

from committer import __version__, git, llm
from committer.cli.utils import RunSettings, report_error, resolve_run_settings
from committer.generation import (
    Cancelled,
    EmptyResultError,
    GenerationError,
    MessageGenerationLoop,
)
from committer.git import GitError, NotAGitRepositoryError
from committer.llm import BaseLLMProvider, LLMError, MissingAPIKeyError
from committer.logging_utils import get_logger
from committer.textsplitter import ChunkingError, chunk_text
from committer.ui import Interaction, Spinner, TerminalInteraction

logger = get_logger(__name__)

NOTHING_TO_DO = "Nothing to do, exiting..."


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"committer {__version__}")
        raise typer.Exit()


def run_commit_flow(
    provider: BaseLLMProvider,
    interaction: Interaction,
    settings: RunSettings,
    spinner: Optional[Spinner] = None,
) -> bool:
    """Stage, generate, commit and optionally push and tag.

    Args:
        provider: LLM provider for message generation.
        interaction: Prompts the user.
        settings: Effective run settings.
        spinner: Progress indicator for LLM calls.

    Returns:
        True if a commit was made, False if there was nothing to do or the
        user cancelled.

    Raises:
        GitError: If a git command fails.
        LLMError: If a completion fails or times out.
        ChunkingError: If the diff cannot be split.
        GenerationError: If no usable message was produced.
    """
    if not git.has_staged_changes():
        if not git.is_dirty():
            return False
        if not interaction.confirm("Would you like to add all changes?", default=False):
            return False
        git.stage_all()

    diff = git.get_diff()
    stats = git.get_stats()

    chunks = chunk_text(diff, settings.chunk_threshold, config=settings.chunk_config)
    logger.debug("Threshold: %d Total chunks: %d", settings.chunk_threshold, len(chunks))

    loop = MessageGenerationLoop(
        provider=provider,
        interaction=interaction,
        stats=stats,
        chunks=chunks,
        timeout=settings.timeout,
        spinner=spinner,
    )
    outcome = loop.run()

    if isinstance(outcome, Cancelled):
        return False
    if not outcome.message.strip():
        raise EmptyResultError("Commit message is empty, nothing was committed.")

    summary = git.commit(outcome.message)
    if summary:
        interaction.show(summary)

    if interaction.confirm("Would you like to push the commits?", default=True):
        git.push()

    if interaction.confirm("Would you like to tag the commit?", default=False):
        tag_name = interaction.ask("Tag name")
        if not tag_name:
            raise EmptyResultError("Tag name is empty, the commit was not tagged.")
        git.tag(tag_name)
        git.push_tags()

    return True


def main_command(
    ctx: typer.Context,
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        "-p",
        help="LLM provider (openai, anthropic, google, ollama)",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name (defaults to the configured model)",
    ),
    chunk_threshold: Optional[int] = typer.Option(
        None,
        "--chunk-threshold",
        "-c",
        min=1,
        help="Diffs longer than this many characters are split into chunks",
    ),
    llm_api_call_timeout: Optional[float] = typer.Option(
        None,
        "--llm-api-call-timeout",
        "-t",
        help="Seconds each LLM call may take",
    ),
    chunk_size: Optional[int] = typer.Option(
        None,
        "--chunk-size",
        help="Maximum tokens per chunk",
    ),
    chunk_overlap: Optional[int] = typer.Option(
        None,
        "--chunk-overlap",
        help="Tokens shared by consecutive chunks",
    ),
    encoding: Optional[str] = typer.Option(
        None,
        "--encoding",
        help="tiktoken encoding used to count tokens",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Log prompts, token usage and loop transitions to stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a commit message for the staged changes and commit it."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    settings = resolve_run_settings(
        provider,
        model,
        chunk_threshold,
        llm_api_call_timeout,
        chunk_size,
        chunk_overlap,
        encoding,
        debug=debug,
    )

    try:
        if not git.is_repository():
            raise NotAGitRepositoryError(
                "Not a git repository (or any of the parent directories)."
            )

        llm_provider = llm.get_provider(settings.provider, settings.model)
        committed = run_commit_flow(
            provider=llm_provider,
            interaction=TerminalInteraction(),
            settings=settings,
            spinner=Spinner(),
        )

    except MissingAPIKeyError as e:
        report_error("Error", e)
        raise typer.Exit(1)
    except GitError as e:
        report_error("Git error", e)
        raise typer.Exit(1)
    except LLMError as e:
        report_error("LLM error", e)
        raise typer.Exit(1)
    except ChunkingError as e:
        report_error("Chunking error", e)
        raise typer.Exit(1)
    except GenerationError as e:
        report_error("Error", e)
        raise typer.Exit(1)
    except ValueError as e:
        report_error("Error", e)
        raise typer.Exit(1)

    if not committed:
        typer.echo(NOTHING_TO_DO)
        raise typer.Exit(0)
