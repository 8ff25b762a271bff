"""CLI command for generating codebase documentation."""

from pathlib import Path
from typing import Optional

import typer

from committer import llm
from committer.cli.utils import report_error, resolve_run_settings
from committer.documenter import (
    DEFAULT_OUTPUT_FILE,
    DocumentationError,
    collect_files,
    generate_documentation,
    read_files,
    save_documentation,
)
from committer.llm import LLMError, MissingAPIKeyError
from committer.logging_utils import get_logger
from committer.textsplitter import ChunkingError
from committer.ui import Spinner

logger = get_logger(__name__)


def document_command(
    file_paths: Optional[list[Path]] = typer.Option(
        None,
        "--file-paths",
        "-f",
        help="Files to document. Relative and absolute paths are accepted",
    ),
    directories: Optional[list[Path]] = typer.Option(
        None,
        "--directories",
        "-d",
        help="Directories to document, walked recursively",
    ),
    output: Path = typer.Option(
        Path(DEFAULT_OUTPUT_FILE),
        "--output",
        "-o",
        help="Markdown file the documentation is written to",
    ),
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
        help="Content longer than this many characters is split into chunks",
    ),
    llm_api_call_timeout: Optional[float] = typer.Option(
        None,
        "--llm-api-call-timeout",
        "-t",
        help="Seconds each LLM call may take",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log prompts and token usage to stderr",
    ),
) -> None:
    """Generate markdown documentation for files and directories."""
    if not file_paths and not directories:
        typer.echo("Nothing to document. Pass --file-paths and/or --directories.", err=True)
        raise typer.Exit(1)

    settings = resolve_run_settings(
        provider,
        model,
        chunk_threshold,
        llm_api_call_timeout,
        None,
        None,
        None,
        debug=debug,
    )

    logger.info("Processing files: %s", file_paths)
    logger.info("Processing directories: %s", directories)

    spinner = Spinner()
    try:
        llm_provider = llm.get_provider(settings.provider, settings.model)

        with spinner.start("Processing specified files..."):
            paths = collect_files(file_paths, directories)
            contents = read_files(paths)

        if not paths:
            typer.echo("No files found to document.", err=True)
            raise typer.Exit(1)

        with spinner.start("Generating documentation..."):
            sections = generate_documentation(
                llm_provider,
                contents,
                threshold=settings.chunk_threshold,
                timeout=settings.timeout,
                config=settings.chunk_config,
            )

        saved = save_documentation(sections, output)

    except MissingAPIKeyError as e:
        report_error("Error", e)
        raise typer.Exit(1)
    except LLMError as e:
        report_error("LLM error", e)
        raise typer.Exit(1)
    except ChunkingError as e:
        report_error("Chunking error", e)
        raise typer.Exit(1)
    except DocumentationError as e:
        report_error("Error", e)
        raise typer.Exit(1)
    except ValueError as e:
        report_error("Error", e)
        raise typer.Exit(1)

    typer.echo(f"✓ Documentation for {len(paths)} file(s) written to {saved}")
