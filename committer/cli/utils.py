"""Shared helpers for CLI commands."""

from dataclasses import dataclass
from typing import Optional

import typer

import committer.config as _config
from committer.config import LLMProvider
from committer.global_config import GlobalConfigError
from committer.logging_utils import configure_logging
from committer.textsplitter import ChunkConfig, InvalidConfigurationError

VALID_PROVIDERS = ", ".join(p.value for p in LLMProvider)


@dataclass
class RunSettings:
    """Effective settings for one command run (CLI > global config > default)."""

    provider: LLMProvider
    model: Optional[str]
    chunk_threshold: int
    timeout: float
    chunk_config: ChunkConfig


def report_error(label: str, error: Exception) -> None:
    """Print an error to stderr, tagged with its stable code when it has one."""
    code = getattr(error, "code", None)
    prefix = f"{label} [{code}]" if code else label
    typer.echo(f"{prefix}: {error}", err=True)


def parse_provider(name: str) -> LLMProvider:
    """Parse a provider name, exiting with status 1 when it is unknown."""
    try:
        return LLMProvider(name.lower())
    except ValueError:
        typer.echo(f"Invalid provider [ERR_INVALID_PROVIDER]: {name}", err=True)
        typer.echo(f"Valid providers: {VALID_PROVIDERS}")
        raise typer.Exit(1)


def resolve_run_settings(
    provider: Optional[str],
    model: Optional[str],
    chunk_threshold: Optional[int],
    timeout: Optional[float],
    chunk_size: Optional[int],
    chunk_overlap: Optional[int],
    encoding: Optional[str],
    debug: bool = False,
) -> RunSettings:
    """Configure logging, load the global config and merge the CLI overrides.

    Exits with status 1 on an unreadable config file or invalid values.
    """
    configure_logging(debug)

    try:
        _config.load_config()
    except GlobalConfigError as e:
        report_error("Configuration error", e)
        raise typer.Exit(1)

    llm_provider = parse_provider(provider) if provider else _config.ACTIVE_PROVIDER
    if model is None and llm_provider == _config.ACTIVE_PROVIDER:
        model = _config.ACTIVE_MODEL

    effective_timeout = timeout if timeout is not None else _config.TIMEOUT
    if effective_timeout <= 0:
        typer.echo(f"Invalid timeout: {effective_timeout}. It must be greater than zero.", err=True)
        raise typer.Exit(1)

    try:
        chunk_config = ChunkConfig(
            chunk_size=chunk_size if chunk_size is not None else _config.CHUNK_SIZE,
            chunk_overlap=chunk_overlap if chunk_overlap is not None else _config.CHUNK_OVERLAP,
            encoding_name=encoding or _config.ENCODING,
        )
    except InvalidConfigurationError as e:
        report_error("Invalid chunking configuration", e)
        raise typer.Exit(1)

    return RunSettings(
        provider=llm_provider,
        model=model,
        chunk_threshold=chunk_threshold if chunk_threshold is not None else _config.CHUNK_THRESHOLD,
        timeout=effective_timeout,
        chunk_config=chunk_config,
    )
