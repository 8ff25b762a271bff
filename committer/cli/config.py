"""CLI commands for global configuration management."""

import typer

from committer import global_config
from committer.cli.utils import VALID_PROVIDERS, parse_provider, report_error
from committer.config import (
    API_KEY_ENV_VARS,
    AVAILABLE_MODELS,
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_CHUNK_THRESHOLD,
    DEFAULT_ENCODING,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT,
    LLMProvider,
)

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global committer configuration in ~/.committer/",
    add_completion=False,
)


def _mask(api_key: str) -> str:
    return api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        if not global_config.is_configured():
            typer.echo(
                "No configuration found. Run 'committer config set-provider' to set up."
            )
            return

        config = global_config.load_global_config()

        typer.echo("Current committer configuration (~/.committer/config.yaml):")
        typer.echo()
        typer.echo(f"  Provider: {config.get('provider', 'not set')}")
        typer.echo(f"  Model: {config.get('model', 'not set')}")
        typer.echo(f"  Max Tokens: {config.get('max_tokens', DEFAULT_MAX_TOKENS)}")
        typer.echo(f"  Temperature: {config.get('temperature', DEFAULT_TEMPERATURE)}")
        typer.echo(f"  Timeout: {config.get('timeout', DEFAULT_TIMEOUT)}s")
        typer.echo(f"  Chunk Threshold: {config.get('chunk_threshold', DEFAULT_CHUNK_THRESHOLD)}")
        typer.echo(f"  Chunk Size: {config.get('chunk_size', DEFAULT_CHUNK_SIZE)}")
        typer.echo(f"  Chunk Overlap: {config.get('chunk_overlap', DEFAULT_CHUNK_OVERLAP)}")
        typer.echo(f"  Encoding: {config.get('encoding', DEFAULT_ENCODING)}")

        editor = config.get("editor")
        if editor:
            typer.echo(f"  Editor: {editor}")

        typer.echo()

        provider_str = config.get("provider")
        if provider_str:
            try:
                provider = LLMProvider(provider_str)
            except ValueError:
                typer.echo(f"  Unknown provider in config: {provider_str}")
                return

            env_var = API_KEY_ENV_VARS.get(provider)
            if env_var is None:
                typer.echo(f"  API Key: not required for {provider.value}")
                return

            api_key = global_config.get_credential(env_var)
            if api_key:
                typer.echo(f"  API Key ({env_var}): {_mask(api_key)}")
            else:
                typer.echo(f"  API Key ({env_var}): not set")

    except global_config.GlobalConfigError as e:
        report_error("Error reading configuration", e)
        raise typer.Exit(1)


@config_app.command("set-key")
def config_set_key(
    provider: str = typer.Argument(
        ...,
        help=f"Provider name ({VALID_PROVIDERS})",
    )
) -> None:
    """Set or update an API key for a provider."""
    llm_provider = parse_provider(provider)

    env_var = API_KEY_ENV_VARS.get(llm_provider)
    if env_var is None:
        typer.echo(f"{llm_provider.value} does not use an API key.")
        return

    typer.echo(f"Setting API key for {llm_provider.value}")
    api_key = typer.prompt(f"Enter your {llm_provider.value} API key", hide_input=True)

    try:
        global_config.ensure_global_config_dir()
        global_config.save_credential(env_var, api_key)
    except global_config.GlobalConfigError as e:
        report_error("Error", e)
        raise typer.Exit(1)

    typer.echo(f"✓ API key saved for {llm_provider.value}")


@config_app.command("set-provider")
def config_set_provider(
    provider: str = typer.Argument(
        ...,
        help=f"Provider name ({VALID_PROVIDERS})",
    ),
    model: str = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name (optional, will prompt if not provided)",
    ),
) -> None:
    """Set the active LLM provider and model."""
    llm_provider = parse_provider(provider)

    if not model:
        models = AVAILABLE_MODELS[llm_provider]
        typer.echo(f"Available models for {llm_provider.value}:")
        for i, m in enumerate(models, 1):
            typer.echo(f"  {i}. {m}")

        model_choice = typer.prompt(f"Select a model (1-{len(models)})", type=int, default=1)
        if model_choice < 1 or model_choice > len(models):
            typer.echo("Invalid choice. Aborting.", err=True)
            raise typer.Exit(1)

        model = models[model_choice - 1]
    elif model not in AVAILABLE_MODELS[llm_provider]:
        typer.echo(f"Warning: {model} is not in the list of known models for {llm_provider.value}")
        if not typer.confirm("Continue anyway?", default=False):
            raise typer.Exit(0)

    try:
        global_config.set_provider_and_model(llm_provider, model)
    except global_config.GlobalConfigError as e:
        report_error("Error", e)
        raise typer.Exit(1)

    typer.echo(f"✓ Provider set to: {llm_provider.value}")
    typer.echo(f"✓ Model set to: {model}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Setting name, e.g. timeout or chunk_size"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a single configuration value."""
    try:
        global_config.set_value(key, value)
    except global_config.GlobalConfigError as e:
        report_error("Error", e)
        raise typer.Exit(1)

    typer.echo(f"✓ {key} set to: {value}")


@config_app.command("list-providers")
def config_list_providers() -> None:
    """List all available LLM providers."""
    typer.echo("Available LLM providers:")
    typer.echo()
    for provider in LLMProvider:
        typer.echo(f"  • {provider.value}")
    typer.echo()
    typer.echo("Use 'committer config list-models <provider>' to see available models.")


@config_app.command("list-models")
def config_list_models(
    provider: str = typer.Argument(
        None,
        help="Provider name (optional, shows all if not provided)",
    )
) -> None:
    """List available models for a provider (or all providers)."""
    providers = [parse_provider(provider)] if provider else list(LLMProvider)

    for llm_provider in providers:
        typer.echo(f"{llm_provider.value}:")
        for model in AVAILABLE_MODELS[llm_provider]:
            typer.echo(f"  • {model}")
        typer.echo()
