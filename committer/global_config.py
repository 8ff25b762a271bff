"""Global configuration management for committer.

Handles user-level configuration stored in ~/.committer/:
- config.yaml: Provider, model, timeout and chunking settings
- credentials: API keys for LLM providers
"""

import os
import stat
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from committer.config import LLMProvider


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""

    code = "ERR_INVALID_CONFIG"


_CONFIG_DIR = Path.home() / ".committer"


class GlobalSettings(BaseModel):
    """Validated view of ~/.committer/config.yaml.

    Every field is optional; unset fields fall back to the defaults in
    committer.config.
    """

    provider: Optional[LLMProvider] = None
    model: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    timeout: Optional[float] = None
    chunk_threshold: Optional[int] = None
    chunk_size: Optional[int] = None
    chunk_overlap: Optional[int] = None
    encoding: Optional[str] = None
    editor: Optional[str] = None

    @field_validator("max_tokens", "chunk_threshold", "chunk_size")
    @classmethod
    def must_be_positive(cls, v: Optional[int]) -> Optional[int]:
        """Reject zero and negative sizes."""
        if v is not None and v <= 0:
            raise ValueError("must be a positive integer")
        return v

    @field_validator("chunk_overlap")
    @classmethod
    def overlap_not_negative(cls, v: Optional[int]) -> Optional[int]:
        """Reject negative overlaps."""
        if v is not None and v < 0:
            raise ValueError("must not be negative")
        return v

    @field_validator("timeout")
    @classmethod
    def timeout_must_be_positive(cls, v: Optional[float]) -> Optional[float]:
        """Reject non-positive timeouts."""
        if v is not None and v <= 0:
            raise ValueError("must be greater than zero")
        return v

    @model_validator(mode="after")
    def overlap_below_chunk_size(self) -> "GlobalSettings":
        """Ensure the configured overlap leaves room for the window to advance."""
        if (
            self.chunk_size is not None
            and self.chunk_overlap is not None
            and self.chunk_overlap >= self.chunk_size
        ):
            raise ValueError("chunk_overlap must be smaller than chunk_size")
        return self


def get_global_config_dir() -> Path:
    """Get the global committer configuration directory.

    Returns:
        Path to ~/.committer/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.committer/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.committer/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def get_credentials_file_path() -> Path:
    """Get path to credentials file.

    Returns:
        Path to ~/.committer/credentials
    """
    return get_global_config_dir() / "credentials"


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.committer/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def load_settings() -> GlobalSettings:
    """Load and validate the global configuration.

    Returns:
        A GlobalSettings instance (all fields None if no config exists).

    Raises:
        GlobalConfigError: If the file cannot be read or holds invalid values.
    """
    config = load_global_config()
    try:
        return GlobalSettings(**config)
    except ValidationError as e:
        raise GlobalConfigError(f"Invalid configuration in {get_config_file_path()}:\n{e}")


def save_global_config(config: dict[str, Any]) -> None:
    """Save global configuration to ~/.committer/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def _parse_credentials(text: str) -> dict[str, str]:
    credentials = {}
    for line in text.splitlines():
        line = line.strip()
        # Skip empty lines and comments
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            key, value = line.split("=", 1)
            credentials[key.strip()] = value.strip()
    return credentials


def load_credentials() -> dict[str, str]:
    """Load API keys from ~/.committer/credentials.

    Returns:
        Dictionary mapping environment variable names to API keys.
    """
    credentials_file = get_credentials_file_path()

    if not credentials_file.exists():
        return {}

    try:
        return _parse_credentials(credentials_file.read_text())
    except OSError as e:
        raise GlobalConfigError(f"Failed to load credentials from {credentials_file}: {e}")


def save_credential(provider_key: str, api_key: str) -> None:
    """Save or update an API key in the credentials file.

    Args:
        provider_key: Environment variable name (e.g., "OPENAI_API_KEY")
        api_key: The API key value.
    """
    ensure_global_config_dir()
    credentials_file = get_credentials_file_path()

    existing_creds = load_credentials()
    existing_creds[provider_key] = api_key

    try:
        with open(credentials_file, "w") as f:
            f.write("# committer API credentials\n")
            f.write("# Format: PROVIDER_API_KEY=your_key_here\n\n")

            for key, value in existing_creds.items():
                f.write(f"{key}={value}\n")

        # Owner read/write only
        os.chmod(credentials_file, stat.S_IRUSR | stat.S_IWUSR)

    except OSError as e:
        raise GlobalConfigError(f"Failed to save credential: {e}")


def get_credential(provider_key: str) -> Optional[str]:
    """Get an API key from credentials file.

    Args:
        provider_key: Environment variable name (e.g., "OPENAI_API_KEY")

    Returns:
        The API key if found, None otherwise.
    """
    return load_credentials().get(provider_key)


def get_active_provider() -> Optional[LLMProvider]:
    """Get the active LLM provider from global config.

    Returns:
        LLMProvider enum value, or None if not configured.
    """
    return load_settings().provider


def get_active_model() -> Optional[str]:
    """Get the active model from global config."""
    return load_settings().model


def set_provider_and_model(provider: LLMProvider, model: str) -> None:
    """Set the active provider and model in global config.

    Args:
        provider: The LLM provider to use.
        model: The model name to use.
    """
    config = load_global_config()
    config["provider"] = provider.value
    config["model"] = model
    save_global_config(config)


def get_editor_preference() -> Optional[str]:
    """Get the user's preferred editor from global config."""
    return load_settings().editor


def set_editor_preference(editor: str) -> None:
    """Set the user's preferred editor in global config.

    Args:
        editor: Editor command (e.g., "nano", "vim", "code --wait")
    """
    config = load_global_config()
    config["editor"] = editor
    save_global_config(config)


def set_value(key: str, value: Any) -> None:
    """Set a single top-level setting after validating it.

    Args:
        key: A GlobalSettings field name.
        value: The raw value (as typed by the user).

    Raises:
        GlobalConfigError: If the key is unknown or the value is invalid.
    """
    if key not in GlobalSettings.model_fields:
        valid = ", ".join(GlobalSettings.model_fields)
        raise GlobalConfigError(f"Unknown setting: {key}. Valid settings: {valid}")

    config = load_global_config()
    config[key] = value
    try:
        validated = GlobalSettings(**config)
    except ValidationError as e:
        raise GlobalConfigError(f"Invalid value for {key}:\n{e}")

    # Store the coerced value so the YAML keeps proper types
    coerced = getattr(validated, key)
    config[key] = coerced.value if isinstance(coerced, LLMProvider) else coerced
    save_global_config(config)


def is_configured() -> bool:
    """Check if committer has been configured.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
