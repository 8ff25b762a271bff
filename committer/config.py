"""Configuration for committer.

Built-in defaults live here. User overrides are loaded from
~/.committer/config.yaml by load_config(); CLI options win over both.
Use 'committer config' commands to modify the saved settings.
"""

from enum import Enum
from typing import Optional


class LLMProvider(Enum):
    """Supported LLM providers."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    OLLAMA = "ollama"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used only if ~/.committer/config.yaml doesn't set them

DEFAULT_PROVIDER = LLMProvider.OPENAI
DEFAULT_MODEL = "gpt-4o"
DEFAULT_MAX_TOKENS = 1500
DEFAULT_TEMPERATURE = 0.3

# Seconds allowed for a single LLM call
DEFAULT_TIMEOUT = 15.0

# Diffs longer than this many characters are split into token chunks
DEFAULT_CHUNK_THRESHOLD = 128000

# Token splitter settings
DEFAULT_CHUNK_SIZE = 4096
DEFAULT_CHUNK_OVERLAP = 100
DEFAULT_ENCODING = "cl100k_base"
DEFAULT_TOKEN_MODEL = "gpt-3.5-turbo"

# "Try again" rounds allowed before giving up
MAX_ATTEMPTS = 5


# ============================================================
# ACTIVE CONFIGURATION (loaded from global config)
# ============================================================

# Initially set to defaults - will be overridden by load_config()
ACTIVE_PROVIDER = DEFAULT_PROVIDER
ACTIVE_MODEL = DEFAULT_MODEL
MAX_TOKENS = DEFAULT_MAX_TOKENS
TEMPERATURE = DEFAULT_TEMPERATURE
TIMEOUT = DEFAULT_TIMEOUT
CHUNK_THRESHOLD = DEFAULT_CHUNK_THRESHOLD
CHUNK_SIZE = DEFAULT_CHUNK_SIZE
CHUNK_OVERLAP = DEFAULT_CHUNK_OVERLAP
ENCODING = DEFAULT_ENCODING


def load_config() -> None:
    """Load configuration from the global config file.

    This should be called by the CLI before using the LLM or the splitter.

    Raises:
        GlobalConfigError: If the config file exists but is unreadable or invalid.
    """
    global ACTIVE_PROVIDER, ACTIVE_MODEL, MAX_TOKENS, TEMPERATURE, TIMEOUT
    global CHUNK_THRESHOLD, CHUNK_SIZE, CHUNK_OVERLAP, ENCODING

    # Import here to avoid circular dependency
    from committer import global_config

    settings = global_config.load_settings()

    if settings.provider:
        ACTIVE_PROVIDER = settings.provider
        # None lets the provider pick its own default model
        ACTIVE_MODEL = settings.model
    elif settings.model:
        ACTIVE_MODEL = settings.model
    if settings.max_tokens is not None:
        MAX_TOKENS = settings.max_tokens
    if settings.temperature is not None:
        TEMPERATURE = settings.temperature
    if settings.timeout is not None:
        TIMEOUT = settings.timeout
    if settings.chunk_threshold is not None:
        CHUNK_THRESHOLD = settings.chunk_threshold
    if settings.chunk_size is not None:
        CHUNK_SIZE = settings.chunk_size
    if settings.chunk_overlap is not None:
        CHUNK_OVERLAP = settings.chunk_overlap
    if settings.encoding:
        ENCODING = settings.encoding


# ============================================================
# AVAILABLE MODELS PER PROVIDER
# ============================================================

AVAILABLE_MODELS = {
    LLMProvider.OPENAI: [
        "gpt-4o",
        "gpt-4o-mini",
        "gpt-4.1",
        "gpt-4.1-mini",
        "gpt-4-turbo",
    ],
    LLMProvider.ANTHROPIC: [
        "claude-sonnet-4-20250514",
        "claude-3-5-sonnet-latest",
        "claude-3-5-haiku-latest",
    ],
    LLMProvider.GOOGLE: [
        "gemini-2.5-pro",
        "gemini-2.5-flash",
        "gemini-2.0-flash",
        "gemini-2.0-flash-lite",
    ],
    LLMProvider.OLLAMA: [
        "llama3.1",
        "qwen2.5-coder",
        "mistral",
    ],
}

# ============================================================
# API KEY ENVIRONMENT VARIABLES
# ============================================================

# Ollama runs locally and needs no key
API_KEY_ENV_VARS = {
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
    LLMProvider.GOOGLE: "GOOGLE_API_KEY",
}


def get_api_key_env_var(provider: LLMProvider) -> Optional[str]:
    """Get the environment variable name for the API key.

    Args:
        provider: The LLM provider.

    Returns:
        The environment variable name, or None if the provider needs no key.
    """
    return API_KEY_ENV_VARS.get(provider)
