"""LLM provider module for committer.

This module provides a unified interface to multiple LLM providers.
The active provider is configured in committer/config.py and can be
overridden from the command line.
"""

from typing import Optional

from dotenv import load_dotenv

import committer.config as _config
from committer.config import LLMProvider
from committer.llm.base import BaseLLMProvider, LLMResult
from committer.llm.exceptions import (
    CompletionError,
    CompletionTimeoutError,
    LLMError,
    MissingAPIKeyError,
)
from committer.llm.invoker import invoke_completion

# Load environment variables from .env file
load_dotenv()


def get_provider(
    provider: Optional[LLMProvider] = None,
    model: Optional[str] = None,
) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        provider: The provider to use. Defaults to ACTIVE_PROVIDER from config.
        model: The model to use. Defaults to ACTIVE_MODEL from config when the
            provider is the configured one, otherwise the provider's default.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    if provider is None:
        provider = _config.ACTIVE_PROVIDER
        model = model or _config.ACTIVE_MODEL
    elif provider == _config.ACTIVE_PROVIDER:
        model = model or _config.ACTIVE_MODEL

    if provider == LLMProvider.OPENAI:
        from committer.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(model=model)

    elif provider == LLMProvider.ANTHROPIC:
        from committer.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(model=model)

    elif provider == LLMProvider.GOOGLE:
        from committer.llm.google_provider import GoogleProvider

        return GoogleProvider(model=model)

    elif provider == LLMProvider.OLLAMA:
        from committer.llm.ollama_provider import OllamaProvider

        return OllamaProvider(model=model)

    else:
        raise ValueError(f"Unsupported provider: {provider}")


__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "MissingAPIKeyError",
    "CompletionError",
    "CompletionTimeoutError",
    "LLMResult",
    "get_provider",
    "invoke_completion",
]
