"""Base classes and shared utilities for LLM providers."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from committer.llm.exceptions import (
    CompletionError,
    CompletionTimeoutError,
    LLMError,
    MissingAPIKeyError,
)
from committer.llm.prompts import SYSTEM_PROMPT


@dataclass
class LLMResult:
    """Result from an LLM completion call, including token usage."""

    text: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    model: str

    @abstractmethod
    def complete(self, prompt: str, timeout: Optional[float] = None) -> LLMResult:
        """Send a prompt to the model and return its text answer.

        Args:
            prompt: The full user prompt.
            timeout: Seconds the underlying HTTP call may take.

        Returns:
            An LLMResult with the raw response text and token usage.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            CompletionTimeoutError: If the SDK reports a timeout.
            CompletionError: For any other provider failure.
        """
        pass

    @abstractmethod
    def get_api_key(self) -> str:
        """Get the API key from environment or credentials file.

        Checks in order:
        1. Environment variable (a repo-level .env file is loaded into it)
        2. ~/.committer/credentials file

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        pass

    @property
    def system_prompt(self) -> str:
        return SYSTEM_PROMPT

    def _get_api_key_with_fallback(self, env_var_name: str, provider_name: str) -> str:
        """Helper to get API key with fallback to credentials file.

        Args:
            env_var_name: Environment variable name to check.
            provider_name: Human-readable provider name for error messages.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        api_key = os.getenv(env_var_name)
        if api_key:
            return api_key

        from committer.global_config import get_credential

        api_key = get_credential(env_var_name)
        if api_key:
            return api_key

        raise MissingAPIKeyError(
            f"{provider_name} API key not found. Set it using:\n"
            f"  1. Environment variable: export {env_var_name}=your_key_here\n"
            f"  2. Run: committer config set-key {provider_name.lower()}\n"
            f"  3. Manually add to ~/.committer/credentials"
        )

    def _wrap_error(self, provider_name: str, error: Exception) -> LLMError:
        """Translate an SDK exception into the committer error hierarchy."""
        if isinstance(error, LLMError):
            return error
        if isinstance(error, TimeoutError) or "timeout" in type(error).__name__.lower():
            return CompletionTimeoutError(f"{provider_name} API call timed out: {error}")
        return CompletionError(f"{provider_name} API call failed: {error}")
