"""Anthropic Claude provider implementation."""

from typing import Optional

from anthropic import Anthropic

import committer.config as _config
from committer.config import API_KEY_ENV_VARS, LLMProvider
from committer.llm.base import BaseLLMProvider, LLMResult


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider."""

    provider_name = "Anthropic"

    def __init__(self, model: Optional[str] = None):
        """Initialize the Anthropic provider.

        Args:
            model: The model to use. Defaults to claude-3-5-sonnet-latest.
        """
        self.model = model or "claude-3-5-sonnet-latest"
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.ANTHROPIC]

    def get_api_key(self) -> str:
        """Get the Anthropic API key from environment or credentials file.

        Raises:
            MissingAPIKeyError: If ANTHROPIC_API_KEY is not found.
        """
        return self._get_api_key_with_fallback(self.api_key_env_var, "Anthropic")

    def complete(self, prompt: str, timeout: Optional[float] = None) -> LLMResult:
        """Generate a completion using Anthropic Claude.

        Args:
            prompt: The user prompt.
            timeout: Seconds the HTTP call may take.

        Returns:
            An LLMResult with the raw text and token usage.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            CompletionError: If the API call fails.
        """
        api_key = self.get_api_key()

        client = Anthropic(api_key=api_key, timeout=timeout, max_retries=0)

        try:
            message = client.messages.create(
                model=self.model,
                max_tokens=_config.MAX_TOKENS,
                temperature=_config.TEMPERATURE,
                system=self.system_prompt,
                messages=[{"role": "user", "content": prompt}],
            )

            # Concatenate the text blocks of the reply
            raw_response = "".join(
                block.text for block in message.content if getattr(block, "type", "") == "text"
            )

            input_tokens = message.usage.input_tokens
            output_tokens = message.usage.output_tokens

        except Exception as e:
            raise self._wrap_error(self.provider_name, e)

        return LLMResult(
            text=raw_response,
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
