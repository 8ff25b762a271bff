"""OpenAI GPT provider implementation."""

from typing import Optional

from openai import OpenAI

import committer.config as _config
from committer.config import API_KEY_ENV_VARS, LLMProvider
from committer.llm.base import BaseLLMProvider, LLMResult


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider."""

    provider_name = "OpenAI"

    def __init__(self, model: Optional[str] = None):
        """Initialize the OpenAI provider.

        Args:
            model: The model to use. Defaults to gpt-4o.
        """
        self.model = model or "gpt-4o"
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.OPENAI]

    def get_api_key(self) -> str:
        """Get the OpenAI API key from environment or credentials file.

        Raises:
            MissingAPIKeyError: If OPENAI_API_KEY is not found.
        """
        return self._get_api_key_with_fallback(self.api_key_env_var, "OpenAI")

    def _create_client(self, timeout: Optional[float]) -> OpenAI:
        # max_retries=0: a failed call ends the attempt, the user decides what's next
        return OpenAI(api_key=self.get_api_key(), timeout=timeout, max_retries=0)

    def complete(self, prompt: str, timeout: Optional[float] = None) -> LLMResult:
        """Generate a completion using the OpenAI chat completions API.

        Args:
            prompt: The user prompt.
            timeout: Seconds the HTTP call may take.

        Returns:
            An LLMResult with the raw text and token usage.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            CompletionError: If the API call fails.
        """
        client = self._create_client(timeout)

        try:
            response = client.chat.completions.create(
                model=self.model,
                max_tokens=_config.MAX_TOKENS,
                temperature=_config.TEMPERATURE,
                messages=[
                    {"role": "system", "content": self.system_prompt},
                    {"role": "user", "content": prompt},
                ],
            )

            raw_response = response.choices[0].message.content or ""

            input_tokens = response.usage.prompt_tokens if response.usage else 0
            output_tokens = response.usage.completion_tokens if response.usage else 0

        except Exception as e:
            raise self._wrap_error(self.provider_name, e)

        return LLMResult(
            text=raw_response,
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
