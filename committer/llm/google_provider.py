"""Google Gemini provider implementation."""

from typing import Optional

from google import genai
from google.genai import types

import committer.config as _config
from committer.config import API_KEY_ENV_VARS, LLMProvider
from committer.llm.base import BaseLLMProvider, LLMResult
from committer.llm.exceptions import CompletionError

# Models that have built-in "thinking" which consumes output tokens
THINKING_MODELS = [
    "gemini-2.5-flash",
    "gemini-2.5-pro",
    "gemini-2.0-flash-thinking",
]

# Multiplier for max_output_tokens on thinking models
THINKING_TOKEN_MULTIPLIER = 3


class GoogleProvider(BaseLLMProvider):
    """Google Gemini LLM provider."""

    provider_name = "Google Gemini"

    def __init__(self, model: Optional[str] = None):
        """Initialize the Google provider.

        Args:
            model: The model to use. Defaults to gemini-2.0-flash.
        """
        self.model = model or "gemini-2.0-flash"
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.GOOGLE]

    def get_api_key(self) -> str:
        """Get the Google API key from environment or credentials file.

        Raises:
            MissingAPIKeyError: If GOOGLE_API_KEY is not found.
        """
        return self._get_api_key_with_fallback(self.api_key_env_var, "Google")

    def _is_thinking_model(self) -> bool:
        return any(thinking_model in self.model.lower() for thinking_model in THINKING_MODELS)

    def complete(self, prompt: str, timeout: Optional[float] = None) -> LLMResult:
        """Generate a completion using Google Gemini.

        Args:
            prompt: The user prompt.
            timeout: Seconds the HTTP call may take.

        Returns:
            An LLMResult with the raw text and token usage.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            CompletionError: If the API call fails or returns nothing usable.
        """
        api_key = self.get_api_key()

        # The SDK expects the HTTP timeout in milliseconds
        http_options = types.HttpOptions(timeout=int(timeout * 1000)) if timeout else None
        client = genai.Client(api_key=api_key, http_options=http_options)

        # Internal "thinking" consumes tokens from the output budget
        effective_max_tokens = _config.MAX_TOKENS
        if self._is_thinking_model():
            effective_max_tokens = _config.MAX_TOKENS * THINKING_TOKEN_MULTIPLIER

        try:
            response = client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=self.system_prompt,
                    max_output_tokens=effective_max_tokens,
                    temperature=_config.TEMPERATURE,
                ),
            )

            if not response.candidates:
                raise CompletionError("Google Gemini returned no candidates in response")

            finish_reason = str(getattr(response.candidates[0], "finish_reason", ""))
            if "SAFETY" in finish_reason:
                raise CompletionError(
                    f"Google Gemini blocked response due to safety filters: {finish_reason}"
                )

            raw_response = response.text
            if not raw_response or not raw_response.strip():
                raise CompletionError("Google Gemini returned empty response")

            input_tokens = 0
            output_tokens = 0
            usage = getattr(response, "usage_metadata", None)
            if usage:
                input_tokens = usage.prompt_token_count or 0
                output_tokens = (usage.candidates_token_count or 0) + (
                    getattr(usage, "thoughts_token_count", 0) or 0
                )

        except Exception as e:
            raise self._wrap_error(self.provider_name, e)

        return LLMResult(
            text=raw_response,
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
