"""Ollama provider implementation.

Ollama serves local models through an OpenAI-compatible API, so this
provider reuses the OpenAI client pointed at the local server.
"""

import os
from typing import Optional

from openai import OpenAI

from committer.llm.openai_provider import OpenAIProvider

# Default Ollama server; override with OLLAMA_HOST
DEFAULT_OLLAMA_HOST = "http://localhost:11434"


class OllamaProvider(OpenAIProvider):
    """Ollama LLM provider (local models, no API key)."""

    provider_name = "Ollama"

    def __init__(self, model: Optional[str] = None):
        """Initialize the Ollama provider.

        Args:
            model: The model to use. Defaults to llama3.1.
        """
        self.model = model or "llama3.1"
        self.api_key_env_var = None

    def get_api_key(self) -> str:
        """Ollama needs no key; the OpenAI client still requires a value."""
        return "ollama"

    @property
    def base_url(self) -> str:
        host = os.getenv("OLLAMA_HOST", DEFAULT_OLLAMA_HOST).rstrip("/")
        if not host.startswith(("http://", "https://")):
            host = f"http://{host}"
        return f"{host}/v1"

    def _create_client(self, timeout: Optional[float]) -> OpenAI:
        return OpenAI(
            api_key=self.get_api_key(),
            base_url=self.base_url,
            timeout=timeout,
            max_retries=0,
        )
