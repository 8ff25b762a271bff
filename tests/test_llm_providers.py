"""Tests for LLM provider modules."""

import os
from unittest.mock import MagicMock, patch

import pytest

import committer.config as _config
from committer.config import LLMProvider
from committer.llm import get_provider
from committer.llm.base import LLMResult
from committer.llm.exceptions import (
    CompletionError,
    CompletionTimeoutError,
    LLMError,
    MissingAPIKeyError,
)
from committer.llm.prompts import SYSTEM_PROMPT


class TestGetProvider:
    """Tests for get_provider factory function."""

    def test_returns_openai_provider(self):
        """Test getting OpenAI provider."""
        from committer.llm.openai_provider import OpenAIProvider

        assert isinstance(get_provider(LLMProvider.OPENAI), OpenAIProvider)

    def test_returns_anthropic_provider(self):
        """Test getting Anthropic provider."""
        from committer.llm.anthropic_provider import AnthropicProvider

        assert isinstance(get_provider(LLMProvider.ANTHROPIC), AnthropicProvider)

    def test_returns_google_provider(self):
        """Test getting Google provider."""
        from committer.llm.google_provider import GoogleProvider

        assert isinstance(get_provider(LLMProvider.GOOGLE), GoogleProvider)

    def test_returns_ollama_provider(self):
        """Test getting Ollama provider."""
        from committer.llm.ollama_provider import OllamaProvider

        assert isinstance(get_provider(LLMProvider.OLLAMA), OllamaProvider)

    def test_custom_model(self):
        """Test provider with custom model."""
        provider = get_provider(LLMProvider.OPENAI, model="gpt-4-turbo")
        assert provider.model == "gpt-4-turbo"

    def test_defaults_to_active_provider(self):
        """Test that no arguments use the active configuration."""
        _config.ACTIVE_PROVIDER = LLMProvider.ANTHROPIC
        _config.ACTIVE_MODEL = "claude-3-5-haiku-latest"

        provider = get_provider()

        assert provider.model == "claude-3-5-haiku-latest"

    def test_other_provider_ignores_active_model(self):
        """Test that the active model is not forced on another provider."""
        _config.ACTIVE_PROVIDER = LLMProvider.OPENAI
        _config.ACTIVE_MODEL = "gpt-4o"

        provider = get_provider(LLMProvider.GOOGLE)

        assert provider.model == "gemini-2.0-flash"

    def test_unsupported_provider_raises_error(self):
        """Test that unsupported provider raises ValueError."""
        with pytest.raises(ValueError) as exc_info:
            get_provider("invalid_provider")
        assert "Unsupported provider" in str(exc_info.value)


class TestApiKeys:
    """Tests for API key lookup."""

    def test_gets_api_key_from_env(self):
        """Test getting API key from environment."""
        from committer.llm.anthropic_provider import AnthropicProvider

        with patch.dict(os.environ, {"ANTHROPIC_API_KEY": "test-key"}):
            assert AnthropicProvider().get_api_key() == "test-key"

    def test_falls_back_to_credentials_file(self):
        """Test the credentials file when the variable is unset."""
        from committer.llm.openai_provider import OpenAIProvider

        with patch.dict(os.environ, {}, clear=True):
            with patch("committer.global_config.get_credential", return_value="from-file"):
                assert OpenAIProvider().get_api_key() == "from-file"

    @pytest.mark.parametrize(
        "module,cls,env_var",
        [
            ("committer.llm.openai_provider", "OpenAIProvider", "OPENAI_API_KEY"),
            ("committer.llm.anthropic_provider", "AnthropicProvider", "ANTHROPIC_API_KEY"),
            ("committer.llm.google_provider", "GoogleProvider", "GOOGLE_API_KEY"),
        ],
    )
    def test_missing_api_key_raises_error(self, module, cls, env_var):
        """Test that missing API key raises MissingAPIKeyError."""
        import importlib

        provider = getattr(importlib.import_module(module), cls)()

        with patch.dict(os.environ, {}, clear=True):
            with patch("committer.global_config.get_credential", return_value=None):
                with pytest.raises(MissingAPIKeyError) as exc_info:
                    provider.get_api_key()

        assert env_var in str(exc_info.value)
        assert "committer config set-key" in str(exc_info.value)

    def test_ollama_needs_no_key(self):
        """Test that Ollama works without credentials."""
        from committer.llm.ollama_provider import OllamaProvider

        with patch.dict(os.environ, {}, clear=True):
            assert OllamaProvider().get_api_key() == "ollama"


class TestOpenAIProvider:
    """Tests for OpenAIProvider.complete."""

    def _response(self, content="Add login", prompt_tokens=12, completion_tokens=3):
        response = MagicMock()
        response.choices = [MagicMock()]
        response.choices[0].message.content = content
        response.usage.prompt_tokens = prompt_tokens
        response.usage.completion_tokens = completion_tokens
        return response

    def test_complete_returns_result(self, mocker):
        """Test a successful chat completion."""
        from committer.llm.openai_provider import OpenAIProvider

        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = self._response()
        mock_openai = mocker.patch(
            "committer.llm.openai_provider.OpenAI", return_value=mock_client
        )

        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-test"}):
            result = OpenAIProvider().complete("the prompt", timeout=9)

        assert result == LLMResult(text="Add login", model="gpt-4o", input_tokens=12, output_tokens=3)
        mock_openai.assert_called_once_with(api_key="sk-test", timeout=9, max_retries=0)
        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages == [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": "the prompt"},
        ]

    def test_sdk_error_is_wrapped(self, mocker):
        """Test that SDK failures become CompletionError."""
        from committer.llm.openai_provider import OpenAIProvider

        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = RuntimeError("500")
        mocker.patch("committer.llm.openai_provider.OpenAI", return_value=mock_client)

        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-test"}):
            with pytest.raises(CompletionError) as exc_info:
                OpenAIProvider().complete("prompt")

        assert "OpenAI API call failed" in str(exc_info.value)

    def test_sdk_timeout_is_wrapped(self, mocker):
        """Test that SDK timeouts become CompletionTimeoutError."""
        from committer.llm.openai_provider import OpenAIProvider

        class APITimeoutError(Exception):
            pass

        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = APITimeoutError("slow")
        mocker.patch("committer.llm.openai_provider.OpenAI", return_value=mock_client)

        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-test"}):
            with pytest.raises(CompletionTimeoutError):
                OpenAIProvider().complete("prompt")


class TestOllamaProvider:
    """Tests for OllamaProvider."""

    def test_default_model(self):
        """Test default model is set."""
        from committer.llm.ollama_provider import OllamaProvider

        assert OllamaProvider().model == "llama3.1"

    def test_base_url_from_env(self):
        """Test OLLAMA_HOST handling."""
        from committer.llm.ollama_provider import OllamaProvider

        with patch.dict(os.environ, {"OLLAMA_HOST": "gpu-box:11434"}):
            assert OllamaProvider().base_url == "http://gpu-box:11434/v1"

        with patch.dict(os.environ, {}, clear=True):
            assert OllamaProvider().base_url == "http://localhost:11434/v1"

    def test_client_points_at_local_server(self, mocker):
        """Test that the OpenAI client is created with the Ollama URL."""
        from committer.llm.ollama_provider import OllamaProvider

        mock_openai = mocker.patch("committer.llm.ollama_provider.OpenAI")

        with patch.dict(os.environ, {}, clear=True):
            OllamaProvider()._create_client(timeout=3)

        mock_openai.assert_called_once_with(
            api_key="ollama",
            base_url="http://localhost:11434/v1",
            timeout=3,
            max_retries=0,
        )


class TestAnthropicProvider:
    """Tests for AnthropicProvider."""

    def test_default_model(self):
        """Test default model is set."""
        from committer.llm.anthropic_provider import AnthropicProvider

        assert AnthropicProvider().model == "claude-3-5-sonnet-latest"

    def test_complete_joins_text_blocks(self, mocker):
        """Test that only text blocks are returned."""
        from committer.llm.anthropic_provider import AnthropicProvider

        message = MagicMock()
        message.content = [
            MagicMock(type="text", text="Fix "),
            MagicMock(type="tool_use"),
            MagicMock(type="text", text="crash"),
        ]
        message.usage.input_tokens = 20
        message.usage.output_tokens = 2
        mock_client = MagicMock()
        mock_client.messages.create.return_value = message
        mocker.patch("committer.llm.anthropic_provider.Anthropic", return_value=mock_client)

        with patch.dict(os.environ, {"ANTHROPIC_API_KEY": "key"}):
            result = AnthropicProvider().complete("prompt", timeout=5)

        assert result.text == "Fix crash"
        assert result.input_tokens == 20
        assert mock_client.messages.create.call_args.kwargs["system"] == SYSTEM_PROMPT


class TestGoogleProvider:
    """Tests for GoogleProvider."""

    def test_default_model(self):
        """Test default model is set."""
        from committer.llm.google_provider import GoogleProvider

        assert GoogleProvider().model == "gemini-2.0-flash"

    def test_is_thinking_model(self):
        """Test thinking model detection."""
        from committer.llm.google_provider import GoogleProvider

        assert GoogleProvider(model="gemini-2.5-flash")._is_thinking_model()
        assert not GoogleProvider(model="gemini-2.0-flash")._is_thinking_model()

    def test_empty_response_raises(self, mocker):
        """Test that an empty answer is an error."""
        from committer.llm.google_provider import GoogleProvider

        response = MagicMock()
        response.candidates = [MagicMock(finish_reason="STOP")]
        response.text = "  "
        mock_client = MagicMock()
        mock_client.models.generate_content.return_value = response
        mocker.patch("committer.llm.google_provider.genai.Client", return_value=mock_client)

        with patch.dict(os.environ, {"GOOGLE_API_KEY": "key"}):
            with pytest.raises(CompletionError) as exc_info:
                GoogleProvider().complete("prompt", timeout=5)

        assert "empty" in str(exc_info.value)

    def test_errors_are_llm_errors(self):
        """Test the exception hierarchy."""
        assert issubclass(CompletionTimeoutError, CompletionError)
        assert issubclass(CompletionError, LLMError)
        assert issubclass(MissingAPIKeyError, LLMError)
