"""Shared test fixtures and configuration."""

import tempfile
import time
from pathlib import Path

import pytest

import committer.config as _config
from committer.llm.base import BaseLLMProvider, LLMResult
from committer.ui.base import Interaction


class FakeEncoding:
    """One token per character, so token counts equal string lengths."""

    def encode(self, text, *, disallowed_special=()):
        return [ord(c) for c in text]

    def decode(self, tokens):
        return "".join(chr(t) for t in tokens)


class ScriptedInteraction(Interaction):
    """Answers prompts from prepared lists and records what was asked."""

    def __init__(self, choices=None, confirms=None, answers=None, edits=None):
        self.choices = list(choices or [])
        self.confirms = list(confirms or [])
        self.answers = list(answers or [])
        self.edits = list(edits or [])
        self.shown = []
        self.questions = []
        self.confirm_questions = []

    def show(self, text):
        self.shown.append(text)

    def choose(self, question, choices):
        self.questions.append((question, list(choices)))
        answer = self.choices.pop(0)
        assert answer in choices, f"{answer!r} not offered in {choices!r}"
        return answer

    def confirm(self, question, default):
        self.confirm_questions.append((question, default))
        return self.confirms.pop(0)

    def ask(self, prompt):
        return self.answers.pop(0)

    def edit(self, initial=""):
        return self.edits.pop(0)


class FakeProvider(BaseLLMProvider):
    """Provider returning canned responses and recording prompts."""

    provider_name = "Fake"

    def __init__(self, responses=None, model="fake-model", error=None, delay=0.0):
        self.model = model
        self.responses = list(responses or ["Add feature"])
        self.error = error
        self.delay = delay
        self.prompts = []
        self.timeouts = []

    def complete(self, prompt, timeout=None):
        self.prompts.append(prompt)
        self.timeouts.append(timeout)
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        index = min(len(self.prompts), len(self.responses)) - 1
        return LLMResult(
            text=self.responses[index],
            model=self.model,
            input_tokens=10,
            output_tokens=5,
        )

    def get_api_key(self):
        return "fake-key"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, mocker):
    """Point ~/.committer at a temporary directory for every test."""
    config_dir = tmp_path / ".committer"
    mocker.patch("committer.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture(autouse=True)
def restore_active_config():
    """Undo load_config() changes to the module-level settings."""
    names = [
        "ACTIVE_PROVIDER",
        "ACTIVE_MODEL",
        "MAX_TOKENS",
        "TEMPERATURE",
        "TIMEOUT",
        "CHUNK_THRESHOLD",
        "CHUNK_SIZE",
        "CHUNK_OVERLAP",
        "ENCODING",
    ]
    saved = {name: getattr(_config, name) for name in names}
    yield
    for name, value in saved.items():
        setattr(_config, name, value)


@pytest.fixture
def fake_encoding():
    """A character-level tokenizer."""
    return FakeEncoding()


@pytest.fixture
def make_interaction():
    """Factory for scripted interactions."""
    return ScriptedInteraction


@pytest.fixture
def make_provider():
    """Factory for fake providers."""
    return FakeProvider
