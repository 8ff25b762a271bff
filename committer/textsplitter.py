"""Token-based text splitter.

Splits large text (typically a staged diff) into overlapping chunks measured
in tokenizer units, so each chunk fits a token-limited LLM call.

Contains:
- ChunkConfig: Immutable splitter settings
- TokenSplitter: Encodes, windows and decodes text
- token_ranges: The window arithmetic, independent of any tokenizer
- chunk_text: Character-threshold fast path used by the CLI
- ChunkingError, InvalidConfigurationError, TokenizerUnavailableError
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

import tiktoken

from committer.config import (
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_ENCODING,
    DEFAULT_TOKEN_MODEL,
)
from committer.logging_utils import get_logger

logger = get_logger(__name__)


class ChunkingError(Exception):
    """Base exception for text splitting errors."""

    code = "ERR_FAILED_TO_CHUNK_DIFF"


class InvalidConfigurationError(ChunkingError):
    """Raised when splitter settings would never advance or make no sense."""

    code = "ERR_FAILED_TO_INIT_CHUNKER"


class TokenizerUnavailableError(ChunkingError):
    """Raised when the requested encoding or model cannot be resolved."""

    code = "ERR_FAILED_TO_INIT_CHUNKER"


class Encoding(Protocol):
    """The part of tiktoken.Encoding the splitter relies on."""

    def encode(self, text: str, *, disallowed_special=...) -> list[int]: ...

    def decode(self, tokens: Sequence[int]) -> str: ...


@dataclass(frozen=True)
class ChunkConfig:
    """Settings for token-based splitting.

    Attributes:
        chunk_size: Maximum number of tokens per chunk.
        chunk_overlap: Tokens repeated at the start of the next chunk.
        encoding_name: tiktoken encoding name. Takes precedence over model_name.
        model_name: Model whose encoding is used when encoding_name is empty.
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP
    encoding_name: str = DEFAULT_ENCODING
    model_name: str = DEFAULT_TOKEN_MODEL

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise InvalidConfigurationError(
                f"chunk_size must be positive, got {self.chunk_size}"
            )
        if self.chunk_overlap < 0:
            raise InvalidConfigurationError(
                f"chunk_overlap must not be negative, got {self.chunk_overlap}"
            )
        if self.chunk_overlap >= self.chunk_size:
            raise InvalidConfigurationError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than "
                f"chunk_size ({self.chunk_size})"
            )
        if not self.encoding_name and not self.model_name:
            raise InvalidConfigurationError("an encoding name or a model name is required")

    @property
    def step(self) -> int:
        """Tokens the window advances between consecutive chunks."""
        return self.chunk_size - self.chunk_overlap


def token_ranges(total_tokens: int, config: ChunkConfig) -> list[tuple[int, int]]:
    """Compute the [start, end) token windows for an input of total_tokens.

    Args:
        total_tokens: Number of tokens in the encoded input.
        config: Splitter settings.

    Returns:
        Windows in source order. Empty when total_tokens is 0.
    """
    ranges = []
    start = 0
    while start < total_tokens:
        end = min(start + config.chunk_size, total_tokens)
        ranges.append((start, end))
        start += config.step
    return ranges


def get_encoding(config: ChunkConfig) -> Encoding:
    """Resolve the tiktoken encoding named by the config.

    Raises:
        TokenizerUnavailableError: If the encoding or model is unknown, or its
            data cannot be loaded.
    """
    try:
        if config.encoding_name:
            return tiktoken.get_encoding(config.encoding_name)
        return tiktoken.encoding_for_model(config.model_name)
    except (KeyError, ValueError, OSError) as e:
        name = config.encoding_name or config.model_name
        raise TokenizerUnavailableError(f"Failed to initialize tokenizer '{name}': {e}")


class TokenSplitter:
    """Splits text into overlapping chunks of at most chunk_size tokens."""

    def __init__(self, config: Optional[ChunkConfig] = None, encoding: Optional[Encoding] = None):
        """Initialize the splitter.

        Args:
            config: Splitter settings. Defaults to ChunkConfig().
            encoding: A ready tokenizer. When omitted it is resolved lazily
                from the config on the first split.
        """
        self.config = config or ChunkConfig()
        self._encoding = encoding

    @property
    def encoding(self) -> Encoding:
        if self._encoding is None:
            self._encoding = get_encoding(self.config)
        return self._encoding

    def split_text(self, text: str) -> list[str]:
        """Split text into decoded chunks.

        Args:
            text: The text to split. May be empty.

        Returns:
            At least one chunk; [""] for empty input.

        Raises:
            TokenizerUnavailableError: If the tokenizer cannot be initialized.
        """
        encoding = self.encoding

        # Diffs can contain literal special-token markers; treat them as text
        token_ids = encoding.encode(text, disallowed_special=())
        ranges = token_ranges(len(token_ids), self.config)

        if not ranges:
            return [""]

        chunks = [encoding.decode(token_ids[start:end]) for start, end in ranges]

        logger.debug(
            "Split %d tokens into %d chunk(s) (size=%d, overlap=%d)",
            len(token_ids),
            len(chunks),
            self.config.chunk_size,
            self.config.chunk_overlap,
        )
        return chunks


def chunk_text(
    text: str,
    threshold: int,
    config: Optional[ChunkConfig] = None,
    splitter: Optional[TokenSplitter] = None,
) -> list[str]:
    """Chunk text only when it is longer than threshold characters.

    Args:
        text: The text to chunk (usually the staged diff).
        threshold: Character count at or below which text is sent whole.
        config: Splitter settings, used when no splitter is given.
        splitter: A preconfigured splitter.

    Returns:
        The chunk list; [text] when no splitting is needed.
    """
    if len(text) <= threshold:
        return [text]

    splitter = splitter or TokenSplitter(config)
    return splitter.split_text(text)
