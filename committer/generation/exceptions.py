"""Message generation exception classes."""


class GenerationError(Exception):
    """Base exception for commit message generation errors."""

    code = "ERR_FAILED_TO_GENERATE_MESSAGE"


class MaxAttemptsExceededError(GenerationError):
    """Raised when every attempt ended with "Try again"."""

    code = "ERR_MAX_ATTEMPTS_REACHED"


class EmptyResultError(GenerationError):
    """Raised when generation finished without a usable message."""

    code = "ERR_EMPTY_COMMIT_MESSAGE"
