"""LLM-related exception classes.

Contains all exception classes for LLM operations:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when API key is not set
- CompletionError: Raised when a completion call fails
- CompletionTimeoutError: Raised when a completion call exceeds its deadline
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    code = "ERR_FAILED_TO_CALL_LLM"


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    code = "ERR_FAILED_TO_SETUP_LLM"


class CompletionError(LLMError):
    """Raised when the provider call fails (network, auth, provider-side)."""

    code = "ERR_FAILED_TO_CALL_LLM"


class CompletionTimeoutError(CompletionError):
    """Raised when the provider does not answer before the deadline."""

    code = "ERR_LLM_CALL_TIMED_OUT"
