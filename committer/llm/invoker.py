"""Deadline-bound completion calls.

invoke_completion wraps a single provider call in a timeout. There is no
retry: a failed or late call ends the current attempt.
"""

from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

from committer.llm.base import BaseLLMProvider, LLMResult
from committer.llm.exceptions import CompletionError, CompletionTimeoutError, LLMError
from committer.logging_utils import get_logger

logger = get_logger(__name__)


def invoke_completion(provider: BaseLLMProvider, prompt: str, timeout: float) -> LLMResult:
    """Call the provider and wait at most timeout seconds for the answer.

    The timeout is also handed to the provider so the SDK can abort the HTTP
    request itself; the worker thread is not joined once the deadline passes.

    Args:
        provider: The LLM provider to call.
        prompt: The full user prompt.
        timeout: Deadline in seconds.

    Returns:
        The provider's LLMResult.

    Raises:
        CompletionTimeoutError: If no answer arrived within timeout.
        LLMError: Any provider error, propagated unchanged.
        CompletionError: If the provider leaked a non-LLMError exception.
    """
    if timeout <= 0:
        raise ValueError(f"timeout must be positive, got {timeout}")

    logger.debug("Prompting %s with the following prompt:\n%s", provider.model, prompt)

    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="committer-llm")
    try:
        future = executor.submit(provider.complete, prompt, timeout)
        try:
            result = future.result(timeout=timeout)
        except FutureTimeoutError:
            future.cancel()
            raise CompletionTimeoutError(
                f"LLM call to {provider.model} did not finish within {timeout:g}s"
            )
        except LLMError:
            raise
        except Exception as e:
            raise CompletionError(f"LLM call to {provider.model} failed: {e}") from e
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    logger.debug(
        "%s answered: %d input / %d output tokens",
        result.model,
        result.input_tokens,
        result.output_tokens,
    )
    return result
