"""Commit message generation for committer.

- exceptions: GenerationError, MaxAttemptsExceededError, EmptyResultError
- outcome: Approved, WrittenByUser, Cancelled
- loop: MessageGenerationLoop and its state types
"""

from committer.generation.exceptions import (
    EmptyResultError,
    GenerationError,
    MaxAttemptsExceededError,
)
from committer.generation.outcome import (
    Approved,
    Cancelled,
    GenerationOutcome,
    WrittenByUser,
)
from committer.generation.loop import (
    GenerationAttempt,
    LoopPhase,
    LoopState,
    MessageGenerationLoop,
    resolve_refinement,
)


__all__ = [
    # Exceptions
    "GenerationError",
    "MaxAttemptsExceededError",
    "EmptyResultError",
    # Outcomes
    "Approved",
    "WrittenByUser",
    "Cancelled",
    "GenerationOutcome",
    # Loop
    "GenerationAttempt",
    "LoopPhase",
    "LoopState",
    "MessageGenerationLoop",
    "resolve_refinement",
]
