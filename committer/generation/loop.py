"""Interactive commit message generation.

MessageGenerationLoop asks the model for a message on the current diff
chunk, starting at chunk 1, and lets the user approve it, write one, refine the
request or exit. Refining starts the next attempt over from chunk 1 with
the new instructions; max_attempts attempts end the loop with
MaxAttemptsExceededError.

Transitions:

    GENERATING -> PRESENTING
    PRESENTING -> DONE        (approve, write it myself)
    PRESENTING -> CANCELLED   (exit)
    PRESENTING -> GENERATING  (try again, attempts left)
    PRESENTING -> EXHAUSTED   (try again, last attempt used)

Errors from the completion invoker propagate out of run() unchanged.
"""

from contextlib import nullcontext
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from committer.config import MAX_ATTEMPTS
from committer.generation.exceptions import MaxAttemptsExceededError
from committer.generation.outcome import (
    Approved,
    Cancelled,
    GenerationOutcome,
    WrittenByUser,
)
from committer.llm.base import BaseLLMProvider
from committer.llm.invoker import invoke_completion
from committer.llm.prompts import (
    LESS_TECHNICAL_INSTRUCTIONS,
    MORE_SUCCINCT_INSTRUCTIONS,
    MORE_TECHNICAL_INSTRUCTIONS,
    build_commit_prompt,
)
from committer.logging_utils import get_logger
from committer.ui.base import Interaction
from committer.ui.spinner import Spinner

logger = get_logger(__name__)

# Main menu
APPROVE = "Approve commit message"
TRY_AGAIN = "Try again"
WRITE_YOURSELF = "Write commit message yourself"
EXIT = "Exit"

MAIN_CHOICES = [APPROVE, TRY_AGAIN, WRITE_YOURSELF, EXIT]

# "Try again" menu
MORE_SUCCINCT = "Make more succinct"
MORE_TECHNICAL = "Make more technical"
LESS_TECHNICAL = "Make less technical"
DESCRIBE_CHANGE = "Write what should change"

REFINEMENTS = {
    MORE_SUCCINCT: MORE_SUCCINCT_INSTRUCTIONS,
    MORE_TECHNICAL: MORE_TECHNICAL_INSTRUCTIONS,
    LESS_TECHNICAL: LESS_TECHNICAL_INSTRUCTIONS,
}

REFINE_CHOICES = [MORE_SUCCINCT, MORE_TECHNICAL, LESS_TECHNICAL, DESCRIBE_CHANGE, EXIT]


class LoopPhase(Enum):
    """Phases of the generation loop."""

    GENERATING = "generating"
    PRESENTING = "presenting"
    DONE = "done"
    CANCELLED = "cancelled"
    EXHAUSTED = "exhausted"


@dataclass
class GenerationAttempt:
    """One model call and the answer shown to the user."""

    chunk_number: int
    total_chunks: int
    additional_instructions: str
    prompt: str
    response: str = ""


@dataclass
class LoopState:
    """Mutable state owned by a single run of the loop."""

    phase: LoopPhase = LoopPhase.GENERATING
    attempt_number: int = 0
    chunk_index: int = 0
    additional_instructions: str = ""
    current: Optional[GenerationAttempt] = None
    history: list[GenerationAttempt] = field(default_factory=list)
    outcome: Optional[GenerationOutcome] = None

    @property
    def final_message(self) -> Optional[str]:
        if isinstance(self.outcome, (Approved, WrittenByUser)):
            return self.outcome.message
        return None


def resolve_refinement(choice: str, interaction: Interaction) -> Optional[str]:
    """Turn a "Try again" choice into instructions for the next prompt.

    Args:
        choice: One of REFINE_CHOICES.
        interaction: Used to ask for free text on DESCRIBE_CHANGE.

    Returns:
        The instruction text, or None when the user chose to exit.

    Raises:
        ValueError: If choice is not a known refinement.
    """
    if choice == EXIT:
        return None
    if choice == DESCRIBE_CHANGE:
        return interaction.ask("What should change in the commit message?")
    if choice in REFINEMENTS:
        return REFINEMENTS[choice]
    raise ValueError(f"Unknown refinement choice: {choice}")


class MessageGenerationLoop:
    """Drives prompt -> completion -> user decision until a terminal phase."""

    def __init__(
        self,
        provider: BaseLLMProvider,
        interaction: Interaction,
        stats: str,
        chunks: list[str],
        timeout: float,
        max_attempts: int = MAX_ATTEMPTS,
        spinner: Optional[Spinner] = None,
    ):
        """Initialize the loop.

        Args:
            provider: LLM provider used for every completion.
            interaction: Prompts the user for decisions.
            stats: Staged change statistics, sent with every chunk.
            chunks: Diff chunks in source order. Must not be empty.
            timeout: Seconds each completion may take.
            max_attempts: Attempts allowed before giving up.
            spinner: Progress indicator shown during completions.

        Raises:
            ValueError: If chunks is empty or max_attempts is not positive.
        """
        if not chunks:
            raise ValueError("at least one chunk is required")
        if max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")

        self.provider = provider
        self.interaction = interaction
        self.stats = stats
        self.chunks = chunks
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.spinner = spinner
        self.state = LoopState()

        self._transitions: dict[LoopPhase, Callable[[LoopState], LoopPhase]] = {
            LoopPhase.GENERATING: self._generate,
            LoopPhase.PRESENTING: self._present,
        }

    def run(self) -> GenerationOutcome:
        """Run the loop to a terminal phase.

        Returns:
            Approved, WrittenByUser or Cancelled.

        Raises:
            MaxAttemptsExceededError: If max_attempts attempts ended in "Try again".
            LLMError: If a completion fails or times out.
        """
        state = self.state = LoopState()

        while state.phase in self._transitions:
            previous = state.phase
            state.phase = self._transitions[previous](state)
            logger.debug(
                "Loop %s -> %s (attempt %d, chunk %d/%d)",
                previous.value,
                state.phase.value,
                state.attempt_number + 1,
                state.chunk_index + 1,
                len(self.chunks),
            )

        if state.phase is LoopPhase.EXHAUSTED:
            raise MaxAttemptsExceededError(
                f"No commit message accepted after {self.max_attempts} attempts"
            )
        if state.phase is LoopPhase.CANCELLED:
            return Cancelled()
        return state.outcome

    def _generate(self, state: LoopState) -> LoopPhase:
        total = len(self.chunks)
        prompt = build_commit_prompt(
            stats=self.stats,
            diff=self.chunks[state.chunk_index],
            chunk_number=state.chunk_index + 1,
            total_chunks=total,
            additional_instructions=state.additional_instructions,
        )
        attempt = GenerationAttempt(
            chunk_number=state.chunk_index + 1,
            total_chunks=total,
            additional_instructions=state.additional_instructions,
            prompt=prompt,
        )

        # Leaving the block stops the spinner before any prompt is shown
        with self._spin("Generating commit message..."):
            result = invoke_completion(self.provider, prompt, self.timeout)

        attempt.response = result.text
        state.current = attempt
        state.history.append(attempt)
        return LoopPhase.PRESENTING

    def _present(self, state: LoopState) -> LoopPhase:
        attempt = state.current
        if attempt.total_chunks > 1:
            self.interaction.show(
                f"\nChunk {attempt.chunk_number} of {attempt.total_chunks}:"
            )
        self.interaction.show(f"\n{attempt.response}\n")

        choice = self.interaction.choose("What would you like to do?", MAIN_CHOICES)

        if choice == APPROVE:
            state.outcome = Approved(message=attempt.response)
            return LoopPhase.DONE

        if choice == WRITE_YOURSELF:
            text = self.interaction.edit()
            state.outcome = WrittenByUser(message=text + "\n" if text else "")
            return LoopPhase.DONE

        if choice == EXIT:
            return LoopPhase.CANCELLED

        refinement = self.interaction.choose(
            "How should the commit message change?", REFINE_CHOICES
        )
        instructions = resolve_refinement(refinement, self.interaction)
        if instructions is None:
            return LoopPhase.CANCELLED

        state.additional_instructions = instructions
        return self._restart(state)

    def _restart(self, state: LoopState) -> LoopPhase:
        state.chunk_index = 0
        state.attempt_number += 1
        if state.attempt_number >= self.max_attempts:
            return LoopPhase.EXHAUSTED
        return LoopPhase.GENERATING

    def _spin(self, text: str):
        if self.spinner is None:
            return nullcontext()
        return self.spinner.start(text)
