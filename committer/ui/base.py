"""Abstract user-interaction collaborator."""

from abc import ABC, abstractmethod
from typing import Optional


class Interaction(ABC):
    """Blocking prompts the commit flow needs from a human."""

    @abstractmethod
    def show(self, text: str) -> None:
        """Display text to the user."""
        pass

    @abstractmethod
    def choose(self, question: str, choices: list[str]) -> str:
        """Ask the user to pick one of choices.

        Args:
            question: The question shown above the options.
            choices: Option labels, in display order.

        Returns:
            The selected label, exactly as it appears in choices.
        """
        pass

    @abstractmethod
    def confirm(self, question: str, default: bool) -> bool:
        """Ask a yes/no question with an explicit default."""
        pass

    @abstractmethod
    def ask(self, prompt: str) -> str:
        """Ask for a single line of free text."""
        pass

    @abstractmethod
    def edit(self, initial: str = "") -> Optional[str]:
        """Open a multi-line editor.

        Args:
            initial: Text the editor starts with.

        Returns:
            The entered text, or None if the user aborted the entry.
        """
        pass
