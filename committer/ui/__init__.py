"""User interaction for committer: prompts, editor and spinner."""

from committer.ui.base import Interaction
from committer.ui.spinner import Spinner, SpinnerHandle
from committer.ui.terminal import TerminalInteraction

__all__ = [
    "Interaction",
    "Spinner",
    "SpinnerHandle",
    "TerminalInteraction",
]
