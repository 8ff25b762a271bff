"""Results of a finished generation loop."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Approved:
    """The user approved a generated message, kept exactly as returned."""

    message: str


@dataclass(frozen=True)
class WrittenByUser:
    """The user wrote the message in the editor.

    message is empty when the entry was aborted or left blank.
    """

    message: str


@dataclass(frozen=True)
class Cancelled:
    """The user chose to exit without a message."""


GenerationOutcome = Approved | WrittenByUser | Cancelled
