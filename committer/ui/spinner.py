"""Progress indicator shown while an LLM call is in flight.

Spinner.start returns a SpinnerHandle; leaving its `with` block (or calling
stop) always clears the indicator, so prompts never share the terminal with
the animation. Only one indicator runs at a time per Spinner.
"""

import threading
from typing import Optional

from rich.console import Console
from rich.status import Status


class SpinnerHandle:
    """Scoped ownership of a running spinner."""

    def __init__(self, spinner: "Spinner", status: Optional[Status]):
        self._spinner = spinner
        self._status = status

    @property
    def active(self) -> bool:
        return self._status is not None

    def stop(self) -> None:
        """Stop the spinner. Safe to call more than once."""
        status, self._status = self._status, None
        if status is None:
            return
        status.stop()
        self._spinner._release()

    def __enter__(self) -> "SpinnerHandle":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.stop()


class Spinner:
    """Starts rich status spinners on stderr, at most one at a time."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)
        self._lock = threading.Lock()
        self._running = False

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._running

    def start(self, text: str) -> SpinnerHandle:
        """Start the spinner with text.

        Returns:
            A handle owning the spinner, or an inert handle if one is
            already running.
        """
        with self._lock:
            if self._running:
                return SpinnerHandle(self, None)
            self._running = True

        status = self.console.status(text, spinner="dots")
        status.start()
        return SpinnerHandle(self, status)

    def _release(self) -> None:
        with self._lock:
            self._running = False
