"""Signal handling for the fstree CLI.

Listing a large tree into ``head`` closes the pipe early, and Ctrl+C may arrive at any
point. Both are recorded here so that the CLI can stop writing and exit with the
conventional status (141 for SIGPIPE, 130 for SIGINT) instead of printing a traceback.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Optional

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


class SignalHandler:
    """Records SIGPIPE and SIGINT for the CLI's main loop to act on.

    Attributes:
        sigpipe_received: Set once a SIGPIPE (or EPIPE on write) has been seen.
        sigint_received: Set once a SIGINT has been seen.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self._original_handlers: dict = {}

    def install(self) -> None:
        """Install handlers, remembering the previous ones. SIGPIPE is skipped where absent."""
        for signum, handler in self._handlers().items():
            self._original_handlers[signum] = signal.getsignal(signum)
            signal.signal(signum, handler)

    def _handlers(self) -> dict:
        handlers: dict = {signal.SIGINT: self.handle_sigint}
        if hasattr(signal, "SIGPIPE"):
            handlers[signal.SIGPIPE] = self.handle_sigpipe
        return handlers

    def _restore(self, signum: int) -> None:
        original: Any = self._original_handlers.get(signum)
        if original is not None:
            signal.signal(signum, original)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        self._restore(signum)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        self._restore(signum)

    @property
    def interrupted(self) -> bool:
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit status implied by the signals received, or None."""
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None

    def reset(self) -> None:
        self.sigpipe_received.clear()
        self.sigint_received.clear()


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Configure signal handlers for SIGPIPE and SIGINT."""
    signal_handler.install()


def cleanup() -> None:
    """Silence stdout at exit after an interruption, so shutdown doesn't hit the closed pipe."""
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
