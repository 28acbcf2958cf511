"""Cancellable worker threads driven by an alive() predicate."""

import threading
import time
from typing import Callable

AliveFn = Callable[[], bool]


class RunLoop:
    """Runs ``target(alive)`` on its own thread.

    ``alive()`` turns False once the loop is cancelled or once its timeout,
    given in milliseconds, has elapsed. The target is expected to poll it.
    """

    def __init__(self, target: Callable[[AliveFn], None], timeout: float | None = None) -> None:
        self._cancelled = threading.Event()
        self._deadline = None if timeout is None else time.monotonic() + timeout / 1000.0
        self._thread = threading.Thread(target=target, args=(self.alive,), daemon=True)
        self._thread.start()

    def alive(self) -> bool:
        """False once cancelled or timed out."""
        if self._cancelled.is_set():
            return False
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return False
        return True

    def cancel(self) -> None:
        """Stop the loop and wait for its thread, unless called from that thread."""
        self._cancelled.set()
        if threading.current_thread() is not self._thread:
            self._thread.join()

    @property
    def finished(self) -> bool:
        """Whether the target has returned."""
        return not self._thread.is_alive()