"""One-shot result callbacks shared between competing transports."""

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class _Completion(Generic[T]):
    """State shared by a callback and all of its clones."""

    def __init__(self, callback: Callable[[T], None]) -> None:
        self.callback: Callable[[T], None] | None = callback
        self.lock = threading.Lock()
        self.done = threading.Event()


class StateCallback(Generic[T]):
    """A callback that fires at most once across all of its clones.

    Each clone may carry its own observer. Only the observer of the clone
    that delivers the result runs, after the callback has been called.
    """

    def __init__(self, callback: Callable[[T], None]) -> None:
        self._completion: _Completion[T] = _Completion(callback)
        self._observer: Callable[[], None] | None = None
        self._observer_lock = threading.Lock()

    def clone(self) -> "StateCallback[T]":
        """Return a callback sharing this one's completion but without its observer."""
        twin: StateCallback[T] = object.__new__(StateCallback)
        twin._completion = self._completion
        twin._observer = None
        twin._observer_lock = threading.Lock()
        return twin

    def add_uncloneable_observer(self, observer: Callable[[], None]) -> None:
        """Attach an observer to this instance only; clones do not inherit it."""
        with self._observer_lock:
            if self._observer is not None:
                raise RuntimeError("an observer is already attached to this callback")
            self._observer = observer

    def call(self, rv: T) -> bool:
        """Deliver a result; returns False if a result was already delivered."""
        completion = self._completion
        with completion.lock:
            callback, completion.callback = completion.callback, None
        if callback is None:
            return False
        try:
            callback(rv)
            with self._observer_lock:
                observer, self._observer = self._observer, None
            if observer is not None:
                observer()
        finally:
            completion.done.set()
        return True

    def wait(self, timeout: float | None = None) -> bool:
        """Block until a result was delivered; returns False on timeout."""
        return self._completion.done.wait(timeout)