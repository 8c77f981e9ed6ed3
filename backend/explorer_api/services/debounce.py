"""Cancellable delayed execution for search-as-you-type input."""
from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Debouncer(Generic[T]):
    """Run ``callback`` with the latest value once input pauses for ``delay`` seconds.

    Each ``schedule`` call cancels the pending timer and starts a new one, so
    only the last value of a burst reaches the callback. Every scheduled value
    carries a generation number; a timer whose generation has been superseded
    does nothing when it fires. Callbacks never run concurrently.
    """

    def __init__(self, callback: Callable[[T], None], *, delay: float = 0.3) -> None:
        self._callback = callback
        self._delay = delay
        self._lock = threading.Lock()
        self._run_lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._generation = 0
        self._pending: tuple[int, T] | None = None

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def schedule(self, value: T) -> None:
        """Cancel any pending call and reschedule with ``value``."""

        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            generation = self._generation
            self._pending = (generation, value)
            if self._delay <= 0:
                self._timer = None
                run_now = True
            else:
                self._timer = threading.Timer(self._delay, self._fire, args=(generation,))
                self._timer.daemon = True
                self._timer.start()
                run_now = False
        if run_now:
            self._fire(generation)

    def flush(self) -> bool:
        """Run the pending call immediately. Returns whether one was pending."""

        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            generation = self._pending[0] if self._pending is not None else None
        if generation is None:
            return False
        return self._fire(generation)

    def cancel(self) -> None:
        """Drop the pending call without running it."""

        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None

    def _fire(self, generation: int) -> bool:
        with self._run_lock:
            with self._lock:
                pending = self._pending
                if pending is None or pending[0] != generation:
                    return False
                self._pending = None
                self._timer = None
            self._callback(pending[1])
            return True
