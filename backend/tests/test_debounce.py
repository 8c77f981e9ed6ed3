"""Tests for the search input debouncer."""
from __future__ import annotations

import threading

from backend.explorer_api.services.debounce import Debouncer


def test_only_last_value_is_applied_on_flush() -> None:
    received: list[str] = []
    debouncer: Debouncer[str] = Debouncer(received.append, delay=60)

    debouncer.schedule("c")
    debouncer.schedule("ca")
    debouncer.schedule("cat")

    assert received == []
    assert debouncer.pending is True
    assert debouncer.flush() is True
    assert received == ["cat"]
    assert debouncer.pending is False
    assert debouncer.flush() is False


def test_cancel_discards_pending_value() -> None:
    received: list[str] = []
    debouncer: Debouncer[str] = Debouncer(received.append, delay=60)

    debouncer.schedule("dog")
    debouncer.cancel()

    assert debouncer.flush() is False
    assert received == []


def test_timer_fires_after_delay() -> None:
    fired = threading.Event()
    received: list[str] = []

    def _callback(value: str) -> None:
        received.append(value)
        fired.set()

    debouncer: Debouncer[str] = Debouncer(_callback, delay=0.01)
    debouncer.schedule("weather")

    assert fired.wait(timeout=5)
    assert received == ["weather"]


def test_zero_delay_applies_immediately() -> None:
    received: list[int] = []
    debouncer: Debouncer[int] = Debouncer(received.append, delay=0)

    debouncer.schedule(1)
    debouncer.schedule(2)

    assert received == [1, 2]
    assert debouncer.pending is False


def test_superseded_timer_does_not_apply_stale_value() -> None:
    """A timer replaced by a later schedule call is a no-op when it fires."""

    received: list[str] = []
    debouncer: Debouncer[str] = Debouncer(received.append, delay=60)

    debouncer.schedule("ca")
    stale_timer = debouncer._timer
    assert stale_timer is not None
    debouncer.schedule("cat")

    assert stale_timer.function(*stale_timer.args) is False
    assert received == []

    assert debouncer.flush() is True
    assert received == ["cat"]
    assert stale_timer.function(*stale_timer.args) is False
    assert received == ["cat"]
    debouncer.cancel()


def test_callbacks_never_overlap() -> None:
    active = threading.Lock()
    overlaps: list[str] = []
    received: list[int] = []

    def _callback(value: int) -> None:
        if not active.acquire(blocking=False):
            overlaps.append("overlap")
            return
        try:
            received.append(value)
        finally:
            active.release()

    debouncer: Debouncer[int] = Debouncer(_callback, delay=0)
    threads = [threading.Thread(target=debouncer.schedule, args=(i,)) for i in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert overlaps == []
    assert received
