from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from collections.abc import Callable

import pytest

from reeldetox.core.session import SessionController


class FakeTimerHandle:
    def __init__(self, interval_ms: int, callback: Callable[[], None], due_ms: int, seq: int) -> None:
        self.interval_ms = interval_ms
        self.callback = callback
        self.due_ms = due_ms
        self.seq = seq
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Virtual clock: timers only fire when a test advances time."""

    def __init__(self) -> None:
        self.now_ms = 0
        self.timers: list[FakeTimerHandle] = []
        self._seq = 0

    def every(self, interval_ms: int, callback: Callable[[], None]) -> FakeTimerHandle:
        handle = FakeTimerHandle(interval_ms, callback, self.now_ms + interval_ms, self._seq)
        self._seq += 1
        self.timers.append(handle)
        return handle

    @property
    def live(self) -> list[FakeTimerHandle]:
        return [t for t in self.timers if not t.cancelled]

    def advance(self, ms: int) -> None:
        target = self.now_ms + ms
        while True:
            due = [t for t in self.live if t.due_ms <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.due_ms, t.seq))
            self.now_ms = timer.due_ms
            timer.due_ms += timer.interval_ms
            timer.callback()
        self.now_ms = target

    def advance_seconds(self, seconds: int) -> None:
        self.advance(seconds * 1000)


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def controller(scheduler: FakeScheduler) -> SessionController:
    return SessionController(scheduler)


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
