from __future__ import annotations

"""Phase-scoped periodic timers.

The controller never talks to a concrete event loop. It asks a ``Scheduler``
for repeating callbacks and keeps the returned handles in a ``TimerRegistry``;
on every transition the registry is reconciled against the set of timers the
new phase needs, so a timer only lives as long as the phase that owns it.
"""

import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Protocol


logger = logging.getLogger(__name__)


class TimerKind(str, Enum):
    SESSION_TICK = "session_tick"
    REEL_ROTATION = "reel_rotation"
    BREAK_TICK = "break_tick"


class TimerHandle(Protocol):
    def cancel(self) -> None:
        """Stop the timer; no further callbacks may fire."""


class Scheduler(Protocol):
    def every(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Call ``callback`` every ``interval_ms`` until the handle is cancelled."""


class _ArmedTimer:
    def __init__(self, kind: TimerKind, callback: Callable[[], None]) -> None:
        self.kind = kind
        self.active = True
        self.handle: TimerHandle | None = None
        self._callback = callback

    def fire(self) -> None:
        if not self.active:
            logger.debug("Dropped stale %s callback", self.kind.value)
            return
        self._callback()

    def cancel(self) -> None:
        self.active = False
        if self.handle is not None:
            self.handle.cancel()
            self.handle = None


class TimerRegistry:
    """Keeps at most one live timer per ``TimerKind``."""

    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler
        self._armed: dict[TimerKind, _ArmedTimer] = {}

    @property
    def active_kinds(self) -> frozenset[TimerKind]:
        return frozenset(self._armed)

    def is_armed(self, kind: TimerKind) -> bool:
        return kind in self._armed

    def arm(self, kind: TimerKind, interval_ms: int, callback: Callable[[], None]) -> None:
        if kind in self._armed:
            return
        armed = _ArmedTimer(kind, callback)
        self._armed[kind] = armed
        armed.handle = self._scheduler.every(interval_ms, armed.fire)
        logger.debug("Armed %s every %d ms", kind.value, interval_ms)

    def cancel(self, kind: TimerKind) -> None:
        armed = self._armed.pop(kind, None)
        if armed is None:
            return
        armed.cancel()
        logger.debug("Cancelled %s", kind.value)

    def reconcile(
        self,
        wanted: Iterable[TimerKind],
        intervals: dict[TimerKind, int],
        callbacks: dict[TimerKind, Callable[[], None]],
    ) -> None:
        wanted_set = set(wanted)
        for kind in list(self._armed):
            if kind not in wanted_set:
                self.cancel(kind)
        # Arm in enum order so same-period timers fire in a stable order.
        for kind in TimerKind:
            if kind in wanted_set:
                self.arm(kind, intervals[kind], callbacks[kind])

    def cancel_all(self) -> None:
        for kind in list(self._armed):
            self.cancel(kind)
