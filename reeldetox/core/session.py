from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from reeldetox.core.reels import REELS, Reel
from reeldetox.core.scheduling import Scheduler, TimerKind, TimerRegistry


logger = logging.getLogger(__name__)

BREAK_SECONDS = 60
MIN_MINUTES = 1
MAX_MINUTES = 30
DEFAULT_MINUTES = 5
QUICK_SELECT_MINUTES = (3, 5, 10, 15)
TICK_INTERVAL_MS = 1000
ROTATION_INTERVAL_MS = 10_000


class SessionPhase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    BREATHING = "locked_breathing"
    BREAK_FINISHED = "locked_finished"


@dataclass
class SessionState:
    session_minutes: int = DEFAULT_MINUTES
    time_remaining: int = DEFAULT_MINUTES * 60
    is_session_active: bool = False
    is_locked: bool = False
    break_remaining: int = BREAK_SECONDS
    break_finished: bool = False
    active_reel_index: int = 0

    @property
    def total_seconds(self) -> int:
        return self.session_minutes * 60

    @property
    def phase(self) -> SessionPhase:
        if self.is_locked:
            return SessionPhase.BREAK_FINISHED if self.break_finished else SessionPhase.BREATHING
        if self.is_session_active:
            return SessionPhase.RUNNING
        return SessionPhase.IDLE

    @property
    def consumption_progress(self) -> float:
        total = self.total_seconds
        if total == 0:
            return 0.0
        if self.is_locked:
            return 1.0
        return max(0.0, min(1.0, (total - self.time_remaining) / total))


@dataclass(frozen=True)
class SessionSnapshot:
    session_minutes: int
    time_remaining: int
    is_session_active: bool
    is_locked: bool
    break_remaining: int
    break_finished: bool
    active_reel_index: int
    reel_count: int
    phase: SessionPhase
    progress: float


def validate_minutes(minutes: int) -> int:
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise ValueError(f"Session length must be a whole number of minutes, got {minutes!r}")
    if not MIN_MINUTES <= minutes <= MAX_MINUTES:
        raise ValueError(f"Session length must be between {MIN_MINUTES} and {MAX_MINUTES} minutes")
    return minutes


Listener = Callable[[SessionSnapshot], None]


class SessionController:
    """Session countdown, break lockout and reel rotation, detached from Qt.

    Every public operation is a guarded transition. Rejected calls return
    ``False`` and leave the state untouched. After each accepted transition the
    phase-scoped timers are reconciled first, then subscribers receive one
    snapshot, so nobody observes a half-applied transition.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        reels: Sequence[Reel] = REELS,
        session_minutes: int = DEFAULT_MINUTES,
    ) -> None:
        if not reels:
            raise ValueError("At least one reel is required")
        validate_minutes(session_minutes)
        self._reels = tuple(reels)
        self._state = SessionState(
            session_minutes=session_minutes,
            time_remaining=session_minutes * 60,
        )
        self._timers = TimerRegistry(scheduler)
        self._listeners: list[Listener] = []
        self._timer_intervals = {
            TimerKind.SESSION_TICK: TICK_INTERVAL_MS,
            TimerKind.REEL_ROTATION: ROTATION_INTERVAL_MS,
            TimerKind.BREAK_TICK: TICK_INTERVAL_MS,
        }
        self._timer_callbacks = {
            TimerKind.SESSION_TICK: self.tick,
            TimerKind.REEL_ROTATION: self.rotate,
            TimerKind.BREAK_TICK: self.tick,
        }

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def phase(self) -> SessionPhase:
        return self._state.phase

    @property
    def reels(self) -> tuple[Reel, ...]:
        return self._reels

    @property
    def current_reel(self) -> Reel:
        return self._reels[self._state.active_reel_index]

    @property
    def consumption_progress(self) -> float:
        return self._state.consumption_progress

    @property
    def active_timers(self) -> frozenset[TimerKind]:
        return self._timers.active_kinds

    def snapshot(self) -> SessionSnapshot:
        s = self._state
        return SessionSnapshot(
            session_minutes=s.session_minutes,
            time_remaining=s.time_remaining,
            is_session_active=s.is_session_active,
            is_locked=s.is_locked,
            break_remaining=s.break_remaining,
            break_finished=s.break_finished,
            active_reel_index=s.active_reel_index,
            reel_count=len(self._reels),
            phase=s.phase,
            progress=s.consumption_progress,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_session_minutes(self, minutes: int) -> bool:
        validate_minutes(minutes)
        if self.phase != SessionPhase.IDLE:
            logger.debug("Ignored session length change while %s", self.phase.value)
            return False
        self._state.session_minutes = minutes
        self._state.time_remaining = minutes * 60
        logger.debug("Session length set to %d min", minutes)
        self._commit()
        return True

    def start(self) -> bool:
        phase = self.phase
        if phase == SessionPhase.RUNNING:
            logger.debug("Start ignored: session already running")
            return False
        if phase == SessionPhase.BREATHING:
            logger.debug("Start rejected: break still in progress")
            return False
        self._begin_session()
        logger.info("Session started for %d min", self._state.session_minutes)
        self._commit()
        return True

    def resume(self) -> bool:
        if self.phase != SessionPhase.BREAK_FINISHED:
            logger.debug("Resume ignored while %s", self.phase.value)
            return False
        self._begin_session()
        logger.info("Session resumed after break for %d min", self._state.session_minutes)
        self._commit()
        return True

    def pause(self) -> bool:
        if self.phase != SessionPhase.RUNNING:
            logger.debug("Pause ignored while %s", self.phase.value)
            return False
        self._state.is_session_active = False
        logger.info("Session paused with %d s left", self._state.time_remaining)
        self._commit()
        return True

    def toggle(self) -> bool:
        if self.phase == SessionPhase.RUNNING:
            return self.pause()
        return self.start()

    def reset(self) -> None:
        s = self._state
        s.is_session_active = False
        s.is_locked = False
        s.break_finished = False
        s.break_remaining = BREAK_SECONDS
        s.time_remaining = s.total_seconds
        s.active_reel_index = 0
        logger.info("Session reset")
        self._commit()

    def tick(self) -> None:
        phase = self.phase
        if phase == SessionPhase.RUNNING:
            self._countdown_step()
        elif phase == SessionPhase.BREATHING:
            self._break_step()
        else:
            logger.debug("Tick ignored while %s", phase.value)
            return
        self._commit()

    def rotate(self) -> None:
        if self.phase != SessionPhase.RUNNING:
            logger.debug("Rotation ignored while %s", self.phase.value)
            return
        self._move_reel(1)
        self._commit()

    def next_reel(self) -> bool:
        return self._navigate(1)

    def previous_reel(self) -> bool:
        return self._navigate(-1)

    def shutdown(self) -> None:
        self._timers.cancel_all()
        self._listeners.clear()

    def _navigate(self, step: int) -> bool:
        if self._state.is_locked:
            logger.debug("Reel navigation blocked while locked")
            return False
        self._move_reel(step)
        self._commit()
        return True

    def _move_reel(self, step: int) -> None:
        count = len(self._reels)
        self._state.active_reel_index = (self._state.active_reel_index + step) % count
        logger.debug("Showing reel %d/%d", self._state.active_reel_index + 1, count)

    def _begin_session(self) -> None:
        s = self._state
        s.time_remaining = s.total_seconds
        s.active_reel_index = 0
        s.is_locked = False
        s.break_finished = False
        s.break_remaining = BREAK_SECONDS
        s.is_session_active = True

    def _countdown_step(self) -> None:
        s = self._state
        if s.time_remaining <= 1:
            s.time_remaining = 0
            s.is_session_active = False
            s.is_locked = True
            s.break_finished = False
            s.break_remaining = BREAK_SECONDS
            logger.info("Scroll allowance used up, locking for %d s", BREAK_SECONDS)
            return
        s.time_remaining -= 1

    def _break_step(self) -> None:
        s = self._state
        if s.break_remaining <= 1:
            s.break_remaining = 0
            s.break_finished = True
            logger.info("Break finished")
            return
        s.break_remaining -= 1

    def _wanted_timers(self) -> tuple[TimerKind, ...]:
        phase = self.phase
        if phase == SessionPhase.RUNNING:
            return (TimerKind.SESSION_TICK, TimerKind.REEL_ROTATION)
        if phase == SessionPhase.BREATHING:
            return (TimerKind.BREAK_TICK,)
        return ()

    def _commit(self) -> None:
        self._timers.reconcile(self._wanted_timers(), self._timer_intervals, self._timer_callbacks)
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
