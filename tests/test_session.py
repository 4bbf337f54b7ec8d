import pytest

from reeldetox.core.reels import REELS
from reeldetox.core.scheduling import TimerKind
from reeldetox.core.session import (
    BREAK_SECONDS,
    MAX_MINUTES,
    MIN_MINUTES,
    SessionController,
    SessionPhase,
)


@pytest.mark.parametrize("minutes", range(MIN_MINUTES, MAX_MINUTES + 1))
def test_setting_minutes_while_idle_recomputes_remaining(controller, minutes) -> None:
    assert controller.set_session_minutes(minutes) is True

    assert controller.state.session_minutes == minutes
    assert controller.state.time_remaining == minutes * 60


@pytest.mark.parametrize("bad", [0, MAX_MINUTES + 1, -5, 2.5, "5", True])
def test_setting_out_of_range_minutes_raises(controller, bad) -> None:
    with pytest.raises(ValueError):
        controller.set_session_minutes(bad)
    assert controller.state.session_minutes == 5


def test_constructor_validates_arguments(scheduler) -> None:
    with pytest.raises(ValueError):
        SessionController(scheduler, reels=())
    with pytest.raises(ValueError):
        SessionController(scheduler, session_minutes=31)


@pytest.mark.parametrize("minutes", [1, 3, 30])
def test_countdown_locks_after_full_allowance(scheduler, minutes) -> None:
    controller = SessionController(scheduler, session_minutes=minutes)
    controller.start()

    for _ in range(minutes * 60 - 1):
        controller.tick()
    assert controller.phase == SessionPhase.RUNNING
    assert controller.state.time_remaining == 1

    controller.tick()

    assert controller.phase == SessionPhase.BREATHING
    assert controller.state.time_remaining == 0
    assert controller.state.break_remaining == BREAK_SECONDS
    assert controller.state.break_finished is False


def test_lock_and_active_are_mutually_exclusive_on_every_tick(scheduler) -> None:
    controller = SessionController(scheduler, session_minutes=2)
    seen = []
    controller.subscribe(seen.append)
    controller.start()

    scheduler.advance_seconds(2 * 60 + BREAK_SECONDS + 5)

    assert seen
    for snapshot in seen:
        assert not (snapshot.is_locked and snapshot.is_session_active)
        if snapshot.break_finished:
            assert snapshot.break_remaining == 0
        if not snapshot.is_locked:
            assert snapshot.break_finished is False
            assert snapshot.break_remaining == BREAK_SECONDS


def test_one_minute_session_scenario(scheduler) -> None:
    controller = SessionController(scheduler, session_minutes=1)
    controller.start()
    controller.next_reel()

    scheduler.advance_seconds(60)
    assert controller.phase == SessionPhase.BREATHING
    assert controller.state.break_remaining == 60

    scheduler.advance_seconds(60)
    assert controller.state.break_finished is True
    assert controller.state.break_remaining == 0
    assert controller.phase == SessionPhase.BREAK_FINISHED

    assert controller.resume() is True
    assert controller.phase == SessionPhase.RUNNING
    assert controller.state.time_remaining == 60
    assert controller.state.active_reel_index == 0
    assert controller.state.is_locked is False
    assert controller.state.break_remaining == BREAK_SECONDS


def test_resume_is_ignored_until_break_finishes(scheduler) -> None:
    controller = SessionController(scheduler, session_minutes=1)
    assert controller.resume() is False

    controller.start()
    scheduler.advance_seconds(60 + 30)
    before = controller.snapshot()

    assert controller.resume() is False
    assert controller.snapshot() == before


def test_start_is_rejected_while_breathing(scheduler) -> None:
    controller = SessionController(scheduler, session_minutes=1)
    controller.start()
    scheduler.advance_seconds(60)

    assert controller.start() is False
    assert controller.phase == SessionPhase.BREATHING


def test_start_after_break_behaves_like_resume(scheduler) -> None:
    controller = SessionController(scheduler, session_minutes=1)
    controller.start()
    scheduler.advance_seconds(120)

    assert controller.start() is True
    assert controller.phase == SessionPhase.RUNNING
    assert controller.state.time_remaining == 60


def test_pause_keeps_remaining_until_minutes_change(controller, scheduler) -> None:
    controller.start()
    scheduler.advance_seconds(10)

    assert controller.pause() is True
    assert controller.state.time_remaining == 290
    assert controller.state.is_session_active is False
    assert controller.state.is_locked is False

    scheduler.advance_seconds(30)
    assert controller.state.time_remaining == 290

    controller.set_session_minutes(3)
    assert controller.state.time_remaining == 180


def test_start_after_pause_restarts_full_countdown(controller, scheduler) -> None:
    controller.start()
    scheduler.advance_seconds(10)
    controller.pause()

    controller.start()

    assert controller.state.time_remaining == 300
    assert controller.state.active_reel_index == 0


def test_minutes_locked_while_running_or_locked(scheduler) -> None:
    controller = SessionController(scheduler, session_minutes=1)
    controller.start()
    assert controller.set_session_minutes(10) is False
    assert controller.state.session_minutes == 1

    scheduler.advance_seconds(60)
    assert controller.set_session_minutes(10) is False
    scheduler.advance_seconds(60)
    assert controller.set_session_minutes(10) is False
    assert controller.state.session_minutes == 1


def test_reset_from_any_phase_returns_to_idle(scheduler) -> None:
    controller = SessionController(scheduler, session_minutes=1)
    controller.start()
    scheduler.advance_seconds(75)
    assert controller.phase == SessionPhase.BREATHING

    controller.reset()

    state = controller.state
    assert controller.phase == SessionPhase.IDLE
    assert state.time_remaining == 60
    assert state.active_reel_index == 0
    assert state.break_remaining == BREAK_SECONDS
    assert state.break_finished is False
    assert controller.active_timers == frozenset()


def test_progress_runs_from_zero_to_one(scheduler) -> None:
    controller = SessionController(scheduler, session_minutes=1)
    controller.start()
    assert controller.consumption_progress == 0.0

    values = []
    for _ in range(59):
        scheduler.advance_seconds(1)
        values.append(controller.consumption_progress)
    assert values == sorted(values)
    assert values[-1] < 1.0

    scheduler.advance_seconds(1)
    assert controller.state.is_locked
    assert controller.consumption_progress == 1.0


def test_next_and_previous_wrap(controller) -> None:
    count = len(REELS)
    assert controller.previous_reel() is True
    assert controller.state.active_reel_index == count - 1

    assert controller.next_reel() is True
    assert controller.state.active_reel_index == 0
    assert controller.current_reel.id == "stretch"


def test_navigation_blocked_while_locked(scheduler) -> None:
    controller = SessionController(scheduler, session_minutes=1)
    controller.start()
    scheduler.advance_seconds(60)
    index = controller.state.active_reel_index

    assert controller.next_reel() is False
    assert controller.previous_reel() is False
    assert controller.state.active_reel_index == index


def test_auto_rotation_only_while_running(controller, scheduler) -> None:
    scheduler.advance_seconds(30)
    assert controller.state.active_reel_index == 0

    controller.start()
    scheduler.advance_seconds(10)
    assert controller.state.active_reel_index == 1

    controller.pause()
    scheduler.advance_seconds(30)
    assert controller.state.active_reel_index == 1


def test_manual_navigation_keeps_rotation_period(controller, scheduler) -> None:
    controller.start()
    scheduler.advance_seconds(5)
    controller.next_reel()
    assert controller.state.active_reel_index == 1

    scheduler.advance_seconds(5)
    assert controller.state.active_reel_index == 2

    scheduler.advance_seconds(50)
    assert controller.state.active_reel_index == (2 + 5) % len(REELS)


def test_timers_follow_phase(scheduler) -> None:
    controller = SessionController(scheduler, session_minutes=1)
    assert controller.active_timers == frozenset()

    controller.start()
    assert controller.active_timers == {TimerKind.SESSION_TICK, TimerKind.REEL_ROTATION}

    scheduler.advance_seconds(60)
    assert controller.active_timers == {TimerKind.BREAK_TICK}

    scheduler.advance_seconds(60)
    assert controller.active_timers == frozenset()
    assert scheduler.live == []


def test_pause_and_restart_never_duplicate_timers(controller, scheduler) -> None:
    for _ in range(3):
        controller.start()
        controller.pause()
    controller.start()

    assert len(scheduler.live) == 2
    scheduler.advance_seconds(3)
    assert controller.state.time_remaining == 297


def test_transition_is_applied_before_listeners_run(scheduler) -> None:
    controller = SessionController(scheduler, session_minutes=1)
    observed = []

    def listener(snapshot) -> None:
        if snapshot.is_locked and not observed:
            observed.append(controller.active_timers)

    controller.subscribe(listener)
    controller.start()
    scheduler.advance_seconds(60)

    assert observed == [frozenset({TimerKind.BREAK_TICK})]


def test_listener_gets_one_snapshot_per_operation(controller) -> None:
    seen = []
    unsubscribe = controller.subscribe(seen.append)

    controller.start()
    controller.tick()
    controller.pause()
    controller.pause()
    assert [s.phase for s in seen] == [SessionPhase.RUNNING, SessionPhase.RUNNING, SessionPhase.IDLE]
    assert seen[1].time_remaining == 299

    unsubscribe()
    controller.reset()
    assert len(seen) == 3


def test_toggle_starts_and_pauses(controller) -> None:
    assert controller.toggle() is True
    assert controller.phase == SessionPhase.RUNNING
    assert controller.toggle() is True
    assert controller.phase == SessionPhase.IDLE


def test_shutdown_cancels_everything(controller, scheduler) -> None:
    controller.start()
    controller.shutdown()

    assert scheduler.live == []
    scheduler.advance_seconds(20)
    assert controller.state.time_remaining == 300
