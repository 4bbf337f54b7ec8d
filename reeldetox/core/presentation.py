from __future__ import annotations

"""Pure projection of a session snapshot onto what the window shows."""

from dataclasses import dataclass

from reeldetox.core.session import BREAK_SECONDS, SessionPhase, SessionSnapshot


@dataclass(frozen=True)
class SessionView:
    timer_label: str
    progress_percent: float
    slider_label: str
    minutes_editable: bool
    show_pause: bool
    start_label: str
    start_enabled: bool
    overlay_visible: bool
    overlay_timer_text: str
    break_notice: str
    resume_label: str
    resume_enabled: bool
    navigation_enabled: bool
    reel_counter: str
    active_reel_index: int
    session_minutes: int


def format_time(total_seconds: int) -> str:
    safe = max(total_seconds, 0)
    return f"{safe // 60:02d}:{safe % 60:02d}"


def timer_label(snapshot: SessionSnapshot) -> str:
    if snapshot.is_locked:
        if snapshot.break_finished:
            return "Break complete. Ready when you are"
        return f"Break: {format_time(snapshot.break_remaining)}"
    if snapshot.is_session_active:
        return f"Time Left: {format_time(snapshot.time_remaining)}"
    return f"Ready for {snapshot.session_minutes} minute mindful session"


def project(snapshot: SessionSnapshot) -> SessionView:
    breathing = snapshot.phase == SessionPhase.BREATHING
    return SessionView(
        timer_label=timer_label(snapshot),
        progress_percent=snapshot.progress * 100,
        slider_label=f"Session length ({snapshot.session_minutes} min)",
        minutes_editable=snapshot.phase == SessionPhase.IDLE,
        show_pause=snapshot.is_session_active,
        start_label="Locked" if breathing else "Start mindful session",
        start_enabled=not breathing,
        overlay_visible=snapshot.is_locked,
        overlay_timer_text=(
            "Tap resume when ready" if snapshot.break_finished else format_time(snapshot.break_remaining)
        ),
        break_notice=(
            f"Your {snapshot.session_minutes}-minute scroll allowance is used up. "
            f"Take a {BREAK_SECONDS}-second breather away from the feed."
        ),
        resume_label="Start another focused burst" if snapshot.break_finished else "Breathing…",
        resume_enabled=snapshot.break_finished,
        navigation_enabled=not snapshot.is_locked,
        reel_counter=f"{snapshot.active_reel_index + 1} / {snapshot.reel_count}",
        active_reel_index=snapshot.active_reel_index,
        session_minutes=snapshot.session_minutes,
    )
