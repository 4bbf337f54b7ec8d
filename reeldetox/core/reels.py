from __future__ import annotations

"""Static reel catalogue shown in the mindful carousel."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Gradient:
    angle: float
    stops: tuple[tuple[float, str], ...]


@dataclass(frozen=True)
class Reel:
    id: str
    title: str
    prompt: str
    anchor: str
    gradient: Gradient


REELS: tuple[Reel, ...] = (
    Reel(
        id="stretch",
        title="60-Second Reset",
        prompt="Stand tall, reach for the ceiling, then fold forward and breathe.",
        anchor="Movement keeps the doom-scroll away",
        gradient=Gradient(160, ((0.0, "#4937ff"), (0.45, "#8a5dff"), (1.0, "#fca2ff"))),
    ),
    Reel(
        id="hydrate",
        title="Hydrate + Reflect",
        prompt="Sip water while naming three wins from today.",
        anchor="Micro wins beat micro scrolls",
        gradient=Gradient(160, ((0.0, "#0099f7"), (0.4, "#00d4ff"), (1.0, "#6ef8ff"))),
    ),
    Reel(
        id="breathe",
        title="Box Breathing",
        prompt="Inhale 4, hold 4, exhale 4, hold 4. Repeat five rounds.",
        anchor="Reels can wait, your nervous system can't",
        gradient=Gradient(140, ((0.0, "#02aab0"), (1.0, "#00cdac"))),
    ),
    Reel(
        id="vision",
        title="Vision Reset",
        prompt="Look 20ft away, trace a square with your eyes, repeat twice.",
        anchor="Focus forward, not just on the feed",
        gradient=Gradient(150, ((0.0, "#ff5858"), (1.0, "#f857a6"))),
    ),
    Reel(
        id="journal",
        title="Mini Journal",
        prompt="Type or speak one thing you're grateful for right now.",
        anchor="Gratitude > infinite scroll",
        gradient=Gradient(150, ((0.0, "#ff9966"), (1.0, "#ff5e62"))),
    ),
)

TIPS: tuple[str, ...] = (
    "Silence notifications before you begin.",
    "Lock your phone once the break overlay appears.",
    "Queue a calming playlist to replace algorithmic feeds.",
)
