from __future__ import annotations

"""Entry point for Reel Detox.

Parses launch options, configures logging, builds the session controller on a
Qt-backed scheduler and runs the main window.
"""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from reeldetox.core.session import DEFAULT_MINUTES, MAX_MINUTES, MIN_MINUTES, SessionController
from reeldetox.ui.main_window import MainWindow
from reeldetox.ui.qt_scheduler import QtScheduler
from reeldetox.ui.styles import apply_theme


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _minutes(value: str) -> int:
    try:
        minutes = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {value!r}") from None
    if not MIN_MINUTES <= minutes <= MAX_MINUTES:
        raise argparse.ArgumentTypeError(f"must be between {MIN_MINUTES} and {MAX_MINUTES}")
    return minutes


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reel Detox mindful scroll timer")
    parser.add_argument(
        "--minutes",
        type=_minutes,
        default=DEFAULT_MINUTES,
        help=f"initial session length in minutes ({MIN_MINUTES}-{MAX_MINUTES})",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="logging verbosity",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Create the application objects and run the Qt event loop."""
    args, qt_args = build_parser().parse_known_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication([sys.argv[0], *qt_args])
    apply_theme(app)

    controller = SessionController(QtScheduler(app), session_minutes=args.minutes)
    window = MainWindow(controller)

    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
