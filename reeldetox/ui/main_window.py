from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from reeldetox.core.presentation import SessionView, project
from reeldetox.core.reels import TIPS
from reeldetox.core.session import (
    MAX_MINUTES,
    MIN_MINUTES,
    QUICK_SELECT_MINUTES,
    SessionController,
    SessionSnapshot,
)
from reeldetox.ui.reel_card import ReelCardWidget


PROGRESS_STEPS = 1000


class MainWindow(QMainWindow):
    def __init__(self, controller: SessionController) -> None:
        super().__init__()
        self.setWindowTitle("Reel Detox")
        self.resize(980, 680)

        self.controller = controller
        self.view: SessionView = project(controller.snapshot())

        self._build_ui()
        self._connect_signals()
        self._unsubscribe = self.controller.subscribe(self._on_state_changed)
        self._render(self.view)

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)
        root_layout = QHBoxLayout(central)
        root_layout.setContentsMargins(24, 24, 24, 24)
        root_layout.setSpacing(28)

        sidebar = QVBoxLayout()
        badge = QLabel("Reel detox")
        badge.setObjectName("Badge")
        heading = QLabel("Shorts-style breaks that keep you off-the-scroll")
        heading.setObjectName("Heading")
        heading.setWordWrap(True)
        intro = QLabel(
            "Trade endless swipes for mindful micro-sessions. Set a limit, press start, "
            "and let the reels guide you out of the doom-scroll loop."
        )
        intro.setObjectName("MutedText")
        intro.setWordWrap(True)
        sidebar.addWidget(badge, 0, Qt.AlignmentFlag.AlignLeft)
        sidebar.addWidget(heading)
        sidebar.addWidget(intro)
        sidebar.addSpacing(12)

        panel = QFrame()
        panel.setObjectName("Panel")
        panel_layout = QVBoxLayout(panel)
        panel_layout.setContentsMargins(20, 20, 20, 20)
        panel_layout.setSpacing(12)

        panel_head = QHBoxLayout()
        designer_title = QLabel("Session designer")
        designer_title.setObjectName("SubtleTitle")
        self.timer_label = QLabel()
        self.timer_label.setObjectName("TimerLabel")
        panel_head.addWidget(designer_title)
        panel_head.addStretch()
        panel_head.addWidget(self.timer_label)
        panel_layout.addLayout(panel_head)

        self.slider_label = QLabel()
        self.minutes_slider = QSlider(Qt.Orientation.Horizontal)
        self.minutes_slider.setRange(MIN_MINUTES, MAX_MINUTES)
        self.minutes_slider.setSingleStep(1)
        self.minutes_slider.setPageStep(1)
        self.minutes_slider.setAccessibleName("Choose session length")
        panel_layout.addWidget(self.slider_label)
        panel_layout.addWidget(self.minutes_slider)

        quick_row = QHBoxLayout()
        self.quick_buttons: dict[int, QPushButton] = {}
        for minutes in QUICK_SELECT_MINUTES:
            button = QPushButton(f"{minutes}m")
            button.setObjectName("QuickSelect")
            button.setCheckable(True)
            self.quick_buttons[minutes] = button
            quick_row.addWidget(button)
        quick_row.addStretch()
        panel_layout.addLayout(quick_row)

        actions = QHBoxLayout()
        self.start_btn = QPushButton("Start mindful session")
        self.start_btn.setObjectName("PrimaryButton")
        self.pause_btn = QPushButton("Pause session")
        self.pause_btn.setObjectName("SecondaryButton")
        self.reset_btn = QPushButton("Reset timer")
        self.reset_btn.setObjectName("SecondaryButton")
        actions.addWidget(self.start_btn)
        actions.addWidget(self.pause_btn)
        actions.addWidget(self.reset_btn)
        actions.addStretch()
        panel_layout.addLayout(actions)

        self.break_notice = QFrame()
        self.break_notice.setObjectName("BreakNotice")
        notice_layout = QVBoxLayout(self.break_notice)
        notice_title = QLabel("Limit reached")
        notice_title.setObjectName("SubtleTitle")
        self.break_notice_text = QLabel()
        self.break_notice_text.setWordWrap(True)
        self.resume_btn = QPushButton()
        self.resume_btn.setObjectName("PrimaryButton")
        notice_layout.addWidget(notice_title)
        notice_layout.addWidget(self.break_notice_text)
        notice_layout.addWidget(self.resume_btn, 0, Qt.AlignmentFlag.AlignLeft)
        panel_layout.addWidget(self.break_notice)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, PROGRESS_STEPS)
        self.progress_bar.setTextVisible(False)
        panel_layout.addWidget(self.progress_bar)

        for tip in TIPS:
            tip_label = QLabel(f"• {tip}")
            tip_label.setObjectName("MutedText")
            tip_label.setWordWrap(True)
            panel_layout.addWidget(tip_label)

        sidebar.addWidget(panel)
        sidebar.addStretch()
        root_layout.addLayout(sidebar, 3)

        phone = QFrame()
        phone.setObjectName("PhoneFrame")
        phone_layout = QVBoxLayout(phone)
        phone_layout.setContentsMargins(14, 22, 14, 14)
        self.reel_card = ReelCardWidget(self.controller.current_reel)
        phone_layout.addWidget(self.reel_card, 1)

        feed_controls = QHBoxLayout()
        self.prev_btn = QPushButton("‹")
        self.prev_btn.setObjectName("FeedButton")
        self.prev_btn.setAccessibleName("Previous reel")
        self.reel_counter = QLabel()
        self.reel_counter.setObjectName("ReelCounter")
        self.reel_counter.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.next_btn = QPushButton("›")
        self.next_btn.setObjectName("FeedButton")
        self.next_btn.setAccessibleName("Next reel")
        feed_controls.addWidget(self.prev_btn)
        feed_controls.addWidget(self.reel_counter, 1)
        feed_controls.addWidget(self.next_btn)
        phone_layout.addLayout(feed_controls)
        root_layout.addWidget(phone, 2)

        space_action = QAction(self)
        space_action.setShortcut(QKeySequence(Qt.Key.Key_Space))
        space_action.triggered.connect(self._space_toggle)
        self.addAction(space_action)

    def _connect_signals(self) -> None:
        self.start_btn.clicked.connect(self.controller.start)
        self.pause_btn.clicked.connect(self.controller.pause)
        self.reset_btn.clicked.connect(self.controller.reset)
        self.resume_btn.clicked.connect(self.controller.resume)
        self.prev_btn.clicked.connect(self.controller.previous_reel)
        self.next_btn.clicked.connect(self.controller.next_reel)
        self.minutes_slider.valueChanged.connect(self._on_minutes_changed)
        for minutes, button in self.quick_buttons.items():
            button.clicked.connect(lambda _checked=False, m=minutes: self._on_minutes_changed(m))

    def _space_toggle(self) -> None:
        self.controller.toggle()

    def _on_minutes_changed(self, minutes: int) -> None:
        if not self.controller.set_session_minutes(minutes):
            # Rejected: put the widgets back in step with the controller.
            self._render(self.view)

    def _on_state_changed(self, snapshot: SessionSnapshot) -> None:
        self.view = project(snapshot)
        self._render(self.view)

    def _render(self, view: SessionView) -> None:
        self.timer_label.setText(view.timer_label)
        self.slider_label.setText(view.slider_label)

        self.minutes_slider.blockSignals(True)
        self.minutes_slider.setValue(view.session_minutes)
        self.minutes_slider.blockSignals(False)
        self.minutes_slider.setEnabled(view.minutes_editable)
        for minutes, button in self.quick_buttons.items():
            button.setChecked(minutes == view.session_minutes)
            button.setEnabled(view.minutes_editable)

        self.pause_btn.setVisible(view.show_pause)
        self.start_btn.setVisible(not view.show_pause)
        self.start_btn.setText(view.start_label)
        self.start_btn.setEnabled(view.start_enabled)

        self.break_notice.setVisible(view.overlay_visible)
        self.break_notice_text.setText(view.break_notice)
        self.resume_btn.setText(view.resume_label)
        self.resume_btn.setEnabled(view.resume_enabled)

        self.progress_bar.setValue(round(view.progress_percent / 100 * PROGRESS_STEPS))

        self.reel_card.set_reel(self.controller.reels[view.active_reel_index])
        self.reel_card.set_overlay(view.overlay_visible, view.overlay_timer_text)
        self.reel_counter.setText(view.reel_counter)
        self.prev_btn.setEnabled(view.navigation_enabled)
        self.next_btn.setEnabled(view.navigation_enabled)

    def closeEvent(self, event) -> None:  # noqa: N802
        self._unsubscribe()
        self.controller.shutdown()
        event.accept()
