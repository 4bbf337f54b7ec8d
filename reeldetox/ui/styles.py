from __future__ import annotations

from PyQt6.QtWidgets import QApplication


THEME_QSS = """
QWidget {
    background: #0f0d1c;
    color: #ece9ff;
    font-size: 13px;
}

QMainWindow {
    background: #0f0d1c;
}

QLabel {
    background: transparent;
}

QFrame#Panel {
    background: #1a1730;
    border: none;
    border-radius: 18px;
}

QFrame#PhoneFrame {
    background: #05040b;
    border: 2px solid #2c2848;
    border-radius: 34px;
}

QFrame#BreakNotice {
    background: #2a1f3f;
    border: 1px solid #5b3f8f;
    border-radius: 14px;
}

QLabel#Badge {
    background: #2c2458;
    color: #b9a8ff;
    border-radius: 10px;
    padding: 4px 10px;
    font-size: 11px;
    font-weight: 600;
}

QLabel#Heading {
    font-size: 24px;
    font-weight: 700;
    color: #ffffff;
}

QLabel#SubtleTitle {
    font-size: 15px;
    font-weight: 600;
    color: #d6d0ff;
}

QLabel#TimerLabel {
    font-size: 14px;
    font-weight: 700;
    color: #fca2ff;
}

QLabel#MutedText {
    color: #9a94c4;
}

QLabel#ReelCounter {
    color: #d6d0ff;
    font-weight: 600;
}

QPushButton {
    border: none;
    background: #262243;
    color: #ece9ff;
    border-radius: 16px;
    padding: 8px 14px;
    font-weight: 600;
}

QPushButton:hover {
    background: #2f2a52;
}

QPushButton:pressed {
    background: #3a3466;
}

QPushButton:disabled {
    color: #5f5a85;
    background: #1c1934;
}

QPushButton#PrimaryButton {
    background: #8a5dff;
    color: #ffffff;
    border-radius: 22px;
    padding: 10px 24px;
    min-height: 24px;
    font-size: 14px;
}

QPushButton#PrimaryButton:hover {
    background: #7b4ef0;
}

QPushButton#PrimaryButton:disabled {
    background: #3d3366;
    color: #a59cd6;
}

QPushButton#SecondaryButton {
    border-radius: 22px;
    padding: 10px 18px;
    min-height: 24px;
    font-size: 14px;
}

QPushButton#QuickSelect {
    border-radius: 14px;
    padding: 6px 12px;
}

QPushButton#QuickSelect:checked {
    background: #8a5dff;
    color: #ffffff;
}

QPushButton#FeedButton {
    border-radius: 18px;
    min-width: 36px;
    min-height: 36px;
    padding: 0;
    font-size: 18px;
}

QSlider::groove:horizontal {
    height: 6px;
    border-radius: 3px;
    background: #2c2848;
}

QSlider::handle:horizontal {
    width: 18px;
    margin: -6px 0;
    border-radius: 9px;
    background: #fca2ff;
}

QSlider::handle:horizontal:disabled {
    background: #5f5a85;
}

QProgressBar {
    border: 0;
    border-radius: 4px;
    background: #2c2848;
    max-height: 8px;
    text-align: center;
}

QProgressBar::chunk {
    border-radius: 4px;
    background: #fca2ff;
}
"""


def apply_theme(app: QApplication) -> None:
    app.setStyleSheet(THEME_QSS)
