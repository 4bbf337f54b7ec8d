from __future__ import annotations

"""Phone-style reel card: gradient background, reel copy and the lock overlay."""

from math import cos, radians, sin

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QLinearGradient, QPainter, QPainterPath, QPen
from PyQt6.QtWidgets import QWidget

from reeldetox.core.reels import Gradient, Reel


def gradient_endpoints(rect: QRectF, angle: float) -> tuple[QPointF, QPointF]:
    """Start and end of a CSS-style angled gradient line (0deg points up)."""
    a = radians(angle)
    dx, dy = sin(a), -cos(a)
    half = abs(rect.width() / 2 * dx) + abs(rect.height() / 2 * dy)
    center = rect.center()
    return (
        QPointF(center.x() - dx * half, center.y() - dy * half),
        QPointF(center.x() + dx * half, center.y() + dy * half),
    )


def build_gradient(rect: QRectF, gradient: Gradient) -> QLinearGradient:
    start, end = gradient_endpoints(rect, gradient.angle)
    brush = QLinearGradient(start, end)
    for position, color in gradient.stops:
        brush.setColorAt(position, QColor(color))
    return brush


class ReelCardWidget(QWidget):
    def __init__(self, reel: Reel, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(300, 520)
        self._reel = reel
        self._overlay_visible = False
        self._overlay_text = ""

    @property
    def reel(self) -> Reel:
        return self._reel

    @property
    def overlay_visible(self) -> bool:
        return self._overlay_visible

    @property
    def overlay_text(self) -> str:
        return self._overlay_text

    def set_reel(self, reel: Reel) -> None:
        if reel is self._reel:
            return
        self._reel = reel
        self.update()

    def set_overlay(self, visible: bool, text: str) -> None:
        self._overlay_visible = visible
        self._overlay_text = text
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        rect = QRectF(self.rect()).adjusted(4, 4, -4, -4)

        clip = QPainterPath()
        clip.addRoundedRect(rect, 28, 28)
        painter.setClipPath(clip)
        painter.fillRect(rect, QBrush(build_gradient(rect, self._reel.gradient)))

        self._draw_copy(painter, rect)
        if self._overlay_visible:
            self._draw_overlay(painter, rect)
        painter.end()

    def _draw_copy(self, painter: QPainter, rect: QRectF) -> None:
        margin = 24
        inner = rect.adjusted(margin, margin, -margin, -margin)
        wrap = Qt.TextFlag.TextWordWrap.value

        badge_rect = QRectF(inner.left(), inner.top(), 110, 26)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(QColor(255, 255, 255, 60)))
        painter.drawRoundedRect(badge_rect, 13, 13)
        painter.setPen(QColor("#ffffff"))
        painter.setFont(self._font(10, QFont.Weight.DemiBold))
        painter.drawText(badge_rect, Qt.AlignmentFlag.AlignCenter.value, "Mindful reel")

        title_rect = QRectF(inner.left(), inner.center().y() - 90, inner.width(), 70)
        painter.setFont(self._font(22, QFont.Weight.Bold))
        painter.drawText(title_rect, Qt.AlignmentFlag.AlignBottom.value | wrap, self._reel.title)

        prompt_rect = QRectF(inner.left(), title_rect.bottom() + 10, inner.width(), 90)
        painter.setFont(self._font(13, QFont.Weight.Normal))
        painter.drawText(prompt_rect, Qt.AlignmentFlag.AlignTop.value | wrap, self._reel.prompt)

        anchor_rect = QRectF(inner.left(), inner.bottom() - 60, inner.width(), 40)
        painter.setPen(QColor(255, 255, 255, 200))
        painter.setFont(self._font(11, QFont.Weight.Medium))
        painter.drawText(anchor_rect, Qt.AlignmentFlag.AlignBottom.value | wrap, self._reel.anchor)

    def _draw_overlay(self, painter: QPainter, rect: QRectF) -> None:
        painter.fillRect(rect, QColor(12, 10, 24, 200))

        card = QRectF(0, 0, rect.width() * 0.82, 200)
        card.moveCenter(rect.center())
        painter.setPen(QPen(QColor(255, 255, 255, 70), 1))
        painter.setBrush(QBrush(QColor(255, 255, 255, 28)))
        painter.drawRoundedRect(card, 20, 20)

        inner = card.adjusted(18, 18, -18, -18)
        wrap = Qt.TextFlag.TextWordWrap.value
        painter.setPen(QColor("#ffffff"))
        painter.setFont(self._font(16, QFont.Weight.Bold))
        painter.drawText(QRectF(inner.left(), inner.top(), inner.width(), 28), Qt.AlignmentFlag.AlignHCenter.value, "Break in progress")

        painter.setFont(self._font(11, QFont.Weight.Normal))
        painter.drawText(
            QRectF(inner.left(), inner.top() + 34, inner.width(), 60),
            Qt.AlignmentFlag.AlignHCenter.value | wrap,
            "You hit the limit. Step away from the screen and let your attention recover.",
        )

        painter.setFont(self._font(20, QFont.Weight.Bold))
        painter.drawText(
            QRectF(inner.left(), inner.bottom() - 40, inner.width(), 40),
            Qt.AlignmentFlag.AlignCenter.value,
            self._overlay_text,
        )

    def _font(self, point_size: int, weight: QFont.Weight) -> QFont:
        font = QFont(self.font())
        font.setPointSize(point_size)
        font.setWeight(weight)
        return font
