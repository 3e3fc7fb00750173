"""Icon builders for home screen controls."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QColor, QIcon, QPainter, QPen, QPixmap, QPolygonF


def _begin(size: int, color: str, width: float) -> tuple[QPixmap, QPainter]:
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.GlobalColor.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)

    pen = QPen(QColor(color))
    pen.setWidthF(width)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    painter.setPen(pen)
    painter.setBrush(Qt.BrushStyle.NoBrush)
    return pixmap, painter


def build_add_icon(size: int = 24, color: str = "#ffffff") -> QIcon:
    pixmap, painter = _begin(size, color, 2.6)
    inset = size * 0.22
    mid = size / 2
    painter.drawLine(QPointF(mid, inset), QPointF(mid, size - inset))
    painter.drawLine(QPointF(inset, mid), QPointF(size - inset, mid))
    painter.end()
    return QIcon(pixmap)


def build_search_icon(size: int = 16, color: str = "#49454f") -> QIcon:
    pixmap, painter = _begin(size, color, 1.8)
    lens = QRectF(2.0, 2.0, size * 0.58, size * 0.58)
    painter.drawEllipse(lens)
    handle_start = QPointF(lens.right() - 0.6, lens.bottom() - 0.6)
    painter.drawLine(handle_start, QPointF(size - 2.2, size - 2.2))
    painter.end()
    return QIcon(pixmap)


def build_sort_icon(size: int = 20, color: str = "#1d1b20") -> QIcon:
    pixmap, painter = _begin(size, color, 1.8)

    # Up arrow on the left, down arrow on the right.
    left_x = size * 0.32
    right_x = size * 0.68
    painter.drawLine(QPointF(left_x, size * 0.28), QPointF(left_x, size - 3.0))
    painter.drawLine(QPointF(right_x, 3.0), QPointF(right_x, size * 0.72))

    head = size * 0.2
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(QColor(color))
    painter.drawPolygon(
        QPolygonF(
            [
                QPointF(left_x, 2.0),
                QPointF(left_x - head, 2.0 + head),
                QPointF(left_x + head, 2.0 + head),
            ]
        )
    )
    painter.drawPolygon(
        QPolygonF(
            [
                QPointF(right_x, size - 2.0),
                QPointF(right_x - head, size - 2.0 - head),
                QPointF(right_x + head, size - 2.0 - head),
            ]
        )
    )
    painter.end()
    return QIcon(pixmap)
