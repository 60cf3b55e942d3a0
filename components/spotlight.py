# spotlight.py
from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QRectF, QPointF, QAbstractAnimation, QVariantAnimation
from PyQt6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen, QPolygonF, QRegion

from core.geometry import OVERLAY_PROPERTY
from core.placement import ARROW_SIZE
from core.steps import Side

HIGHLIGHT_PADDING = 8
DIM_COLOR = QColor(0, 0, 0, 153)
RING_COLOR = QColor("#2196F3")
CARD_COLOR = QColor("#333")


class Spotlight(QWidget):
    """Dims the host window around the anchor and draws the tooltip's pointer.

    Mouse input is blocked everywhere except through the cut-out of an
    interactive step, so only the prescribed target can be clicked.
    """

    def __init__(self, parent):
        super().__init__(parent)
        self.setProperty(OVERLAY_PROPERTY, True)
        self.setObjectName("Spotlight")
        self.highlight = None
        self.placement = None
        self.tooltip_size = None
        self.interactive = False
        self.glow = 0.0

        self.pulse = QVariantAnimation(self)
        self.pulse.setDuration(1500)
        self.pulse.setStartValue(0.0)
        self.pulse.setKeyValueAt(0.5, 1.0)
        self.pulse.setEndValue(0.0)
        self.pulse.setLoopCount(-1)
        self.pulse.valueChanged.connect(self._on_pulse)
        self.hide()

    def hole(self):
        if self.highlight is None:
            return None
        box = self.highlight.inflated(HIGHLIGHT_PADDING)
        return QRectF(box.left, box.top, box.width, box.height)

    def set_view(self, view, tooltip_size):
        self.highlight = view.highlight
        self.placement = view.placement
        self.tooltip_size = tooltip_size
        self.interactive = view.interactive

        self.setGeometry(self.parentWidget().rect())
        hole = self.hole()
        if self.interactive and hole is not None:
            self.setMask(QRegion(self.rect()).subtracted(QRegion(hole.toAlignedRect())))
        else:
            self.clearMask()

        if self.interactive and hole is not None:
            if self.pulse.state() != QAbstractAnimation.State.Running:
                self.pulse.start()
        else:
            self.pulse.stop()
            self.glow = 0.0

        self.raise_()
        self.show()
        self.update()

    def clear(self):
        self.pulse.stop()
        self.clearMask()
        self.highlight = None
        self.placement = None
        self.hide()

    def _on_pulse(self, value):
        self.glow = value
        self.update()

    # --- Painting ---
    def paintEvent(self, event):
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)

        shade = QPainterPath()
        shade.addRect(QRectF(self.rect()))
        hole = self.hole()
        if hole is not None:
            cut = QPainterPath()
            cut.addRoundedRect(hole, 8, 8)
            shade = shade.subtracted(cut)
        p.fillPath(shade, QBrush(DIM_COLOR))

        if hole is not None:
            pen = QPen(QBrush(RING_COLOR), 4 + 4 * self.glow)
            p.setPen(pen)
            p.setBrush(Qt.BrushStyle.NoBrush)
            p.drawRoundedRect(hole, 8, 8)

        pointer = self.pointer_polygon()
        if pointer is not None:
            p.setPen(Qt.PenStyle.NoPen)
            p.setBrush(QBrush(CARD_COLOR))
            p.drawPolygon(pointer)

    def pointer_polygon(self):
        placement = self.placement
        if placement is None or not placement.has_arrow or self.tooltip_size is None:
            return None

        top, left = placement.tooltip_top, placement.tooltip_left
        width, height = self.tooltip_size.width, self.tooltip_size.height
        offset = placement.arrow_offset
        a = ARROW_SIZE

        if placement.arrow_side is Side.TOP:
            x, y = left + offset, top
            points = [QPointF(x - a, y), QPointF(x, y - a), QPointF(x + a, y)]
        elif placement.arrow_side is Side.BOTTOM:
            x, y = left + offset, top + height
            points = [QPointF(x - a, y), QPointF(x, y + a), QPointF(x + a, y)]
        elif placement.arrow_side is Side.LEFT:
            x, y = left, top + offset
            points = [QPointF(x, y - a), QPointF(x - a, y), QPointF(x, y + a)]
        else:
            x, y = left + width, top + offset
            points = [QPointF(x, y - a), QPointF(x + a, y), QPointF(x, y + a)]
        return QPolygonF(points)
