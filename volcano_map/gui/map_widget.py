"""
Volcano map widget — QPainter-based frame driver.

Every repaint runs the full pipeline from scratch:
  1. black background and title block
  2. one circle per plottable volcano (position, size, colour, opacity)
  3. hit test against the last known pointer position
  4. tooltip for the hovered volcano, if any
  5. legend column (categories, then eruption recency)

No symbol list or hover state survives between frames; moving the
pointer or resizing the window only schedules a repaint.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from PyQt5 import QtCore, QtGui, QtWidgets

from .. import config
from ..geo.projection import Viewport
from ..ingest.dataset import Dataset
from ..render.encoding import Color, EncodingContext
from ..render.frame import Frame, build_frame
from ..render.layout import Legend, TextItem, Tooltip, layout_legend, layout_tooltip

log = logging.getLogger(__name__)


# ── Painter helpers ───────────────────────────────────────────────────

def _qcolor(c: Color) -> QtGui.QColor:
    return QtGui.QColor(c.r, c.g, c.b, c.a)


def _font(pixel_size: int, bold: bool = False) -> QtGui.QFont:
    font = QtGui.QFont(config.FONT_FAMILY)
    font.setPixelSize(pixel_size)
    font.setBold(bold)
    return font


def _draw_text(painter: QtGui.QPainter, item: TextItem, color: QtGui.QColor) -> None:
    painter.setFont(_font(item.font_px, item.bold))
    painter.setPen(color)
    painter.drawText(
        QtCore.QRectF(item.x, item.y, 10_000.0, item.font_px * 2.0),
        QtCore.Qt.AlignLeft | QtCore.Qt.AlignTop,
        item.text,
    )


# ── Map widget ────────────────────────────────────────────────────────

class MapWidget(QtWidgets.QWidget):
    """Interactive volcano scatter map.

    Signals
    -------
    record_hovered(int)
        Emitted when the hovered record changes (row index, -1 for none).
    """

    record_hovered = QtCore.pyqtSignal(int)

    def __init__(
        self,
        dataset: Dataset,
        context: EncodingContext,
        parent: Optional[QtWidgets.QWidget] = None,
    ):
        super().__init__(parent)
        self._dataset = dataset
        self._ctx = context
        self._pointer: Optional[Tuple[float, float]] = None
        self._hover_row = -1
        self._last_frame: Optional[Frame] = None

        self.setMouseTracking(True)
        self.setAttribute(QtCore.Qt.WA_OpaquePaintEvent, True)
        self.setMinimumSize(640, 480)

    # ── Public API ────────────────────────────────────────────────────

    @property
    def hovered_row(self) -> int:
        return self._hover_row

    @property
    def last_frame(self) -> Optional[Frame]:
        return self._last_frame

    def set_pointer(self, pos: Optional[Tuple[float, float]]) -> None:
        self._pointer = pos
        self.update()

    def viewport_geometry(self) -> Viewport:
        return Viewport(float(self.width()), float(self.height()))

    # ── Qt events ─────────────────────────────────────────────────────

    def mouseMoveEvent(self, event):
        self.set_pointer((float(event.x()), float(event.y())))
        super().mouseMoveEvent(event)

    def leaveEvent(self, event):
        self.set_pointer(None)
        super().leaveEvent(event)

    def paintEvent(self, event):
        frame = build_frame(
            self._dataset, self._ctx, self.viewport_geometry(), self._pointer
        )
        self._last_frame = frame

        painter = QtGui.QPainter(self)
        try:
            painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
            painter.setRenderHint(QtGui.QPainter.TextAntialiasing, True)
            painter.fillRect(self.rect(), QtGui.QColor(0, 0, 0))

            self._draw_title(painter)
            self._draw_symbols(painter, frame)

            if frame.hover is not None:
                self.setCursor(QtCore.Qt.PointingHandCursor)
                record = self._dataset[frame.hover.row]
                metrics = QtGui.QFontMetricsF(_font(config.TOOLTIP_FONT_PX))
                tip = layout_tooltip(
                    record, self._dataset.field_names, frame.hover.symbol,
                    metrics.horizontalAdvance,
                )
                self._draw_tooltip(painter, tip)
            else:
                self.setCursor(QtCore.Qt.ArrowCursor)

            self._draw_legend(painter, layout_legend(self._ctx.palette, frame.viewport))
        finally:
            painter.end()

        row = frame.hover.row if frame.hover is not None else -1
        if row != self._hover_row:
            self._hover_row = row
            self.record_hovered.emit(row)

    # ── Layers ────────────────────────────────────────────────────────

    def _draw_title(self, painter: QtGui.QPainter) -> None:
        w = float(self.width())
        lines = (
            (config.TITLE, 48, True, QtGui.QColor(255, 255, 255), 40.0),
            (config.SUBTITLE, 18, False, QtGui.QColor(255, 255, 255), 95.0),
            (config.HOVER_HINT, 15, False, QtGui.QColor(config.HINT_COLOR), 120.0),
        )
        for text, size, bold, color, y in lines:
            painter.setFont(_font(size, bold))
            painter.setPen(color)
            painter.drawText(
                QtCore.QRectF(0.0, y, w, size * 2.0),
                QtCore.Qt.AlignHCenter | QtCore.Qt.AlignTop,
                text,
            )

    def _draw_symbols(self, painter: QtGui.QPainter, frame: Frame) -> None:
        painter.setPen(QtCore.Qt.NoPen)
        for _row, sym in frame.symbols:
            painter.setBrush(QtGui.QBrush(_qcolor(sym.color)))
            painter.drawEllipse(QtCore.QPointF(sym.x, sym.y), sym.radius, sym.radius)

    def _draw_tooltip(self, painter: QtGui.QPainter, tip: Tooltip) -> None:
        pen = QtGui.QPen(QtGui.QColor(255, 255, 255))
        pen.setWidthF(1.5)
        painter.setPen(pen)
        painter.setBrush(QtGui.QBrush(QtGui.QColor(0, 0, 0, 180)))
        painter.drawRoundedRect(QtCore.QRectF(tip.x, tip.y, tip.width, tip.height), 8.0, 8.0)

        white = QtGui.QColor(255, 255, 255)
        for line in tip.lines:
            _draw_text(painter, line, white)

    def _draw_legend(self, painter: QtGui.QPainter, legend: Legend) -> None:
        white = QtGui.QColor(255, 255, 255)
        for heading in legend.headings:
            _draw_text(painter, heading, white)

        for row in legend.rows:
            cx, cy = row.swatch_center
            r = row.swatch_diameter / 2.0
            painter.setPen(QtCore.Qt.NoPen)
            painter.setBrush(QtGui.QBrush(_qcolor(row.color)))
            painter.drawEllipse(QtCore.QPointF(cx, cy), r, r)
            _draw_text(painter, row.label, white)


# ── Main window ───────────────────────────────────────────────────────

class MainWindow(QtWidgets.QMainWindow):
    """Top-level window hosting the map and a status line."""

    def __init__(self, dataset: Dataset, context: EncodingContext):
        super().__init__()
        self.setWindowTitle(config.TITLE)
        self._dataset = dataset

        self.map = MapWidget(dataset, context, self)
        self.setCentralWidget(self.map)
        self.map.record_hovered.connect(self._on_record_hovered)

        self.statusBar().setStyleSheet(
            "color: #a0b8d0; background: #000000; font-size: 11px;"
        )
        self._idle_message = (
            f"{len(dataset)} volcanoes  |  {len(context.palette)} categories"
        )
        self.statusBar().showMessage(self._idle_message)
        self.resize(*config.WINDOW_SIZE)

    def _on_record_hovered(self, row: int) -> None:
        if row < 0:
            self.statusBar().showMessage(self._idle_message)
            return
        rec = self._dataset[row]
        name = rec.get("Volcano Name") or f"row {row}"
        log.debug("Hover: %s", name)
        self.statusBar().showMessage(
            f"{name}  |  {rec.get(config.CATEGORY_COL, '')}  |  "
            f"last eruption {rec.get(config.RECENCY_COL, '') or '?'}"
        )
