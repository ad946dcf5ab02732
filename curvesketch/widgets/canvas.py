from typing import override

from PySide6 import QtCore, QtGui, QtWidgets

from curvesketch.core import Curve, CurveEditor, EditorConfig
from curvesketch.core import config
from curvesketch.widgets.utils import qpoint_to_point, point_to_qpoint, mouse_button


class CanvasWidget(QtWidgets.QWidget):
    """
    View/controller for a CurveEditor.
    Converts Qt events to normalized points, forwards them to the editor and
    paints the editor's curve collection.
    """

    modeChanged = QtCore.Signal(str)    # emitted after every handled event, arg = mode label
    curvesChanged = QtCore.Signal(int)  # emitted after every handled event, arg = curve count

    def __init__(self, editor_config: EditorConfig | None = None, parent=None):
        super().__init__(parent)

        # model; repaint is only scheduled, Qt coalesces it
        self._editor = CurveEditor(config=editor_config, request_redraw=self.update)

        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(200, 150)

    # --- public API -------------------------
    @property
    def editor(self) -> CurveEditor:
        return self._editor

    def clear(self) -> None:
        self._editor.clear()
        self._emit_state()

    def delete_selected_curve(self) -> None:
        self._editor.delete_selected_curve()
        self._emit_state()

    # --- keyboard ---------------------------
    @staticmethod
    def _key_text(e: QtGui.QKeyEvent) -> str | None:
        text = e.text()
        if len(text) != 1:
            return None
        return text.lower()

    @override
    def keyPressEvent(self, e: QtGui.QKeyEvent):
        key = self._key_text(e)
        if key is None or e.isAutoRepeat():
            return super().keyPressEvent(e)
        self._editor.key_down(key)
        self._emit_state()

    @override
    def keyReleaseEvent(self, e: QtGui.QKeyEvent):
        key = self._key_text(e)
        if key is None or e.isAutoRepeat():
            return super().keyReleaseEvent(e)
        self._editor.key_up(key)
        self._emit_state()

    # --- mouse ------------------------------
    @override
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        button = mouse_button(e.button())
        if button is None:
            return
        self._editor.mouse_down(qpoint_to_point(e.position(), self), button)
        self._emit_state()

    @override
    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        self._editor.mouse_move(qpoint_to_point(e.position(), self))

    @override
    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        button = mouse_button(e.button())
        if button is None:
            return
        self._editor.mouse_up(qpoint_to_point(e.position(), self), button)
        self._emit_state()

    # --- painting ---------------------------
    def _draw_curve(self, p: QtGui.QPainter, curve: Curve) -> None:
        pts = curve.path(self._editor.config.samples)
        if len(pts) < 2:
            return
        if curve.selected:
            pen = QtGui.QPen(config.SELECTED_COLOR.to_QColor(), config.SELECTED_LINE_WIDTH)
        else:
            pen = QtGui.QPen(curve.color.to_QColor(), config.LINE_WIDTH)
        p.setPen(pen)
        p.drawPolyline(QtGui.QPolygonF([point_to_qpoint(q, self) for q in pts]))

    def _draw_control_points(self, p: QtGui.QPainter, curve: Curve) -> None:
        r = config.CONTROL_POINT_SIZE
        p.setPen(QtCore.Qt.PenStyle.NoPen)
        p.setBrush(config.CONTROL_POINT_COLOR.to_QColor())
        for cp in curve.points:
            q = point_to_qpoint(cp, self)
            p.drawRect(QtCore.QRectF(q.x() - r * 0.5, q.y() - r * 0.5, r, r))

    @override
    def paintEvent(self, _):
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        p.fillRect(self.rect(), config.BACKGROUND_COLOR.to_QColor())

        curves = self._editor.collection
        for curve in curves:
            self._draw_curve(p, curve)
        # markers go on top of every path
        for curve in curves:
            if curve.selected:
                self._draw_control_points(p, curve)
        p.end()

    # --- internals --------------------------
    def _emit_state(self):
        self.modeChanged.emit(self._editor.mode.value)
        self.curvesChanged.emit(len(self._editor.collection))
