from PySide6 import QtCore, QtWidgets

from curvesketch.core import Point, MouseButton
from curvesketch.core.math import normalize_device, device_from_normalized


def qpoint_to_point(p: QtCore.QPointF, widget: QtWidgets.QWidget) -> Point:
    return normalize_device(float(p.x()), float(p.y()), max(1, widget.width()), max(1, widget.height()))

def point_to_qpoint(p: Point, widget: QtWidgets.QWidget) -> QtCore.QPointF:
    x, y = device_from_normalized(p, max(1, widget.width()), max(1, widget.height()))
    return QtCore.QPointF(x, y)

def mouse_button(button: QtCore.Qt.MouseButton) -> MouseButton | None:
    match button:
        case QtCore.Qt.MouseButton.LeftButton:
            return MouseButton.LEFT
        case QtCore.Qt.MouseButton.RightButton:
            return MouseButton.RIGHT
        case QtCore.Qt.MouseButton.MiddleButton:
            return MouseButton.MIDDLE
        case _:
            return None
