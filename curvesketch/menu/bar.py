from PySide6 import QtCore, QtWidgets

from curvesketch.core.editor import Mode
from curvesketch.widgets import CanvasWidget

KEY_HELP = "b: Bezier   l: Lagrange   p: polyline   a: append   d: delete   space: next curve"


class Bar(QtWidgets.QToolBar):
    def __init__(self, canvas: CanvasWidget):
        super().__init__()

        self.canvas = canvas
        self.reset_button = QtWidgets.QPushButton("clear")
        self.reset_button.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        self.delete_button = QtWidgets.QPushButton("delete curve")
        self.delete_button.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        self.mode_label = QtWidgets.QLabel()
        self.count_label = QtWidgets.QLabel()
        self.help_label = QtWidgets.QLabel(KEY_HELP)
        self.setObjectName("Bar")
        self.setMovable(False)
        self.setFloatable(False)
        self.setIconSize(QtCore.QSize(18, 18))

        self.addWidget(self.reset_button)
        self.addWidget(self.delete_button)
        self.addSeparator()
        self.addWidget(self.mode_label)
        self.addSeparator()
        self.addWidget(self.count_label)
        self.addSeparator()
        self.addWidget(self.help_label)

        self.reset_button.clicked.connect(self._reset_canvas)
        self.delete_button.clicked.connect(self._delete_curve)
        self.canvas.modeChanged.connect(self.set_mode)
        self.canvas.curvesChanged.connect(self.set_count)

        self.set_mode(Mode.IDLE.value)
        self.set_count(0)

    @QtCore.Slot(str)
    def set_mode(self, mode: str):
        self.mode_label.setText(f"Mode: {mode}")

    @QtCore.Slot(int)
    def set_count(self, n: int):
        self.count_label.setText(f"Curves: {n}")

    @QtCore.Slot()
    def _reset_canvas(self):
        self.canvas.clear()

    @QtCore.Slot()
    def _delete_curve(self):
        self.canvas.delete_selected_curve()
