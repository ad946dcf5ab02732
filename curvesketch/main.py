import argparse
import logging
import sys

from PySide6 import QtCore, QtWidgets

from curvesketch.core import EditorConfig
from curvesketch.core import config
from curvesketch.menu import Bar
from curvesketch.widgets import CanvasWidget

logger = logging.getLogger(__name__)


class MyWidget(QtWidgets.QWidget):
    def __init__(self, editor_config: EditorConfig | None = None):
        super().__init__()

        self.layout = QtWidgets.QVBoxLayout(self)

        self.canvas = CanvasWidget(editor_config=editor_config, parent=self)
        self.top_bar = Bar(self.canvas)

        self.layout.addWidget(self.top_bar, alignment=QtCore.Qt.AlignmentFlag.AlignTop)
        self.layout.addWidget(self.canvas, stretch=1)

        self.setWindowTitle("Curves Editor")
        self.canvas.setFocus()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sketch Bezier, Lagrange and polyline curves.")
    parser.add_argument("--width", type=int, default=config.WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=config.WINDOW_HEIGHT)
    parser.add_argument("--random-colors", action="store_true",
                        help="give each new curve a random color instead of its kind's color")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    app = QtWidgets.QApplication(sys.argv[:1])

    widget = MyWidget(EditorConfig(random_colors=args.random_colors))
    widget.resize(args.width, args.height)
    widget.show()
    logger.info("Editor started (%dx%d)", args.width, args.height)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
