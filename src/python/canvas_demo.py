"""Demo window for the extent canvas: a pannable, zoomable grid."""

import math
import sys

from PyQt6.QtCore import QLineF, QPointF, QRectF
from PyQt6.QtGui import QKeySequence, QPainter, QPen, QShortcut
from PyQt6.QtWidgets import QApplication, QLabel, QMainWindow

from canvas_math import visible_rect
from config_manager import config
from custom_types import CanvasOptions, Point, ViewBox
from enums import ViewChangeReason
from logging_config import get_logger, setup_logging
from ui.canvas import ExtentCanvasWidget

logger = get_logger(__name__)


class CanvasDemoWindow(QMainWindow):
    """Main window hosting one ExtentCanvasWidget."""

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(config.get_ui_setting("window", "title", "Extent Canvas"))
        self.resize(
            config.get_ui_setting("window", "width", 800),
            config.get_ui_setting("window", "height", 600),
        )
        self.grid_spacing = config.get_ui_setting("grid", "spacing", 50)
        self.view_box_label = QLabel()
        self.statusBar().addWidget(self.view_box_label)
        self.canvas: ExtentCanvasWidget | None = None

        options = CanvasOptions.from_settings(
            config.get_canvas_config(),
            on_before_draw=self.prepare,
            on_draw=self.draw_grid,
            on_view_box_change=self.show_view_box,
            on_right_click=self.report_point,
        )
        self.canvas = ExtentCanvasWidget(options, parent=self)
        self.setCentralWidget(self.canvas)

        QShortcut(QKeySequence("F11"), self, activated=self.canvas.toggle_full_screen)

    def prepare(self, painter: QPainter) -> None:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

    def draw_grid(self, painter: QPainter) -> None:
        # The first frame is drawn while the widget is still being constructed
        if self.canvas is None or self.canvas.controller.view_box is None:
            return
        view_box = self.canvas.controller.view_box
        view = self.canvas.controller.view
        scale = view.scale
        spacing = self.grid_spacing
        painter.fillRect(QRectF(*visible_rect(self.canvas.surface.size(), view)), config.get_qt_color("background"))

        pen = QPen(config.get_qt_color("grid"))
        pen.setWidthF(config.get_ui_setting("grid", "lineWidth", 1) / scale)
        painter.setPen(pen)

        first_x = math.floor(view_box.left / spacing) * spacing
        for x in range(first_x, view_box.right + spacing, spacing):
            painter.drawLine(QLineF(x, view_box.top, x, view_box.bottom))
        first_y = math.floor(view_box.top / spacing) * spacing
        for y in range(first_y, view_box.bottom + spacing, spacing):
            painter.drawLine(QLineF(view_box.left, y, view_box.right, y))

        pen.setColor(config.get_qt_color("origin"))
        painter.setPen(pen)
        painter.drawEllipse(QPointF(0, 0), 4 / scale, 4 / scale)

    def show_view_box(self, view_box: ViewBox, reason: ViewChangeReason) -> None:
        self.view_box_label.setText(
            f"{reason}: left {view_box.left}, top {view_box.top}, "
            f"right {view_box.right}, bottom {view_box.bottom}"
        )

    def report_point(self, point: Point) -> None:
        logger.info("Right click at logical (%d, %d)", point.x, point.y)
        self.statusBar().showMessage(f"({point.x}, {point.y})", 2000)

    def closeEvent(self, event) -> None:
        self.canvas.controller.detach()
        super().closeEvent(event)


def main() -> int:
    setup_logging()
    app = QApplication(sys.argv)
    window = CanvasDemoWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
