"""
Qt widget hosting an extent canvas.

The widget owns a RasterSurface and an InputEventSource, forwards Qt mouse,
wheel, touch and context-menu events to the engine as neutral event records,
and blits the raster in paintEvent.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QEvent, QPointF, Qt
from PyQt6.QtGui import QContextMenuEvent, QEventPoint, QMouseEvent, QPainter, QPaintEvent, QResizeEvent, QTouchEvent, QWheelEvent
from PyQt6.QtWidgets import QWidget

from controllers.canvas_controller import ExtentCanvasController
from custom_types import CanvasOptions, Point, PointerEvent, Size, Touch, TouchEvent, View, ViewBox, WheelEvent
from enums import InputEventKind, PointerButton
from input_events import InputEventSource
from ui.canvas.raster_surface import RasterSurface

logger = logging.getLogger(__name__)

BUTTON_MAP = {
    Qt.MouseButton.LeftButton: PointerButton.PRIMARY,
    Qt.MouseButton.MiddleButton: PointerButton.MIDDLE,
    Qt.MouseButton.RightButton: PointerButton.SECONDARY,
}

TOUCH_EVENT_TYPES = (
    QEvent.Type.TouchBegin,
    QEvent.Type.TouchUpdate,
    QEvent.Type.TouchEnd,
    QEvent.Type.TouchCancel,
)


def touch_event_kind(event: QTouchEvent) -> InputEventKind:
    """Engine event kind for a Qt touch event.

    Qt reports a finger landing or lifting while others stay down as a
    TouchUpdate. Those updates change the touch set, so they re-baseline
    the gesture instead of moving it.
    """
    event_type = event.type()
    if event_type == QEvent.Type.TouchBegin:
        return InputEventKind.TOUCH_START
    if event_type in (QEvent.Type.TouchEnd, QEvent.Type.TouchCancel):
        return InputEventKind.TOUCH_END

    states = {point.state() for point in event.points()}
    if QEventPoint.State.Pressed in states:
        return InputEventKind.TOUCH_START
    if QEventPoint.State.Released in states:
        return InputEventKind.TOUCH_END
    return InputEventKind.TOUCH_MOVE


class ExtentCanvasWidget(QWidget):
    """A widget whose content can be panned and zoomed.

    Either view or view_box can be used for controlled view state, together
    with the matching on_view_change or on_view_box_change callback.
    """

    def __init__(
        self,
        options: Optional[CanvasOptions] = None,
        parent: Optional[QWidget] = None,
        view: Optional[View] = None,
        view_box: Optional[ViewBox] = None,
    ) -> None:
        """
        Initialize the canvas widget.

        Args:
            options: Engine configuration
            parent: Parent widget, defaults to None
            view: Initial controlled view
            view_box: Initial controlled view box, applied after view
        """
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self.events = InputEventSource(self)
        self.surface = RasterSurface(self.width(), self.height(), origin_provider=self._global_origin)
        self.controller = ExtentCanvasController(options, parent=self)
        self.controller.drawn.connect(self.update)
        self.controller.attach(self.surface, self.events)

        if view is not None:
            self.set_view(view)
        if view_box is not None:
            self.set_view_box(view_box)

    def _global_origin(self) -> Point:
        origin = self.mapToGlobal(QPointF(0, 0))
        return Point(origin.x(), origin.y())

    # Controlled view state

    def set_view(self, view: View) -> None:
        self.controller.set_view(view)

    def set_view_box(self, view_box: ViewBox) -> None:
        self.controller.set_view_box(view_box)

    def draw(self) -> None:
        """Redraw the canvas content."""
        self.controller.draw()

    def toggle_full_screen(self) -> None:
        """Switch the top-level window between full screen and normal."""
        window = self.window()
        if window.isFullScreen():
            window.showNormal()
        else:
            window.showFullScreen()

    # Qt event forwarding

    def _pointer_event(self, event: QMouseEvent) -> PointerEvent:
        position = event.globalPosition()
        button = BUTTON_MAP.get(event.button(), PointerButton.PRIMARY)
        return PointerEvent(position.x(), position.y(), button)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        self.events.emit(InputEventKind.POINTER_DOWN, self._pointer_event(event))
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        self.events.emit(InputEventKind.POINTER_MOVE, self._pointer_event(event))
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        self.events.emit(InputEventKind.POINTER_UP, self._pointer_event(event))
        event.accept()

    def leaveEvent(self, event: QEvent) -> None:
        self.events.emit(InputEventKind.POINTER_LEAVE, PointerEvent())
        super().leaveEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        position = event.globalPosition()
        # Qt reports forward rotation as positive; the engine zooms out on positive deltas
        delta_y = -event.angleDelta().y()
        self.events.emit(InputEventKind.WHEEL, WheelEvent(position.x(), position.y(), delta_y))
        event.accept()

    def contextMenuEvent(self, event: QContextMenuEvent) -> None:
        position = event.globalPos()
        self.events.emit(
            InputEventKind.CONTEXT_MENU,
            PointerEvent(position.x(), position.y(), PointerButton.SECONDARY),
        )
        event.accept()

    def event(self, event: QEvent) -> bool:
        if event.type() in TOUCH_EVENT_TYPES and isinstance(event, QTouchEvent):
            kind = touch_event_kind(event)
            touches: tuple[Touch, ...] = ()
            # A cancelled sequence leaves no touches, whatever their last state
            if event.type() != QEvent.Type.TouchCancel:
                touches = tuple(
                    Touch(point.globalPosition().x(), point.globalPosition().y())
                    for point in event.points()
                    if point.state() != QEventPoint.State.Released
                )
            self.events.emit(kind, TouchEvent(touches))
            event.accept()
            return True
        return super().event(event)

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        viewport = None
        full_screen = self.window().isFullScreen()
        if full_screen and self.screen() is not None:
            screen_size = self.screen().size()
            viewport = Size(screen_size.width(), screen_size.height())
        self.controller.handle_resize(Size(size.width(), size.height()), full_screen=full_screen, viewport=viewport)
        super().resizeEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        if self.surface.image.isNull():
            return
        painter = QPainter(self)
        painter.drawImage(0, 0, self.surface.image)
        painter.end()

    def closeEvent(self, event) -> None:
        self.controller.detach()
        super().closeEvent(event)
