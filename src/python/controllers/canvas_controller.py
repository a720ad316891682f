"""ExtentCanvasController - the pan/zoom engine behind an extent canvas.

Architecture:
- Owns the ViewState and the controllers that read or mutate it
- GestureController turns input into view changes
- DrawScheduler renders the surface through the current view
- ResizeHandler keeps the picture stable while the surface is reallocated
- Notifies owners through the option callbacks and Qt signals
"""

import logging
from typing import Any, Callable

from PyQt6.QtCore import QObject, pyqtSignal

from canvas_math import view_box_to_view, view_to_view_box
from controllers.draw_scheduler import DrawScheduler
from controllers.gesture_controller import GestureController
from controllers.resize_handler import ResizeHandler
from custom_types import CanvasOptions, DrawingSurface, Point, Size, Unsubscribe, View, ViewBox
from enums import ViewChangeReason
from error_handler import ErrorHandler
from input_events import InputEventSource
from view_state import ViewState

logger = logging.getLogger(__name__)


class ExtentCanvasController(QObject):
    """Give a drawing surface an extent that can be panned and zoomed.

    The controller is inert until a surface is attached: set_view,
    set_view_box, draw and handle_resize return immediately before that.

    Signals:
        context_initialized(surface): a surface was attached
        view_changed(View, ViewChangeReason): the affine view changed
        view_box_changed(ViewBox, ViewChangeReason): the visible rect changed
        right_clicked(Point): logical point under a right click
        drawn(): a frame was rendered onto the surface
    """

    context_initialized = pyqtSignal(object)
    view_changed = pyqtSignal(object, object)
    view_box_changed = pyqtSignal(object, object)
    right_clicked = pyqtSignal(object)
    drawn = pyqtSignal()

    def __init__(self, options: CanvasOptions | None = None, parent: QObject | None = None) -> None:
        """Initialize ExtentCanvasController.

        Args:
            options: Engine configuration, defaults to CanvasOptions()
            parent: Qt parent object
        """
        super().__init__(parent)
        self.options = options if options is not None else CanvasOptions()
        self.view_state = ViewState(self.options.initial_position, self.options.initial_scale)
        self.surface: DrawingSurface | None = None
        self._unsubscribers: list[Unsubscribe] = []

        self.gestures = GestureController(
            self.view_state,
            origin=self._surface_origin,
            min_scale=self.options.min_scale,
            max_scale=self.options.max_scale,
            zoom_sensitivity=self.options.zoom_sensitivity,
        )
        self.scheduler = DrawScheduler(
            self.view_state,
            on_before_draw=self._guarded(self.options.on_before_draw, "before-draw callback"),
            on_draw=self._guarded(self.options.on_draw, "draw callback"),
        )
        self.resizer = ResizeHandler(self.view_state, self.scheduler)

        self.gestures.view_changed.connect(self._on_gesture)
        self.gestures.right_clicked.connect(self._on_right_click)

    # Lifecycle

    @property
    def is_initialized(self) -> bool:
        return self.surface is not None

    def attach(self, surface: DrawingSurface, events: InputEventSource | None = None) -> None:
        """Bind a drawing surface and, optionally, an input event source.

        Fires on_context_init once and draws the first frame.
        """
        if self.surface is not None:
            self.detach()
        self.surface = surface
        if events is not None:
            self._unsubscribers = self.gestures.subscribe(events)

        logger.debug("Attached surface %s", surface.size())
        self._invoke(self.options.on_context_init, "context-init callback", surface)
        self.context_initialized.emit(surface)
        self.draw()

    def detach(self) -> None:
        """Release every input subscription and forget the surface."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self.surface = None
        logger.debug("Detached surface")

    # View access

    @property
    def view(self) -> View:
        return self.view_state.snapshot()

    @property
    def view_box(self) -> ViewBox | None:
        if self.surface is None:
            return None
        return view_to_view_box(self.surface.size(), self.view_state.view)

    def set_view(self, view: View) -> None:
        """Replace the current view, notify listeners and redraw."""
        if self.surface is None:
            logger.debug("set_view ignored, no surface attached")
            return
        self.view_state.replace(view)
        self._notify(ViewChangeReason.SET)
        self.draw()

    def set_view_box(self, view_box: ViewBox) -> None:
        """Show a logical rectangle, fitted into the surface, and redraw.

        Raises:
            ValueError: If the box has zero width or height
        """
        if self.surface is None:
            logger.debug("set_view_box ignored, no surface attached")
            return
        size = self.surface.size()
        if size.is_empty:
            # A view box cannot be fitted into a surface without area
            logger.debug("set_view_box ignored, surface is %dx%d", size.width, size.height)
            return
        self.view_state.replace(view_box_to_view(size, view_box))
        self._notify(ViewChangeReason.SET)
        self.draw()

    # Rendering

    def draw(self) -> None:
        """Render a frame through the current view."""
        if self.surface is None:
            return
        if self.scheduler.render(self.surface):
            self.drawn.emit()

    def handle_resize(self, content_size: Size, full_screen: bool = False, viewport: Size | None = None) -> None:
        """Resize the attached surface without changing the view."""
        if self.surface is None:
            return
        if self.resizer.resize(self.surface, content_size, full_screen=full_screen, viewport=viewport):
            self.drawn.emit()

    # Internal

    def _surface_origin(self) -> Point:
        if self.surface is None:
            return Point()
        return self.surface.origin()

    def _on_gesture(self, reason: ViewChangeReason) -> None:
        if self.surface is None:
            return
        self._notify(reason)
        self.draw()

    def _on_right_click(self, point: Point) -> None:
        self._invoke(self.options.on_right_click, "right-click callback", point)
        self.right_clicked.emit(point)

    def _notify(self, reason: ViewChangeReason) -> None:
        view = self.view_state.snapshot()
        view_box = view_to_view_box(self.surface.size(), view)
        self._invoke(self.options.on_view_change, "view-change callback", view, reason)
        self.view_changed.emit(view, reason)
        self._invoke(self.options.on_view_box_change, "view-box-change callback", view_box, reason)
        self.view_box_changed.emit(view_box, reason)

    def _invoke(self, callback: Callable[..., Any] | None, context: str, *args: Any) -> None:
        if callback is None:
            return
        try:
            callback(*args)
        except Exception as e:
            ErrorHandler.log_exception(e, context)

    def _guarded(self, callback: Callable[[Any], None] | None, context: str) -> Callable[[Any], None] | None:
        if callback is None:
            return None

        def run(painter: Any) -> None:
            self._invoke(callback, context, painter)

        return run
