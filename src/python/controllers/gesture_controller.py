"""Gesture controller for the extent canvas.

Translates pointer, wheel and touch events into ViewState mutations.
"""

import logging
from typing import Callable

from PyQt6.QtCore import QObject, pyqtSignal

import canvas_math
from canvas_math import clamp_scale, cursor_offset, diff, scale_point
from custom_types import Point, PointerEvent, TouchEvent, Unsubscribe, WheelEvent
from enums import GestureMode, InputEventKind, PointerButton, ViewChangeReason
from input_events import InputEventSource
from view_state import ViewState

logger = logging.getLogger(__name__)

# Largest |deltaY| accepted per wheel event, as a fraction of the sensitivity.
# Keeps the wheel zoom factor strictly positive.
MAX_WHEEL_FRACTION = 0.9


class GestureController(QObject):
    """State machine turning raw input into pan and zoom.

    States are idle, dragging (primary button held) and touching (at least
    one active touch). The wheel zooms in any state without changing it.

    Signals:
        view_changed(ViewChangeReason): the ViewState was mutated
        right_clicked(Point): logical point under a context-menu request
    """

    view_changed = pyqtSignal(object)
    right_clicked = pyqtSignal(object)

    def __init__(
        self,
        view_state: ViewState,
        origin: Callable[[], Point],
        min_scale: float | None = None,
        max_scale: float | None = None,
        zoom_sensitivity: float = 320.0,
    ) -> None:
        """Initialize GestureController.

        Args:
            view_state: The state this controller mutates
            origin: Returns the surface's top-left corner in screen coordinates
            min_scale: Lower zoom bound, None for unbounded
            max_scale: Upper zoom bound, None for unbounded
            zoom_sensitivity: Wheel delta divisor, larger is less sensitive
        """
        super().__init__()
        self.view_state = view_state
        self.origin = origin
        self.min_scale = min_scale
        self.max_scale = max_scale
        self.zoom_sensitivity = float(zoom_sensitivity)

    @property
    def mode(self) -> GestureMode:
        return self.view_state.mode

    def subscribe(self, events: InputEventSource) -> list[Unsubscribe]:
        """Attach every handler to an event source.

        Returns:
            list: Unsubscribe callables, one per handler
        """
        handlers = {
            InputEventKind.POINTER_DOWN: self.pointer_down,
            InputEventKind.POINTER_MOVE: self.pointer_move,
            InputEventKind.POINTER_UP: self.pointer_up,
            InputEventKind.POINTER_LEAVE: self.pointer_up,
            InputEventKind.WHEEL: self.wheel,
            InputEventKind.TOUCH_START: self.touch_start,
            InputEventKind.TOUCH_MOVE: self.touch_move,
            InputEventKind.TOUCH_END: self.touch_end,
            InputEventKind.CONTEXT_MENU: self.context_menu,
        }
        return [events.subscribe(kind, handler) for kind, handler in handlers.items()]

    def _cursor(self, client_x: float, client_y: float) -> Point:
        return cursor_offset(client_x, client_y, self.origin())

    # Mouse

    def pointer_down(self, event: PointerEvent) -> None:
        """Start dragging on a primary button press."""
        if event.button != PointerButton.PRIMARY:
            logger.debug("Ignoring %s button press", event.button)
            return
        self.view_state.mode = GestureMode.DRAGGING
        self.view_state.rebaseline(self._cursor(event.client_x, event.client_y))

    def pointer_move(self, event: PointerEvent) -> None:
        """Pan by the pointer delta while dragging."""
        if self.view_state.mode != GestureMode.DRAGGING:
            return
        state = self.view_state
        state.track(self._cursor(event.client_x, event.client_y))
        state.pan(scale_point(diff(state.position, state.previous_position), state.scale))
        self.view_changed.emit(ViewChangeReason.MOVE)

    def pointer_up(self, event: PointerEvent | None = None) -> None:
        """End dragging on release or when the pointer leaves the surface."""
        if self.view_state.mode == GestureMode.DRAGGING:
            self.view_state.mode = GestureMode.IDLE

    def context_menu(self, event: PointerEvent) -> None:
        """Report the logical point under a right click."""
        position = self._cursor(event.client_x, event.client_y)
        point = canvas_math.canvas_position(self.view_state.view, position.x, position.y)
        logger.debug("Right click at %s -> logical %s", position, point)
        self.right_clicked.emit(point)

    # Wheel

    def wheel(self, event: WheelEvent) -> None:
        """Zoom toward the cursor."""
        if event.delta_y == 0:
            return
        state = self.view_state
        state.track(self._cursor(event.client_x, event.client_y))

        magnitude = min(abs(event.delta_y), self.zoom_sensitivity * MAX_WHEEL_FRACTION)
        factor = 1 - magnitude / self.zoom_sensitivity
        if event.delta_y > 0:
            target = state.scale * factor
        else:
            target = state.scale / factor

        self._zoom(target, state.position)
        self.view_changed.emit(ViewChangeReason.ZOOM)

    def _zoom(self, target: float, anchor: Point) -> None:
        clamped = clamp_scale(target, self.min_scale, self.max_scale)
        logger.debug("Zoom %.4f -> %.4f (target %.4f) at %s", self.view_state.scale, clamped, target, anchor)
        self.view_state.zoom(clamped, anchor)

    # Touch

    def touch_start(self, event: TouchEvent) -> None:
        """Baseline the centroid and, with two touches, the pinch distance."""
        state = self.view_state
        touches = event.touches
        if not touches:
            state.mode = GestureMode.IDLE
            state.pinch_distance = 0.0
            return

        state.mode = GestureMode.TOUCHING
        centroid = canvas_math.touch_centroid(touches)
        state.rebaseline(self._cursor(centroid.x, centroid.y))
        if len(touches) > 1:
            state.pinch_distance = canvas_math.touch_distance(touches[0], touches[1])

    def touch_move(self, event: TouchEvent) -> None:
        """Pan by the centroid delta, then pinch-zoom when two touches are down.

        The pan is applied first so the pinch anchors on the moved centroid.
        """
        touches = event.touches
        if self.view_state.mode != GestureMode.TOUCHING or not touches:
            return
        state = self.view_state

        centroid = canvas_math.touch_centroid(touches)
        state.track(self._cursor(centroid.x, centroid.y))
        state.pan(scale_point(diff(state.position, state.previous_position), state.scale))

        reason = ViewChangeReason.MOVE
        if len(touches) > 1:
            distance = canvas_math.touch_distance(touches[0], touches[1])
            if state.pinch_distance > 0:
                self._zoom(state.scale * (distance / state.pinch_distance), state.position)
                reason = ViewChangeReason.ZOOM
            state.pinch_distance = distance

        self.view_changed.emit(reason)

    def touch_end(self, event: TouchEvent) -> None:
        """Re-baseline on the remaining touches."""
        self.touch_start(event)
