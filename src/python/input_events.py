"""
Input event source for the extent canvas.

Toolkit bindings push neutral PointerEvent/WheelEvent/TouchEvent records
into an InputEventSource; the engine subscribes to the kinds it handles
and keeps the returned unsubscribe callables for teardown.
"""

import logging
from typing import Any, Callable

from PyQt6.QtCore import QObject, pyqtSignal

from custom_types import Unsubscribe
from enums import InputEventKind

logger = logging.getLogger(__name__)


class InputEventSource(QObject):
    """Qt signal hub with one signal per InputEventKind."""

    pointer_down = pyqtSignal(object)
    pointer_move = pyqtSignal(object)
    pointer_up = pyqtSignal(object)
    pointer_leave = pyqtSignal(object)
    wheel = pyqtSignal(object)
    touch_start = pyqtSignal(object)
    touch_move = pyqtSignal(object)
    touch_end = pyqtSignal(object)
    context_menu = pyqtSignal(object)

    def subscribe(self, kind: InputEventKind, handler: Callable[[Any], None]) -> Unsubscribe:
        """Connect a handler to one kind of input event.

        Args:
            kind: The event kind to listen for
            handler: Callable receiving the event record

        Returns:
            Callable that disconnects the handler. Calling it twice is harmless.
        """
        signal = getattr(self, InputEventKind(kind).value)
        signal.connect(handler)

        def unsubscribe() -> None:
            try:
                signal.disconnect(handler)
            except TypeError:
                logger.debug("Handler for %s already disconnected", kind)

        return unsubscribe

    def emit(self, kind: InputEventKind, event: Any = None) -> None:
        """Deliver an event record to every subscriber of kind."""
        getattr(self, InputEventKind(kind).value).emit(event)
