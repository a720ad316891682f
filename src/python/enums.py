"""
Enumerations for the extent canvas using Python 3.11+ StrEnum.

This module defines string-based enumerations for the constants shared by
the gesture engine, the draw pipeline and the Qt binding.
"""

from enum import StrEnum


class ViewChangeReason(StrEnum):
    """Why the view changed.

    Attributes:
        MOVE: The canvas was panned with the mouse or a touch
        ZOOM: The canvas was zoomed with the wheel or a pinch
        SET: The view was replaced through set_view/set_view_box
    """
    MOVE = "move"
    ZOOM = "zoom"
    SET = "set"


class GestureMode(StrEnum):
    """Input state of the gesture controller.

    Attributes:
        IDLE: No button held and no active touch
        DRAGGING: Primary mouse button held down
        TOUCHING: At least one active touch point
    """
    IDLE = "idle"
    DRAGGING = "dragging"
    TOUCHING = "touching"


class PointerButton(StrEnum):
    """Mouse buttons the engine distinguishes."""
    PRIMARY = "primary"
    MIDDLE = "middle"
    SECONDARY = "secondary"


class InputEventKind(StrEnum):
    """Subscribable input events.

    Values match the signal names on InputEventSource.
    """
    POINTER_DOWN = "pointer_down"
    POINTER_MOVE = "pointer_move"
    POINTER_UP = "pointer_up"
    POINTER_LEAVE = "pointer_leave"
    WHEEL = "wheel"
    TOUCH_START = "touch_start"
    TOUCH_MOVE = "touch_move"
    TOUCH_END = "touch_end"
    CONTEXT_MENU = "context_menu"
