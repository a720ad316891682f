"""Controllers package for the extent canvas.

This package splits the pan/zoom engine into focused controllers
orchestrated by the ExtentCanvasController.

Main Components:
    ExtentCanvasController: Engine owning the view state and the controllers below
    GestureController: Pointer, wheel and touch state machine
    DrawScheduler: Applies the view transform and invokes draw callbacks
    ResizeHandler: Snapshot-and-restore when the surface changes size

Usage:
    from controllers import ExtentCanvasController

    controller = ExtentCanvasController(CanvasOptions(on_draw=paint))
    controller.attach(surface, events)
    controller.set_view_box(ViewBox(top=0, bottom=100, left=0, right=100))
"""

from controllers.canvas_controller import ExtentCanvasController
from controllers.draw_scheduler import DrawScheduler
from controllers.gesture_controller import GestureController
from controllers.resize_handler import ResizeHandler

__all__ = [
    'ExtentCanvasController',
    'DrawScheduler',
    'GestureController',
    'ResizeHandler',
]
