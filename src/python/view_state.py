"""
ViewState: the mutable pan/zoom record owned by the gesture engine.
"""

from canvas_math import add, zoom_offset
from custom_types import Point, View
from enums import GestureMode


class ViewState:
    """Hold the current view, the tracked pointer positions and the pinch baseline."""
    def __init__(self, initial_position: Point | None = None, initial_scale: float = 1.0):
        start = initial_position if initial_position is not None else Point()
        self.view = View(offset=Point(start.x, start.y), scale=float(initial_scale))
        self.position = Point(start.x, start.y)
        self.previous_position = Point(start.x, start.y)
        self.pinch_distance: float = 0.0
        self.mode = GestureMode.IDLE

    @property
    def offset(self) -> Point:
        return self.view.offset

    @property
    def scale(self) -> float:
        return self.view.scale

    def snapshot(self) -> View:
        """Copy of the current view, safe to hand to listeners."""
        return self.view.copy()

    def replace(self, view: View) -> None:
        """Replace the view wholesale."""
        self.view = view.copy()

    def track(self, position: Point) -> None:
        """Advance the tracked pointer: current becomes previous."""
        self.previous_position = self.position
        self.position = position

    def rebaseline(self, position: Point) -> None:
        """Set both tracked positions, so the next move starts from here."""
        self.position = position
        self.previous_position = Point(position.x, position.y)

    def pan(self, delta: Point) -> None:
        """Shift the offset by a logical-space delta."""
        self.view.offset = add(self.view.offset, delta)

    def zoom(self, new_scale: float, anchor: Point) -> None:
        """Commit new_scale, keeping the logical point under anchor fixed."""
        self.view.offset = zoom_offset(self.view, anchor, new_scale)
        self.view.scale = float(new_scale)
