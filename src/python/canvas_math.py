"""
Coordinate math for the extent canvas.

Pure functions converting between surface pixels, screen positions and the
logical plane. Nothing here touches Qt or mutates its arguments.
"""

import math
from typing import Sequence

import numpy as np

from custom_types import Point, Size, Touch, View, ViewBox


def _round(value: float) -> int:
    """Round half up, so that 0.5 -> 1 and -0.5 -> 0."""
    return int(math.floor(value + 0.5))


def add(p1: Point, p2: Point) -> Point:
    """Add two points."""
    return Point(p1.x + p2.x, p1.y + p2.y)


def diff(p1: Point, p2: Point) -> Point:
    """Get the difference p1 - p2."""
    return Point(p1.x - p2.x, p1.y - p2.y)


def scale_point(p: Point, scale: float) -> Point:
    """Divide both components of a point by scale.

    Converts a screen-space delta into a logical-space delta at the given
    zoom level.
    """
    return Point(p.x / scale, p.y / scale)


def cursor_offset(client_x: float, client_y: float, origin: Point) -> Point:
    """Get a pointer position relative to the surface's top-left corner.

    Args:
        client_x: Pointer x in screen coordinates
        client_y: Pointer y in screen coordinates
        origin: Top-left corner of the surface in screen coordinates

    Returns:
        Point: Surface-local pixel position
    """
    return diff(Point(client_x, client_y), origin)


def view_to_view_box(size: Size, view: View) -> ViewBox:
    """Calculate the logical rectangle visible through a view."""
    x, y = view.offset.x, view.offset.y
    return ViewBox(
        top=_round(-y),
        bottom=_round(-y + size.height / view.scale),
        left=_round(-x),
        right=_round(-x + size.width / view.scale),
    )


def view_box_to_view(size: Size, box: ViewBox) -> View:
    """Fit a view box into the surface, preserving its aspect ratio.

    The box is centered along the axis with spare room.

    Args:
        size: Surface size in pixels
        box: Logical rectangle to show

    Returns:
        View: View showing the whole box

    Raises:
        ValueError: If the box has zero width or height
    """
    box_width = box.right - box.left
    box_height = box.bottom - box.top
    if box_width == 0 or box_height == 0:
        raise ValueError(f"View box has zero area: {box}")

    scale = min(size.width / box_width, size.height / box_height)
    x = -(box.left + box_width / 2 - size.width / (2 * scale))
    y = -(box.top + box_height / 2 - size.height / (2 * scale))
    return View(offset=Point(x, y), scale=scale)


def canvas_position(view: View, x: float, y: float) -> Point:
    """Get the logical point under a surface pixel, rounded to integers."""
    return Point(
        _round(-view.offset.x + x / view.scale),
        _round(-view.offset.y + y / view.scale),
    )


def visible_rect(size: Size, view: View) -> tuple[float, float, float, float]:
    """Logical (x, y, width, height) of the region shown on the surface."""
    return (
        -view.offset.x,
        -view.offset.y,
        size.width / view.scale,
        size.height / view.scale,
    )


def clamp_scale(target: float, min_scale: float | None, max_scale: float | None) -> float:
    """Clamp a scale to the configured bounds.

    An unset bound never constrains.
    """
    upper = max_scale if max_scale is not None else target
    lower = min_scale if min_scale is not None else target
    return max(min(target, upper), lower)


def zoom_offset(view: View, anchor: Point, new_scale: float) -> Point:
    """Offset that keeps the logical point under anchor fixed when zooming.

    Args:
        view: Current view
        anchor: Surface-pixel position of the cursor or touch centroid
        new_scale: Scale being applied

    Returns:
        Point: The offset to commit together with new_scale
    """
    shift = diff(scale_point(anchor, view.scale), scale_point(anchor, new_scale))
    return diff(view.offset, shift)


def touch_distance(t1: Touch, t2: Touch) -> float:
    """Euclidean distance between two touches."""
    return float(np.hypot(t1.client_x - t2.client_x, t1.client_y - t2.client_y))


def touch_centroid(touches: Sequence[Touch]) -> Point:
    """Centroid of the first two touches, in screen coordinates.

    One touch yields that touch, two yield their midpoint. An empty
    sequence yields the origin.
    """
    if not touches:
        return Point(0.0, 0.0)
    coords = np.array([(t.client_x, t.client_y) for t in touches[:2]], dtype=np.float64)
    cx, cy = coords.mean(axis=0)
    return Point(float(cx), float(cy))
