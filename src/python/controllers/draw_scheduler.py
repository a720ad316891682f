"""Draw scheduler for the extent canvas.

Applies the current view as a painter transform and hands the painter to
the caller's draw callback.
"""

import logging
from typing import Any

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QPainter

from canvas_math import visible_rect
from custom_types import DrawingSurface, PainterCallback, Size
from view_state import ViewState

logger = logging.getLogger(__name__)


class DrawScheduler:
    """Render the surface through the current view."""

    def __init__(
        self,
        view_state: ViewState,
        on_before_draw: PainterCallback | None = None,
        on_draw: PainterCallback | None = None,
    ) -> None:
        self.view_state = view_state
        self.on_before_draw = on_before_draw
        self.on_draw = on_draw

    def render(self, surface: DrawingSurface) -> bool:
        """Draw one frame onto surface.

        Returns:
            bool: False when the surface has no area and nothing was drawn
        """
        size = surface.size()
        if size.is_empty:
            logger.debug("Skipping draw on empty surface %dx%d", size.width, size.height)
            return False

        with surface.painter() as painter:
            self.paint(painter, size)
        return True

    def paint(self, painter: Any, size: Size) -> None:
        """Run the transform/clear/draw sequence on an open painter.

        Scale is applied before translate so the offset is expressed in
        logical units.
        """
        painter.resetTransform()
        if self.on_before_draw is not None:
            self.on_before_draw(painter)

        view = self.view_state.view
        painter.scale(view.scale, view.scale)
        painter.translate(view.offset.x, view.offset.y)

        # The visible rect maps exactly onto the device rect (0, 0, width, height)
        painter.save()
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
        painter.fillRect(QRectF(*visible_rect(size, view)), Qt.GlobalColor.transparent)
        painter.restore()

        if self.on_draw is not None:
            self.on_draw(painter)
