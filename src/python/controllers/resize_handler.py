"""Resize handler for the extent canvas.

Keeps the picture on screen while the surface is reallocated at a new size.
"""

import logging
from typing import Any

from PyQt6.QtCore import QRectF

from controllers.draw_scheduler import DrawScheduler
from custom_types import DrawingSurface, Size
from view_state import ViewState

logger = logging.getLogger(__name__)


class ResizeHandler:
    """Snapshot-and-restore the raster across surface size changes.

    The view is never rescaled: a larger surface shows more of the logical
    plane at the same zoom level.
    """

    def __init__(self, view_state: ViewState, scheduler: DrawScheduler) -> None:
        self.view_state = view_state
        self.scheduler = scheduler

    def resize(
        self,
        surface: DrawingSurface,
        content_size: Size,
        full_screen: bool = False,
        viewport: Size | None = None,
    ) -> bool:
        """Resize surface and redraw it.

        Args:
            surface: The surface to resize
            content_size: Observed content rectangle of the widget
            full_screen: Whether the surface is shown full screen
            viewport: Screen dimensions used in full-screen mode

        Returns:
            bool: False when the resized surface has no area and nothing was drawn
        """
        target = viewport if full_screen and viewport is not None else content_size
        current = surface.size()
        if target == current:
            logger.debug("Surface already %dx%d, redrawing only", target.width, target.height)
            return self.scheduler.render(surface)

        snapshot = None if current.is_empty else surface.snapshot()
        surface.resize(target)
        logger.debug("Resized surface %dx%d -> %dx%d", current.width, current.height, target.width, target.height)

        if snapshot is not None and not target.is_empty:
            with surface.painter() as painter:
                self._restore(painter, snapshot)

        return self.scheduler.render(surface)

    def _restore(self, painter: Any, snapshot: Any) -> None:
        """Paint the previous raster back at the current view offset."""
        view = self.view_state.view
        painter.resetTransform()
        painter.scale(view.scale, view.scale)
        painter.translate(view.offset.x, view.offset.y)
        painter.drawImage(
            QRectF(
                -view.offset.x,
                -view.offset.y,
                snapshot.width() / view.scale,
                snapshot.height() / view.scale,
            ),
            snapshot,
        )
