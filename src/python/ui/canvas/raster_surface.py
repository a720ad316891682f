"""
QImage-backed drawing surface for the extent canvas.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage, QPainter

from custom_types import Point, Size

logger = logging.getLogger(__name__)


class RasterSurface:
    """An offscreen raster the engine draws into and a widget blits from.

    Attributes:
        image: The backing QImage (null while the surface has no area)
    """

    IMAGE_FORMAT = QImage.Format.Format_ARGB32_Premultiplied

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        origin_provider: Callable[[], Point] | None = None
    ) -> None:
        """
        Args:
            width: Initial width in pixels
            height: Initial height in pixels
            origin_provider: Returns the top-left corner in screen coordinates;
                the surface sits at the screen origin when omitted
        """
        self._origin_provider = origin_provider
        self.image = self._allocate(Size(width, height))

    def _allocate(self, size: Size) -> QImage:
        image = QImage(max(size.width, 0), max(size.height, 0), self.IMAGE_FORMAT)
        if not image.isNull():
            image.fill(Qt.GlobalColor.transparent)
        return image

    def size(self) -> Size:
        return Size(self.image.width(), self.image.height())

    def width(self) -> int:
        return self.image.width()

    def height(self) -> int:
        return self.image.height()

    def origin(self) -> Point:
        if self._origin_provider is None:
            return Point()
        return self._origin_provider()

    def resize(self, size: Size) -> None:
        """Reallocate the raster. Previous content is discarded."""
        self.image = self._allocate(size)

    def snapshot(self) -> QImage:
        """Copy of the current raster."""
        return self.image.copy()

    @contextmanager
    def painter(self) -> Iterator[QPainter]:
        """Open a QPainter on the raster, closed on exit."""
        painter = QPainter(self.image)
        try:
            yield painter
        finally:
            painter.end()
