"""
Qt binding of the extent canvas.

Provides the QImage-backed drawing surface and the widget that forwards
Qt input events to the engine.
"""

from ui.canvas.raster_surface import RasterSurface
from ui.canvas.extent_canvas_widget import ExtentCanvasWidget

__all__ = [
    "ExtentCanvasWidget",
    "RasterSurface",
]
