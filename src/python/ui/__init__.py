"""UI components package for the extent canvas."""

from ui.canvas import ExtentCanvasWidget, RasterSurface

__all__ = [
    "ExtentCanvasWidget",
    "RasterSurface",
]
