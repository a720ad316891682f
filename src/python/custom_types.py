"""
Type definitions for the extent canvas.

This module defines the value types, event records, callback aliases and
TypedDict structures used throughout the codebase.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, TypedDict

from enums import PointerButton, ViewChangeReason


@dataclass
class Point:
    """A point on the canvas, in surface pixels or logical units."""
    x: float = 0.0
    y: float = 0.0


@dataclass
class View:
    """Affine view onto the logical plane: offset plus uniform scale."""
    offset: Point = field(default_factory=Point)
    scale: float = 1.0

    def copy(self) -> "View":
        return View(offset=Point(self.offset.x, self.offset.y), scale=self.scale)


@dataclass(frozen=True)
class ViewBox:
    """Logical rectangle currently visible on the canvas."""
    top: int
    bottom: int
    left: int
    right: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


@dataclass(frozen=True)
class Size:
    """Pixel dimensions of a drawing surface."""
    width: int = 0
    height: int = 0

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0


@dataclass(frozen=True)
class Touch:
    """A single touch point in screen coordinates."""
    client_x: float
    client_y: float


# Input event records
@dataclass(frozen=True)
class PointerEvent:
    """Mouse press, move, release or context-menu request."""
    client_x: float = 0.0
    client_y: float = 0.0
    button: PointerButton = PointerButton.PRIMARY


@dataclass(frozen=True)
class WheelEvent:
    """Wheel rotation. Positive delta_y scrolls down (zoom out)."""
    client_x: float
    client_y: float
    delta_y: float


@dataclass(frozen=True)
class TouchEvent:
    """Touch update carrying the touches still on the surface."""
    touches: tuple[Touch, ...] = ()


# Callback aliases
ContextInitCallback = Callable[[Any], None]
PainterCallback = Callable[[Any], None]
ViewChangeCallback = Callable[[View, ViewChangeReason], None]
ViewBoxChangeCallback = Callable[[ViewBox, ViewChangeReason], None]
RightClickCallback = Callable[[Point], None]
Unsubscribe = Callable[[], None]


class DrawingSurface(Protocol):
    """Raster the engine draws into."""

    def size(self) -> Size: ...

    def origin(self) -> Point: ...

    def resize(self, size: Size) -> None: ...

    def snapshot(self) -> Any: ...

    def painter(self) -> Any: ...


# Configuration TypedDict definitions
class PointConfig(TypedDict):
    """A point as stored in config.json."""
    x: float
    y: float


class CanvasConfig(TypedDict, total=False):
    """Canvas configuration section."""
    initialPosition: PointConfig
    initialScale: float
    minScale: float | None
    maxScale: float | None
    zoomSensitivity: float


@dataclass
class CanvasOptions:
    """Configuration surface of the extent canvas engine.

    Every field is optional. Unset scale bounds leave that side unbounded.
    """
    initial_position: Point = field(default_factory=Point)
    initial_scale: float = 1.0
    min_scale: float | None = None
    max_scale: float | None = None
    zoom_sensitivity: float = 320.0
    on_context_init: ContextInitCallback | None = None
    on_before_draw: PainterCallback | None = None
    on_draw: PainterCallback | None = None
    on_view_change: ViewChangeCallback | None = None
    on_view_box_change: ViewBoxChangeCallback | None = None
    on_right_click: RightClickCallback | None = None

    @classmethod
    def from_settings(cls, settings: CanvasConfig, **callbacks: Any) -> "CanvasOptions":
        """Build options from the 'canvas' config section.

        Args:
            settings: Mapping read from config.json
            **callbacks: Callback fields (on_draw, on_view_change, ...)

        Returns:
            CanvasOptions: Options with defaults for missing keys
        """
        position = settings.get("initialPosition") or {"x": 0.0, "y": 0.0}
        return cls(
            initial_position=Point(float(position["x"]), float(position["y"])),
            initial_scale=float(settings.get("initialScale", 1.0)),
            min_scale=settings.get("minScale"),
            max_scale=settings.get("maxScale"),
            zoom_sensitivity=float(settings.get("zoomSensitivity", 320.0)),
            **callbacks,
        )
