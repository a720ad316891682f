"""
Tests for DrawScheduler: call order on the painter and the cleared region.
"""
from unittest.mock import MagicMock

import pytest
from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QColor

from controllers.draw_scheduler import DrawScheduler
from custom_types import Point, Size, View
from ui.canvas.raster_surface import RasterSurface
from view_state import ViewState


@pytest.fixture
def panned_state():
    return ViewState(Point(50, 30), 2.0)


def test_paint_call_order(panned_state):
    painter = MagicMock()
    scheduler = DrawScheduler(
        panned_state,
        on_before_draw=lambda p: p.before_hook(),
        on_draw=lambda p: p.draw_hook(),
    )

    scheduler.paint(painter, Size(800, 600))

    names = [call[0] for call in painter.method_calls]
    assert names == [
        "resetTransform",
        "before_hook",
        "scale",
        "translate",
        "save",
        "setCompositionMode",
        "fillRect",
        "restore",
        "draw_hook",
    ]
    painter.scale.assert_called_once_with(2.0, 2.0)
    painter.translate.assert_called_once_with(50, 30)


def test_clear_region_is_the_visible_rect(panned_state):
    painter = MagicMock()
    DrawScheduler(panned_state).paint(painter, Size(800, 600))

    rect = painter.fillRect.call_args[0][0]
    assert rect == QRectF(-50, -30, 400, 300)


def test_callbacks_are_optional(panned_state):
    painter = MagicMock()
    DrawScheduler(panned_state).paint(painter, Size(10, 10))
    assert painter.resetTransform.called


@pytest.mark.parametrize("size", [Size(0, 600), Size(800, 0), Size(0, 0)])
def test_render_skips_empty_surface(panned_state, size):
    surface = MagicMock()
    surface.size.return_value = size
    on_draw = MagicMock()

    assert DrawScheduler(panned_state, on_draw=on_draw).render(surface) is False
    surface.painter.assert_not_called()
    on_draw.assert_not_called()


def test_no_stale_pixels_after_pan():
    surface = RasterSurface(200, 100)
    surface.image.fill(QColor("red"))
    state = ViewState(Point(0, 0), 1.0)
    scheduler = DrawScheduler(state)

    state.pan(Point(-37, 12))
    state.zoom(3.0, Point(20, 20))
    assert scheduler.render(surface) is True

    for x, y in [(0, 0), (199, 0), (0, 99), (199, 99), (100, 50)]:
        assert surface.image.pixelColor(x, y).alpha() == 0


def test_draw_callback_paints_in_logical_units():
    surface = RasterSurface(100, 100)
    state = ViewState(Point(5, 5), 2.0)

    def on_draw(painter):
        painter.fillRect(QRectF(0, 0, 10, 10), Qt.GlobalColor.red)

    DrawScheduler(state, on_draw=on_draw).render(surface)

    # Logical (0, 0)-(10, 10) lands on device (10, 10)-(30, 30)
    assert surface.image.pixelColor(20, 20) == QColor(Qt.GlobalColor.red)
    assert surface.image.pixelColor(5, 5).alpha() == 0
    assert surface.image.pixelColor(35, 35).alpha() == 0
