"""
Tests for ResizeHandler snapshot-and-restore.
"""
from unittest.mock import MagicMock

import pytest
from PyQt6.QtGui import QColor

from controllers.draw_scheduler import DrawScheduler
from controllers.resize_handler import ResizeHandler
from custom_types import Point, Size, View
from ui.canvas.raster_surface import RasterSurface
from view_state import ViewState


@pytest.fixture
def scheduler():
    """Scheduler double so the restored snapshot is not painted over."""
    scheduler = MagicMock(spec=DrawScheduler)
    scheduler.render.return_value = True
    return scheduler


def test_resize_keeps_view(scheduler):
    state = ViewState(Point(10, 20), 1.5)
    surface = RasterSurface(400, 400)
    handler = ResizeHandler(state, scheduler)

    assert handler.resize(surface, Size(800, 400)) is True
    assert surface.size() == Size(800, 400)
    assert state.view == View(Point(10, 20), 1.5)
    scheduler.render.assert_called_once_with(surface)


def test_snapshot_is_restored_in_place(scheduler):
    state = ViewState(Point(5, 5), 2.0)
    surface = RasterSurface(400, 400)
    surface.image.fill(QColor("red"))

    ResizeHandler(state, scheduler).resize(surface, Size(800, 400))

    red = QColor("red")
    assert surface.image.pixelColor(10, 10) == red
    assert surface.image.pixelColor(390, 200) == red
    # The newly exposed area starts out transparent
    assert surface.image.pixelColor(410, 200).alpha() == 0
    assert surface.image.pixelColor(790, 10).alpha() == 0


def test_empty_surface_is_not_snapshotted(scheduler, monkeypatch):
    surface = RasterSurface(0, 0)
    snapshot = MagicMock(side_effect=surface.snapshot)
    monkeypatch.setattr(surface, "snapshot", snapshot)

    ResizeHandler(ViewState(), scheduler).resize(surface, Size(100, 100))

    snapshot.assert_not_called()
    assert surface.size() == Size(100, 100)
    scheduler.render.assert_called_once_with(surface)


def test_resize_to_empty_skips_restore(scheduler, monkeypatch):
    surface = RasterSurface(100, 100)
    painter = MagicMock(side_effect=surface.painter)
    monkeypatch.setattr(surface, "painter", painter)

    ResizeHandler(ViewState(), scheduler).resize(surface, Size(0, 100))

    painter.assert_not_called()
    assert surface.size().is_empty
    scheduler.render.assert_called_once_with(surface)


def test_full_screen_uses_viewport(scheduler):
    surface = RasterSurface(400, 300)
    handler = ResizeHandler(ViewState(), scheduler)

    handler.resize(surface, Size(400, 300), full_screen=True, viewport=Size(1920, 1080))

    assert surface.size() == Size(1920, 1080)


def test_same_size_only_redraws(scheduler, monkeypatch):
    surface = RasterSurface(400, 300)
    snapshot = MagicMock(side_effect=surface.snapshot)
    monkeypatch.setattr(surface, "snapshot", snapshot)

    ResizeHandler(ViewState(), scheduler).resize(surface, Size(400, 300))

    snapshot.assert_not_called()
    scheduler.render.assert_called_once_with(surface)


def test_resize_to_empty_reports_no_frame():
    surface = RasterSurface(100, 100)
    state = ViewState()
    handler = ResizeHandler(state, DrawScheduler(state))

    assert handler.resize(surface, Size(100, 0)) is False
    assert handler.resize(surface, Size(50, 50)) is True
