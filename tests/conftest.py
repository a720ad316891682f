"""
conftest.py - Shared pytest fixtures for extent canvas tests

This module provides standardized test fixtures for use across all tests.
It includes fixtures for:
- Path setup and Python path configuration
- Offscreen Qt platform and a session-wide QApplication
- Configuration management
- Drawing surfaces, event sources and engines wired to recorders
"""
import os
import sys
import json
import pathlib
import pytest

# Render without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add the src/python directory to the Python path
sys.path.insert(0, str(pathlib.Path(__file__).parent.parent / "src" / "python"))

# Imports from project modules (now that path is configured)
from config_manager import ConfigManager
from controllers.canvas_controller import ExtentCanvasController
from custom_types import CanvasOptions
from input_events import InputEventSource
from ui.canvas.raster_surface import RasterSurface


# Path and Environment Fixtures
# ----------------------------

@pytest.fixture
def canvas_paths():
    """Provide standard paths to key project directories."""
    root_dir = pathlib.Path(__file__).parent.parent
    return {
        'root': root_dir,
        'src': root_dir / 'src',
        'python': root_dir / 'src' / 'python',
        'config': root_dir / 'config',
        'tests': root_dir / 'tests'
    }


@pytest.fixture(scope="session", autouse=True)
def qt_app(qapp):
    """Make sure a QApplication exists for every test in the session."""
    return qapp


# Configuration Fixtures
# ---------------------

@pytest.fixture
def test_config_data():
    """Create minimal test configuration data."""
    return {
        "colors": {
            "palette": {
                "background": "#121212",
                "grid": "#2E3440"
            }
        },
        "ui": {
            "window": {
                "title": "Extent Canvas Test",
                "width": 400
            }
        },
        "canvas": {
            "initialPosition": {"x": 10, "y": -20},
            "initialScale": 2.0,
            "minScale": 0.5,
            "maxScale": 4.0,
            "zoomSensitivity": 200
        },
        "logging": {
            "level": "DEBUG",
            "console": False,
            "raiseOnError": False
        }
    }


@pytest.fixture
def test_config_files(tmp_path, test_config_data):
    """Create a temporary config file."""
    config_file = tmp_path / "test_config.json"
    with open(config_file, 'w') as f:
        json.dump(test_config_data, f)

    return {
        "config_path": config_file,
        "tmp_path": tmp_path
    }


@pytest.fixture
def test_config_manager(test_config_files):
    """Create a ConfigManager instance with test configuration."""
    return ConfigManager(
        cfg_path=test_config_files["config_path"],
        exit_on_error=False
    )


# Engine Fixtures
# ---------------

class CallbackRecorder:
    """Collects every engine callback invocation in order."""

    def __init__(self):
        self.calls = []

    def context_init(self, surface):
        self.calls.append(("context_init", surface))

    def before_draw(self, painter):
        self.calls.append(("before_draw", painter))

    def draw(self, painter):
        self.calls.append(("draw", painter))

    def view_change(self, view, reason):
        self.calls.append(("view", view, reason))

    def view_box_change(self, view_box, reason):
        self.calls.append(("view_box", view_box, reason))

    def right_click(self, point):
        self.calls.append(("right_click", point))

    def named(self, name):
        return [call for call in self.calls if call[0] == name]

    def options(self, **overrides):
        values = dict(
            on_context_init=self.context_init,
            on_before_draw=self.before_draw,
            on_draw=self.draw,
            on_view_change=self.view_change,
            on_view_box_change=self.view_box_change,
            on_right_click=self.right_click,
        )
        values.update(overrides)
        return CanvasOptions(**values)


@pytest.fixture
def recorder():
    """Fresh callback recorder."""
    return CallbackRecorder()


@pytest.fixture
def surface():
    """800x600 raster with its origin at the screen origin."""
    return RasterSurface(800, 600)


@pytest.fixture
def events():
    """Input event source not bound to any widget."""
    return InputEventSource()


@pytest.fixture
def make_controller(recorder, surface, events):
    """Factory returning an engine attached to the surface and event source."""
    created = []

    def factory(**overrides):
        controller = ExtentCanvasController(recorder.options(**overrides))
        controller.attach(surface, events)
        created.append(controller)
        return controller

    yield factory

    for controller in created:
        controller.detach()
