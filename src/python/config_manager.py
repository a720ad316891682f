import json
import pathlib
import sys
import logging
from typing import Any

from PyQt6.QtGui import QColor

from custom_types import CanvasConfig

logger = logging.getLogger(__name__)

class ConfigManager:
    """Manages application configuration: colors, UI settings, canvas defaults and logging"""

    colors: dict[str, str]
    ui: dict[str, Any]
    canvas: CanvasConfig
    exit_on_error: bool
    _cfg: dict[str, Any]
    cfg_path: str | pathlib.Path

    def __init__(
        self,
        cfg_path: str | pathlib.Path | None = None,
        exit_on_error: bool = True
    ) -> None:
        """Initialize the ConfigManager with an optional custom path.

        Args:
            cfg_path: Path to the config.json file (defaults to standard location if None)
            exit_on_error: Whether to exit the program on configuration errors
        """
        self.colors = {}
        self.ui = {}
        self.canvas = {}
        self.exit_on_error = exit_on_error
        self._cfg = {}

        self.cfg_path = cfg_path if cfg_path is not None else self._default_config_path()

        self.load_config()

    def _default_config_path(self) -> pathlib.Path:
        """Get the default path to the config.json file."""
        base = pathlib.Path(__file__).parent.parent.parent
        return base / "config" / "config.json"

    def _fail(self, message: str, error_type: type[Exception] = RuntimeError) -> None:
        logger.error(message)
        if self.exit_on_error:
            sys.exit(1)
        raise error_type(message)

    def load_config(self) -> None:
        """Load master configuration from the configured path."""
        try:
            with open(self.cfg_path, 'r') as f:
                self._cfg = json.load(f)
        except Exception as e:
            self._fail(f"Critical error loading configuration '{self.cfg_path}': {e}")

        # Validate and assign sections
        try:
            self.colors = self._cfg["colors"]["palette"]
            self.ui = self._cfg["ui"]
            self.canvas = self._cfg["canvas"]
        except KeyError as e:
            self._fail(f"Configuration missing key: {e}", KeyError)

        self._validate_canvas()

    def _validate_canvas(self) -> None:
        """Check the scale settings of the canvas section."""
        initial_scale = self.canvas.get("initialScale", 1.0)
        if initial_scale <= 0:
            self._fail(f"canvas.initialScale must be positive, got {initial_scale}", ValueError)

        sensitivity = self.canvas.get("zoomSensitivity", 320)
        if sensitivity <= 0:
            self._fail(f"canvas.zoomSensitivity must be positive, got {sensitivity}", ValueError)

        min_scale = self.canvas.get("minScale")
        max_scale = self.canvas.get("maxScale")
        if min_scale is not None and max_scale is not None and min_scale > max_scale:
            self._fail(f"canvas.minScale {min_scale} exceeds canvas.maxScale {max_scale}", ValueError)

    def get_color(self, key: str, default: str | None = None) -> str:
        """Get a color hex string from the palette by key"""
        return self.colors.get(key, default or "#000000")

    def get_qt_color(self, key: str, default: str | None = None) -> QColor:
        """Get a palette color as a QColor"""
        return QColor(self.get_color(key, default))

    def get_ui_setting(self, category: str, key: str, default: Any = None) -> Any:
        """Get a UI setting value by category and key"""
        if category in self.ui and key in self.ui[category]:
            return self.ui[category][key]
        return default

    def get_setting(self, section: str, key: str, default: Any = None) -> Any:
        """Get a generic setting from the master config"""
        try:
            return self._cfg.get(section, {}).get(key, default)
        except Exception:
            return default

    def set_setting(self, section: str, key: str, value: Any) -> None:
        """Set a setting in memory (does not persist to file).

        Args:
            section: Configuration section (e.g., 'canvas', 'ui')
            key: Setting key within the section
            value: Value to set
        """
        if section not in self._cfg:
            self._cfg[section] = {}
        self._cfg[section][key] = value

    def get_logging_setting(self, key: str, default: Any = None) -> Any:
        """Get a logging configuration setting"""
        try:
            return self._cfg.get("logging", {}).get(key, default)
        except Exception:
            return default

    def get_canvas_config(self) -> CanvasConfig:
        """Get the canvas defaults.

        Returns:
            dict: Canvas configuration with keys:
                - initialPosition: Starting offset {x, y}
                - initialScale: Starting scale
                - minScale: Lower zoom bound or null
                - maxScale: Upper zoom bound or null
                - zoomSensitivity: Wheel delta divisor
        """
        return self._cfg.get("canvas", {})


# Create a singleton instance
config = ConfigManager()
