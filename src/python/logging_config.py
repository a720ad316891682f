"""
Logging setup for the extent canvas.

Gesture and drawing code logs through module loggers only; this module
decides where those records go. Handlers are built from the 'logging'
section of config.json, so a demo run and a test run can route the same
records differently.
"""

import logging
import logging.handlers
from pathlib import Path
from config_manager import ConfigManager, config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ErrorRaisingHandler(logging.Handler):
    """Turn ERROR and CRITICAL records into RuntimeError.

    Installed when raiseOnError is set, so a callback failure reported
    through ErrorHandler stops a debugging session at the point of failure.
    """

    def emit(self, record):
        if record.levelno >= logging.ERROR:
            raise RuntimeError(f"Logger error: {record.getMessage()}")


def _level(name: str, fallback: int) -> int:
    return getattr(logging, name.upper(), fallback)


def _console_handler(cfg: ConfigManager, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(_level(cfg.get_logging_setting("consoleLevel", "WARNING"), logging.WARNING))
    handler.setFormatter(formatter)
    return handler


def _file_handler(cfg: ConfigManager, level: int, formatter: logging.Formatter) -> logging.Handler:
    """Rotating file handler; raises OSError when the log directory is unusable."""
    log_file = Path(cfg.get_logging_setting("file", "logs/extent_canvas.log"))
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=cfg.get_logging_setting("maxBytes", 10 * 1024 * 1024),
        backupCount=cfg.get_logging_setting("backupCount", 3),
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(raise_on_error: bool | None = None, cfg: ConfigManager | None = None) -> None:
    """
    Replace the root logger's handlers with the configured ones.

    Settings read from the 'logging' section:
    - level: root and file level name (default INFO)
    - file, maxBytes, backupCount: rotating log file
    - console, consoleLevel: optional stderr output (default WARNING)
    - raiseOnError: add an ErrorRaisingHandler

    Args:
        raise_on_error: Takes precedence over raiseOnError when not None
        cfg: Configuration to read, the application config by default
    """
    cfg = cfg if cfg is not None else config
    level_name = cfg.get_logging_setting("level", "INFO")
    level = _level(level_name, logging.INFO)
    if raise_on_error is None:
        raise_on_error = cfg.get_logging_setting("raiseOnError", False)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if cfg.get_logging_setting("console", True):
        root_logger.addHandler(_console_handler(cfg, formatter))

    try:
        file_handler = _file_handler(cfg, level, formatter)
    except OSError as e:
        root_logger.warning("Could not initialize file logging: %s", e)
    else:
        root_logger.addHandler(file_handler)
        root_logger.info("Extent Canvas started, logging at %s to %s", level_name, file_handler.baseFilename)

    if raise_on_error:
        root_logger.addHandler(ErrorRaisingHandler())

    # Qt's own loggers are chatty at DEBUG
    logging.getLogger('PyQt6').setLevel(logging.WARNING)


def get_logger(name):
    """Module logger, for code that prefers not to import logging directly."""
    return logging.getLogger(name)
