"""
Extent Canvas Error Handler Module

This module provides a centralized error reporting pattern:
Exceptions raised by caller-supplied callbacks are logged with their context
and stack trace through a single logger instead of being propagated.
"""

import traceback
import logging

logger = logging.getLogger("extent_canvas.error_handler")


class ErrorHandler:
    """Centralized error handling for the extent canvas."""

    @staticmethod
    def log_exception(e: Exception, context: str = "") -> str:
        """Log an exception with its stack trace."""
        error_type = type(e).__name__
        error_msg = str(e)

        if context:
            logger.error("%s: %s: %s", context, error_type, error_msg)
        else:
            logger.error("%s: %s", error_type, error_msg)

        logger.debug("".join(traceback.format_exception(e)))

        return f"{error_type}: {error_msg}"

