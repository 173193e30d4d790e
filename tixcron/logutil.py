"""Logging helpers that prefix messages with the caller's file and line."""

from __future__ import annotations

import inspect
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


def _caller_location() -> str:
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        if caller is None:
            return "[?:0]"
        return f"[{os.path.basename(caller.f_code.co_filename)}:{caller.f_lineno}]"
    finally:
        del frame


def log_error(err: BaseException | str) -> str:
    """Log an error with the caller's location; returns the logged line."""
    message = f"{_caller_location()} {err}"
    logger.error(message)
    return message


def log_string(message: str) -> str:
    """Log a message with the caller's location; returns the logged line."""
    line = f"{_caller_location()} {message}"
    logger.info(line)
    return line


def log_debugger(data: Any) -> str:
    """Log the caller's location and print the data to stdout; returns the location."""
    location = _caller_location()
    logger.debug(location)
    print(data)
    return location