"""Categorized, color-tagged terminal messages with an optional log file.

Public singleton: ``logger``. The module-level functions below are bound to
it, so a host program can simply do::

    import msglogger
    msglogger.configure_log_file("run.log", "append")
    msglogger.enable_thread_safety()       # before starting worker threads
    msglogger.error("Loader", "bad record %d\\n", 7)
    msglogger.clean_up()                   # after joining them

Create a separate ``LoggerState`` when an isolated logger is needed (tests,
embedding with a different stream).
"""
from __future__ import annotations

from msglogger.core.colors import Color, DisplayColors, ResetTarget, strip_ansi
from msglogger.core.engine import DIAGNOSTIC_CONTEXT, LoggerState
from msglogger.core.errors import (
    InvalidArgumentError, LogFileError, MsgLoggerError, ResourceError,
)
from msglogger.core.palette import MessageCategory, TagCategory
from msglogger.core.sink import DEFAULT_TIME_FORMAT, TIME_FORMAT_MAX_LENGTH, LogFileMode

__version__ = "0.1.0"

logger = LoggerState()

configure_log_file = logger.configure_log_file
enable_thread_safety = logger.enable_thread_safety
get_message_colors = logger.get_message_colors
get_tag_colors = logger.get_tag_colors
set_message_colors = logger.set_message_colors
set_tag_colors = logger.set_tag_colors
reset_palette = logger.reset_palette
get_time_format = logger.get_time_format
set_time_format = logger.set_time_format
lock = logger.lock
unlock = logger.unlock
locked = logger.locked
clean_up = logger.clean_up

paint_text = logger.paint_text
paint_background = logger.paint_background
reset_colors = logger.reset_colors

emit = logger.emit
message = logger.message
info = logger.info
success = logger.success
warning = logger.warning
error = logger.error

__all__ = [
    "Color", "DisplayColors", "ResetTarget", "strip_ansi",
    "LoggerState", "DIAGNOSTIC_CONTEXT", "logger",
    "MsgLoggerError", "InvalidArgumentError", "LogFileError", "ResourceError",
    "MessageCategory", "TagCategory",
    "LogFileMode", "DEFAULT_TIME_FORMAT", "TIME_FORMAT_MAX_LENGTH",
    "configure_log_file", "enable_thread_safety",
    "get_message_colors", "get_tag_colors", "set_message_colors", "set_tag_colors",
    "reset_palette", "get_time_format", "set_time_format",
    "lock", "unlock", "locked", "clean_up",
    "paint_text", "paint_background", "reset_colors",
    "emit", "message", "info", "success", "warning", "error",
]
