"""Logger state: configuration store and emission engine in one owned object.

Every public method takes the lock (once thread safety is enabled) for its
whole duration and then only calls the unlocked ``_`` helpers, including
for the diagnostics it emits on failure. The lock is still reentrant because
``lock()`` hands it to host code, which may keep logging while holding it.

Configuration calls never raise for bad input: they return ``False``, keep
the exception in ``last_error`` and print one ``error`` diagnostic through
the normal pipeline. Emission calls never raise either: a bad format or a
failed log file write is reported the same way.
"""
from __future__ import annotations
from collections.abc import Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Callable, Optional
import os
import sys
import threading

from .colors import (
    Color, DisplayColors, ResetTarget,
    background_sequence, colors_disabled_by_env, reset_sequence, text_sequence,
)
from .errors import InvalidArgumentError, LogFileError, MsgLoggerError, ResourceError
from .palette import (
    MESSAGE_TAGS, ColorPalette, MessageCategory, TagCategory,
    parse_message_category, parse_tag_category,
)
from .sink import (
    DEFAULT_TIME_FORMAT, TIME_FORMAT_MAX_LENGTH, LogFileMode, LogSink, format_timestamp,
)

DIAGNOSTIC_CONTEXT = "Logger module"


def render_message(fmt, args: tuple) -> str:
    """printf-style substitution, only when arguments were given."""
    if not args:
        return str(fmt)
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        return fmt % args[0]
    return fmt % args

def _coerce(parser, value, argument: str):
    try:
        return parser(value)
    except ValueError as e:
        raise InvalidArgumentError(argument, f"{e}! Please use a valid {argument}.") from e

def _require_colors(colors) -> DisplayColors:
    if colors is None:
        raise InvalidArgumentError(
            "colors",
            "Cannot assign display color information from an empty reference! "
            "Please use a valid reference.",
        )
    if not isinstance(colors, DisplayColors):
        raise InvalidArgumentError(
            "colors", f"Expected DisplayColors, got {type(colors).__name__}!",
        )
    return colors

def _require_path(path) -> str:
    if path is None:
        raise InvalidArgumentError(
            "path", "Cannot open a log file from an empty reference! Please use a valid path.",
        )
    try:
        p = os.fspath(path)
    except TypeError as e:
        raise InvalidArgumentError("path", f"Expected a file path, got {type(path).__name__}!") from e
    if not p:
        raise InvalidArgumentError("path", "Cannot open a log file with an empty name!")
    return p


class LoggerState:
    def __init__(self, stream: Optional[IO[str]] = None, colors_enabled: Optional[bool] = None,
                 lock_factory: Callable[[], object] = threading.RLock):
        self._palette = ColorPalette()
        self._time_format = DEFAULT_TIME_FORMAT
        self._sink: Optional[LogSink] = None
        self._lock = None
        self._lock_factory = lock_factory
        self._enable_guard = threading.Lock()
        self._stream = stream
        if colors_enabled is None:
            colors_enabled = not colors_disabled_by_env()
        self.colors_enabled = colors_enabled
        self.last_error: Optional[MsgLoggerError] = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.clean_up()

    # --- internal -----------------------------------------------------
    @contextmanager
    def _guard(self):
        lock = self._lock
        if lock is None:
            yield
        else:
            with lock:
                yield

    def _out(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    def _paint_text(self, color: Color):
        if self.colors_enabled:
            self._out().write(text_sequence(color))

    def _paint_background(self, color: Color):
        if self.colors_enabled:
            self._out().write(background_sequence(color))

    def _paint(self, colors: DisplayColors):
        self._paint_text(colors.text_color)
        self._paint_background(colors.background_color)

    def _reset_colors(self, target: ResetTarget = ResetTarget.BOTH):
        if self.colors_enabled:
            self._out().write(reset_sequence(target))

    def _emit(self, category: MessageCategory, context: Optional[str], body: str):
        out = self._out()
        if context:
            self._paint(self._palette.tag_colors[TagCategory.CONTEXT])
            out.write(f"{context}: ")
            self._reset_colors()
        label = None
        tag = MESSAGE_TAGS.get(category)
        if tag is not None:
            tag_category, label = tag
            self._paint(self._palette.tag_colors[tag_category])
            out.write(f"{label} ")
            self._reset_colors()
        self._paint(self._palette.message_colors[category])
        out.write(body)
        self._reset_colors()
        out.flush()
        if self._sink is not None:
            try:
                self._sink.write_entry(format_timestamp(self._time_format), context, label, body)
            except OSError as e:
                self._drop_sink(e)

    def _drop_sink(self, exc: OSError):
        # detached before reporting so the diagnostic stays on the terminal
        sink, self._sink = self._sink, None
        sink.discard()
        self._fail(
            LogFileError(str(sink.path), exc.strerror or str(exc)),
            f"Could not write to log file '{sink.path}' ({exc.strerror or exc})! Logging to the terminal only.",
        )

    def _warn(self, text: str):
        self._emit(MessageCategory.WARNING, DIAGNOSTIC_CONTEXT, text)

    def _fail(self, exc: MsgLoggerError, text: Optional[str] = None) -> bool:
        self.last_error = exc
        if text is None:
            text = getattr(exc, "detail", None) or str(exc)
        self._emit(MessageCategory.ERROR, DIAGNOSTIC_CONTEXT, f"{text}\n")
        return False

    def _ok(self) -> bool:
        self.last_error = None
        return True

    def _close_sink(self):
        sink, self._sink = self._sink, None
        if sink is None:
            return
        try:
            sink.close()
        except OSError as e:
            self._warn(f"Could not close log file '{sink.path}' ({e.strerror or e})!\n")

    # --- configuration store --------------------------------------------
    @property
    def thread_safe(self) -> bool:
        return self._lock is not None

    @property
    def log_file(self) -> Optional[Path]:
        sink = self._sink
        return sink.path if sink is not None else None

    def get_message_colors(self, category) -> DisplayColors:
        with self._guard():
            try:
                cat = _coerce(parse_message_category, category, "message category")
            except InvalidArgumentError as e:
                self._fail(e)
                raise
            return self._palette.message(cat)

    def get_tag_colors(self, category) -> DisplayColors:
        with self._guard():
            try:
                cat = _coerce(parse_tag_category, category, "tag category")
            except InvalidArgumentError as e:
                self._fail(e)
                raise
            return self._palette.tag(cat)

    def set_message_colors(self, category, colors: Optional[DisplayColors]) -> bool:
        with self._guard():
            try:
                cat = _coerce(parse_message_category, category, "message category")
                self._palette.set_message(cat, _require_colors(colors))
            except InvalidArgumentError as e:
                return self._fail(e)
            return self._ok()

    def set_tag_colors(self, category, colors: Optional[DisplayColors]) -> bool:
        with self._guard():
            try:
                cat = _coerce(parse_tag_category, category, "tag category")
                self._palette.set_tag(cat, _require_colors(colors))
            except InvalidArgumentError as e:
                return self._fail(e)
            return self._ok()

    def reset_palette(self):
        with self._guard():
            self._palette.reset()

    def palette_snapshot(self) -> ColorPalette:
        with self._guard():
            return self._palette.copy()

    def get_time_format(self) -> str:
        with self._guard():
            return self._time_format

    def set_time_format(self, pattern: Optional[str]) -> bool:
        with self._guard():
            if pattern is None:
                return self._fail(InvalidArgumentError(
                    "pattern",
                    "Cannot assign time format from an empty reference! Please use a valid reference.",
                ))
            if not isinstance(pattern, str):
                return self._fail(InvalidArgumentError(
                    "pattern", f"Expected a string, got {type(pattern).__name__}!",
                ))
            if len(pattern) > TIME_FORMAT_MAX_LENGTH:
                return self._fail(InvalidArgumentError(
                    "pattern",
                    "Could not change time format! Try again with an argument of at most "
                    f"{TIME_FORMAT_MAX_LENGTH} characters.",
                ))
            try:
                format_timestamp(pattern)
            except ValueError as e:
                return self._fail(InvalidArgumentError(
                    "pattern", f"Could not change time format! {pattern!r} is not a valid pattern ({e}).",
                ))
            self._time_format = pattern
            return self._ok()

    def configure_log_file(self, path, mode=LogFileMode.WRITE) -> bool:
        with self._guard():
            self._close_sink()
            try:
                file_mode = _coerce(LogFileMode.parse, mode, "log file mode")
                sink, fell_back = LogSink.open(_require_path(path), file_mode)
            except InvalidArgumentError as e:
                return self._fail(e)
            except LogFileError as e:
                return self._fail(e, f"Could not create log file '{e.path}' ({e.detail})! Please check your system.")
            if fell_back:
                self._warn("Could not find log file! Defaulting to write mode!\n")
            self._sink = sink
            return self._ok()

    def enable_thread_safety(self) -> bool:
        with self._enable_guard:
            if self._lock is not None:
                return True
            try:
                lock = self._lock_factory()
            except (MemoryError, RuntimeError) as e:
                return self._fail(
                    ResourceError(str(e)),
                    "Could not allocate the logger recursive mutex! Please check your system.",
                )
            self._lock = lock
            return self._ok()

    def lock(self):
        lock = self._lock
        if lock is None:
            self.warning(DIAGNOSTIC_CONTEXT, "Enable thread safety to access the logger recursive mutex.\n")
            return
        lock.acquire()

    def unlock(self):
        lock = self._lock
        if lock is None:
            self.warning(DIAGNOSTIC_CONTEXT, "Enable thread safety to access the logger recursive mutex.\n")
            return
        try:
            lock.release()
        except RuntimeError:
            self.warning(DIAGNOSTIC_CONTEXT, "Cannot unlock the logger recursive mutex: this thread does not hold it.\n")

    @contextmanager
    def locked(self):
        """Hold the logger lock around a block of host terminal output."""
        lock = self._lock
        if lock is None:
            self.lock()
            yield
            return
        with lock:
            yield

    def clean_up(self):
        """Close the log file and drop the lock. Safe to call repeatedly."""
        with self._guard():
            try:
                self._close_sink()
            finally:
                self._lock = None

    # --- emission -------------------------------------------------------
    def paint_text(self, color: Color | str):
        color = Color.parse(color)
        with self._guard():
            self._paint_text(color)

    def paint_background(self, color: Color | str):
        color = Color.parse(color)
        with self._guard():
            self._paint_background(color)

    def reset_colors(self, target: ResetTarget | str = ResetTarget.BOTH):
        target = ResetTarget(target)
        with self._guard():
            self._reset_colors(target)

    def emit(self, category, context: Optional[str], fmt: str, *args):
        with self._guard():
            try:
                cat = _coerce(parse_message_category, category, "message category")
                body = render_message(fmt, args)
            except InvalidArgumentError as e:
                self._fail(e)
                return
            except (TypeError, ValueError) as e:
                self._fail(InvalidArgumentError("format", f"Could not format message {fmt!r} with {args!r} ({e})!"))
                return
            self._emit(cat, context, body)

    def message(self, context: Optional[str], fmt: str, *args):
        self.emit(MessageCategory.DEFAULT, context, fmt, *args)

    def info(self, context: Optional[str], fmt: str, *args):
        self.emit(MessageCategory.INFO, context, fmt, *args)

    def success(self, context: Optional[str], fmt: str, *args):
        self.emit(MessageCategory.SUCCESS, context, fmt, *args)

    def warning(self, context: Optional[str], fmt: str, *args):
        self.emit(MessageCategory.WARNING, context, fmt, *args)

    def error(self, context: Optional[str], fmt: str, *args):
        self.emit(MessageCategory.ERROR, context, fmt, *args)
