"""Sample program walking through every logger feature.

    python -m msglogger --log-file demo.log --threads 4
"""
from __future__ import annotations
import argparse
import threading
from typing import List, Optional

from msglogger.core.colors import Color, DisplayColors
from msglogger.core.engine import LoggerState
from msglogger.core.palette import MessageCategory, TagCategory
from msglogger.core.sink import LogFileMode
from msglogger.system.settings import Settings
from msglogger.ui.preview import show_palette

_CYCLE = ("message", "error", "info", "success", "warning")
_ARTICLES = {"message": "a normal", "error": "an error", "info": "an info",
             "success": "a success", "warning": "a warning"}

def _worker(log: LoggerState, thread_id: int):
    context = f"Thread {thread_id}"
    for i, name in enumerate(_CYCLE, start=1):
        getattr(log, name)(context, "Message number %d!\n", i)
    # host output serialized with the logger's own
    with log.locked():
        log.paint_text(Color.BLUE)
        log.paint_background(Color.BRIGHT_GREEN)
        print(f"{context}: Message number {len(_CYCLE) + 1}!", flush=True)
        log.reset_colors()

def _basic(log: LoggerState):
    print("Basic message types:")
    for name in _CYCLE:
        getattr(log, name)(None, "This is %s message.\n", _ARTICLES[name])
    print()
    print("Messages with context:")
    for i, name in enumerate(_CYCLE, start=1):
        getattr(log, name)(f"Context {i}", "This is a message with a context.\n")
    print()

def _log_file(log: LoggerState, path: str) -> bool:
    print("Creating a log file:")
    if not log.configure_log_file(path, LogFileMode.WRITE):
        return False
    log.message("Log context 1", "This is a normal message that is being logged.\n")
    log.success("Log context 2", "This is a success message that is being logged.\n")
    log.clean_up()
    print()
    print("Append to an existing log file:")
    if not log.configure_log_file(path, LogFileMode.APPEND):
        return False
    log.success("New context", "Appended successfully.\n")
    print()
    return True

def _threads(log: LoggerState, count: int) -> bool:
    print("Using multiple threads:")
    if not log.enable_thread_safety():
        return False
    workers = [threading.Thread(target=_worker, args=(log, i + 1)) for i in range(count)]
    for t in workers:
        t.start()
    for i, t in enumerate(workers, start=1):
        t.join()
        log.success("Main", "Thread %d finished!\n", i)
    print()
    return True

def _palette(log: LoggerState) -> bool:
    print("Getting the display colors currently used in the logger:")
    msg_colors = log.get_message_colors(MessageCategory.SUCCESS)
    tag_colors = log.get_tag_colors(TagCategory.SUCCESS)
    log.paint_text(msg_colors.text_color)
    log.paint_background(tag_colors.text_color)
    print("Text and background colors copied from the success message and tag text colors!", flush=True)
    log.reset_colors()
    print()
    print("Changing the display colors used in the logger:")
    ok = log.set_tag_colors(TagCategory.CONTEXT, DisplayColors(Color.BRIGHT_GREEN, Color.BRIGHT_WHITE))
    ok &= log.set_message_colors(MessageCategory.INFO, DisplayColors(Color.BRIGHT_WHITE, Color.CYAN))
    ok &= log.set_tag_colors(TagCategory.INFO, DisplayColors(Color.BRIGHT_BLACK, Color.CYAN))
    log.info("My context", "This is an info message with a custom color scheme!\n")
    print()
    print("Resetting the display colors used in the logger:")
    log.reset_palette()
    log.info("Another context", "The logger color scheme has been reset!\n")
    print()
    return bool(ok)

def _time_format(log: LoggerState, path: str, pattern: str) -> bool:
    print("Getting the current time format:")
    print(f"Current time format: {log.get_time_format()}")
    print()
    print("Changing the time format in the log file:")
    if not log.configure_log_file(path, LogFileMode.APPEND):
        return False
    if not log.set_time_format(pattern):
        return False
    log.success("New time format", "Look at the log file time!\n")
    print()
    return True

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="msglogger", description="Message logger sample program")
    parser.add_argument("--log-file", default="logger-test.log", help="Log file used by the sample")
    parser.add_argument("--threads", type=int, default=4, help="Number of worker threads")
    parser.add_argument("--time-format", default="New format: %c", help="Time format set at the end")
    parser.add_argument("--config", default=None, help="Settings JSON applied before the sample runs")
    parser.add_argument("--no-color", action="store_true", help="Print without escape sequences")
    parser.add_argument("--show-palette", action="store_true", help="Print the palette table and exit")
    return parser

def run(argv: Optional[List[str]] = None, state: Optional[LoggerState] = None) -> int:
    args = build_parser().parse_args(argv)
    if state is None:
        from msglogger import logger as state
    ok = True
    try:
        if args.config:
            ok = Settings.load(args.config, state=state).apply(state)
        if args.no_color:
            state.colors_enabled = False
        if args.show_palette:
            show_palette(state)
            return 0 if ok else 1
        _basic(state)
        ok = ok and _log_file(state, args.log_file)
        ok = ok and _threads(state, max(1, args.threads))
        ok = ok and _palette(state)
        ok = ok and _time_format(state, args.log_file, args.time_format)
    finally:
        state.clean_up()
    return 0 if ok else 1
