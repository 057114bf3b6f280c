from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, Optional

from msglogger import logger as default_logger
from msglogger.core.colors import COLOR_DISABLED_ENV, DisplayColors
from msglogger.core.engine import LoggerState
from msglogger.core.palette import MessageCategory, TagCategory
from msglogger.core.sink import DEFAULT_TIME_FORMAT, TIME_FORMAT_MAX_LENGTH

SETTINGS_FILENAME = ".msglogger.json"
SETTINGS_ENV = "MSGLOGGER_SETTINGS"
SETTINGS_CONTEXT = "Settings"

ColorMap = Dict[str, Dict[str, str]]

def _truthy(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}

def _normalize_colors(raw, valid: set) -> ColorMap:
    clean: ColorMap = {}
    if not isinstance(raw, dict):
        return clean
    for name, entry in raw.items():
        key = str(name).lower()
        if key not in valid or not isinstance(entry, dict):
            continue
        try:
            clean[key] = DisplayColors.from_dict(entry).to_dict()
        except ValueError:
            continue
    return clean

@dataclass
class LoggerSettings:
    time_format: str = DEFAULT_TIME_FORMAT
    log_file: Optional[str] = None
    log_mode: str = "write"          # write, append
    thread_safe: bool = False
    colors_enabled: bool = True
    message_colors: ColorMap = field(default_factory=dict)
    tag_colors: ColorMap = field(default_factory=dict)

    def normalize(self):
        if not isinstance(self.time_format, str) or len(self.time_format) > TIME_FORMAT_MAX_LENGTH:
            self.time_format = DEFAULT_TIME_FORMAT
        self.log_mode = str(self.log_mode).strip().lower()
        if self.log_mode not in {"write", "append"}:
            self.log_mode = "write"
        if self.log_file is not None:
            self.log_file = str(self.log_file) or None
        self.thread_safe = bool(self.thread_safe)
        self.colors_enabled = bool(self.colors_enabled)
        self.message_colors = _normalize_colors(self.message_colors, {c.value for c in MessageCategory})
        self.tag_colors = _normalize_colors(self.tag_colors, {c.value for c in TagCategory})

    def apply_env(self, environ=None):
        env = os.environ if environ is None else environ
        if env.get("MSGLOGGER_LOG_FILE"):
            self.log_file = env["MSGLOGGER_LOG_FILE"]
        if env.get("MSGLOGGER_LOG_MODE"):
            self.log_mode = env["MSGLOGGER_LOG_MODE"].strip().lower()
        if env.get("MSGLOGGER_TIME_FORMAT"):
            self.time_format = env["MSGLOGGER_TIME_FORMAT"]
        if env.get("MSGLOGGER_THREAD_SAFE"):
            self.thread_safe = _truthy(env["MSGLOGGER_THREAD_SAFE"])
        if env.get(COLOR_DISABLED_ENV) == "1":
            self.colors_enabled = False

class Settings:
    def __init__(self, data: LoggerSettings, path: Path):
        self.data = data
        self.path = path

    @classmethod
    def _resolve_path(cls) -> Path:
        if os.environ.get(SETTINGS_ENV):
            return Path(os.environ[SETTINGS_ENV])
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None, state: Optional[LoggerState] = None) -> "Settings":
        """Read settings JSON, falling back to defaults; env overrides win."""
        log = state or default_logger
        path = Path(path) if path is not None else cls._resolve_path()
        data = LoggerSettings()
        if path.exists():
            try:
                data = LoggerSettings(**json.loads(path.read_text(encoding="utf-8")))
            except (OSError, ValueError, TypeError) as e:
                log.warning(SETTINGS_CONTEXT, "Failed to parse %s, using defaults (%s)\n", path, e)
                data = LoggerSettings()
        data.apply_env()
        data.normalize()
        return cls(data, path)

    def save(self, state: Optional[LoggerState] = None) -> bool:
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            return True
        except OSError as e:
            (state or default_logger).error(SETTINGS_CONTEXT, "Failed to save %s (%s)\n", self.path, e)
            return False

    def apply(self, state: LoggerState) -> bool:
        """Push these settings into ``state`` through its public setters."""
        ok = True
        state.colors_enabled = self.data.colors_enabled
        ok &= state.set_time_format(self.data.time_format)
        for name, entry in self.data.message_colors.items():
            ok &= state.set_message_colors(name, DisplayColors.from_dict(entry))
        for name, entry in self.data.tag_colors.items():
            ok &= state.set_tag_colors(name, DisplayColors.from_dict(entry))
        if self.data.thread_safe:
            ok &= state.enable_thread_safety()
        if self.data.log_file:
            ok &= state.configure_log_file(self.data.log_file, self.data.log_mode)
        return bool(ok)
