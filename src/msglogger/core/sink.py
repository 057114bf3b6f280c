from __future__ import annotations
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import IO, Optional, Tuple

from .errors import LogFileError

DEFAULT_TIME_FORMAT = "%H:%M:%S %d-%m-%Y"
TIME_FORMAT_MAX_LENGTH = 50

class LogFileMode(Enum):
    WRITE = "write"    # truncate any existing file
    APPEND = "append"  # falls back to WRITE when the file does not exist

    @classmethod
    def parse(cls, value) -> "LogFileMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            aliases = {"w": cls.WRITE, "a": cls.APPEND}
            if key in aliases:
                return aliases[key]
            return cls(key)
        raise ValueError(f"Unknown log file mode: {value!r}")


def format_timestamp(pattern: str, when: Optional[datetime] = None) -> str:
    """Render ``pattern`` (strftime syntax) against local time."""
    return (when or datetime.now()).strftime(pattern)


class LogSink:
    """An open log file plus the mode it was opened with."""

    def __init__(self, path: Path, mode: LogFileMode, handle: IO[str]):
        self.path = path
        self.mode = mode
        self._handle: Optional[IO[str]] = handle

    @classmethod
    def open(cls, path, mode: LogFileMode) -> Tuple["LogSink", bool]:
        """Open ``path``; returns the sink and whether APPEND fell back to WRITE.

        Raises LogFileError when the final open attempt fails.
        """
        p = Path(path)
        fell_back = False
        # devices and pipes exist without being regular files; append to them as-is
        if mode is LogFileMode.APPEND and not p.exists():
            fell_back = True
        file_mode = "a" if mode is LogFileMode.APPEND and not fell_back else "w"
        try:
            handle = p.open(file_mode, encoding="utf-8")
        except OSError as e:
            raise LogFileError(str(p), e.strerror or str(e)) from e
        return cls(p, mode, handle), fell_back

    @property
    def closed(self) -> bool:
        return self._handle is None

    def write_entry(self, timestamp: str, context: Optional[str], tag: Optional[str], body: str):
        if self._handle is None:
            return
        parts = [f"[{timestamp}] "]
        if context:
            parts.append(f"{context}: ")
        if tag:
            parts.append(f"{tag} ")
        parts.append(body)
        self._handle.write("".join(parts))
        self._handle.flush()

    def close(self):
        if self._handle is not None:
            try:
                self._handle.close()
            finally:
                self._handle = None

    def discard(self):
        """Close after a failed write; whatever is still buffered is dropped."""
        handle, self._handle = self._handle, None
        if handle is None:
            return
        try:
            handle.close()
        except OSError:
            # close retries the flush that just failed
            pass
