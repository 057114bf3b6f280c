from __future__ import annotations

class MsgLoggerError(Exception):
    """Base for logger configuration errors."""

class InvalidArgumentError(MsgLoggerError, ValueError):
    def __init__(self, argument: str, detail: str):
        super().__init__(f"Invalid '{argument}': {detail}")
        self.argument = argument
        self.detail = detail

class LogFileError(MsgLoggerError, OSError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed opening log file '{path}': {detail}")
        self.path = path
        self.detail = detail

class ResourceError(MsgLoggerError, RuntimeError):
    pass
