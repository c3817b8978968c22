"""Core error types for :mod:`ctxlog`."""


class CtxLogException(Exception):
    """Base class for all ctxlog exceptions."""

    def __init__(self, message: str, source: str = "Unknown", note: str = ""):
        super().__init__(message)
        self.message = message
        self.source = source
        self.note = note

    def __str__(self):
        return f"<{self.source}> {self.note}: {self.message}"


class LevelError(CtxLogException, ValueError):
    """Raised when a log level name or number cannot be resolved."""

    def __init__(self, level: object):
        super().__init__(f"unknown log level {level!r}", source="ctxlog.record", note="parse_level")
        self.level = level
