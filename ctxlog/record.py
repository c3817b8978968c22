"""Log records and severity levels.

Levels are OpenTelemetry :class:`SeverityNumber` values so records can be
handed to an OTel logger without translation.
"""

import time
from dataclasses import dataclass, field, replace
from typing import Literal

from opentelemetry._logs import SeverityNumber

from .attrs import Attr
from .mechanism import LevelError

LOG_LEVEL = Literal["DEBUG", "INFO", "WARN", "WARNING", "ERROR", "FATAL", "CRITICAL"]

LEVELS: dict[str, SeverityNumber] = {
    "DEBUG": SeverityNumber.DEBUG,
    "INFO": SeverityNumber.INFO,
    "WARN": SeverityNumber.WARN,
    "WARNING": SeverityNumber.WARN,
    "ERROR": SeverityNumber.ERROR,
    "FATAL": SeverityNumber.FATAL,
    "CRITICAL": SeverityNumber.FATAL,
}

_LEVEL_TEXT: dict[SeverityNumber, str] = {
    SeverityNumber.DEBUG: "DEBUG",
    SeverityNumber.INFO: "INFO",
    SeverityNumber.WARN: "WARN",
    SeverityNumber.ERROR: "ERROR",
    SeverityNumber.FATAL: "FATAL",
}


def parse_level(level: str | int | SeverityNumber) -> SeverityNumber:
    """Resolve a level name, number or ``SeverityNumber``.

    Raises:
        LevelError: if the value does not name a known severity.
    """
    if isinstance(level, SeverityNumber):
        return level
    if isinstance(level, str):
        try:
            return LEVELS[level.upper()]
        except KeyError:
            raise LevelError(level) from None
    try:
        return SeverityNumber(level)
    except ValueError:
        raise LevelError(level) from None


def level_name(level: SeverityNumber) -> str:
    """Canonical severity text, e.g. ``"WARN"``. Falls back to the enum name."""
    return _LEVEL_TEXT.get(level, level.name)


@dataclass(frozen=True)
class Record:
    """An emitted log event.

    ``attrs`` holds the attributes added at the call site, oldest first.
    ``caller`` is an optional ``"file:line"`` marker of the call site.
    """

    message: str
    level: SeverityNumber = SeverityNumber.INFO
    time_ns: int = field(default_factory=time.time_ns)
    caller: str | None = None
    attrs: tuple[Attr, ...] = ()

    def with_attrs(self, attrs: tuple[Attr, ...]) -> "Record":
        """Copy of this record carrying ``attrs`` instead of its own."""
        return replace(self, attrs=tuple(attrs))
