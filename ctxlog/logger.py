"""Logger facade over a ctxlog handler pipeline.

Provides :class:`Logger` with convenience ``debug``/``info``/``warning``/
``error`` methods. Records are built only when the handler reports the level
as enabled.
"""

import os
import sys
import time
from typing import Any

from opentelemetry._logs import SeverityNumber

from .attrs import to_attrs
from .context import LogContext
from .handler import SinkHandler
from .record import Record, parse_level


def _caller(depth: int) -> str:
    frame = sys._getframe(depth)
    return f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"


class Logger:
    """Emit records into a handler pipeline.

    Example:
        >>> logger = Logger(ContextHandler(OTelSink(otel_logger)), source="MyClass")
        >>> logger.info("Connection established", peer_id="abc123")
        >>>
        >>> req_logger = logger.with_group("req").with_attrs(method="GET")
        >>> with ctxlog.add_to_group("req", status=200):
        ...     req_logger.info("done", path="/x")
    """

    def __init__(
        self,
        handler: SinkHandler,
        source: str | None = None,
        add_caller: bool = False,
    ):
        """Initialize the logger.

        Args:
            handler: First handler of the pipeline.
            source: Optional source identifier used as the record's caller
                marker when ``add_caller`` is off.
            add_caller: Record the ``file:line`` of the logging call instead.
        """
        self._handler = handler
        self._source = source
        self._add_caller = add_caller

    @property
    def handler(self) -> SinkHandler:
        return self._handler

    def debug(self, message: str, *args: Any, ctx: LogContext | None = None, **attrs: Any) -> None:
        self._emit(SeverityNumber.DEBUG, message, args, attrs, ctx)

    def info(self, message: str, *args: Any, ctx: LogContext | None = None, **attrs: Any) -> None:
        self._emit(SeverityNumber.INFO, message, args, attrs, ctx)

    def warning(self, message: str, *args: Any, ctx: LogContext | None = None, **attrs: Any) -> None:
        self._emit(SeverityNumber.WARN, message, args, attrs, ctx)

    def error(self, message: str, *args: Any, ctx: LogContext | None = None, **attrs: Any) -> None:
        self._emit(SeverityNumber.ERROR, message, args, attrs, ctx)

    def log(
        self,
        level: str | int | SeverityNumber,
        message: str,
        *args: Any,
        ctx: LogContext | None = None,
        **attrs: Any,
    ) -> None:
        """Emit a record at ``level``.

        Args:
            level: Level name, number or ``SeverityNumber``.
            message: Log message body.
            *args: ``Attr`` instances, added before ``attrs``.
            ctx: Log context; the current context when omitted.
            **attrs: Additional attributes to include.
        """
        self._emit(parse_level(level), message, args, attrs, ctx)

    def with_attrs(self, *args: Any, **attrs: Any) -> "Logger":
        """Derive a logger whose handler carries the given attributes."""
        return self._derive(self._handler.with_attrs(to_attrs(*args, **attrs)))

    def with_group(self, name: str) -> "Logger":
        """Derive a logger that nests every later attribute under ``name``."""
        return self._derive(self._handler.with_group(name))

    def _derive(self, handler: SinkHandler) -> "Logger":
        return Logger(handler, source=self._source, add_caller=self._add_caller)

    def _emit(
        self,
        level: SeverityNumber,
        message: str,
        args: tuple,
        attrs: dict,
        ctx: LogContext | None,
    ) -> Any:
        if not self._handler.enabled(ctx, level):
            return None
        # _caller -> _emit -> debug/info/... -> call site
        caller = _caller(3) if self._add_caller else self._source
        record = Record(
            message=message,
            level=level,
            time_ns=time.time_ns(),
            caller=caller,
            attrs=to_attrs(*args, **attrs),
        )
        return self._handler.handle(ctx, record)
