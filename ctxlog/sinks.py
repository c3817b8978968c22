"""Terminal handlers at the end of a ctxlog pipeline.

Provides :class:`OTelSink`, which emits records through an OpenTelemetry
``Logger``, and :class:`ObserverSink`, which pushes records into a
reactivex observer so they can be filtered and redirected as a stream.

Both apply their own ``with_attrs``/``with_group`` scopes with the same
composition as :class:`~ctxlog.handler.ContextHandler`, without extractors.
"""

import copy
from collections.abc import Callable, Sequence
from typing import Any

import reactivex as rx
from opentelemetry._logs import Logger, SeverityNumber
from opentelemetry._logs import LogRecord as OTelLogRecord

from .attrs import Attr, flatten_attrs
from .chain import GroupOrAttrs, with_attrs, with_group
from .compose import compose
from .context import LogContext
from .record import Record, level_name, parse_level


class _TerminalSink:
    """Shared level check and scope handling for terminal sinks."""

    def __init__(self, min_level: str | int | SeverityNumber | None = None):
        self._min_level = None if min_level is None else parse_level(min_level)
        self._chain: GroupOrAttrs | None = None

    def enabled(self, ctx: LogContext | None, level: SeverityNumber) -> bool:
        if self._min_level is None:
            return True
        return level.value >= self._min_level.value

    def with_attrs(self, attrs: Sequence[Attr]):
        sink = copy.copy(self)
        sink._chain = with_attrs(self._chain, attrs)
        return sink

    def with_group(self, name: str):
        sink = copy.copy(self)
        sink._chain = with_group(self._chain, name)
        return sink

    def _final_attrs(self, record: Record) -> tuple[Attr, ...]:
        return compose(self._chain, {}, (), record.attrs)


class OTelSink(_TerminalSink):
    """Emit records through an OpenTelemetry ``Logger``.

    Group attributes are flattened to dotted keys (``req.status``) and the
    record's caller marker, if any, is reported as ``log.source``.

    Example:
        >>> provider = configure_logging("my-app", log_exporter=ConsoleLogRecordExporter())
        >>> sink = OTelSink(provider.get_logger("my-app"), min_level="INFO")
    """

    def __init__(
        self,
        logger: Logger,
        min_level: str | int | SeverityNumber | None = None,
    ):
        super().__init__(min_level)
        self._logger = logger

    def handle(self, ctx: LogContext | None, record: Record) -> None:
        attributes = flatten_attrs(self._final_attrs(record))
        if record.caller:
            attributes.setdefault("log.source", record.caller)
        otel_record = OTelLogRecord(
            timestamp=record.time_ns,
            body=record.message,
            severity_text=level_name(record.level),
            severity_number=record.level,
            attributes=attributes,
        )
        self._logger.emit(otel_record)


class ObserverSink(_TerminalSink):
    """Push composed records into a reactivex observer or a plain callable.

    Example:
        >>> records = Subject()
        >>> records.pipe(ops.filter(lambda r: r.level.value >= SeverityNumber.WARN.value)).subscribe(print)
        >>> logger = Logger(ContextHandler(ObserverSink(records)))
    """

    def __init__(
        self,
        observer: rx.abc.ObserverBase | Callable[[Record], Any],
        min_level: str | int | SeverityNumber | None = None,
    ):
        super().__init__(min_level)
        self._observer = observer

    def handle(self, ctx: LogContext | None, record: Record) -> None:
        final = record.with_attrs(self._final_attrs(record))
        if hasattr(self._observer, "on_next"):
            self._observer.on_next(final)
        else:
            self._observer(final)  # type: ignore
