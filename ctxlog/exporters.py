"""OTel log-record exporter for console output.

Provides :class:`ConsoleLogRecordExporter`, used by the default logger to
print composed records to stderr, and :func:`format_log_record`.
"""

import sys
from collections.abc import Sequence
from datetime import UTC, datetime

from opentelemetry._logs import LogRecord
from opentelemetry.sdk._logs._internal import ReadableLogRecord
from opentelemetry.sdk._logs.export import (
    LogRecordExporter,
    LogRecordExportResult,
)


def format_log_record(record: LogRecord) -> str:
    """
    Format a LogRecord as a human-readable line.

    Format: YYYY-MM-DDTHH:MM:SSZ [LEVEL] source\\t: body key=value ...\\n
    """
    timestamp_ns = record.timestamp or 0
    timestamp_str = datetime.fromtimestamp(timestamp_ns / 1e9, tz=UTC).strftime(
        "%Y-%m-%dT%H:%M:%SZ"
    )
    attrs = dict(record.attributes or {})
    source = attrs.pop("log.source", "Unknown")
    pairs = "".join(f" {k}={v!r}" for k, v in attrs.items())

    return f"{timestamp_str} [{record.severity_text}] {source}\t: {record.body}{pairs}\n"


class ConsoleLogRecordExporter(LogRecordExporter):
    """OTel LogRecordExporter that writes one line per record to stderr.

    Example output:
        2026-02-03T10:30:00Z [INFO] app.py:12	: request done trace_id='abc' req.status=200
    """

    def export(self, batch: Sequence[ReadableLogRecord]) -> LogRecordExportResult:
        try:
            for readable_record in batch:
                sys.stderr.write(format_log_record(readable_record.log_record))
            sys.stderr.flush()
            return LogRecordExportResult.SUCCESS
        except Exception:
            return LogRecordExportResult.FAILURE

    def shutdown(self) -> None:
        pass

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        sys.stderr.flush()
        return True
