"""Tests for the terminal sinks.

- OTelSink emitting OTel LogRecords with flattened attributes
- ObserverSink pushing records into reactivex observers
- Scope handling and level checks shared by both
"""

from unittest.mock import MagicMock

import pytest
from opentelemetry._logs import SeverityNumber
from reactivex import operators as ops
from reactivex.subject import Subject

from ctxlog import (
    ContextHandler,
    LevelError,
    LogContext,
    ObserverSink,
    OTelSink,
    Record,
    group,
    to_attrs,
)


class TestOTelSink:
    """Tests for OTelSink."""

    def test_emits_log_record(self):
        """Body, timestamp and severity are copied onto the OTel record."""
        mock_logger = MagicMock()
        sink = OTelSink(mock_logger)

        sink.handle(None, Record("hello", level=SeverityNumber.WARN, time_ns=42))

        record = mock_logger.emit.call_args[0][0]
        assert record.body == "hello"
        assert record.timestamp == 42
        assert record.severity_number == SeverityNumber.WARN
        assert record.severity_text == "WARN"

    def test_groups_are_flattened(self):
        """Nested groups become dotted attribute keys."""
        mock_logger = MagicMock()
        sink = OTelSink(mock_logger)

        sink.handle(None, Record("m", attrs=(group("req", status=200), *to_attrs(a=1))))

        record = mock_logger.emit.call_args[0][0]
        assert dict(record.attributes) == {"req.status": 200, "a": 1}

    def test_caller_reported_as_source(self):
        mock_logger = MagicMock()

        OTelSink(mock_logger).handle(None, Record("m", caller="app.py:3"))

        record = mock_logger.emit.call_args[0][0]
        assert record.attributes["log.source"] == "app.py:3"

    def test_own_scopes_applied(self):
        """with_group/with_attrs on the sink itself nest the record attributes."""
        mock_logger = MagicMock()
        sink = OTelSink(mock_logger).with_attrs(to_attrs(svc="api")).with_group("req")

        sink.handle(None, Record("m", attrs=to_attrs(path="/x")))

        record = mock_logger.emit.call_args[0][0]
        assert dict(record.attributes) == {"svc": "api", "req.path": "/x"}

    def test_enabled_without_minimum(self):
        assert OTelSink(MagicMock()).enabled(None, SeverityNumber.DEBUG)

    def test_enabled_respects_minimum(self):
        sink = OTelSink(MagicMock(), min_level="INFO")

        assert not sink.enabled(None, SeverityNumber.DEBUG)
        assert sink.enabled(None, SeverityNumber.INFO)
        assert sink.enabled(None, SeverityNumber.ERROR)

    def test_unknown_minimum_rejected(self):
        with pytest.raises(LevelError):
            OTelSink(MagicMock(), min_level="LOUD")

    def test_emit_errors_propagate(self):
        """Errors raised by the OTel logger reach the caller through the handler."""
        mock_logger = MagicMock()
        mock_logger.emit.side_effect = OSError("disk full")
        handler = ContextHandler(OTelSink(mock_logger))

        with pytest.raises(OSError, match="disk full"):
            handler.handle(LogContext(), Record("m"))


class TestObserverSink:
    """Tests for ObserverSink."""

    def test_pushes_to_observer(self, collector):
        ObserverSink(collector).handle(None, Record("m", attrs=to_attrs(a=1)))

        assert len(collector.items) == 1
        assert collector.items[0].attrs == to_attrs(a=1)

    def test_pushes_to_callable(self):
        received = []

        ObserverSink(received.append).handle(None, Record("m"))

        assert [r.message for r in received] == ["m"]

    def test_subject_pipeline(self, records):
        """Records flow through reactivex operators like any other stream."""
        subject, _ = records
        warnings = []
        subject.pipe(
            ops.filter(lambda r: r.level.value >= SeverityNumber.WARN.value),
            ops.map(lambda r: r.message),
        ).subscribe(warnings.append)
        handler = ContextHandler(ObserverSink(subject))

        handler.handle(LogContext(), Record("quiet", level=SeverityNumber.INFO))
        handler.handle(LogContext(), Record("loud", level=SeverityNumber.ERROR))

        assert warnings == ["loud"]

    def test_derived_sinks_are_independent(self, records):
        subject, collected = records
        base = ObserverSink(subject)
        grouped = base.with_group("g")

        base.handle(None, Record("a", attrs=to_attrs(x=1)))
        grouped.handle(None, Record("b", attrs=to_attrs(x=1)))

        assert collected[0].attrs == to_attrs(x=1)
        assert collected[1].attrs == (group("g", x=1),)

    def test_level_filter(self):
        sink = ObserverSink(Subject(), min_level=SeverityNumber.ERROR)

        assert not sink.enabled(None, SeverityNumber.WARN)
        assert sink.enabled(None, SeverityNumber.FATAL)
