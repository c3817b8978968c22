"""Tests for attributes, records and levels."""

import dataclasses

import pytest
from opentelemetry._logs import SeverityNumber

from ctxlog import (
    Attr,
    CtxLogException,
    LevelError,
    Record,
    attrs_to_dict,
    flatten_attrs,
    group,
    level_name,
    parse_level,
    to_attrs,
)

# =============================================================================
# Attributes
# =============================================================================


def test_to_attrs_keeps_order():
    """Positional attributes come first, then keywords in call order."""
    attrs = to_attrs(Attr("a", 1), z=2, b=3)

    assert attrs == (Attr("a", 1), Attr("z", 2), Attr("b", 3))


def test_to_attrs_rejects_non_attrs():
    with pytest.raises(TypeError):
        to_attrs("key", "value")


def test_group_value():
    g = group("req", Attr("a", 1), b=2)

    assert g.is_group
    assert g.value == (Attr("a", 1), Attr("b", 2))
    assert not Attr("a", (1, 2)).is_group


def test_attrs_to_dict_nests_groups():
    attrs = (Attr("a", 1), group("req", status=200, inner=group("x", y=1).value))

    assert attrs_to_dict(attrs) == {"a": 1, "req": {"status": 200, "inner": {"y": 1}}}


def test_flatten_attrs():
    attrs = (group("req", Attr("status", 200), group("db", table="t")), Attr("a", 1))

    assert flatten_attrs(attrs) == {"req.status": 200, "req.db.table": "t", "a": 1}


# =============================================================================
# Records and levels
# =============================================================================


def test_record_with_attrs_copies():
    record = Record("m", attrs=to_attrs(a=1))
    copy = record.with_attrs(to_attrs(b=2))

    assert record.attrs == to_attrs(a=1)
    assert copy.attrs == to_attrs(b=2)
    assert copy.time_ns == record.time_ns


def test_record_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Record("m").message = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("debug", SeverityNumber.DEBUG),
        ("WARNING", SeverityNumber.WARN),
        ("critical", SeverityNumber.FATAL),
        (17, SeverityNumber.ERROR),
        (SeverityNumber.INFO, SeverityNumber.INFO),
    ],
)
def test_parse_level(value, expected):
    assert parse_level(value) is expected


@pytest.mark.parametrize("value", ["LOUD", 999])
def test_parse_level_rejects_unknown(value):
    with pytest.raises(LevelError) as exc_info:
        parse_level(value)

    assert isinstance(exc_info.value, CtxLogException)
    assert isinstance(exc_info.value, ValueError)
    assert "unknown log level" in str(exc_info.value)


def test_level_name():
    assert level_name(SeverityNumber.WARN) == "WARN"
    assert level_name(SeverityNumber.TRACE) == "TRACE"
