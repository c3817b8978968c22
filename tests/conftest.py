"""Shared test fixtures for ctxlog tests."""

from unittest.mock import MagicMock

import pytest
from reactivex.subject import Subject

from ctxlog import ContextHandler, ObserverSink


class Collector:
    def __init__(self):
        self.items = []

    def on_next(self, value):
        self.items.append(value)

    def on_error(self, error):
        raise error

    def on_completed(self):
        pass


@pytest.fixture
def collector():
    """Observer that keeps every record it receives."""
    return Collector()


@pytest.fixture
def records():
    """Subject fed by an ObserverSink, paired with the list it collects into.

    Returns (subject, collected) tuple.
    """
    subject = Subject()
    collected = []
    subject.subscribe(collected.append)
    return subject, collected


@pytest.fixture
def handler(collector):
    """ContextHandler in front of an ObserverSink feeding ``collector``."""
    return ContextHandler(ObserverSink(collector))


@pytest.fixture
def mock_sink():
    """MagicMock standing in for the next handler.

    ``enabled`` returns True and ``handle`` returns a sentinel string.
    """
    sink = MagicMock()
    sink.enabled.return_value = True
    sink.handle.return_value = "handled"
    return sink
