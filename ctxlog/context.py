"""Immutable log context carrying attributes staged for emit time.

A :class:`LogContext` holds two kinds of staged attributes:

* *added* attributes, prepended to every record handled under the context;
* *grouped* attributes, placed inside a named group when a handler's chain
  opens that group, or at the root of the record when it never does.

The context is a pure value: ``add``/``add_to_group`` derive a new context.
The ambient context of the running task or thread is kept in a
:class:`contextvars.ContextVar`; :func:`use_context`, :func:`add` and
:func:`add_to_group` bind a derived context for the duration of a block.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Any

from .attrs import Attr, to_attrs


@dataclass(frozen=True)
class LogContext:
    """Immutable bundle of attributes staged for later log records."""

    added: tuple[Attr, ...] = ()
    grouped: tuple[tuple[str, tuple[Attr, ...]], ...] = ()

    def add(self, *args: Any, **kwargs: Any) -> "LogContext":
        """Derive a context that prepends the given attributes to every record."""
        attrs = to_attrs(*args, **kwargs)
        if not attrs:
            return self
        return replace(self, added=self.added + attrs)

    def add_to_group(self, group: str, *args: Any, **kwargs: Any) -> "LogContext":
        """Derive a context that places the given attributes inside ``group``.

        Staging the same group again appends to its attributes, keeping the
        position of the first staging.
        """
        attrs = to_attrs(*args, **kwargs)
        if not attrs:
            return self
        grouped: list[tuple[str, tuple[Attr, ...]]] = []
        found = False
        for name, existing in self.grouped:
            if name == group:
                existing = existing + attrs
                found = True
            grouped.append((name, existing))
        if not found:
            grouped.append((group, attrs))
        return replace(self, grouped=tuple(grouped))

    def group_attrs(self) -> dict[str, tuple[Attr, ...]]:
        """Staged group attributes keyed by group name, in first-staged order."""
        return dict(self.grouped)


_EMPTY = LogContext()
_CURRENT: ContextVar[LogContext] = ContextVar("ctxlog_context", default=_EMPTY)


def current_context() -> LogContext:
    """Return the log context bound to the running task or thread."""
    return _CURRENT.get()


@contextmanager
def use_context(ctx: LogContext) -> Iterator[LogContext]:
    """Bind ``ctx`` as the current log context for the duration of the block."""
    token = _CURRENT.set(ctx)
    try:
        yield ctx
    finally:
        _CURRENT.reset(token)


@contextmanager
def add(*args: Any, **kwargs: Any) -> Iterator[LogContext]:
    """Stage attributes on the current context for the duration of the block.

    Example:
        >>> with ctxlog.add(trace_id="abc"):
        ...     logger.info("handled")
    """
    with use_context(current_context().add(*args, **kwargs)) as ctx:
        yield ctx


@contextmanager
def add_to_group(group: str, *args: Any, **kwargs: Any) -> Iterator[LogContext]:
    """Stage attributes for ``group`` on the current context for the block."""
    with use_context(current_context().add_to_group(group, *args, **kwargs)) as ctx:
        yield ctx
