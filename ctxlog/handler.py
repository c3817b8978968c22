"""Handler middleware that composes context and scoped attributes.

:class:`ContextHandler` sits between a :class:`~ctxlog.logger.Logger` and a
terminal sink. At emit time it extracts attributes from the
:class:`~ctxlog.context.LogContext`, merges them with the attributes bound
through ``with_attrs``/``with_group`` and the record's own attributes, and
forwards a rebuilt record to the next handler.

Handlers derived with ``with_attrs``/``with_group`` share their ancestor's
chain and never modify it, so they can be used from many threads or tasks
without locking.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Protocol, runtime_checkable

from opentelemetry._logs import SeverityNumber

from .attrs import Attr
from .chain import GroupOrAttrs, with_attrs, with_group
from .compose import compose
from .context import LogContext, current_context
from .extractors import DEFAULT_EXTRACTORS, AttrExtractor, extract_added_to_group
from .record import Record


@runtime_checkable
class SinkHandler(Protocol):
    """Capability shared by every handler in a pipeline."""

    def enabled(self, ctx: LogContext | None, level: SeverityNumber) -> bool: ...

    def handle(self, ctx: LogContext | None, record: Record) -> Any: ...

    def with_attrs(self, attrs: Sequence[Attr]) -> "SinkHandler": ...

    def with_group(self, name: str) -> "SinkHandler": ...


Middleware = Callable[[SinkHandler], SinkHandler]


@dataclass(frozen=True)
class ContextHandler:
    """Middleware handler that prepends and nests context attributes.

    Args:
        next: The handler receiving the rebuilt record.
        extractors: Top-level extractors, applied in this order. Defaults to
            :data:`~ctxlog.extractors.DEFAULT_EXTRACTORS`.
    """

    next: SinkHandler
    extractors: tuple[AttrExtractor, ...] = DEFAULT_EXTRACTORS
    chain: GroupOrAttrs | None = field(default=None, repr=False)

    def enabled(self, ctx: LogContext | None, level: SeverityNumber) -> bool:
        """Report whether the next handler handles records at ``level``."""
        return self.next.enabled(ctx, level)

    def handle(self, ctx: LogContext | None, record: Record) -> Any:
        """Compose the record's final attributes and pass it to the next handler.

        ``ctx`` defaults to the current context. Whatever the next handler
        returns or raises reaches the caller unchanged.
        """
        if ctx is None:
            ctx = current_context()
        args = (ctx, record.time_ns, record.level, record.message)

        attrs = compose(
            self.chain,
            extract_added_to_group(*args),
            [extractor(*args) for extractor in self.extractors],
            record.attrs,
        )
        return self.next.handle(ctx, record.with_attrs(attrs))

    def with_attrs(self, attrs: Sequence[Attr]) -> "ContextHandler":
        """Return a handler whose attributes are this handler's followed by ``attrs``."""
        return replace(self, chain=with_attrs(self.chain, attrs))

    def with_group(self, name: str) -> "ContextHandler":
        """Return a handler that nests every attribute added later under ``name``."""
        return replace(self, chain=with_group(self.chain, name))


def new_middleware(
    extractors: Sequence[AttrExtractor] | None = None,
) -> Callable[[SinkHandler], ContextHandler]:
    """Return a middleware factory wrapping a handler in a :class:`ContextHandler`."""
    chosen = DEFAULT_EXTRACTORS if extractors is None else tuple(extractors)

    def _middleware(next: SinkHandler) -> ContextHandler:
        return ContextHandler(next, extractors=chosen)

    return _middleware


def pipe(sink: SinkHandler, *middlewares: Middleware) -> SinkHandler:
    """Wrap ``sink`` in ``middlewares``; the first one listed is outermost.

    Example:
        >>> handler = pipe(OTelSink(otel_logger), new_middleware())
    """
    handler = sink
    for middleware in reversed(middlewares):
        handler = middleware(handler)
    return handler
