"""Functions that pull attributes out of a :class:`LogContext` at emit time."""

from collections.abc import Callable, Sequence

from opentelemetry._logs import SeverityNumber

from .attrs import Attr
from .context import LogContext

AttrExtractor = Callable[[LogContext, int, SeverityNumber, str], Sequence[Attr]]


def extract_added(
    ctx: LogContext, time_ns: int, level: SeverityNumber, message: str
) -> tuple[Attr, ...]:
    """Attributes staged with :meth:`LogContext.add`."""
    return ctx.added


def extract_added_to_group(
    ctx: LogContext, time_ns: int, level: SeverityNumber, message: str
) -> dict[str, tuple[Attr, ...]]:
    """Attributes staged with :meth:`LogContext.add_to_group`, keyed by group."""
    return ctx.group_attrs()


DEFAULT_EXTRACTORS: tuple[AttrExtractor, ...] = (extract_added,)
