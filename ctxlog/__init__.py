"""Convenience exports for the :mod:`ctxlog` package."""

from .attrs import Attr, attrs_to_dict, flatten_attrs, group, to_attrs  # noqa: F401
from .chain import GroupOrAttrs, iter_chain, with_attrs, with_group  # noqa: F401
from .compose import compose  # noqa: F401
from .config import configure_logging, get_default_logger, new_logger  # noqa: F401
from .context import LogContext, add, add_to_group, current_context, use_context  # noqa: F401
from .exporters import ConsoleLogRecordExporter, format_log_record  # noqa: F401
from .extractors import (  # noqa: F401
    DEFAULT_EXTRACTORS,
    AttrExtractor,
    extract_added,
    extract_added_to_group,
)
from .handler import ContextHandler, SinkHandler, new_middleware, pipe  # noqa: F401
from .logger import Logger  # noqa: F401
from .mechanism import CtxLogException, LevelError  # noqa: F401
from .record import LEVELS, LOG_LEVEL, Record, level_name, parse_level  # noqa: F401
from .sinks import ObserverSink, OTelSink  # noqa: F401

__all__ = [
    "CtxLogException",
    "LevelError",

    # attributes
    "Attr",
    "group",
    "to_attrs",
    "attrs_to_dict",
    "flatten_attrs",

    # records
    "Record",
    "LOG_LEVEL",
    "LEVELS",
    "parse_level",
    "level_name",

    # chain
    "GroupOrAttrs",
    "with_attrs",
    "with_group",
    "iter_chain",

    # context
    "LogContext",
    "current_context",
    "use_context",
    "add",
    "add_to_group",

    # extractors
    "AttrExtractor",
    "DEFAULT_EXTRACTORS",
    "extract_added",
    "extract_added_to_group",

    # composition and handlers
    "compose",
    "SinkHandler",
    "ContextHandler",
    "new_middleware",
    "pipe",

    # sinks
    "OTelSink",
    "ObserverSink",

    # logger
    "Logger",

    # exporters
    "ConsoleLogRecordExporter",
    "format_log_record",

    # config
    "configure_logging",
    "new_logger",
    "get_default_logger",
]
