"""OTel provider configuration and pipeline wiring for ctxlog.

Provides :func:`configure_logging` (logger provider), :func:`new_logger`
(``Logger -> ContextHandler -> OTelSink``) and :func:`get_default_logger`
(lazy singleton with console output).
"""

from collections.abc import Sequence

from opentelemetry._logs import SeverityNumber
from opentelemetry.sdk._logs import LoggerProvider
from opentelemetry.sdk._logs.export import (
    BatchLogRecordProcessor,
    LogRecordExporter,
    SimpleLogRecordProcessor,
)
from opentelemetry.sdk.resources import Resource

from .exporters import ConsoleLogRecordExporter
from .extractors import AttrExtractor
from .handler import new_middleware, pipe
from .logger import Logger
from .sinks import OTelSink


def configure_logging(
    service_name: str = "ctxlog",
    service_version: str = "",
    log_exporter: LogRecordExporter | None = None,
    batch_logs: bool = True,
) -> LoggerProvider:
    """
    Configure an OTel LoggerProvider for ctxlog pipelines.

    Returns the provider for explicit injection -- does NOT set the global
    provider.

    Args:
        service_name: Service identifier for resource attributes.
        service_version: Service version for resource attributes.
        log_exporter: Optional log exporter
            (e.g., OTLPLogExporter, ConsoleLogRecordExporter).
        batch_logs: If True, use BatchLogRecordProcessor
            (better for network exporters). If False, use
            SimpleLogRecordProcessor (immediate, better for console).

    Returns:
        The configured LoggerProvider.
    """
    resource = Resource.create(
        {
            "service.name": service_name,
            "service.version": service_version,
        }
    )

    logger_provider = LoggerProvider(resource=resource)
    if log_exporter:
        if batch_logs:
            logger_provider.add_log_record_processor(
                BatchLogRecordProcessor(log_exporter)
            )
        else:
            logger_provider.add_log_record_processor(
                SimpleLogRecordProcessor(log_exporter)
            )

    return logger_provider


def new_logger(
    logger_provider: LoggerProvider,
    name: str,
    *,
    min_level: str | int | SeverityNumber | None = None,
    extractors: Sequence[AttrExtractor] | None = None,
    add_caller: bool = False,
) -> Logger:
    """Build a :class:`Logger` whose records pass through a context handler
    into an OTel logger named ``name``.

    Example:
        >>> provider = configure_logging("my-app", log_exporter=exporter)
        >>> logger = new_logger(provider, "my-app.http", min_level="INFO")
    """
    sink = OTelSink(logger_provider.get_logger(name), min_level=min_level)
    handler = pipe(sink, new_middleware(extractors))
    return Logger(handler, source=name, add_caller=add_caller)


# =============================================================================
# Default Logger
# =============================================================================


_default_logger_provider: LoggerProvider | None = None
_default_logger: Logger | None = None


def get_default_logger(name: str = "ctxlog") -> Logger:
    """Get or create the default logger with console output.

    Lazily initializes a provider with a ``ConsoleLogRecordExporter`` and
    immediate (non-batched) processing on first call. Returns the same
    logger on subsequent calls.

    Args:
        name: Logger and service name (only used on first call).
    """
    global _default_logger_provider, _default_logger

    if _default_logger is None:
        _default_logger_provider = configure_logging(
            service_name=name,
            log_exporter=ConsoleLogRecordExporter(),
            batch_logs=False,
        )
        _default_logger = new_logger(_default_logger_provider, name)

    return _default_logger
