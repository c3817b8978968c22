"""Request-scoped logging with ctxlog.

A process-wide logger carries the service name; each request derives a
logger with its own ``req`` group, and middleware-style code stages
attributes on the context that land inside that group.
"""

from concurrent.futures import ThreadPoolExecutor

import ctxlog
from ctxlog import ConsoleLogRecordExporter, configure_logging, new_logger

provider = configure_logging(
    service_name="example",
    log_exporter=ConsoleLogRecordExporter(),
    batch_logs=False,
)
logger = new_logger(provider, "example.http", min_level="INFO").with_attrs(service="api")


def handle_request(i: int) -> None:
    req_logger = logger.with_group("req").with_attrs(method="GET")
    with ctxlog.add(trace_id=f"trace-{i:04d}"), ctxlog.add_to_group("req", status=200):
        req_logger.info("request done", path=f"/items/{i}")
        req_logger.debug("not shown")


if __name__ == "__main__":
    with ThreadPoolExecutor(max_workers=4) as pool:
        list(pool.map(handle_request, range(8)))
    provider.shutdown()
