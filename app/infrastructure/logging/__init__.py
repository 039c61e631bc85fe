"""structlog setup and request-scoped logging context.

configure_logging() runs once in the server lifespan. Modules create their
logger at import time with get_module_logger() or structlog.get_logger().
Every request runs inside bind_request_context(), so each line carries the
request's correlation_id and, for tool calls, the tool name.
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_request_context,
    get_correlation_id,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
]
