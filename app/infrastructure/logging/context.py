"""Request-scoped logging context.

Usage:
    from infrastructure.logging import bind_request_context

    with bind_request_context(correlation_id="req-123", tool="list_keys"):
        logger.info("tool_invoked")
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    tool: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind fields to every log line written inside the block.

    Arguments left as ``None`` are not bound, except ``correlation_id``,
    which gets a fresh UUID. On exit the previous values of the bound keys
    come back, so a tool context nested inside the HTTP middleware's
    context keeps the request path.

    Args:
        correlation_id: Request identifier, usually the X-Correlation-ID header
        tool: Name of the tool being invoked
        request_path: HTTP path, e.g. "/tools/list_keys"
        request_method: HTTP method
        **extra_context: Any further fields, e.g. project_id
    """
    optional = {
        "tool": tool,
        "request_path": request_path,
        "request_method": request_method,
    }
    context = {key: value for key, value in optional.items() if value is not None}
    context.update(extra_context)

    with structlog.contextvars.bound_contextvars(
        correlation_id=correlation_id or str(uuid.uuid4()), **context
    ):
        yield


def get_correlation_id() -> Optional[str]:
    """Return the correlation ID bound for the current request, if any."""
    return structlog.contextvars.get_contextvars().get("correlation_id")
