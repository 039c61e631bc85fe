from fastapi import FastAPI, Request

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.logging import bind_request_context, get_correlation_id
from server.lifespan import lifespan

CORRELATION_HEADER = "X-Correlation-ID"

handler = FastAPI(title="Texterify Tools", lifespan=lifespan)
setup_rate_limiter(handler)


@handler.middleware("http")
async def correlation_middleware(request: Request, call_next):
    """Bind a correlation ID to every log line of the request and echo it back."""
    with bind_request_context(
        correlation_id=request.headers.get(CORRELATION_HEADER),
        request_path=request.url.path,
        request_method=request.method,
    ):
        correlation_id = get_correlation_id()
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


handler.include_router(api_router)
