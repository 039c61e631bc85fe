"""FastAPI routes for the Texterify tools."""

from typing import Any, Dict, List, Optional

import structlog
from fastapi import APIRouter, Body, HTTPException, Request
from pydantic import ValidationError

from api.dependencies.rate_limits import TOOL_RATE_LIMIT, get_limiter
from infrastructure.logging import bind_request_context, get_correlation_id
from packages.texterify.registry import ToolRegistry
from packages.texterify.schemas import ToolDescriptor, ToolResponse

logger = structlog.get_logger()
router = APIRouter(prefix="/tools", tags=["tools"])
limiter = get_limiter()


def _registry(request: Request) -> ToolRegistry:
    return request.app.state.tool_registry


@router.get(
    "",
    response_model=List[ToolDescriptor],
    summary="List Tools",
    description="Describe every registered tool with its JSON input schema",
)
def list_tools(request: Request) -> List[ToolDescriptor]:
    return [tool.describe() for tool in _registry(request).list_tools()]


@router.post(
    "/{name}",
    response_model=ToolResponse,
    summary="Invoke Tool",
    description="Validate the arguments against the tool's input model and run it",
)
@limiter.limit(TOOL_RATE_LIMIT)
def invoke_tool(
    name: str,
    request: Request,
    arguments: Optional[Dict[str, Any]] = Body(None),
) -> ToolResponse:
    """Invoke a tool by name.

    Tool-level failures are returned as a ToolResponse with ``is_error`` set
    and HTTP 200.

    Raises:
        HTTPException: 404 for an unknown tool, 422 for invalid arguments
    """
    tool = _registry(request).get_tool(name)
    if tool is None:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {name}")

    with bind_request_context(correlation_id=get_correlation_id(), tool=name):
        log = logger.bind(endpoint="/tools/{name}")
        try:
            args = tool.input_model.model_validate(arguments or {})
        except ValidationError as e:
            log.warning("tool_arguments_invalid", errors=e.error_count())
            raise HTTPException(
                status_code=422,
                detail=e.errors(include_url=False, include_context=False),
            ) from e

        log.info("tool_invoked")
        response = tool.run(args)
        if response.is_error:
            log.warning("tool_returned_error", text=response.text)
        else:
            log.info("tool_succeeded")
        return response
