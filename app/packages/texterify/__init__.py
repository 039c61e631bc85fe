"""Texterify package - translation management tools over the Texterify API."""

from packages.texterify.registry import Tool, ToolRegistry, build_tool_registry
from packages.texterify.routes import router as tools_router
from packages.texterify.schemas import ToolResponse

__all__ = [
    "tools_router",
    "build_tool_registry",
    "Tool",
    "ToolRegistry",
    "ToolResponse",
]
