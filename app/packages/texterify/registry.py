"""Tool registry for registration, discovery and invocation."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel

from infrastructure.clients.texterify import TexterifyClient
from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger
from packages.texterify.responses import format_error_response
from packages.texterify.schemas import (
    CreateKeyInput,
    CreateKeyWithTranslationsInput,
    DeleteKeysInput,
    GetKeyInput,
    ListKeysInput,
    ListLanguagesInput,
    ListProjectsInput,
    SetTranslationInput,
    ToolAnnotations,
    ToolDescriptor,
    ToolResponse,
    UpdateKeyInput,
)
from packages.texterify.tools import TexterifyTools

logger = get_module_logger()

READ_ONLY = ToolAnnotations(read_only=True, destructive=False, idempotent=True)
WRITE = ToolAnnotations(read_only=False, destructive=False, idempotent=False)
UPSERT = ToolAnnotations(read_only=False, destructive=False, idempotent=True)
DESTRUCTIVE = ToolAnnotations(read_only=False, destructive=True, idempotent=True)


@dataclass
class Tool:
    """Tool definition.

    Attributes:
        name: Tool name (e.g., "list_keys")
        description: Human-readable description for tool discovery
        input_model: Pydantic model validating the tool arguments
        handler: Callable taking a validated ``input_model`` instance
        operation: Label used in error messages (e.g., "listing keys")
        annotations: Behaviour hints
    """

    name: str
    description: str
    input_model: Type[BaseModel]
    handler: Callable[[Any], ToolResponse]
    operation: str
    annotations: ToolAnnotations = field(default_factory=ToolAnnotations)

    def describe(self) -> ToolDescriptor:
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            annotations=self.annotations,
            input_schema=self.input_model.model_json_schema(),
        )

    def run(self, arguments: BaseModel) -> ToolResponse:
        """Run the handler, converting unexpected exceptions to an error response.

        Args:
            arguments: Validated instance of ``input_model``

        Returns:
            ToolResponse from the handler, or ``Error <operation>: ...``
        """
        try:
            return self.handler(arguments)
        except Exception as e:  # pylint: disable=broad-except
            logger.exception("tool_failed", tool=self.name, error=str(e))
            return format_error_response(f"Network error — {e}", self.operation)


class ToolRegistry:
    """Registry for tool registration and discovery.

    Example:
        registry = ToolRegistry()

        @registry.tool(
            name="list_projects",
            operation="listing projects",
            description="List projects",
            input_model=ListProjectsInput,
        )
        def list_projects(args: ListProjectsInput) -> ToolResponse:
            ...
    """

    def __init__(self):
        self._tools: Dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool
        logger.debug("registered tool", name=tool.name)

    def tool(
        self,
        name: str,
        operation: str,
        description: str,
        input_model: Type[BaseModel],
        annotations: Optional[ToolAnnotations] = None,
    ) -> Callable:
        """Decorator to register a tool with handler.

        Returns:
            Decorator function that registers the handler
        """

        def decorator(handler: Callable) -> Callable:
            self.register(
                Tool(
                    name=name,
                    description=description,
                    input_model=input_model,
                    handler=handler,
                    operation=operation,
                    annotations=annotations or ToolAnnotations(),
                )
            )
            return handler

        return decorator

    def get_tool(self, name: str) -> Optional[Tool]:
        return self._tools.get(name)

    def list_tools(self) -> List[Tool]:
        return list(self._tools.values())


def build_tool_registry(client: TexterifyClient, settings: Settings) -> ToolRegistry:
    """Register the Texterify tool set against one client.

    Args:
        client: Shared Texterify API client
        settings: Application settings

    Returns:
        ToolRegistry holding all nine tools
    """
    tools = TexterifyTools(client, settings)
    registry = ToolRegistry()

    registry.register(
        Tool(
            name="list_projects",
            description=(
                "List the Texterify projects available to the configured account. "
                "Returns project ids and names; use them as project_id for the "
                "other tools."
            ),
            input_model=ListProjectsInput,
            handler=tools.list_projects,
            operation="listing projects",
            annotations=READ_ONLY,
        )
    )
    registry.register(
        Tool(
            name="list_languages",
            description=(
                "List the languages configured in a project. Each language has an "
                "id (needed by set_translation) and a language code such as 'en' "
                "in the included records."
            ),
            input_model=ListLanguagesInput,
            handler=tools.list_languages,
            operation="listing languages",
            annotations=READ_ONLY,
        )
    )
    registry.register(
        Tool(
            name="list_keys",
            description=(
                "List or search translation keys in a project, together with their "
                "translations. Use only_untranslated to find keys that still need "
                "work."
            ),
            input_model=ListKeysInput,
            handler=tools.list_keys,
            operation="listing keys",
            annotations=READ_ONLY,
        )
    )
    registry.register(
        Tool(
            name="get_key",
            description="Get one translation key and its translations by key id.",
            input_model=GetKeyInput,
            handler=tools.get_key,
            operation="getting key",
            annotations=READ_ONLY,
        )
    )
    registry.register(
        Tool(
            name="create_key",
            description=(
                "Create a translation key. The key name must be unique in the "
                "project. Use set_translation afterwards, or "
                "create_key_with_translations to do both at once."
            ),
            input_model=CreateKeyInput,
            handler=tools.create_key,
            operation="creating key",
            annotations=WRITE,
        )
    )
    registry.register(
        Tool(
            name="update_key",
            description=(
                "Update a key's name, description or flags. Only the supplied "
                "fields are changed. Translations are not touched."
            ),
            input_model=UpdateKeyInput,
            handler=tools.update_key,
            operation="updating key",
            annotations=DESTRUCTIVE,
        )
    )
    registry.register(
        Tool(
            name="delete_keys",
            description=(
                "Permanently delete one or more keys and all of their translations. "
                "This cannot be undone."
            ),
            input_model=DeleteKeysInput,
            handler=tools.delete_keys,
            operation="deleting keys",
            annotations=DESTRUCTIVE,
        )
    )
    registry.register(
        Tool(
            name="set_translation",
            description=(
                "Create or replace the translation of a key in one language, "
                "addressed by language id. Plural forms apply when pluralization "
                "is enabled on the key."
            ),
            input_model=SetTranslationInput,
            handler=tools.set_translation,
            operation="setting translation",
            annotations=UPSERT,
        )
    )
    registry.register(
        Tool(
            name="create_key_with_translations",
            description=(
                "Create a key and set its translations for several languages in one "
                "call, addressing languages by code ('en', 'de', ...). Unknown codes "
                "are rejected before anything is written, and the key is deleted "
                "again if any translation fails."
            ),
            input_model=CreateKeyWithTranslationsInput,
            handler=tools.create_key_with_translations,
            operation="creating key with translations",
            annotations=WRITE,
        )
    )

    logger.info("tool_registry_built", tools=len(registry.list_tools()))
    return registry
