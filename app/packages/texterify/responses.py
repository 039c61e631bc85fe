"""Tool response formatting and shared request builders.

Every tool returns a ToolResponse. Success text is the pretty-printed JSON
payload; error text is ``Error <operation>: <message>``, except for
validation errors embedded in a 2xx body, whose message already names the
failing call.
"""

import json
from typing import Any, Dict, Optional

from infrastructure.configuration import Settings
from infrastructure.operations import OperationResult
from packages.texterify.schemas import (
    PLURAL_FORMS,
    KeyAttributesInput,
    PluralFormsInput,
    TextContent,
    ToolResponse,
)

EMBEDDED_VALIDATION_ERROR = "EMBEDDED_VALIDATION_ERROR"
MISSING_PROJECT_ID = "MISSING_PROJECT_ID"

PROJECT_ID_REQUIRED_MESSAGE = (
    "project_id is required — provide it as a parameter or set "
    "TEXTERIFY_PROJECT_ID. You can find this value in the project's "
    "texterify.json file."
)


def format_success_response(data: Any) -> ToolResponse:
    return ToolResponse(
        content=[TextContent(text=json.dumps(data, indent=2, ensure_ascii=False))]
    )


def format_error_response(message: str, operation: str) -> ToolResponse:
    return ToolResponse(
        content=[TextContent(text=f"Error {operation}: {message}")],
        is_error=True,
    )


def format_result(result: OperationResult, operation: str) -> ToolResponse:
    """Turn an OperationResult into a ToolResponse.

    Args:
        result: Outcome of a client call or the orchestrator
        operation: Label of the tool (e.g. "listing keys")

    Returns:
        Success response with ``result.data``, or an error response
    """
    if result.is_success:
        return format_success_response(result.data)
    if result.error_code == EMBEDDED_VALIDATION_ERROR:
        return ToolResponse(content=[TextContent(text=result.message)], is_error=True)
    return format_error_response(result.message, operation)


def resolve_project_id(
    project_id: Optional[str], settings: Settings
) -> OperationResult:
    """Pick the explicit project id, else the configured default."""
    resolved = project_id or settings.texterify.TEXTERIFY_PROJECT_ID
    if not resolved:
        return OperationResult.permanent_error(
            PROJECT_ID_REQUIRED_MESSAGE, error_code=MISSING_PROJECT_ID
        )
    return OperationResult.success(data=resolved)


def build_key_body(
    attributes: KeyAttributesInput, name: Optional[str] = None
) -> Dict[str, Any]:
    """Build a create/update key body carrying only the supplied fields."""
    body: Dict[str, Any] = {}
    if name is not None:
        body["name"] = name
    if attributes.description is not None:
        body["description"] = attributes.description
    if attributes.html_enabled is not None:
        body["html_enabled"] = attributes.html_enabled
    if attributes.pluralization_enabled is not None:
        body["pluralization_enabled"] = attributes.pluralization_enabled
    return body


def build_translation_body(
    key_id: str, language_id: str, forms: PluralFormsInput
) -> Dict[str, Any]:
    """Build a translation body with content and the supplied plural forms."""
    translation: Dict[str, Any] = {"content": forms.content}
    for form in PLURAL_FORMS:
        value = getattr(forms, form)
        if value is not None:
            translation[form] = value
    return {"key_id": key_id, "language_id": language_id, "translation": translation}
