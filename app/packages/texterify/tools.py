"""Business logic behind each Texterify tool.

Each method takes the tool's validated input model and returns a
ToolResponse. Project-scoped tools fall back to TEXTERIFY_PROJECT_ID when no
``project_id`` argument is given.
"""

from typing import Optional

import structlog

from infrastructure.clients.texterify import TexterifyClient
from infrastructure.configuration import Settings
from infrastructure.operations import (
    OperationResult,
    describe_embedded_errors,
    has_embedded_errors,
)
from packages.texterify.orchestration import KeyWithTranslationsOrchestrator
from packages.texterify.responses import (
    EMBEDDED_VALIDATION_ERROR,
    build_key_body,
    build_translation_body,
    format_error_response,
    format_result,
    resolve_project_id,
)
from packages.texterify.schemas import (
    CreateKeyInput,
    CreateKeyWithTranslationsInput,
    DeleteKeysInput,
    GetKeyInput,
    ListKeysInput,
    ListLanguagesInput,
    ListProjectsInput,
    SetTranslationInput,
    ToolResponse,
    UpdateKeyInput,
)

logger = structlog.get_logger()


def reject_embedded_errors(result: OperationResult, operation: str) -> OperationResult:
    """Turn a 2xx body with an ``errors`` map into an error result."""
    if result.is_success and has_embedded_errors(result.data):
        return OperationResult.permanent_error(
            describe_embedded_errors(result.data, operation),
            error_code=EMBEDDED_VALIDATION_ERROR,
            data=result.data,
        )
    return result


class TexterifyTools:
    """The Texterify tool set bound to one client and one settings object.

    Args:
        client: Texterify API client
        settings: Application settings (default project id)
        orchestrator: Optional orchestrator for create_key_with_translations
    """

    def __init__(
        self,
        client: TexterifyClient,
        settings: Settings,
        orchestrator: Optional[KeyWithTranslationsOrchestrator] = None,
    ):
        self.client = client
        self.settings = settings
        self.orchestrator = orchestrator or KeyWithTranslationsOrchestrator(client)

    def _project(self, project_id: Optional[str]) -> OperationResult:
        return resolve_project_id(project_id, self.settings)

    def list_projects(self, args: ListProjectsInput) -> ToolResponse:
        result = self.client.list_projects(
            search=args.search, page=args.page, per_page=args.per_page
        )
        return format_result(result, "listing projects")

    def list_languages(self, args: ListLanguagesInput) -> ToolResponse:
        project = self._project(args.project_id)
        if not project.is_success:
            return format_error_response(project.message, "resolving project")

        result = self.client.list_languages(
            project.data, search=args.search, page=args.page, per_page=args.per_page
        )
        return format_result(result, "listing languages")

    def list_keys(self, args: ListKeysInput) -> ToolResponse:
        project = self._project(args.project_id)
        if not project.is_success:
            return format_error_response(project.message, "resolving project")

        result = self.client.list_keys(
            project.data,
            search=args.search,
            page=args.page,
            per_page=args.per_page,
            only_untranslated=args.only_untranslated,
        )
        return format_result(result, "listing keys")

    def get_key(self, args: GetKeyInput) -> ToolResponse:
        project = self._project(args.project_id)
        if not project.is_success:
            return format_error_response(project.message, "resolving project")

        result = self.client.get_key(project.data, args.key_id)
        return format_result(result, "getting key")

    def create_key(self, args: CreateKeyInput) -> ToolResponse:
        project = self._project(args.project_id)
        if not project.is_success:
            return format_error_response(project.message, "resolving project")

        body = build_key_body(args, name=args.name)
        result = self.client.create_key(project.data, body)
        result = reject_embedded_errors(result, "creating key")
        if not result.is_success:
            logger.warning(
                "create_key_failed", key_name=args.name, error=result.message
            )
        return format_result(result, "creating key")

    def update_key(self, args: UpdateKeyInput) -> ToolResponse:
        project = self._project(args.project_id)
        if not project.is_success:
            return format_error_response(project.message, "resolving project")

        result = self.client.update_key(
            project.data, args.key_id, build_key_body(args, name=args.name)
        )
        result = reject_embedded_errors(result, "updating key")
        return format_result(result, "updating key")

    def delete_keys(self, args: DeleteKeysInput) -> ToolResponse:
        project = self._project(args.project_id)
        if not project.is_success:
            return format_error_response(project.message, "resolving project")

        logger.info("deleting_keys", project_id=project.data, count=len(args.key_ids))
        result = self.client.delete_keys(project.data, args.key_ids)
        return format_result(result, "deleting keys")

    def set_translation(self, args: SetTranslationInput) -> ToolResponse:
        project = self._project(args.project_id)
        if not project.is_success:
            return format_error_response(project.message, "resolving project")

        body = build_translation_body(args.key_id, args.language_id, args)
        result = self.client.create_translation(project.data, body)
        return format_result(result, "setting translation")

    def create_key_with_translations(
        self, args: CreateKeyWithTranslationsInput
    ) -> ToolResponse:
        project = self._project(args.project_id)
        if not project.is_success:
            return format_error_response(project.message, "resolving project")

        result = self.orchestrator.run(
            project.data, args.name, args.translations, attributes=args
        )
        return format_result(result, "creating key with translations")
