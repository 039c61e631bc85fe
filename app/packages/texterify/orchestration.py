"""Create a key and its translations as one all-or-nothing operation.

Steps:
1. Resolve the project's language codes and reject unknown ones before
   anything is written.
2. Create the key. A 2xx body carrying an ``errors`` map is a failure.
3. Set each translation in request order, stopping at the first failure.
4. On a translation failure, delete the key again and report whether the
   rollback succeeded.
"""

from typing import Dict, List, Optional

import structlog

from infrastructure.clients.texterify import TexterifyClient
from infrastructure.operations import (
    OperationResult,
    describe_embedded_errors,
    has_embedded_errors,
)
from packages.texterify.languages import LanguageResolver
from packages.texterify.responses import (
    EMBEDDED_VALIDATION_ERROR,
    build_key_body,
    build_translation_body,
)
from packages.texterify.schemas import KeyAttributesInput, TranslationEntry

logger = structlog.get_logger()

UNKNOWN_LANGUAGE_CODES = "UNKNOWN_LANGUAGE_CODES"
ROLLED_BACK = "TRANSLATION_FAILED_ROLLED_BACK"
ROLLBACK_FAILED = "TRANSLATION_FAILED_ROLLBACK_FAILED"


def find_unknown_codes(
    translations: List[TranslationEntry], code_map: Dict[str, str]
) -> List[str]:
    """Return requested codes missing from the project, in request order."""
    unknown = []
    for entry in translations:
        if entry.language_code not in code_map and entry.language_code not in unknown:
            unknown.append(entry.language_code)
    return unknown


class KeyWithTranslationsOrchestrator:
    """Create a key with translations, rolling the key back on failure.

    Args:
        client: Texterify API client
        resolver: Language resolver; defaults to one over ``client``
    """

    def __init__(
        self, client: TexterifyClient, resolver: Optional[LanguageResolver] = None
    ):
        self.client = client
        self.resolver = resolver or LanguageResolver(client)

    def run(
        self,
        project_id: str,
        name: str,
        translations: List[TranslationEntry],
        attributes: Optional[KeyAttributesInput] = None,
    ) -> OperationResult:
        """Run the whole operation.

        Args:
            project_id: Project UUID
            name: Key name
            translations: Requested translations, applied in order
            attributes: Optional description / html / pluralization flags

        Returns:
            OperationResult with ``{"key": <created key>, "translations":
            [<translation responses>]}`` on success. Errors carry the final
            message; ``error_code`` tells which step failed.
        """
        log = logger.bind(project_id=project_id, key_name=name)
        log.info("create_key_with_translations_started", count=len(translations))

        languages = self.resolver.resolve(project_id)
        if not languages.is_success:
            return languages
        code_map: Dict[str, str] = languages.data

        unknown = find_unknown_codes(translations, code_map)
        if unknown:
            log.warning("unknown_language_codes", unknown=unknown)
            return OperationResult.permanent_error(
                f"Unknown language code(s): {', '.join(unknown)}. "
                f"Available codes in this project: {', '.join(sorted(code_map))}",
                error_code=UNKNOWN_LANGUAGE_CODES,
            )

        key_body = build_key_body(attributes or KeyAttributesInput(), name=name)

        created = self.client.create_key(project_id, key_body)
        if not created.is_success:
            return created
        if has_embedded_errors(created.data):
            message = describe_embedded_errors(created.data, "creating key")
            log.warning("key_creation_rejected", error=message)
            return OperationResult.permanent_error(
                message, error_code=EMBEDDED_VALIDATION_ERROR, data=created.data
            )

        key = created.data
        key_id = key["data"]["id"]
        log = log.bind(key_id=key_id)

        responses = []
        for entry in translations:
            label = f"setting translation for '{entry.language_code}'"
            body = build_translation_body(key_id, code_map[entry.language_code], entry)
            result = self.client.create_translation(project_id, body, operation=label)
            if not result.is_success:
                return self._roll_back(
                    project_id, name, key_id, f"{label}: {result.message}"
                )
            responses.append(result.data)

        log.info("create_key_with_translations_succeeded")
        return OperationResult.success(
            data={"key": key, "translations": responses},
            message="key created with translations",
        )

    def _roll_back(
        self, project_id: str, name: str, key_id: str, failure: str
    ) -> OperationResult:
        log = logger.bind(project_id=project_id, key_id=key_id)
        log.warning("translation_failed_rolling_back", error=failure)

        deleted = self.client.delete_keys(
            project_id, [key_id], operation="rolling back key"
        )
        if deleted.is_success:
            return OperationResult.permanent_error(
                f"{failure}. The key '{name}' (ID: {key_id}) has been rolled back "
                "(deleted).",
                error_code=ROLLED_BACK,
            )

        log.error(
            "rollback_failed", error=deleted.message, failed_call=deleted.operation
        )
        return OperationResult.permanent_error(
            f"Translation failed: {failure}. Additionally, rollback (key deletion) "
            f"failed: rolling back key: {deleted.message}. The key '{name}' "
            f"(ID: {key_id}) was created but may have partial translations.",
            error_code=ROLLBACK_FAILED,
        )
