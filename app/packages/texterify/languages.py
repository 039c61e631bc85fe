"""Language code resolution for a Texterify project.

Texterify addresses languages by UUID, while callers think in codes such as
``en`` or ``de``. The code lives on a related ``language_code`` record that
each languages page returns in ``included``.
"""

from typing import Any, Dict, List

import structlog

from infrastructure.clients.texterify import TexterifyClient
from infrastructure.operations import OperationResult

logger = structlog.get_logger()

LANGUAGE_PAGE_SIZE = 50


def map_language_codes(page: Dict[str, Any]) -> Dict[str, str]:
    """Map language codes to language ids for one languages page.

    Languages whose related code record is missing from ``included`` are
    skipped.

    Args:
        page: Decoded body of a languages list call

    Returns:
        Dict of code -> language id
    """
    codes_by_id = {}
    for item in page.get("included") or []:
        code = (item.get("attributes") or {}).get("code")
        if item.get("id") is not None and code is not None:
            codes_by_id[item["id"]] = code

    mapping = {}
    for language in page.get("data") or []:
        related = (
            (language.get("relationships") or {}).get("language_code") or {}
        ).get("data") or {}
        code = codes_by_id.get(related.get("id"))
        if code is not None:
            mapping[code] = language["id"]
    return mapping


class LanguageResolver:
    """Resolve every language code configured in a project.

    Args:
        client: Texterify API client
        page_size: Languages requested per page
    """

    def __init__(self, client: TexterifyClient, page_size: int = LANGUAGE_PAGE_SIZE):
        self.client = client
        self.page_size = page_size

    def resolve(self, project_id: str) -> OperationResult:
        """Fetch all language pages and build the code -> id map.

        Paging stops once the number of fetched records reaches
        ``meta.total``, or when a page comes back empty.

        Args:
            project_id: Project UUID

        Returns:
            OperationResult with the code map, or the failing page's error
        """
        log = logger.bind(project_id=project_id, operation="resolve_language_codes")
        mapping: Dict[str, str] = {}
        fetched = 0
        page = 1

        while True:
            result = self.client.list_languages(
                project_id, page=page, per_page=self.page_size
            )
            if not result.is_success:
                log.warning(
                    "language_page_failed",
                    page=page,
                    error=result.message,
                    failed_call=result.operation,
                )
                return result

            body = result.data or {}
            records: List[Any] = body.get("data") or []
            total = (body.get("meta") or {}).get("total") or 0

            mapping.update(map_language_codes(body))
            fetched += len(records)

            if not records or fetched >= total:
                break
            page += 1

        log.debug("language_codes_resolved", pages=page, codes=sorted(mapping))
        return OperationResult.success(data=mapping)
