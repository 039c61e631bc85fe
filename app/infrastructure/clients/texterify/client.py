"""Texterify REST API client.

Issues single-resource calls against the Texterify API and returns every
outcome as an OperationResult, classified by
``infrastructure.operations.classifiers``. The client never raises for HTTP
or network failures; callers branch on ``result.is_success``.

Usage:
    from infrastructure.clients.texterify import TexterifyClient

    client = TexterifyClient(settings)
    result = client.list_languages("project-uuid", page=1, per_page=50)
    if result.is_success:
        languages = result.data["data"]
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import requests
import structlog

from infrastructure.operations import (
    OperationResult,
    classify_response,
    classify_transport_error,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()


class TexterifyClient:
    """HTTP client for the Texterify API.

    Attributes:
        base_url: ``<TEXTERIFY_API_BASE_URL>/<TEXTERIFY_API_VERSION>``
        timeout: Per-request deadline in seconds

    Args:
        settings: Settings instance with the ``texterify`` section
        session: Optional pre-built requests session (tests inject a mock)
    """

    def __init__(
        self,
        settings: "Settings",
        session: Optional[requests.Session] = None,
    ) -> None:
        config = settings.texterify
        base_url = config.TEXTERIFY_API_BASE_URL.rstrip("/")
        self.base_url = f"{base_url}/{config.TEXTERIFY_API_VERSION}"
        self.timeout = config.TEXTERIFY_REQUEST_TIMEOUT
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Auth-Email": config.TEXTERIFY_AUTH_EMAIL or "",
                "Auth-Secret": config.TEXTERIFY_AUTH_SECRET or "",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )
        self._logger = logger.bind(component="texterify_client")

    def send(
        self,
        method: str,
        path: str,
        operation: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> OperationResult:
        """Send one request to the Texterify API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Path below the versioned base URL (e.g. "projects/p1/keys")
            operation: Human label used in error messages and logs
            params: Query parameters; entries whose value is None are dropped
            body: JSON body, sent for non-GET methods only

        Returns:
            OperationResult with the decoded body or a classified error
        """
        url = f"{self.base_url}/{path}"
        query = {k: v for k, v in (params or {}).items() if v is not None}
        json_body = body if method != "GET" else None

        log = self._logger.bind(method=method, path=path, operation=operation)
        log.debug("texterify_request")

        try:
            response = self._session.request(
                method=method,
                url=url,
                params=query or None,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            log.warning("texterify_transport_error", error=str(e))
            return classify_transport_error(e, operation)

        result = classify_response(response, operation)
        if result.is_success:
            log.debug("texterify_request_succeeded", status_code=response.status_code)
        else:
            log.warning(
                "texterify_request_failed",
                status_code=response.status_code,
                error_code=result.error_code,
                response_body=response.text,
            )
        return result

    # Projects

    def list_projects(
        self,
        search: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        operation: str = "listing projects",
    ) -> OperationResult:
        params = {"search": search or None, "page": page, "per_page": per_page}
        return self.send("GET", "projects", operation, params=params)

    # Languages

    def list_languages(
        self,
        project_id: str,
        search: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        operation: str = "listing languages",
    ) -> OperationResult:
        params = {"search": search or None, "page": page, "per_page": per_page}
        return self.send(
            "GET", f"projects/{project_id}/languages", operation, params=params
        )

    # Keys

    def list_keys(
        self,
        project_id: str,
        search: Optional[str] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        only_untranslated: Optional[bool] = None,
        operation: str = "listing keys",
    ) -> OperationResult:
        params = {
            "search": search or None,
            "page": page,
            "per_page": per_page,
            "only_untranslated": "true" if only_untranslated else None,
        }
        return self.send("GET", f"projects/{project_id}/keys", operation, params=params)

    def get_key(
        self, project_id: str, key_id: str, operation: str = "getting key"
    ) -> OperationResult:
        return self.send("GET", f"projects/{project_id}/keys/{key_id}", operation)

    def create_key(
        self,
        project_id: str,
        body: Dict[str, Any],
        operation: str = "creating key",
    ) -> OperationResult:
        """Create a key.

        Args:
            project_id: Project UUID
            body: ``{"name", "description"?, "html_enabled"?,
                "pluralization_enabled"?}``; sent exactly as given
            operation: Human label for errors

        Returns:
            OperationResult with the decoded body. A 200 body may still carry
            an ``errors`` map (e.g. duplicate name); callers check it.
        """
        return self.send("POST", f"projects/{project_id}/keys", operation, body=body)

    def update_key(
        self,
        project_id: str,
        key_id: str,
        body: Dict[str, Any],
        operation: str = "updating key",
    ) -> OperationResult:
        return self.send(
            "PUT", f"projects/{project_id}/keys/{key_id}", operation, body=body
        )

    def delete_keys(
        self,
        project_id: str,
        key_ids: List[str],
        operation: str = "deleting keys",
    ) -> OperationResult:
        return self.send(
            "DELETE",
            f"projects/{project_id}/keys",
            operation,
            body={"keys": list(key_ids)},
        )

    # Translations

    def create_translation(
        self,
        project_id: str,
        body: Dict[str, Any],
        operation: str = "setting translation",
    ) -> OperationResult:
        """Create or update the translation of one key in one language.

        Args:
            project_id: Project UUID
            body: ``{"key_id", "language_id", "translation": {"content", ...}}``
            operation: Human label for errors

        Returns:
            OperationResult with the decoded body
        """
        return self.send(
            "POST", f"projects/{project_id}/translations", operation, body=body
        )

    def close(self) -> None:
        """Close HTTP session and release connections."""
        self._session.close()
        self._logger.debug("texterify_client_closed")


__all__ = ["TexterifyClient"]
