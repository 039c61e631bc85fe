"""Response classifiers for Texterify API calls.

Converts raw HTTP responses and transport exceptions into standardized
OperationResult objects, and inspects decoded bodies for validation errors
the backend reports without an error status. Centralizes classification so
resource clients and tools never interpret status codes themselves.

Key Functions:
- classify_response(): requests.Response -> OperationResult
- classify_transport_error(): requests exceptions -> OperationResult
- has_embedded_errors(): detect a non-empty ``errors`` map in a 2xx body
- describe_embedded_errors(): flatten that map into a readable message

Usage:
    from infrastructure.operations.classifiers import (
        classify_response,
        classify_transport_error,
    )

    try:
        response = session.request("GET", url, timeout=30)
    except requests.RequestException as exc:
        return classify_transport_error(exc, "listing keys")
    return classify_response(response, "listing keys")
"""

import json
from typing import Any

import requests

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

AUTH_ENV_VARS = ("TEXTERIFY_AUTH_EMAIL", "TEXTERIFY_AUTH_SECRET")


def _failure_details(
    operation: str, status_code: int, status_text: str, body: str
) -> dict[str, Any]:
    return {
        "operation": operation,
        "status_code": status_code,
        "status_text": status_text,
        "body": body,
    }


def classify_response(response: requests.Response, operation: str) -> OperationResult:
    """Classify a Texterify API response into an OperationResult.

    A 2xx response decodes to a SUCCESS result carrying the JSON body, or
    ``None`` when the body is empty. Anything else is an error carrying the
    operation label, status code, status text and raw body in ``data``.

    Status Code Mapping:
    - 2xx: SUCCESS (empty body -> data None)
    - 403: UNAUTHORIZED, message names the credential settings to check
    - 404: NOT_FOUND
    - 5xx: TRANSIENT_ERROR
    - Other: PERMANENT_ERROR

    Args:
        response: Response returned by the requests session
        operation: Human label of the call (e.g. "creating key")

    Returns:
        OperationResult with decoded body or classified error
    """
    status_code = response.status_code
    body = response.text or ""

    if 200 <= status_code < 300:
        if not body:
            return OperationResult.success(data=None, message=f"{operation} succeeded")
        try:
            data = json.loads(body)
        except ValueError as e:
            return OperationResult.permanent_error(
                f"Invalid JSON in response: {e}",
                error_code="INVALID_RESPONSE",
                data=_failure_details(operation, status_code, response.reason, body),
            )
        return OperationResult.success(data=data, message=f"{operation} succeeded")

    if status_code == 403:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"Authentication failed (403). Check {AUTH_ENV_VARS[0]} and "
            f"{AUTH_ENV_VARS[1]}. Response: {body}",
            error_code="HTTP_403",
            data=_failure_details(operation, 403, "Forbidden", body),
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            f"The requested resource was not found (404). Response: {body}",
            error_code="HTTP_404",
            data=_failure_details(operation, 404, "Not Found", body),
        )

    status_text = response.reason or ""
    message = f"{status_code} {status_text} — {body}"
    details = _failure_details(operation, status_code, status_text, body)

    if 500 <= status_code < 600:
        return OperationResult.transient_error(
            message, error_code=f"HTTP_{status_code}", data=details
        )

    return OperationResult.permanent_error(
        message, error_code=f"HTTP_{status_code}", data=details
    )


def classify_transport_error(exc: Exception, operation: str) -> OperationResult:
    """Classify a transport failure (no HTTP response) into an OperationResult.

    Timeouts imposed by the client deadline surface here like any other
    network failure.

    Args:
        exc: Exception raised while sending the request
        operation: Human label of the call

    Returns:
        OperationResult with TRANSIENT_ERROR status
    """
    error_code = "TIMEOUT" if isinstance(exc, requests.Timeout) else "CONNECTION_ERROR"
    return OperationResult.transient_error(
        f"Network error — {exc}",
        error_code=error_code,
        data={"operation": operation},
    )


def has_embedded_errors(body: Any) -> bool:
    """Check whether a decoded 2xx body carries a non-empty ``errors`` map.

    The Texterify API answers some validation failures with HTTP 200 and a
    body like ``{"errors": {"name": [{"error": "TAKEN"}]}}``.

    Args:
        body: Decoded response body (any JSON value, or None)

    Returns:
        True if ``errors`` is present, not null, and has at least one field
    """
    if not isinstance(body, dict):
        return False
    errors = body.get("errors")
    return isinstance(errors, dict) and len(errors) > 0


def describe_embedded_errors(body: dict[str, Any], operation: str) -> str:
    """Flatten an embedded ``errors`` map into a single message.

    Example:
        {"errors": {"name": [{"error": "TAKEN"}]}} with "creating key"
        -> "Error creating key: name: TAKEN"

    Args:
        body: Decoded response body with a non-empty ``errors`` map
        operation: Human label of the call

    Returns:
        Message listing every ``field: CODE`` pair in field then list order
    """
    parts = []
    for field, field_errors in body["errors"].items():
        for entry in field_errors or []:
            code = entry.get("error") if isinstance(entry, dict) else entry
            parts.append(f"{field}: {code}")
    return f"Error {operation}: {', '.join(parts)}"
