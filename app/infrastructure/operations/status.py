"""Outcome categories of calls against the translation backend."""

from enum import Enum


class OperationStatus(Enum):
    """Outcome of an operation.

    Attributes:
        SUCCESS: 2xx response with a usable body
        TRANSIENT_ERROR: network failure, timeout or 5xx response
        PERMANENT_ERROR: the request itself was rejected or produced a bad body
        UNAUTHORIZED: 403, the configured credentials were refused
        NOT_FOUND: 404, project, key or language does not exist
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
