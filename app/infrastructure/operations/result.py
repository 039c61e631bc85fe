"""Tagged result of one call against the translation backend."""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Outcome of a client call or a multi-step operation.

    Attributes:
        status: OperationStatus -- SUCCESS or the kind of failure
        message: str -- text shown to the caller on failure
        data: Optional[Any] -- decoded body on success; on HTTP failure a
            dict with operation, status_code, status_text and body
        error_code: Optional[str] -- e.g. "HTTP_404", "TIMEOUT",
            "UNKNOWN_LANGUAGE_CODES"
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @property
    def operation(self) -> Optional[str]:
        """Label of the failed call, when the failure details carry one."""
        if not self.is_success and isinstance(self.data, dict):
            return self.data.get("operation")
        return None

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Build a failed result with an explicit status."""
        return cls(status=status, message=message, error_code=error_code, data=data)

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Failure of the transport: network errors, timeouts, 5xx responses."""
        return cls.error(OperationStatus.TRANSIENT_ERROR, message, error_code, data)

    @classmethod
    def permanent_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Failure caused by the request itself.

        Rejected input (unknown language codes, missing project), other 4xx
        responses, validation errors embedded in a 2xx body, and bodies that
        are not JSON.
        """
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code, data)
