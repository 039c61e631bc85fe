"""Operation result types and status enums.

This module contains the standardized result type returned by every call
against the translation backend, the status enum, and the response
classifiers that turn raw HTTP responses into results.
"""

from infrastructure.operations.classifiers import (
    classify_response,
    classify_transport_error,
    describe_embedded_errors,
    has_embedded_errors,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_response",
    "classify_transport_error",
    "has_embedded_errors",
    "describe_embedded_errors",
]
