"""Unit tests for OperationResult and OperationStatus."""

import pytest
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


@pytest.mark.unit
class TestOperationStatus:
    @pytest.mark.parametrize(
        "status,value",
        [
            (OperationStatus.SUCCESS, "success"),
            (OperationStatus.TRANSIENT_ERROR, "transient_error"),
            (OperationStatus.PERMANENT_ERROR, "permanent_error"),
            (OperationStatus.UNAUTHORIZED, "unauthorized"),
            (OperationStatus.NOT_FOUND, "not_found"),
        ],
    )
    def test_status_values(self, status, value):
        assert status.value == value


@pytest.mark.unit
class TestOperationResultFactories:
    def test_success_factory_minimal(self):
        result = OperationResult.success()
        assert result.status == OperationStatus.SUCCESS
        assert result.is_success
        assert result.data is None

    def test_success_factory_with_body(self):
        body = {"data": {"id": "key-1", "attributes": {"name": "welcome"}}}
        result = OperationResult.success(data=body, message="creating key succeeded")
        assert result.data["data"]["id"] == "key-1"
        assert result.message == "creating key succeeded"

    def test_error_factory_with_error_code(self):
        result = OperationResult.error(
            OperationStatus.NOT_FOUND, "Key not found", error_code="HTTP_404"
        )
        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "HTTP_404"
        assert not result.is_success

    def test_transient_error_factory(self):
        result = OperationResult.transient_error("Timeout", error_code="TIMEOUT")
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.message == "Timeout"

    def test_permanent_error_factory_keeps_details(self):
        details = {"operation": "listing keys", "status_code": 400}
        result = OperationResult.permanent_error(
            "400 Bad Request — nope", error_code="HTTP_400", data=details
        )
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.data == details


@pytest.mark.unit
class TestOperationResultEdgeCases:
    def test_success_with_empty_data_is_still_success(self):
        result = OperationResult.success(data={})
        assert result.is_success
        assert result.data == {}

    def test_unauthorized_is_not_success(self):
        result = OperationResult.error(OperationStatus.UNAUTHORIZED, "denied")
        assert not result.is_success

    def test_operation_label_from_failure_details(self):
        result = OperationResult.transient_error(
            "502 Bad Gateway — down",
            error_code="HTTP_502",
            data={"operation": "rolling back key", "status_code": 502},
        )
        assert result.operation == "rolling back key"

    def test_operation_label_absent_on_success(self):
        result = OperationResult.success(data={"operation": "not a failure"})
        assert result.operation is None
