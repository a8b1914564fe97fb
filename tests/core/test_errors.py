"""Error Hierarchy — status codes and the REST error envelope."""

from taskflow.core.errors import (
    ApiRequestError, DatabaseError, ErrorCategory, ResourceNotFoundError,
)


def test_not_found_envelope():
    err = ResourceNotFoundError("Task", 9)
    assert err.http_status == 404
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["context"] == {"entity": "Task", "entity_id": 9}
    assert "timestamp" in body


def test_database_error_is_503():
    err = DatabaseError("timeout", "execute")
    assert err.http_status == 503
    assert err.category == ErrorCategory.DATABASE
    assert "execute" in err.message


def test_api_request_error_carries_status():
    err = ApiRequestError("PATCH", "/api/tasks/1", 404, "RESOURCE_NOT_FOUND")
    assert err.http_status == 404
    assert err.server_code == "RESOURCE_NOT_FOUND"
    assert err.message == "PATCH /api/tasks/1 failed with HTTP 404"
