"""Error hierarchy tests — status codes, codes and the REST envelope."""

from learning_tracker.core.errors import (
    ErrorCategory, ErrorContext, ErrorSeverity,
    NotFoundError, PersistenceError, TrackerError, ValidationError,
)


def test_validation_error_maps_to_400():
    err = ValidationError("Title and goal are required", fields=["title"])
    assert err.http_status == 400
    assert err.code == "VALIDATION_ERROR"
    assert err.category == ErrorCategory.VALIDATION
    assert err.fields == ["title"]


def test_not_found_error_maps_to_404():
    err = NotFoundError("Step", "abc")
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.message == "Step not found"
    assert err.resource_id == "abc"


def test_persistence_error_maps_to_500_critical():
    err = PersistenceError("create project")
    assert err.http_status == 500
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.message == "Failed to create project"


def test_all_errors_share_base():
    for err in (
        ValidationError("x", fields=[]), NotFoundError("Project", "1"),
        PersistenceError("x"),
    ):
        assert isinstance(err, TrackerError)


def test_to_response_envelope():
    err = NotFoundError("Project", "p1", ErrorContext(project_id="p1"))
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "error"
    assert body["context"] == {"project_id": "p1", "step_id": None}
    assert "timestamp" in body


def test_validation_error_response_lists_missing_fields():
    body = ValidationError("Content is required", fields=["content"]).to_response()
    assert body["error"]["details"] == [
        {"field": "content", "message": "Field required", "type": "missing"},
    ]


def test_other_errors_have_no_details():
    assert "details" not in PersistenceError("fetch step").to_response()["error"]
