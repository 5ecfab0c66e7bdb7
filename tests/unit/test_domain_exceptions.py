"""Tests for domain exceptions (error_code, message, details)."""

from app.domain.exceptions import (
    ResourceNotFoundException,
    TodoException,
    ValidationException,
)


def test_todo_exception_default_error_code() -> None:
    """Base TodoException uses class name as error_code when not provided."""
    exc = TodoException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TodoException"
    assert exc.details == {}


def test_todo_exception_custom_error_code_and_details() -> None:
    exc = TodoException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field/code in details."""
    exc = ValidationException("Invalid status", field="status", code="Pattern")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "status", "code": "Pattern"}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.details == {}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("task", 12)
    assert exc.message == "task not found: 12"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "task", "resource_id": 12}
