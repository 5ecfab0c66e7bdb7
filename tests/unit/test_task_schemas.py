"""Task request validation, search criteria parsing, and error field mapping."""

import pytest
from pydantic import ValidationError

from app.core.constants import ValidationMessages
from app.domain.enums import TaskStatus
from app.domain.exceptions import ValidationException
from app.schemas.errors import field_errors_from_pydantic
from app.schemas.task import (
    TaskCreateRequest,
    TaskForm,
    TaskUpdateRequest,
    build_search_criteria,
)


def _errors(model, data: dict) -> list[tuple[str, str, str]]:
    with pytest.raises(ValidationError) as exc_info:
        model.model_validate(data)
    return [
        (e.field, e.code, e.defaultMessage)
        for e in field_errors_from_pydantic(exc_info.value.errors())
    ]


def test_valid_create_request_builds_task_without_id() -> None:
    body = TaskCreateRequest(summary="新しいタスク", description="詳細", status="TODO")
    task = body.to_task()
    assert task.id is None
    assert task.summary == "新しいタスク"
    assert task.description == "詳細"
    assert task.status is TaskStatus.TODO


def test_update_request_builds_task_with_id() -> None:
    task = TaskUpdateRequest(summary="x", status="DONE").to_task(3)
    assert task.id == 3
    assert task.description is None
    assert task.status is TaskStatus.DONE


def test_empty_summary_reports_not_blank() -> None:
    assert _errors(TaskCreateRequest, {"summary": "", "status": "TODO"}) == [
        ("summary", "NotBlank", ValidationMessages.SUMMARY_REQUIRED)
    ]


def test_whitespace_summary_reports_not_blank() -> None:
    errors = _errors(TaskCreateRequest, {"summary": "   ", "status": "TODO"})
    assert errors[0][:2] == ("summary", "NotBlank")


def test_summary_length_limit() -> None:
    TaskCreateRequest(summary="a" * 256, status="TODO")
    assert _errors(TaskCreateRequest, {"summary": "a" * 257, "status": "TODO"}) == [
        ("summary", "Size", ValidationMessages.SUMMARY_SIZE)
    ]


def test_oversized_blank_summary_reports_not_blank_and_size() -> None:
    assert _errors(TaskCreateRequest, {"summary": " " * 300, "status": "TODO"}) == [
        ("summary", "NotBlank", ValidationMessages.SUMMARY_REQUIRED),
        ("summary", "Size", ValidationMessages.SUMMARY_SIZE),
    ]


def test_summary_length_counts_code_points() -> None:
    TaskCreateRequest(summary="\N{GRINNING FACE}" * 256, status="TODO")
    errors = _errors(TaskCreateRequest, {"summary": "\N{GRINNING FACE}" * 257, "status": "TODO"})
    assert errors == [("summary", "Size", ValidationMessages.SUMMARY_SIZE)]


def test_invalid_status_reports_pattern() -> None:
    assert _errors(TaskUpdateRequest, {"summary": "x", "status": "INVALID"}) == [
        ("status", "Pattern", ValidationMessages.STATUS_PATTERN)
    ]


def test_status_is_case_sensitive() -> None:
    errors = _errors(TaskUpdateRequest, {"summary": "x", "status": "todo"})
    assert errors[0][:2] == ("status", "Pattern")


def test_missing_fields_reported_in_field_order() -> None:
    assert _errors(TaskCreateRequest, {}) == [
        ("summary", "NotBlank", ValidationMessages.SUMMARY_REQUIRED),
        ("status", "NotBlank", ValidationMessages.STATUS_REQUIRED),
    ]


def test_form_blank_description_becomes_none() -> None:
    form = TaskForm.model_validate({"summary": "x", "description": "", "status": "DOING"})
    assert form.to_task(1).description is None


def test_search_criteria_from_query() -> None:
    criteria = build_search_criteria("Spring", ["TODO", "DONE", "TODO"])
    assert criteria.summary == "Spring"
    assert criteria.statuses == frozenset({TaskStatus.TODO, TaskStatus.DONE})


def test_search_criteria_empty_values_mean_no_filter() -> None:
    criteria = build_search_criteria("", None)
    assert criteria.summary is None
    assert criteria.statuses == frozenset()
    assert criteria.is_empty


def test_search_criteria_rejects_unknown_status() -> None:
    with pytest.raises(ValidationException) as exc_info:
        build_search_criteria(None, ["TODO", "BLOCKED"])
    assert exc_info.value.details == {"field": "status", "code": "Pattern"}


def test_field_name_strips_request_location_and_formats_index() -> None:
    errors = field_errors_from_pydantic(
        [
            {"loc": ("body", "summary"), "msg": "m", "type": "NotBlank"},
            {"loc": ("query", "status", 0), "msg": "m", "type": "enum"},
            {"loc": ("body",), "msg": "Field required", "type": "missing"},
        ]
    )
    assert [e.field for e in errors] == ["summary", "status[0]", "body"]
