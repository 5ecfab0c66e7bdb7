"""Task HTML views: list/search, detail, create and edit forms, delete.

Browsers cannot send PUT/DELETE from a form, so update and delete also accept
POST (/tasks/{id} and /tasks/{id}/delete). Successful writes redirect (303).
"""

from collections import defaultdict
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from app.api.dependencies import get_task_service, get_task_service_for_write
from app.application.use_cases.tasks import TaskService
from app.domain.enums import TaskStatus
from app.domain.exceptions import ValidationException
from app.pages.tasks import (
    FormMode,
    render_task_detail,
    render_task_form,
    render_task_list,
)
from app.schemas.errors import field_errors_from_pydantic
from app.schemas.task import TaskForm, build_search_criteria

router = APIRouter(default_response_class=HTMLResponse)


async def _read_form(request: Request) -> dict[str, str | None]:
    """Return the task form fields as strings (None when absent or a file)."""
    form = await request.form()
    values: dict[str, str | None] = {}
    for field in ("summary", "description", "status"):
        value = form.get(field)
        values[field] = value if isinstance(value, str) else None
    return values


def _errors_by_field(exc: ValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = defaultdict(list)
    for detail in field_errors_from_pydantic(exc.errors()):
        errors[detail.field].append(detail.defaultMessage)
    return errors


@router.get("")
async def list_tasks(
    service: Annotated[TaskService, Depends(get_task_service)],
    summary: Annotated[str | None, Query()] = None,
    status: Annotated[list[str] | None, Query()] = None,
):
    """Task list with search form; checked statuses are kept in the form.

    An unknown status re-renders the search form (400) with the field message.
    """
    try:
        criteria = build_search_criteria(summary, status)
    except ValidationException as exc:
        errors = {exc.details.get("field", "status"): [exc.message]}
        known = [s for s in status or [] if s in TaskStatus.values()]
        return HTMLResponse(
            render_task_list([], summary=summary, checked_statuses=known, errors=errors),
            status_code=400,
        )
    tasks = await service.find(criteria)
    return render_task_list(
        tasks, summary=summary, checked_statuses=[s.value for s in criteria.statuses]
    )


@router.get("/creationForm")
async def show_creation_form():
    """Empty form for a new task."""
    return render_task_form(FormMode.CREATE)


@router.post("")
async def create_task(
    request: Request,
    service: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Create from form; re-render with messages on validation failure."""
    values = await _read_form(request)
    try:
        form = TaskForm.model_validate(values)
    except ValidationError as exc:
        return render_task_form(FormMode.CREATE, values, _errors_by_field(exc))
    await service.create(form.to_task())
    return RedirectResponse("/tasks", status_code=303)


@router.get("/{task_id}")
async def show_detail(
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Task detail page; 404 page when absent."""
    task = await service.get(task_id)
    return render_task_detail(task)


@router.get("/{task_id}/editForm")
async def show_edit_form(
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Form pre-filled with the stored task."""
    task = await service.get(task_id)
    values = {
        "summary": task.summary,
        "description": task.description,
        "status": task.status.value,
    }
    return render_task_form(FormMode.EDIT, values, task_id=task_id)


@router.api_route("/{task_id}", methods=["PUT", "POST"])
async def update_task(
    request: Request,
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Update from form and redirect to the detail page."""
    values = await _read_form(request)
    try:
        form = TaskForm.model_validate(values)
    except ValidationError as exc:
        return render_task_form(
            FormMode.EDIT, values, _errors_by_field(exc), task_id=task_id
        )
    await service.update(form.to_task(task_id))
    return RedirectResponse(f"/tasks/{task_id}", status_code=303)


@router.delete("/{task_id}")
@router.post("/{task_id}/delete")
async def delete_task(
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Delete and redirect to the list."""
    await service.delete(task_id)
    return RedirectResponse("/tasks", status_code=303)
