"""Task API: search, get, create, update, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from app.api.dependencies import get_task_service, get_task_service_for_write
from app.application.use_cases.tasks import TaskService
from app.core.limiter import limit_writes
from app.schemas.errors import ValidationErrorResponse
from app.schemas.task import (
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
    build_search_criteria,
)

router = APIRouter()

_VALIDATION_RESPONSES = {400: {"description": "Validation failed", "model": ValidationErrorResponse}}


@router.get("", response_model=list[TaskResponse], responses=_VALIDATION_RESPONSES)
async def list_tasks(
    service: Annotated[TaskService, Depends(get_task_service)],
    summary: Annotated[str | None, Query(description="Substring of summary")] = None,
    status: Annotated[
        list[str] | None, Query(description="Repeat for several statuses")
    ] = None,
):
    """Search tasks by summary substring and/or statuses (all when neither given)."""
    criteria = build_search_criteria(summary, status)
    tasks = await service.find(criteria)
    return [TaskResponse.model_validate(t) for t in tasks]


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Get task by id; 404 when absent."""
    task = await service.get(task_id)
    return TaskResponse.model_validate(task)


@router.post(
    "", response_model=TaskResponse, status_code=201, responses=_VALIDATION_RESPONSES
)
@limit_writes
async def create_task(
    request: Request,
    body: TaskCreateRequest,
    service: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Create a task; the response carries the id assigned by the database."""
    created = await service.create(body.to_task())
    return TaskResponse.model_validate(created)


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    responses={**_VALIDATION_RESPONSES, 404: {"description": "Task not found"}},
)
@limit_writes
async def update_task(
    request: Request,
    task_id: int,
    body: TaskUpdateRequest,
    service: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Replace summary, description and status of a task."""
    updated = await service.update(body.to_task(task_id))
    return TaskResponse.model_validate(updated)


@router.delete("/{task_id}", status_code=204)
@limit_writes
async def delete_task(
    request: Request,
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service_for_write)],
) -> Response:
    """Delete a task. Succeeds when the task is already gone."""
    await service.delete(task_id)
    return Response(status_code=204)
