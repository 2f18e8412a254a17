"""Task API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from api.v1.dependencies import get_task_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.task import (
    TaskCreate,
    TaskDeletedResponse,
    TaskDetailResponse,
    TaskListResponse,
    TaskOverviewData,
    TaskOverviewResponse,
    TaskResponse,
)
from core.exceptions import TaskNotFoundError
from domain.entities.task import Task
from domain.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get(
    "/",
    response_model=TaskOverviewResponse,
    response_model_exclude_none=True,
    include_in_schema=False,
)
@router.get(
    "",
    response_model=TaskOverviewResponse,
    response_model_exclude_none=True,
    summary="List all tasks",
    responses={
        200: {"description": "All tasks with pending and completed views"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
)
async def list_tasks(
    service: TaskService = Depends(get_task_service),
) -> TaskOverviewResponse:
    """
    Get every task, newest created first.

    `pendingTasks` and `completedTasks` are filtered from the same list and
    keep its order.
    """
    overview = await service.list_all()
    return TaskOverviewResponse(
        message="Tasks retrieved successfully",
        data=TaskOverviewData(
            all_tasks=[_build_task_response(t) for t in overview.all_tasks],
            pending_tasks=[_build_task_response(t) for t in overview.pending_tasks],
            completed_tasks=[_build_task_response(t) for t in overview.completed_tasks],
        ),
    )


@router.get(
    "/pending",
    response_model=TaskListResponse,
    response_model_exclude_none=True,
    summary="List pending tasks",
    responses={
        200: {"description": "Pending tasks, oldest created first"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
)
async def list_pending_tasks(
    service: TaskService = Depends(get_task_service),
) -> TaskListResponse:
    """Get pending tasks in the order they were created (first in, first out)."""
    tasks = await service.list_pending()
    return TaskListResponse(
        message="Pending tasks retrieved successfully",
        data=[_build_task_response(t) for t in tasks],
    )


@router.get(
    "/completed",
    response_model=TaskListResponse,
    response_model_exclude_none=True,
    summary="List completed tasks",
    responses={
        200: {"description": "Completed tasks, most recently completed first"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
)
async def list_completed_tasks(
    service: TaskService = Depends(get_task_service),
) -> TaskListResponse:
    """Get completed tasks, most recently completed on top (last in, first out)."""
    tasks = await service.list_completed()
    return TaskListResponse(
        message="Completed tasks retrieved successfully",
        data=[_build_task_response(t) for t in tasks],
    )


@router.post(
    "/",
    response_model=TaskDetailResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@router.post(
    "",
    response_model=TaskDetailResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new task",
    responses={
        201: {"description": "Task added successfully"},
        400: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
)
async def add_task(
    body: TaskCreate,
    service: TaskService = Depends(get_task_service),
) -> TaskDetailResponse:
    """
    Add a new task.

    `priority` defaults to `Medium`. New tasks always start as `pending`.
    """
    task = await service.create(
        title=body.title,
        description=body.description,
        priority=body.priority,
    )
    return TaskDetailResponse(
        message="Task added successfully",
        data=_build_task_response(task),
    )


@router.put(
    "/{task_id}/complete",
    response_model=TaskDetailResponse,
    response_model_exclude_none=True,
    summary="Mark a task as completed",
    responses={
        200: {"description": "Task marked as completed"},
        404: {"model": ErrorResponse, "description": "Task not found"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
)
async def complete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
) -> TaskDetailResponse:
    """Set status to `completed` and stamp `completedAt`."""
    task = await service.complete(_parse_task_id(task_id))
    return TaskDetailResponse(
        message="Task marked as completed",
        data=_build_task_response(task),
    )


@router.delete(
    "/{task_id}",
    response_model=TaskDeletedResponse,
    summary="Delete a task",
    responses={
        200: {"description": "Task deleted successfully"},
        404: {"model": ErrorResponse, "description": "Task not found"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
)
async def delete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
) -> TaskDeletedResponse:
    """Permanently delete a task."""
    await service.delete(_parse_task_id(task_id))
    return TaskDeletedResponse(message="Task deleted successfully")


def _parse_task_id(task_id: str) -> UUID:
    """Parse a path identifier; anything that is not a task ID is unknown."""
    try:
        return UUID(task_id)
    except ValueError:
        raise TaskNotFoundError(task_id) from None


def _build_task_response(task: Task) -> TaskResponse:
    """Convert domain entity to response schema."""
    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        priority=task.priority,
        status=task.status,
        created_at=task.created_at,
        completed_at=task.completed_at,
    )
