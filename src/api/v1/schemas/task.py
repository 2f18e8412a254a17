"""Pydantic schemas for Task API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from domain.entities.task import TaskPriority, TaskStatus


class TaskCreate(BaseModel):
    """Schema for creating a Task.

    Any ``status`` sent by the caller is ignored; new tasks are always pending.
    """

    title: str
    description: str | None = None
    priority: TaskPriority = TaskPriority.MEDIUM

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please add a task title")
        return value

    @field_validator("description")
    @classmethod
    def blank_description_to_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("priority", mode="before")
    @classmethod
    def null_priority_to_default(cls, value: Any) -> Any:
        return TaskPriority.MEDIUM if value is None else value


class TaskResponse(BaseModel):
    """Schema for Task response."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Buy milk",
                "description": "Two litres, semi-skimmed",
                "priority": "High",
                "status": "completed",
                "createdAt": "2026-01-28T10:00:00",
                "completedAt": "2026-01-28T12:30:00",
            }
        },
    )

    id: UUID
    title: str
    description: str | None = None
    priority: TaskPriority
    status: TaskStatus
    created_at: datetime
    completed_at: datetime | None = None


class TaskOverviewData(BaseModel):
    """All tasks plus the pending and completed views."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    all_tasks: list[TaskResponse]
    pending_tasks: list[TaskResponse]
    completed_tasks: list[TaskResponse]


class TaskOverviewResponse(BaseModel):
    """Envelope for the task overview."""

    success: bool = True
    message: str
    data: TaskOverviewData


class TaskListResponse(BaseModel):
    """Envelope for an ordered list of Tasks."""

    success: bool = True
    message: str
    data: list[TaskResponse]


class TaskDetailResponse(BaseModel):
    """Envelope for a single Task."""

    success: bool = True
    message: str
    data: TaskResponse


class TaskDeletedResponse(BaseModel):
    """Envelope returned after a delete; ``data`` is always empty."""

    success: bool = True
    message: str
    data: dict[str, Any] = Field(default_factory=dict)
