"""Task domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4


class TaskPriority(StrEnum):
    """Task priority. Wire values are capitalized."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class TaskStatus(StrEnum):
    """Task lifecycle status. Only pending -> completed is ever applied."""

    PENDING = "pending"
    COMPLETED = "completed"


@dataclass
class Task:
    """Domain entity for a Task."""

    title: str
    id: UUID = field(default_factory=uuid4)
    description: str | None = None
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    created_at: datetime = field(default_factory=datetime.utcnow)
    completed_at: datetime | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    def complete(self) -> None:
        """Mark the task as completed.

        Completing an already completed task re-stamps ``completed_at``.
        """
        self.status = TaskStatus.COMPLETED
        self.completed_at = datetime.utcnow()

    def __post_init__(self) -> None:
        """Keep completed_at in step with status."""
        if self.status == TaskStatus.PENDING:
            self.completed_at = None
