"""Task repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.task import Task, TaskStatus


class ITaskRepository(Protocol):
    """Repository interface for Task entities."""

    async def get(self, id: UUID) -> Task | None:
        """Get a task by ID."""
        ...

    async def list_all(self) -> list[Task]:
        """Get every task, newest created first."""
        ...

    async def list_by_status(self, status: TaskStatus) -> list[Task]:
        """Get tasks with the given status.

        Pending tasks come oldest created first; completed tasks come most
        recently completed first.
        """
        ...

    async def create(self, task: Task) -> Task:
        """Create a new task."""
        ...

    async def update(self, task: Task) -> Task:
        """Update an existing task."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a task and return success status."""
        ...

    async def count(self) -> int:
        """Count stored tasks."""
        ...
