"""Task service layer with business logic."""

from collections.abc import Callable
from dataclasses import dataclass, field
from uuid import UUID

import structlog

from core.exceptions import TaskNotFoundError
from domain.entities.task import Task, TaskPriority, TaskStatus
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


@dataclass
class TaskOverview:
    """Every task plus the pending and completed views derived from it."""

    all_tasks: list[Task] = field(default_factory=list)
    pending_tasks: list[Task] = field(default_factory=list)
    completed_tasks: list[Task] = field(default_factory=list)


class TaskService:
    """Service layer for Task business logic.

    Holds no state between calls; the store is the only source of truth.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_all(self) -> TaskOverview:
        """Get all tasks (newest first) with pending/completed views."""
        async with self._uow_factory() as uow:
            tasks = await uow.tasks.list_all()

        return TaskOverview(
            all_tasks=tasks,
            pending_tasks=[t for t in tasks if t.status == TaskStatus.PENDING],
            completed_tasks=[t for t in tasks if t.status == TaskStatus.COMPLETED],
        )

    async def list_pending(self) -> list[Task]:
        """Get pending tasks in the order they were created."""
        async with self._uow_factory() as uow:
            return await uow.tasks.list_by_status(TaskStatus.PENDING)  # type: ignore[no-any-return]

    async def list_completed(self) -> list[Task]:
        """Get completed tasks, most recently completed first."""
        async with self._uow_factory() as uow:
            return await uow.tasks.list_by_status(TaskStatus.COMPLETED)  # type: ignore[no-any-return]

    async def count(self) -> int:
        """Count stored tasks. Raises if the store cannot be reached."""
        async with self._uow_factory() as uow:
            return await uow.tasks.count()  # type: ignore[no-any-return]

    async def create(
        self,
        title: str,
        description: str | None = None,
        priority: TaskPriority = TaskPriority.MEDIUM,
    ) -> Task:
        """Create a new task. New tasks always start out pending."""
        async with self._uow_factory() as uow:
            task = Task(
                title=title,
                description=description,
                priority=priority,
                status=TaskStatus.PENDING,
            )

            created = await uow.tasks.create(task)
            await uow.commit()

        logger.info(
            "task_created",
            task_id=str(created.id),
            title=created.title,
            priority=created.priority.value,
        )
        return created

    async def complete(self, task_id: UUID) -> Task:
        """Mark a task as completed.

        Completing a task twice is allowed and re-stamps ``completed_at``.
        """
        async with self._uow_factory() as uow:
            task = await uow.tasks.get(task_id)

            if not task:
                raise TaskNotFoundError(str(task_id))

            task.complete()

            updated = await uow.tasks.update(task)
            await uow.commit()

        logger.info("task_completed", task_id=str(task_id), title=updated.title)
        return updated

    async def delete(self, task_id: UUID) -> None:
        """Permanently delete a task."""
        async with self._uow_factory() as uow:
            task = await uow.tasks.get(task_id)

            if not task:
                raise TaskNotFoundError(str(task_id))

            await uow.tasks.delete(task_id)
            await uow.commit()

        logger.info("task_deleted", task_id=str(task_id), title=task.title)
