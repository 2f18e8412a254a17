"""SQLAlchemy implementation of Task repository."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.task import Task, TaskPriority, TaskStatus
from infrastructure.database.models import TaskModel


class SQLAlchemyTaskRepository:
    """SQLAlchemy implementation of ITaskRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Task | None:
        """Get a task by ID."""
        stmt = select(TaskModel).where(TaskModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_all(self) -> list[Task]:
        """Get every task, newest created first."""
        stmt = select(TaskModel).order_by(TaskModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def list_by_status(self, status: TaskStatus) -> list[Task]:
        """Get tasks with a given status in queue/stack order."""
        stmt = select(TaskModel).where(TaskModel.status == status.value)
        if status == TaskStatus.COMPLETED:
            stmt = stmt.order_by(TaskModel.completed_at.desc())
        else:
            stmt = stmt.order_by(TaskModel.created_at.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, task: Task) -> Task:
        """Create a new task."""
        model = self._to_model(task)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, task: Task) -> Task:
        """Persist the completion state of an existing task.

        Title, description, priority and created_at never change after
        creation, so only status and completed_at are written.
        """
        stmt = select(TaskModel).where(TaskModel.id == task.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Task {task.id} not found")

        model.status = task.status.value
        model.completed_at = task.completed_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Hard-delete a task."""
        stmt = select(TaskModel).where(TaskModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def count(self) -> int:
        """Count stored tasks."""
        result = await self._session.execute(select(func.count()).select_from(TaskModel))
        return result.scalar_one()

    def _to_entity(self, model: TaskModel) -> Task:
        """Convert ORM model to domain entity."""
        return Task(
            id=model.id,
            title=model.title,
            description=model.description,
            priority=TaskPriority(model.priority),
            status=TaskStatus(model.status),
            created_at=model.created_at,
            completed_at=model.completed_at,
        )

    def _to_model(self, entity: Task) -> TaskModel:
        """Convert domain entity to ORM model."""
        return TaskModel(
            id=entity.id,
            title=entity.title,
            description=entity.description,
            priority=entity.priority.value,
            status=entity.status.value,
            created_at=entity.created_at,
            completed_at=entity.completed_at,
        )
