"""View model for the task board.

The board keeps one list of every task and rebuilds it from the API after
each action. The pending and completed columns are computed from that list
on every access and are never fetched separately.
"""

from collections.abc import Awaitable, Callable

import structlog

from client.api_client import TaskTrackerClient, TaskTrackerClientError
from client.models import DEFAULT_PRIORITY, TaskView

logger = structlog.get_logger()


class TaskBoard:
    """State behind the task tracker UI."""

    def __init__(self, client: TaskTrackerClient) -> None:
        self._client = client
        self.tasks: list[TaskView] = []
        self.error: str | None = None
        self.loading = True

    @property
    def pending(self) -> list[TaskView]:
        return [t for t in self.tasks if t.is_pending]

    @property
    def completed(self) -> list[TaskView]:
        return [t for t in self.tasks if t.is_completed]

    def dismiss_error(self) -> None:
        self.error = None

    async def load(self) -> None:
        """Initial fetch. The only call that drives ``loading``."""
        self.loading = True
        try:
            await self.refresh()
        finally:
            self.loading = False

    async def refresh(self) -> bool:
        """Replace the task list with a fresh copy from the API."""
        self.error = None
        try:
            self.tasks = await self._client.list_tasks()
        except TaskTrackerClientError as exc:
            self._record_failure(exc)
            return False
        return True

    async def add_task(
        self,
        title: str,
        description: str | None = None,
        priority: str = DEFAULT_PRIORITY,
    ) -> bool:
        if not await self._run(lambda: self._client.add_task(title, description, priority)):
            return False
        return await self.refresh()

    async def complete_task(self, task_id: str) -> bool:
        if not await self._run(lambda: self._client.complete_task(task_id)):
            return False
        return await self.refresh()

    async def delete_task(self, task_id: str) -> bool:
        if not await self._run(lambda: self._client.delete_task(task_id)):
            return False
        return await self.refresh()

    async def _run(self, action: Callable[[], Awaitable[object]]) -> bool:
        """Run one API call; on failure keep its message in ``error``."""
        self.error = None
        try:
            await action()
        except TaskTrackerClientError as exc:
            self._record_failure(exc)
            return False
        return True

    def _record_failure(self, exc: TaskTrackerClientError) -> None:
        logger.info("task_board_action_failed", message=exc.message)
        self.error = exc.message
