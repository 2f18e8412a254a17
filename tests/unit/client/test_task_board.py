"""Unit tests for the task board view model."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from client.api_client import TaskTrackerClientError
from client.board import TaskBoard
from client.models import TaskView


def _view(title: str, status: str = "pending") -> TaskView:
    now = datetime(2026, 5, 1, 12, 0, 0)
    return TaskView(
        id=title,
        title=title,
        status=status,
        created_at=now,
        completed_at=now if status == "completed" else None,
    )


@pytest.fixture
def api() -> AsyncMock:
    api = AsyncMock()
    api.list_tasks.return_value = []
    return api


class TestTaskBoard:
    def test_starts_loading_with_no_tasks(self, api: AsyncMock) -> None:
        board = TaskBoard(api)

        assert board.loading is True
        assert board.tasks == []
        assert board.error is None

    @pytest.mark.asyncio
    async def test_load_clears_loading_even_on_failure(self, api: AsyncMock) -> None:
        api.list_tasks.side_effect = TaskTrackerClientError("Server Error")
        board = TaskBoard(api)

        await board.load()

        assert board.loading is False
        assert board.error == "Server Error"

    @pytest.mark.asyncio
    async def test_views_are_computed_from_full_list(self, api: AsyncMock) -> None:
        api.list_tasks.return_value = [_view("b", "completed"), _view("a")]
        board = TaskBoard(api)

        await board.load()

        assert [t.title for t in board.pending] == ["a"]
        assert [t.title for t in board.completed] == ["b"]

        board.tasks = [_view("c")]
        assert [t.title for t in board.pending] == ["c"]
        assert board.completed == []

    @pytest.mark.asyncio
    async def test_mutations_do_not_touch_loading(self, api: AsyncMock) -> None:
        board = TaskBoard(api)
        await board.load()

        await board.add_task("New")

        assert board.loading is False
        api.add_task.assert_awaited_once_with("New", None, "Medium")
        assert api.list_tasks.await_count == 2

    @pytest.mark.asyncio
    async def test_failed_action_keeps_list_and_skips_refresh(self, api: AsyncMock) -> None:
        api.list_tasks.return_value = [_view("a")]
        api.complete_task.side_effect = TaskTrackerClientError("Task not found", 404)
        board = TaskBoard(api)
        await board.load()

        ok = await board.complete_task("missing")

        assert ok is False
        assert board.error == "Task not found"
        assert [t.title for t in board.tasks] == ["a"]
        assert api.list_tasks.await_count == 1

    @pytest.mark.asyncio
    async def test_next_request_clears_previous_error(self, api: AsyncMock) -> None:
        api.delete_task.side_effect = [TaskTrackerClientError("Task not found", 404), None]
        board = TaskBoard(api)
        await board.load()

        assert await board.delete_task("x") is False
        assert board.error == "Task not found"

        assert await board.delete_task("y") is True
        assert board.error is None

    def test_dismiss_error(self, api: AsyncMock) -> None:
        board = TaskBoard(api)
        board.error = "boom"

        board.dismiss_error()

        assert board.error is None
