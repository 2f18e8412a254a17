"""Integration tests for the async API client against the real app."""

from collections.abc import AsyncGenerator
from uuid import uuid4

import httpx
import pytest
from fastapi import FastAPI
from httpx import ASGITransport

from client.api_client import TaskTrackerClient, TaskTrackerClientError
from client.board import TaskBoard


@pytest.fixture
async def api(app: FastAPI) -> AsyncGenerator[TaskTrackerClient, None]:
    async with TaskTrackerClient("http://test", transport=ASGITransport(app=app)) as c:
        yield c


class TestTaskTrackerClient:
    @pytest.mark.asyncio
    async def test_full_lifecycle(self, api: TaskTrackerClient) -> None:
        created = await api.add_task("Buy milk", priority="High")

        assert created.title == "Buy milk"
        assert created.priority == "High"
        assert created.is_pending
        assert created.completed_at is None

        completed = await api.complete_task(created.id)
        assert completed.is_completed
        assert completed.completed_at is not None

        assert [t.id for t in await api.list_completed()] == [created.id]
        assert await api.list_pending() == []

        await api.delete_task(created.id)
        assert await api.list_tasks() == []

    @pytest.mark.asyncio
    async def test_validation_failure_surfaces_server_message(
        self, api: TaskTrackerClient
    ) -> None:
        with pytest.raises(TaskTrackerClientError) as exc_info:
            await api.add_task("   ")

        assert exc_info.value.message == "Validation Error"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_not_found_surfaces_server_message(self, api: TaskTrackerClient) -> None:
        with pytest.raises(TaskTrackerClientError) as exc_info:
            await api.delete_task(str(uuid4()))

        assert exc_info.value.message == "Task not found"
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_transport_failure_becomes_client_error(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with TaskTrackerClient(transport=httpx.MockTransport(refuse)) as api:
            with pytest.raises(TaskTrackerClientError, match="connection refused"):
                await api.list_tasks()


class TestTaskBoardAgainstApp:
    @pytest.mark.asyncio
    async def test_board_refreshes_after_each_action(self, api: TaskTrackerClient) -> None:
        board = TaskBoard(api)

        await board.load()
        assert board.loading is False
        assert board.tasks == []

        assert await board.add_task("First") is True
        assert await board.add_task("Second", priority="Low") is True
        assert [t.title for t in board.pending] == ["Second", "First"]

        first = next(t for t in board.tasks if t.title == "First")
        assert await board.complete_task(first.id) is True
        assert [t.title for t in board.completed] == ["First"]
        assert [t.title for t in board.pending] == ["Second"]

        assert await board.delete_task(first.id) is True
        assert [t.title for t in board.tasks] == ["Second"]
        assert board.error is None

    @pytest.mark.asyncio
    async def test_board_records_failure_message(self, api: TaskTrackerClient) -> None:
        board = TaskBoard(api)
        await board.load()

        assert await board.complete_task(str(uuid4())) is False
        assert board.error == "Task not found"

        board.dismiss_error()
        assert board.error is None
