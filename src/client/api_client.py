"""Async HTTP client for the task tracker API."""

from types import TracebackType
from typing import Any

import httpx
import structlog

from client.models import DEFAULT_PRIORITY, TaskView

logger = structlog.get_logger()

DEFAULT_BASE_URL = "http://localhost:5000"
TASKS_PATH = "/api/tasks"


class TaskTrackerClientError(Exception):
    """The API reported a failure.

    ``message`` is the server's message verbatim, or the transport error
    text when the server could not be reached.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class TaskTrackerClient:
    """Thin wrapper over the six task endpoints.

    Use as an async context manager, or call ``aclose()`` when done.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "TaskTrackerClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def list_tasks(self) -> list[TaskView]:
        """Fetch every task, newest created first."""
        data = await self._request("GET", TASKS_PATH)
        return [TaskView.model_validate(item) for item in data["allTasks"]]

    async def list_pending(self) -> list[TaskView]:
        data = await self._request("GET", f"{TASKS_PATH}/pending")
        return [TaskView.model_validate(item) for item in data]

    async def list_completed(self) -> list[TaskView]:
        data = await self._request("GET", f"{TASKS_PATH}/completed")
        return [TaskView.model_validate(item) for item in data]

    async def add_task(
        self,
        title: str,
        description: str | None = None,
        priority: str = DEFAULT_PRIORITY,
    ) -> TaskView:
        payload: dict[str, Any] = {"title": title, "priority": priority}
        if description:
            payload["description"] = description
        data = await self._request("POST", TASKS_PATH, json=payload)
        return TaskView.model_validate(data)

    async def complete_task(self, task_id: str) -> TaskView:
        data = await self._request("PUT", f"{TASKS_PATH}/{task_id}/complete")
        return TaskView.model_validate(data)

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", f"{TASKS_PATH}/{task_id}")

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request and unwrap the response envelope's ``data``."""
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("task_api_unreachable", method=method, path=path, error=str(exc))
            raise TaskTrackerClientError(str(exc) or type(exc).__name__) from exc

        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {}

        if response.is_error or not body.get("success", False):
            message = body.get("message") or f"Request failed with status {response.status_code}"
            logger.info(
                "task_api_error",
                method=method,
                path=path,
                status_code=response.status_code,
                message=message,
            )
            raise TaskTrackerClientError(message, status_code=response.status_code)

        return body.get("data")
