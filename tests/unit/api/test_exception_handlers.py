"""Unit tests for exception handlers."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from api.exception_handlers import setup_exception_handlers
from api.v1.schemas.task import TaskCreate
from core.exceptions import ErrorCode, TaskNotFoundError


def _create_test_app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)
    return app


class TestExceptionHandlers:
    @pytest.mark.asyncio
    async def test_not_found_returns_envelope(self) -> None:
        app = _create_test_app()

        @app.get("/raise-app")
        async def _() -> None:
            raise TaskNotFoundError("some-id")

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.get("/raise-app")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Task not found"}

    @pytest.mark.asyncio
    async def test_http_exception_returns_standard_format(self) -> None:
        from starlette.exceptions import HTTPException

        app = _create_test_app()

        @app.get("/raise-http")
        async def _() -> None:
            raise HTTPException(status_code=405, detail="Method Not Allowed")

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.get("/raise-http")

        assert response.status_code == 405
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Method Not Allowed"

    @pytest.mark.asyncio
    async def test_validation_error_returns_400_with_itemized_errors(self) -> None:
        app = _create_test_app()

        @app.post("/validate")
        async def _(body: TaskCreate) -> dict[str, bool]:
            return {"ok": True}

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.post("/validate", json={"title": "  ", "priority": "Urgent"})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Validation Error"
        fields = {error["field"] for error in body["errors"]}
        assert fields == {"body.title", "body.priority"}
        title_error = next(e for e in body["errors"] if e["field"] == "body.title")
        assert "Please add a task title" in title_error["message"]

    @pytest.mark.asyncio
    async def test_unhandled_exception_returns_500_with_raw_message(self) -> None:
        app = _create_test_app()

        mock_request = MagicMock()
        mock_request.state.request_id = "test-req-id"

        exc = RuntimeError("Something went wrong")

        handler = None
        for exc_class, h in app.exception_handlers.items():
            if exc_class is Exception:
                handler = h
                break

        assert handler is not None, "Global exception handler not registered"

        response = await handler(mock_request, exc)  # type: ignore[misc]

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body == {
            "success": False,
            "message": "Server Error",
            "error": "Something went wrong",
        }


class TestTaskNotFoundError:
    def test_carries_code_status_and_id(self) -> None:
        exc = TaskNotFoundError("abc")

        assert exc.error_code is ErrorCode.TASK_NOT_FOUND
        assert exc.status_code == 404
        assert exc.details == {"task_id": "abc"}
        assert list(ErrorCode) == [ErrorCode.TASK_NOT_FOUND]
