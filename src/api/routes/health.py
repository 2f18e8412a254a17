"""Liveness banner and health endpoints."""

from datetime import UTC, datetime

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from api.v1.dependencies import get_task_service
from core.config import settings
from domain.services.task_service import TaskService

logger = structlog.get_logger()

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Service status, plus task store state on the detailed check."""

    status: str
    version: str
    timestamp: str
    environment: str
    task_store: str | None = None
    task_count: int | None = None


def _health(status: str, **extra: object) -> HealthResponse:
    return HealthResponse(
        status=status,
        version=settings.app_version,
        timestamp=datetime.now(UTC).isoformat(),
        environment=settings.app_env,
        **extra,
    )


@router.get("/", response_class=PlainTextResponse, summary="Liveness banner")
async def root() -> str:
    """Plain-text banner confirming the backend is up."""
    return "Task Tracker Backend is Running!"


@router.get("/health", response_model=HealthResponse, response_model_exclude_none=True)
async def health_check() -> HealthResponse:
    """Answer without touching the task store."""
    return _health("healthy")


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    summary="Health check including the task store",
)
async def detailed_health_check(
    service: TaskService = Depends(get_task_service),
) -> HealthResponse:
    """
    Count tasks through the same unit of work the task endpoints use.

    An unreachable store reports ``degraded`` with a 200 so monitors can
    tell a sick store apart from a dead process.
    """
    try:
        task_count = await service.count()
    except SQLAlchemyError as exc:
        logger.warning("task_store_unhealthy", error=str(exc))
        return _health("degraded", task_store=f"unhealthy: {exc}")

    return _health("healthy", task_store="healthy", task_count=task_count)
