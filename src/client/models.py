"""Task records as seen by the client."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DEFAULT_PRIORITY = "Medium"


class TaskView(BaseModel):
    """A read-only copy of a task returned by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    title: str
    description: str | None = None
    priority: str = DEFAULT_PRIORITY
    status: str = "pending"
    created_at: datetime
    completed_at: datetime | None = None

    @property
    def is_pending(self) -> bool:
        return self.status == "pending"

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"
