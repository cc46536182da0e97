from datetime import datetime
from uuid import UUID

from pydantic import Field

from tasklist.core.db import MongoModel
from tasklist.utils import now


class Task(MongoModel):
    """Single item of a list."""

    title: str
    list_id: UUID
    completed: bool = False
    created_at: datetime = Field(default_factory=now)
