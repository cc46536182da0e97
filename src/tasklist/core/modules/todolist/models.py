from datetime import datetime
from uuid import UUID

from pydantic import Field

from tasklist.core.db import MongoModel
from tasklist.utils import now


class TodoList(MongoModel):
    """Named list of tasks owned by a single user."""

    title: str
    user_id: UUID  # Owner; every query filters on it
    created_at: datetime = Field(default_factory=now)
