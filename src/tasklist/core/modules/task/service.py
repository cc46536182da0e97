from typing import Any
from uuid import UUID

from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase

from tasklist.core.core import Service
from tasklist.core.modules.task.models import Task
from tasklist.errors import NotFoundError, ValidationError


class TaskService(Service):
    """Manages tasks. Callers check list ownership before calling in."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("tasks")

    async def on_start(self) -> None:
        await self._collection.create_index([("list_id", 1)])

    async def get_tasks(self, list_id: UUID) -> list[Task]:
        cursor = self._collection.find({"list_id": list_id}).sort("created_at", 1)
        return await Task.list_cursor(cursor)

    async def create_task(self, list_id: UUID, title: str) -> Task:
        task = Task(title=title, list_id=list_id)
        await self._collection.insert_one(task.to_mongo())
        return task

    async def update_task(
        self, list_id: UUID, task_id: UUID, title: str | None = None, completed: bool | None = None
    ) -> Task:
        """Partially update a task; None values are left untouched."""
        changes: dict[str, Any] = {}
        if title is not None:
            changes["title"] = title
        if completed is not None:
            changes["completed"] = completed
        if not changes:
            raise ValidationError("Nothing to update")

        document = await self._collection.find_one_and_update(
            {"_id": task_id, "list_id": list_id},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        task = Task.from_mongo(document)
        if task is None:
            raise NotFoundError(f"Task '{task_id}' not found")
        return task

    async def delete_task(self, list_id: UUID, task_id: UUID) -> Task:
        task = Task.from_mongo(await self._collection.find_one_and_delete({"_id": task_id, "list_id": list_id}))
        if task is None:
            raise NotFoundError(f"Task '{task_id}' not found")
        return task

    async def delete_tasks_by_list(self, list_id: UUID) -> int:
        """Delete all tasks in a list and return count of deleted tasks."""
        result = await self._collection.delete_many({"list_id": list_id})
        return result.deleted_count
