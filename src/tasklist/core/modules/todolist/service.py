from typing import Any
from uuid import UUID

import structlog
from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase

from tasklist.core.core import Service
from tasklist.core.modules.todolist.models import TodoList
from tasklist.errors import NotFoundError

logger = structlog.get_logger(__name__)


class TodoListService(Service):
    """Manages lists, always scoped to the owning user."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("lists")

    async def on_start(self) -> None:
        await self._collection.create_index([("user_id", 1)])

    async def get_lists(self, user_id: UUID) -> list[TodoList]:
        cursor = self._collection.find({"user_id": user_id}).sort("created_at", 1)
        return await TodoList.list_cursor(cursor)

    async def get_owned_list(self, list_id: UUID, user_id: UUID) -> TodoList:
        """Get a list by ID if it belongs to the user."""
        todo_list = TodoList.from_mongo(await self._collection.find_one({"_id": list_id, "user_id": user_id}))
        if todo_list is None:
            raise NotFoundError(f"List '{list_id}' not found")
        return todo_list

    async def create_list(self, user_id: UUID, title: str) -> TodoList:
        todo_list = TodoList(title=title, user_id=user_id)
        await self._collection.insert_one(todo_list.to_mongo())
        return todo_list

    async def update_title(self, list_id: UUID, user_id: UUID, title: str) -> TodoList:
        document = await self._collection.find_one_and_update(
            {"_id": list_id, "user_id": user_id},
            {"$set": {"title": title}},
            return_document=ReturnDocument.AFTER,
        )
        todo_list = TodoList.from_mongo(document)
        if todo_list is None:
            raise NotFoundError(f"List '{list_id}' not found")
        return todo_list

    async def delete_list(self, list_id: UUID, user_id: UUID) -> TodoList:
        """Delete an owned list together with all of its tasks."""
        todo_list = TodoList.from_mongo(await self._collection.find_one_and_delete({"_id": list_id, "user_id": user_id}))
        if todo_list is None:
            raise NotFoundError(f"List '{list_id}' not found")

        deleted = await self.core.services.task.delete_tasks_by_list(list_id)
        logger.debug("list_deleted", list_id=str(list_id), deleted_tasks=deleted)
        return todo_list
