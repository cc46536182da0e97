"""Task endpoints, nested under the owning list."""

from uuid import UUID

from fastapi import APIRouter
from pydantic import BaseModel, Field

from tasklist.core.modules.task.models import Task
from tasklist.web.deps import AppDep, CurrentUserIdDep
from tasklist.web.openapi import ErrorResponse

router: APIRouter = APIRouter(tags=["tasks"])

LIST_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Not authenticated"},
    404: {"model": ErrorResponse, "description": "List or task not found"},
}


class CreateTaskRequest(BaseModel):
    """Request to create a task."""

    title: str = Field(..., min_length=1, description="Task title")


class UpdateTaskRequest(BaseModel):
    """Partial task update; omitted fields are left unchanged."""

    title: str | None = Field(None, min_length=1, description="New title")
    completed: bool | None = Field(None, description="Completion flag")


@router.get(
    "/lists/{list_id}/tasks",
    summary="List tasks",
    operation_id="getTasks",
    responses={200: {"description": "Tasks in the list"}, **LIST_RESPONSES},
)
async def get_tasks(list_id: UUID, app: AppDep, user_id: CurrentUserIdDep) -> list[Task]:
    return await app.get_tasks(user_id, list_id)


@router.post(
    "/lists/{list_id}/tasks",
    summary="Create task",
    operation_id="createTask",
    responses={200: {"description": "Created task"}, **LIST_RESPONSES},
)
async def create_task(list_id: UUID, request: CreateTaskRequest, app: AppDep, user_id: CurrentUserIdDep) -> Task:
    return await app.create_task(user_id, list_id, request.title)


@router.patch(
    "/lists/{list_id}/tasks/{task_id}",
    summary="Update task",
    operation_id="updateTask",
    responses={
        200: {"description": "Updated task"},
        400: {"model": ErrorResponse, "description": "Nothing to update"},
        **LIST_RESPONSES,
    },
)
async def update_task(
    list_id: UUID, task_id: UUID, request: UpdateTaskRequest, app: AppDep, user_id: CurrentUserIdDep
) -> Task:
    return await app.update_task(user_id, list_id, task_id, request.title, request.completed)


@router.delete(
    "/lists/{list_id}/tasks/{task_id}",
    summary="Delete task",
    description="Delete a task and return the removed document.",
    operation_id="deleteTask",
    responses={200: {"description": "Removed task"}, **LIST_RESPONSES},
)
async def delete_task(list_id: UUID, task_id: UUID, app: AppDep, user_id: CurrentUserIdDep) -> Task:
    return await app.delete_task(user_id, list_id, task_id)
