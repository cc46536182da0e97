from uuid import UUID

from fastapi import APIRouter
from pydantic import BaseModel, Field

from tasklist.core.modules.todolist.models import TodoList
from tasklist.web.deps import AppDep, CurrentUserIdDep
from tasklist.web.openapi import ErrorResponse

router = APIRouter(tags=["lists"])


class ListRequest(BaseModel):
    """Request to create or rename a list."""

    title: str = Field(..., min_length=1, description="List title")


@router.get(
    "/lists",
    summary="List lists",
    description="Get all lists owned by the authenticated user.",
    operation_id="getLists",
    responses={
        200: {"description": "Lists of the current user"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def get_lists(app: AppDep, user_id: CurrentUserIdDep) -> list[TodoList]:
    return await app.get_lists(user_id)


@router.post(
    "/lists",
    summary="Create list",
    operation_id="createList",
    responses={
        200: {"description": "Created list"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def create_list(request: ListRequest, app: AppDep, user_id: CurrentUserIdDep) -> TodoList:
    return await app.create_list(user_id, request.title)


@router.patch(
    "/lists/{list_id}",
    summary="Rename list",
    operation_id="updateList",
    responses={
        200: {"description": "Updated list"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "List not found"},
    },
)
async def update_list(list_id: UUID, request: ListRequest, app: AppDep, user_id: CurrentUserIdDep) -> TodoList:
    return await app.update_list(user_id, list_id, request.title)


@router.delete(
    "/lists/{list_id}",
    summary="Delete list",
    description="Delete a list and all of its tasks. Returns the removed list.",
    operation_id="deleteList",
    responses={
        200: {"description": "Removed list"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "List not found"},
    },
)
async def delete_list(list_id: UUID, app: AppDep, user_id: CurrentUserIdDep) -> TodoList:
    return await app.delete_list(user_id, list_id)
