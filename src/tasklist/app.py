from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any
from uuid import UUID

from pymongo import AsyncMongoClient

from tasklist.config import Config
from tasklist.core.core import Core
from tasklist.core.modules.access.models import VerifiedSession
from tasklist.core.modules.task.models import Task
from tasklist.core.modules.todolist.models import TodoList
from tasklist.core.modules.token.models import AccessToken, TokenPair
from tasklist.core.modules.user.models import User, UserView


class App:
    """Facade for all application operations.

    Identity comes from the two guards (`authenticate`, `verify_session`);
    everything after them trusts the user id it is given and only enforces
    ownership.
    """

    def __init__(self, config: Config, mongo_client: AsyncMongoClient[dict[str, Any]] | None = None) -> None:
        self._core = Core(config, mongo_client)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    # === Guards ===
    def authenticate(self, access_token: str | None) -> UUID:
        """Verify an access token and return the user id it was issued to."""
        return self._core.services.access.authenticate(access_token)

    async def verify_session(self, user_id: str | None, refresh_token: str | None) -> VerifiedSession:
        """Verify a refresh token against the session list of the claimed user."""
        return await self._core.services.access.verify_session(user_id, refresh_token)

    # === Users and sessions ===
    async def signup(self, email: str, password: str) -> tuple[UserView, TokenPair]:
        """Create a user and open their first session."""
        user = await self._core.services.user.create_user(email, password)
        tokens = await self._issue_tokens(user)
        return UserView.from_domain(user), tokens

    async def login(self, email: str, password: str) -> tuple[UserView, TokenPair]:
        """Check credentials and open a new session."""
        user = await self._core.services.user.find_by_credentials(email, password)
        tokens = await self._issue_tokens(user)
        return UserView.from_domain(user), tokens

    async def refresh_access_token(self, session: VerifiedSession) -> AccessToken:
        """Mint a new access token for a verified refresh session."""
        return self._core.services.token.generate_access_token(session.user)

    async def logout(self, session: VerifiedSession) -> None:
        """Remove the refresh session that authenticated this request."""
        await self._core.services.session.invalidate_session(session.user_id, session.refresh_token)

    # === Lists ===
    async def get_lists(self, current_user_id: UUID) -> list[TodoList]:
        return await self._core.services.todolist.get_lists(current_user_id)

    async def create_list(self, current_user_id: UUID, title: str) -> TodoList:
        return await self._core.services.todolist.create_list(current_user_id, title)

    async def update_list(self, current_user_id: UUID, list_id: UUID, title: str) -> TodoList:
        return await self._core.services.todolist.update_title(list_id, current_user_id, title)

    async def delete_list(self, current_user_id: UUID, list_id: UUID) -> TodoList:
        """Delete a list and every task in it."""
        return await self._core.services.todolist.delete_list(list_id, current_user_id)

    # === Tasks ===
    async def get_tasks(self, current_user_id: UUID, list_id: UUID) -> list[Task]:
        todo_list = await self._resolve_list(current_user_id, list_id)
        return await self._core.services.task.get_tasks(todo_list.id)

    async def create_task(self, current_user_id: UUID, list_id: UUID, title: str) -> Task:
        todo_list = await self._resolve_list(current_user_id, list_id)
        return await self._core.services.task.create_task(todo_list.id, title)

    async def update_task(
        self,
        current_user_id: UUID,
        list_id: UUID,
        task_id: UUID,
        title: str | None = None,
        completed: bool | None = None,
    ) -> Task:
        todo_list = await self._resolve_list(current_user_id, list_id)
        return await self._core.services.task.update_task(todo_list.id, task_id, title, completed)

    async def delete_task(self, current_user_id: UUID, list_id: UUID, task_id: UUID) -> Task:
        todo_list = await self._resolve_list(current_user_id, list_id)
        return await self._core.services.task.delete_task(todo_list.id, task_id)

    # === Private helpers ===
    async def _issue_tokens(self, user: User) -> TokenPair:
        refresh_token = await self._core.services.session.create_session(user.id)
        access_token = self._core.services.token.generate_access_token(user)
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    async def _resolve_list(self, current_user_id: UUID, list_id: UUID) -> TodoList:
        """Resolve a list owned by the current user. Raises NotFoundError otherwise."""
        return await self._core.services.todolist.get_owned_list(list_id, current_user_id)
