import secrets
from datetime import datetime, timedelta
from typing import Any
from uuid import UUID

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from tasklist.core.core import Service
from tasklist.core.modules.session.models import RefreshToken, Session
from tasklist.core.modules.user.models import User
from tasklist.errors import UserNotFoundError
from tasklist.utils import now

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Manages refresh-token sessions embedded in user documents.

    Every mutation is a single atomic update on the user document ($push/$pull),
    so concurrent logins for the same user never overwrite each other.
    """

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("users")

    async def on_start(self) -> None:
        """Create indexes on startup."""
        await self._collection.create_index([("sessions.token", 1)])

    async def create_session(self, user_id: UUID) -> RefreshToken:
        """Append a new refresh session to the user and return its token."""
        refresh_token = RefreshToken(secrets.token_urlsafe(48))
        expires_at = now() + timedelta(days=self.core.config.refresh_token_ttl_days)
        session = Session(token=refresh_token, expires_at=expires_at)

        await self.prune_expired_sessions(user_id)
        result = await self._collection.update_one(
            {"_id": user_id},
            {"$push": {"sessions": session.model_dump()}},
        )
        if result.matched_count == 0:
            raise UserNotFoundError(f"User '{user_id}' not found")

        await self.core.services.user.cache_session(user_id, session)
        logger.debug("session_created", user_id=str(user_id), expires_at=expires_at.isoformat())
        return refresh_token

    async def prune_expired_sessions(self, user_id: UUID, at: datetime | None = None) -> None:
        """Drop sessions whose expiry instant has been reached."""
        await self._collection.update_one(
            {"_id": user_id},
            {"$pull": {"sessions": {"expires_at": {"$lte": at or now()}}}},
        )

    async def find_session_owner(self, user_id: UUID, refresh_token: RefreshToken) -> User:
        """Find the user holding the refresh token; raises UserNotFoundError otherwise."""
        user = await self.core.services.user.find_by_id_and_token(user_id, refresh_token)
        if user is None:
            raise UserNotFoundError(f"User '{user_id}' not found")
        return user

    def is_session_valid(self, user: User, refresh_token: str, at: datetime | None = None) -> bool:
        """True iff the user holds a token-equal session that has not expired."""
        return any(session.token == refresh_token and not session.is_expired(at) for session in user.sessions)

    async def invalidate_session(self, user_id: UUID, refresh_token: RefreshToken) -> None:
        """Remove a single session (logout)."""
        await self._collection.update_one({"_id": user_id}, {"$pull": {"sessions": {"token": refresh_token}}})
        self.core.services.user.uncache_session(user_id, refresh_token)
        logger.debug("session_invalidated", user_id=str(user_id))
