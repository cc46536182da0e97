import asyncio
import secrets
from typing import Any
from uuid import UUID

import structlog
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from tasklist.core.core import Service
from tasklist.core.modules.session.models import RefreshToken, Session
from tasklist.core.modules.user.models import User
from tasklist.core.modules.user.password import hash_password, verify_dummy_password, verify_password
from tasklist.core.modules.user.validators import validate_email, validate_password
from tasklist.errors import InvalidCredentialsError, UserNotFoundError, ValidationError
from tasklist.utils import normalize_email

logger = structlog.get_logger(__name__)


class UserService(Service):
    """Manages users with in-memory cache."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("users")
        self._users: dict[UUID, User] = {}

    def get_user(self, user_id: UUID) -> User:
        """Get user by ID from cache."""
        if user_id not in self._users:
            raise UserNotFoundError(f"User '{user_id}' not found")
        return self._users[user_id]

    def get_user_by_email(self, email: str) -> User | None:
        """Get user by email from cache, None if unknown."""
        email = normalize_email(email)
        return next((u for u in self._users.values() if u.email == email), None)

    def has_user(self, user_id: UUID) -> bool:
        """Check if user exists by ID."""
        return user_id in self._users

    def has_email(self, email: str) -> bool:
        return self.get_user_by_email(email) is not None

    async def create_user(self, email: str, password: str) -> User:
        """Create user with hashed password and a fresh token salt."""
        email = normalize_email(email)
        validate_email(email)
        if self.has_email(email):
            raise ValidationError(f"User '{email}' already exists")
        validate_password(password)

        password_hash = await asyncio.to_thread(hash_password, password, self.core.config.bcrypt_rounds)
        user = User(email=email, password_hash=password_hash, token_salt=secrets.token_hex(16))
        try:
            res = await self._collection.insert_one(user.to_mongo())
        except DuplicateKeyError as e:
            raise ValidationError(f"User '{email}' already exists") from e

        logger.info("user_created", user_id=str(user.id))
        return await self.update_user_cache(res.inserted_id)

    async def find_by_credentials(self, email: str, password: str) -> User:
        """Resolve a user by email and password.

        Unknown emails still pay for one bcrypt check so both failure paths take
        the same time.
        """
        user = self.get_user_by_email(email)
        if user is None:
            await asyncio.to_thread(verify_dummy_password, password, self.core.config.bcrypt_rounds)
            raise InvalidCredentialsError

        if not await asyncio.to_thread(verify_password, password, user.password_hash):
            logger.debug("login_rejected", user_id=str(user.id))
            raise InvalidCredentialsError
        return user

    async def find_by_id_and_token(self, user_id: UUID, refresh_token: RefreshToken) -> User | None:
        """Load a user straight from the store if it holds the given session token."""
        document = await self._collection.find_one({"_id": user_id, "sessions.token": refresh_token})
        return User.from_mongo(document)

    async def cache_session(self, user_id: UUID, session: Session) -> None:
        """Mirror a stored session push, dropping cached sessions that have expired.

        Cached sessions are advisory. The refresh guard reads sessions from the store.
        """
        user = self._users.get(user_id)
        if user is None:
            await self.update_user_cache(user_id)
            return
        user.sessions = [*(s for s in user.sessions if not s.is_expired()), session]

    def uncache_session(self, user_id: UUID, refresh_token: RefreshToken) -> None:
        """Mirror a stored session pull."""
        user = self._users.get(user_id)
        if user is not None:
            user.sessions = [s for s in user.sessions if s.token != refresh_token]

    async def update_all_users_cache(self) -> None:
        """Reload all users cache from database."""
        users = await User.list_cursor(self._collection.find())
        self._users = {user.id: user for user in users}

    async def update_user_cache(self, user_id: UUID) -> User:
        """Reload a specific user cache from database."""
        user = User.from_mongo(await self._collection.find_one({"_id": user_id}))
        if user is None:
            raise UserNotFoundError(f"User '{user_id}' not found")
        self._users[user_id] = user
        return user

    async def on_start(self) -> None:
        """Initialize indexes and cache."""
        await self._collection.create_index([("email", 1)], unique=True)
        await self.update_all_users_cache()
        logger.debug("user_service_started", user_count=len(self._users))
