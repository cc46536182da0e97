from uuid import UUID

import structlog

from tasklist.core.core import Service
from tasklist.core.modules.access.models import VerifiedSession
from tasklist.core.modules.session.models import RefreshToken
from tasklist.errors import AuthenticationError, SessionNotFoundError, TokenMalformedError, UserNotFoundError

logger = structlog.get_logger(__name__)

# Clients of the original API match on these messages
USER_NOT_FOUND_MESSAGE = "User not found. Make sure that the refresh token and user id are correct"
SESSION_INVALID_MESSAGE = "Refresh token has expired or the session is invalid"


class AccessService(Service):
    """Request-time guards deriving a trusted user identity from credentials."""

    def authenticate(self, access_token: str | None) -> UUID:
        """Stateless guard: verify an access token and return its user id."""
        if not access_token:
            raise TokenMalformedError("Access token is missing")
        try:
            return self.core.services.token.verify_access_token(access_token)
        except AuthenticationError as e:
            logger.debug("access_token_rejected", reason=type(e).__name__)
            raise

    async def verify_session(self, user_id: str | None, refresh_token: str | None) -> VerifiedSession:
        """Stateful guard: check the refresh token against the user's session list."""
        if not user_id or not refresh_token:
            raise AuthenticationError(USER_NOT_FOUND_MESSAGE)
        try:
            parsed_user_id = UUID(user_id)
        except ValueError as e:
            raise AuthenticationError(USER_NOT_FOUND_MESSAGE) from e

        sessions = self.core.services.session
        try:
            user = await sessions.find_session_owner(parsed_user_id, RefreshToken(refresh_token))
        except UserNotFoundError as e:
            logger.debug("refresh_rejected", reason="user_not_found")
            raise AuthenticationError(USER_NOT_FOUND_MESSAGE) from e

        if not sessions.is_session_valid(user, refresh_token):
            logger.debug("refresh_rejected", reason="session_invalid", user_id=str(user.id))
            raise SessionNotFoundError(SESSION_INVALID_MESSAGE)

        return VerifiedSession(user_id=user.id, user=user, refresh_token=RefreshToken(refresh_token))
