from datetime import datetime, timedelta
from uuid import UUID

from tasklist.core.core import Service
from tasklist.core.modules.token import codec
from tasklist.core.modules.token.models import AccessToken
from tasklist.core.modules.user.models import User
from tasklist.errors import TokenSignatureInvalidError


class TokenService(Service):
    """Issues and verifies access tokens using per-user derived signing keys."""

    def signing_key_for(self, user: User) -> str:
        return codec.derive_signing_key(self.core.config.jwt_secret, user.token_salt)

    def generate_access_token(self, user: User, issued_at: datetime | None = None) -> AccessToken:
        ttl = timedelta(minutes=self.core.config.access_token_ttl_minutes)
        return codec.issue_access_token(user.id, self.signing_key_for(user), ttl, issued_at)

    def verify_access_token(self, token: str, at: datetime | None = None) -> UUID:
        """Return the user id of a valid token.

        The salt comes from the in-memory user cache, so no store I/O happens.
        A subject with no known user has no key to verify against.
        """
        user_id = codec.read_unverified_subject(token)
        if not self.core.services.user.has_user(user_id):
            raise TokenSignatureInvalidError
        user = self.core.services.user.get_user(user_id)
        return codec.verify_access_token(token, self.signing_key_for(user), at)
