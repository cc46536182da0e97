from uuid import UUID

from pydantic import BaseModel

from tasklist.core.modules.session.models import RefreshToken
from tasklist.core.modules.user.models import User


class VerifiedSession(BaseModel):
    """Identity established by the refresh-session guard."""

    user_id: UUID
    user: User
    refresh_token: RefreshToken
