from typing import NewType

from pydantic import BaseModel

from tasklist.core.modules.session.models import RefreshToken

AccessToken = NewType("AccessToken", str)


class TokenPair(BaseModel):
    """Credentials handed out on signup and login."""

    access_token: AccessToken
    refresh_token: RefreshToken
