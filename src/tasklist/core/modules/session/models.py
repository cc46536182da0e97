"""Refresh-token session models."""

from datetime import datetime
from typing import NewType

from pydantic import BaseModel

from tasklist.utils import is_expired

RefreshToken = NewType("RefreshToken", str)


def has_refresh_token_expired(expires_at: datetime, at: datetime | None = None) -> bool:
    """Check a session expiry; the expiry instant itself is already expired."""
    return is_expired(expires_at, at)


class Session(BaseModel):
    """Refresh-token grant embedded in the owning user document.

    Entries are appended on login/signup and pulled on logout or once expired,
    never edited in place. Indexed on sessions.token via the users collection.
    """

    token: RefreshToken
    expires_at: datetime

    def is_expired(self, at: datetime | None = None) -> bool:
        return has_refresh_token_expired(self.expires_at, at)
