from typing import Annotated, cast
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from tasklist.app import App
from tasklist.core.modules.access.models import VerifiedSession

# Security schemes; header names are shared with existing clients
access_token_scheme = APIKeyHeader(name="x-access-token", scheme_name="AccessToken", auto_error=False)
refresh_token_scheme = APIKeyHeader(name="x-refresh-token", scheme_name="RefreshToken", auto_error=False)
user_id_scheme = APIKeyHeader(name="_id", scheme_name="UserId", auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_current_user_id(
    app: Annotated[App, Depends(get_app)],
    access_token: Annotated[str | None, Depends(access_token_scheme)] = None,
) -> UUID:
    """Access-token guard: resolve the caller's user id or fail with 401."""
    return app.authenticate(access_token)


async def get_verified_session(
    app: Annotated[App, Depends(get_app)],
    refresh_token: Annotated[str | None, Depends(refresh_token_scheme)] = None,
    user_id: Annotated[str | None, Depends(user_id_scheme)] = None,
) -> VerifiedSession:
    """Refresh-session guard: resolve user, session record and token or fail with 401."""
    return await app.verify_session(user_id, refresh_token)


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
CurrentUserIdDep = Annotated[UUID, Depends(get_current_user_id)]
VerifiedSessionDep = Annotated[VerifiedSession, Depends(get_verified_session)]
