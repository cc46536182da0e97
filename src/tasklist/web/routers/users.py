from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from tasklist.core.modules.token.models import TokenPair
from tasklist.core.modules.user.models import UserView
from tasklist.web.deps import AppDep, VerifiedSessionDep
from tasklist.web.openapi import ACCESS_TOKEN_HEADERS, TOKEN_PAIR_HEADERS, ErrorResponse

router = APIRouter(tags=["users"])


class CredentialsRequest(BaseModel):
    """Email and password, used for both signup and login."""

    email: str = Field(..., min_length=1, description="Email address (case-insensitive)")
    password: str = Field(..., min_length=1, description="Plaintext password")


class AccessTokenResponse(BaseModel):
    """Freshly minted access token."""

    access_token: str = Field(..., alias="accessToken", description="Signed access token")

    model_config = {"populate_by_name": True}


def set_token_headers(response: Response, tokens: TokenPair) -> None:
    response.headers["x-refresh-token"] = tokens.refresh_token
    response.headers["x-access-token"] = tokens.access_token


@router.post(
    "/users",
    summary="Sign up",
    description="Create an account. The token pair for the first session is returned in response headers.",
    operation_id="signup",
    responses={
        200: {"description": "User created", "headers": TOKEN_PAIR_HEADERS},
        400: {"model": ErrorResponse, "description": "Invalid email/password or email already registered"},
    },
)
async def signup(credentials: CredentialsRequest, app: AppDep, response: Response) -> UserView:
    user, tokens = await app.signup(credentials.email, credentials.password)
    set_token_headers(response, tokens)
    return user


@router.post(
    "/users/login",
    summary="Log in",
    description="Authenticate with email and password. A new session is opened on every login.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated", "headers": TOKEN_PAIR_HEADERS},
        400: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(credentials: CredentialsRequest, app: AppDep, response: Response) -> UserView:
    user, tokens = await app.login(credentials.email, credentials.password)
    set_token_headers(response, tokens)
    return user


@router.get(
    "/users/me/access-token",
    summary="Refresh access token",
    description="Exchange a valid refresh token (x-refresh-token) and user id (_id) for a new access token.",
    operation_id="refreshAccessToken",
    responses={
        200: {"description": "New access token", "headers": ACCESS_TOKEN_HEADERS},
        401: {"model": ErrorResponse, "description": "Refresh token has expired or the session is invalid"},
    },
)
async def refresh_access_token(app: AppDep, session: VerifiedSessionDep, response: Response) -> AccessTokenResponse:
    access_token = await app.refresh_access_token(session)
    response.headers["x-access-token"] = access_token
    return AccessTokenResponse(access_token=access_token)


@router.delete(
    "/users/me/session",
    summary="Log out",
    description="Delete the session bound to the presented refresh token.",
    operation_id="logout",
    status_code=204,
    responses={
        204: {"description": "Session deleted"},
        401: {"model": ErrorResponse, "description": "Refresh token has expired or the session is invalid"},
    },
)
async def logout(app: AppDep, session: VerifiedSessionDep) -> None:
    await app.logout(session)
