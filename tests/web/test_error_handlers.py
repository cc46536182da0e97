"""Tests for mapping UserError subclasses to HTTP responses."""

import json

import pytest

from tasklist.errors import (
    InvalidCredentialsError,
    NotFoundError,
    SessionNotFoundError,
    TokenExpiredError,
    UserNotFoundError,
    ValidationError,
)
from tasklist.web.error_handlers import user_error_handler


class TestUserErrorHandler:
    """Tests for user_error_handler status codes and payloads."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("exc", "status_code", "error_type"),
        [
            (TokenExpiredError(), 401, "authentication_error"),
            (SessionNotFoundError(), 401, "authentication_error"),
            (InvalidCredentialsError(), 400, "invalid_credentials"),
            (NotFoundError("List not found"), 404, "not_found"),
            (UserNotFoundError(), 404, "not_found"),
            (ValidationError("Title is required"), 400, "validation_error"),
        ],
    )
    async def test_status_and_payload(self, exc, status_code, error_type):
        response = await user_error_handler(None, exc)  # type: ignore[arg-type]

        assert response.status_code == status_code
        assert json.loads(response.body) == {"error": str(exc), "type": error_type}
