from typing import Any

from pydantic import BaseModel, Field

# Documented on every response that hands out a token pair
TOKEN_PAIR_HEADERS: dict[str, Any] = {
    "x-access-token": {"description": "Short-lived signed access token", "schema": {"type": "string"}},
    "x-refresh-token": {"description": "Refresh token bound to a new session", "schema": {"type": "string"}},
}

ACCESS_TOKEN_HEADERS: dict[str, Any] = {
    "x-access-token": TOKEN_PAIR_HEADERS["x-access-token"],
}


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"error": "Invalid email or password", "type": "invalid_credentials"},
                {"error": "Refresh token has expired or the session is invalid", "type": "authentication_error"},
                {"error": "List not found", "type": "not_found"},
            ]
        }
    }
