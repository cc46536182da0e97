from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str = "Document not found") -> None:
        super().__init__(message)


class UserNotFoundError(NotFoundError):
    """Raised when a user id does not resolve to a stored user."""


class AuthenticationError(UserError):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class TokenMalformedError(AuthenticationError):
    """Access token is missing, cannot be decoded, or lacks required claims."""

    def __init__(self, message: str = "Access token is malformed") -> None:
        super().__init__(message)


class TokenSignatureInvalidError(AuthenticationError):
    """Access token signature does not match the expected signing key."""

    def __init__(self, message: str = "Access token signature is invalid") -> None:
        super().__init__(message)


class TokenExpiredError(AuthenticationError):
    """Access token expiry instant has been reached."""

    def __init__(self, message: str = "Access token has expired") -> None:
        super().__init__(message)


class SessionNotFoundError(AuthenticationError):
    """No matching, non-expired refresh session exists for the user."""

    def __init__(self, message: str = "Refresh token has expired or the session is invalid") -> None:
        super().__init__(message)


class InvalidCredentialsError(UserError):
    """Raised on login with an unknown email or a wrong password."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""
