from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from tasklist.core.db import MongoModel
from tasklist.core.modules.session.models import Session
from tasklist.utils import now


class User(MongoModel):
    """User domain model with credentials and active refresh sessions."""

    email: str  # Normalized (stripped, lower-cased), unique index
    password_hash: str  # bcrypt hash
    token_salt: str  # Random per-user salt for access token signing key derivation
    sessions: list[Session] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=now)


class UserView(BaseModel):
    """User account information (API representation)."""

    id: UUID = Field(..., description="User ID")
    email: str = Field(..., description="Email address")

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        """Create view model from domain model."""
        return cls(id=user.id, email=user.email)
