import re
from datetime import UTC, datetime

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def is_email(value: str) -> bool:
    return bool(EMAIL_RE.fullmatch(value))


def normalize_email(value: str) -> str:
    return value.strip().lower()


def now() -> datetime:
    return datetime.now(UTC)


def is_expired(expires_at: datetime, at: datetime | None = None) -> bool:
    """Closed-open validity: a value expiring at `at` is no longer valid.

    Naive datetimes are treated as UTC.
    """
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=UTC)
    return expires_at <= (at or now())
