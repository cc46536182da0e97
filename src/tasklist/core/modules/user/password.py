"""One-way password hashing with bcrypt."""

from functools import cache

import bcrypt

DEFAULT_ROUNDS = 12


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a plaintext password with a fresh random salt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    A malformed hash or an over-long password is reported as a mismatch.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


@cache
def _dummy_hash(rounds: int) -> str:
    return hash_password("tasklist-dummy-password", rounds)


def verify_dummy_password(password: str, rounds: int = DEFAULT_ROUNDS) -> None:
    """Spend the same bcrypt work as a real check when the email is unknown."""
    verify_password(password, _dummy_hash(rounds))
