"""Tests for refresh session expiry."""

from datetime import UTC, datetime, timedelta

from tasklist.core.modules.session.models import RefreshToken, Session, has_refresh_token_expired

EXPIRES_AT = datetime(2025, 1, 11, 12, 0, 0, tzinfo=UTC)


class TestHasRefreshTokenExpired:
    """Tests for has_refresh_token_expired function."""

    def test_before_expiry_is_valid(self):
        assert has_refresh_token_expired(EXPIRES_AT, at=EXPIRES_AT - timedelta(seconds=1)) is False

    def test_expiry_instant_is_expired(self):
        assert has_refresh_token_expired(EXPIRES_AT, at=EXPIRES_AT) is True

    def test_after_expiry_is_expired(self):
        assert has_refresh_token_expired(EXPIRES_AT, at=EXPIRES_AT + timedelta(days=1)) is True

    def test_naive_datetime_treated_as_utc(self):
        naive = EXPIRES_AT.replace(tzinfo=None)
        assert has_refresh_token_expired(naive, at=EXPIRES_AT - timedelta(seconds=1)) is False
        assert has_refresh_token_expired(naive, at=EXPIRES_AT) is True

    def test_past_date_expired_against_wall_clock(self):
        assert has_refresh_token_expired(EXPIRES_AT) is True


class TestSession:
    """Tests for Session model."""

    def test_is_expired_delegates_to_expiry_rule(self):
        session = Session(token=RefreshToken("abc"), expires_at=EXPIRES_AT)
        assert session.is_expired(at=EXPIRES_AT - timedelta(minutes=1)) is False
        assert session.is_expired(at=EXPIRES_AT) is True
