"""Tests for user input validators."""

import pytest

from tasklist.core.modules.user.validators import validate_email, validate_password
from tasklist.errors import ValidationError


class TestValidatePassword:
    """Tests for validate_password function."""

    def test_valid_password_accepted(self):
        validate_password("secret1")

    def test_short_password_rejected(self):
        with pytest.raises(ValidationError, match="at least 6 characters"):
            validate_password("abc")

    def test_whitespace_rejected(self):
        with pytest.raises(ValidationError, match="whitespace"):
            validate_password("secret 1")

    def test_password_over_bcrypt_limit_rejected(self):
        """Test that passwords bcrypt would silently truncate are refused."""
        with pytest.raises(ValidationError, match="at most 72 bytes"):
            validate_password("x" * 73)


class TestValidateEmail:
    """Tests for validate_email function."""

    def test_valid_email_accepted(self):
        validate_email("a@b.com")

    @pytest.mark.parametrize("email", ["", "ab.com", "a@b", "a b@c.com", "a@@b.com"])
    def test_invalid_email_rejected(self, email):
        with pytest.raises(ValidationError, match="Invalid email"):
            validate_email(email)
