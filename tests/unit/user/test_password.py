"""Tests for bcrypt password hashing."""

from tasklist.core.modules.user.password import hash_password, verify_dummy_password, verify_password


class TestHashPassword:
    """Tests for hash_password function."""

    def test_hash_is_not_plaintext(self):
        """Test that the digest never contains the plaintext."""
        digest = hash_password("secret1", rounds=4)
        assert "secret1" not in digest
        assert digest.startswith("$2b$04$")

    def test_same_password_gets_distinct_salts(self):
        """Test that hashing is randomized."""
        assert hash_password("secret1", rounds=4) != hash_password("secret1", rounds=4)


class TestVerifyPassword:
    """Tests for verify_password function."""

    def test_correct_password_accepted(self):
        digest = hash_password("secret1", rounds=4)
        assert verify_password("secret1", digest) is True

    def test_wrong_password_rejected(self):
        digest = hash_password("secret1", rounds=4)
        assert verify_password("secret2", digest) is False

    def test_malformed_hash_rejected(self):
        """Test that a corrupt stored hash is a mismatch, not an exception."""
        assert verify_password("secret1", "not-a-bcrypt-hash") is False

    def test_dummy_check_does_not_raise(self):
        """Test that the unknown-user path runs a check without failing."""
        assert verify_dummy_password("anything", rounds=4) is None
