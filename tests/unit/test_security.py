"""
Unit tests for catalog_api.core.security
"""
import time

import jwt
import pytest
from catalog_api.core.security import (
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
)
from catalog_api.domain.exceptions import ExpiredTokenError, InvalidTokenError


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("mypassword")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same")
        h2 = hash_password("same")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self):
        result = hash_password("secret123")
        assert result != "secret123"

    def test_uses_configured_cost(self, test_settings):
        assert hash_password("secret123").startswith(f"$2b${test_settings.bcrypt_rounds:02d}$")


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        hashed = hash_password("correct")
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("correct")
        assert verify_password("wrong", hashed) is False

    def test_malformed_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestJwtToken:
    """Tests for create_jwt_token and decode_jwt_token"""

    def test_create_and_decode_roundtrip(self):
        payload = {"sub": "user-123", "email": "test@example.com"}
        token = create_jwt_token(payload)
        decoded = decode_jwt_token(token)
        assert decoded["sub"] == "user-123"
        assert decoded["email"] == "test@example.com"
        assert "iat" in decoded
        assert "exp" in decoded

    def test_expiry_is_seven_days(self):
        decoded = decode_jwt_token(create_jwt_token({"sub": "user-1"}))
        assert decoded["exp"] - decoded["iat"] == 7 * 24 * 60 * 60

    def test_decode_invalid_token_raises(self):
        with pytest.raises(InvalidTokenError) as exc_info:
            decode_jwt_token("invalid.jwt.token")
        assert exc_info.value.message == "Invalid token."

    def test_decode_tampered_token_raises(self):
        token = create_jwt_token({"sub": "user-1"})
        header, payload, signature = token.split(".")
        tampered = ".".join([header, payload, signature[::-1]])
        with pytest.raises(InvalidTokenError):
            decode_jwt_token(tampered)

    def test_token_signed_with_other_secret_raises(self, test_settings):
        foreign = jwt.encode(
            {"sub": "user-1", "exp": int(time.time()) + 60},
            "some-other-secret",
            algorithm=test_settings.jwt_algorithm,
        )
        with pytest.raises(InvalidTokenError):
            decode_jwt_token(foreign)

    def test_expired_token_raises_expired(self, test_settings):
        expired = jwt.encode(
            {"sub": "user-1", "iat": int(time.time()) - 120, "exp": int(time.time()) - 60},
            test_settings.jwt_secret_key,
            algorithm=test_settings.jwt_algorithm,
        )
        with pytest.raises(ExpiredTokenError) as exc_info:
            decode_jwt_token(expired)
        assert exc_info.value.message == "Token expired."
