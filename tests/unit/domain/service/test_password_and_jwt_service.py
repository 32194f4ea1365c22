"""Unit tests for PasswordService and JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from forum.config import AuthSettings
from forum.domain.error import ValidationError
from forum.domain.service import JWTService, PasswordService
from forum.util.jwt import JWTError


class TestPasswordService:
    """Tests for bcrypt hashing."""

    def test_hash_verifies(self):
        service = PasswordService(AuthSettings(bcrypt_rounds=4))

        hashed = service.hash_password("hunter2")

        assert hashed != "hunter2"
        assert service.verify_password("hunter2", hashed) is True
        assert service.verify_password("hunter3", hashed) is False

    def test_configured_rounds_are_used(self):
        service = PasswordService(AuthSettings(bcrypt_rounds=5))

        hashed = service.hash_password("hunter2")

        assert hashed.split("$")[2] == "05"

    def test_non_bcrypt_hash_does_not_verify(self):
        service = PasswordService(AuthSettings(bcrypt_rounds=4))

        assert service.verify_password("hunter2", "not-a-hash") is False

    def test_password_over_72_bytes_is_rejected(self):
        service = PasswordService(AuthSettings(bcrypt_rounds=4))

        # 37 two-byte characters: 37 characters but 74 bytes
        with pytest.raises(ValidationError, match="72 bytes"):
            service.hash_password("é" * 37)

    def test_password_of_exactly_72_bytes_hashes(self):
        service = PasswordService(AuthSettings(bcrypt_rounds=4))

        hashed = service.hash_password("é" * 36)

        assert service.verify_password("é" * 36, hashed) is True

    def test_overlong_password_never_verifies(self):
        service = PasswordService(AuthSettings(bcrypt_rounds=4))
        hashed = service.hash_password("é" * 36)

        assert service.verify_password("é" * 40, hashed) is False


class TestJWTService:
    """Tests for token creation and verification."""

    def test_round_trip_payload(self):
        service = JWTService(AuthSettings(jwt_secret="test-secret"))

        token = service.create_token(user_id="u1", username="alice")
        payload = service.verify_token(token)

        assert payload.user_id == "u1"
        assert payload.username == "alice"

    def test_token_signed_with_other_secret_is_rejected(self):
        issuer = JWTService(AuthSettings(jwt_secret="secret-one"))
        verifier = JWTService(AuthSettings(jwt_secret="secret-two"))

        token = issuer.create_token(user_id="u1", username="alice")

        with pytest.raises(JWTError, match="Invalid token"):
            verifier.verify_token(token)

    def test_expired_token_is_rejected(self):
        settings = AuthSettings(jwt_secret="test-secret")
        service = JWTService(settings)
        token = jwt.encode(
            {
                "sub": "u1",
                "username": "alice",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            service.verify_token(token)

    def test_get_user_id_from_token_tolerates_bad_input(self):
        service = JWTService(AuthSettings(jwt_secret="test-secret"))

        assert service.get_user_id_from_token(None) is None
        assert service.get_user_id_from_token("garbage") is None
        token = service.create_token(user_id="u1", username="alice")
        assert service.get_user_id_from_token(token) == "u1"
