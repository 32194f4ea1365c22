"""Password hashing domain service."""

import bcrypt
import logfire

from forum.config import AuthSettings
from forum.domain.error import ValidationError

from .base import Service

# bcrypt ignores or rejects anything past this many bytes
MAX_PASSWORD_BYTES = 72


def check_password_length(password: str) -> str:
    """Reject passwords bcrypt cannot hash whole.

    The limit is on UTF-8 bytes, so multibyte characters count more than once.

    Raises:
        ValueError: If the encoded password is longer than MAX_PASSWORD_BYTES
    """
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return password


class PasswordService(Service):
    """Hashes and checks user passwords with bcrypt.

    Every hash gets a fresh random salt, so hashing the same password
    twice yields different strings that both verify.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.rounds = auth_settings.bcrypt_rounds

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password

        Returns:
            bcrypt hash as text

        Raises:
            ValidationError: If the password is too long for bcrypt
        """
        try:
            check_password_length(password)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        with logfire.span("password_service.hash_password", rounds=self.rounds):
            hashed = bcrypt.hashpw(
                password.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds)
            )
            return hashed.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash."""
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            # No stored hash can match a password that was never hashable
            return False
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError:
            # Stored value is not a bcrypt hash
            logfire.warn("Stored password is not a valid bcrypt hash")
            return False
