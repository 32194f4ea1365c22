"""Session token encoding with pyjwt.

Tokens carry the user's ID in the standard ``sub`` claim, plus the username
for logging, and expire after ``AuthSettings.jwt_expiry_days``.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from forum.config import AuthSettings


class TokenPayload(BaseModel):
    """Decoded session token."""

    user_id: str
    username: str
    exp: datetime


class JWTError(Exception):
    """Raised for a token that is malformed, forged or expired."""

    pass


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Issue a signed session token for the user."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the token's signature and expiry and decode it.

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    return TokenPayload(
        user_id=claims["sub"],
        username=claims.get("username", ""),
        exp=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
    )
