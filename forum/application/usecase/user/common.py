"""Shared user response models."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import User


class UserInfo(BaseModel):
    """Public view of a user. Never carries the password hash."""

    user_id: str
    name: str
    username: str
    email: str
    is_moderator: bool
    is_blocked: bool
    created_at: datetime


def user_info(user: User) -> UserInfo:
    """Build the public response model for a user."""
    return UserInfo(
        user_id=str(user.id),
        name=user.name,
        username=user.username,
        email=user.email,
        is_moderator=user.is_moderator,
        is_blocked=user.is_blocked,
        created_at=user.created_at,
    )
