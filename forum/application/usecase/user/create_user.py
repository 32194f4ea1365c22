"""Create user use case."""

import logfire
from pydantic import BaseModel, Field, field_validator

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import UserService, check_password_length
from forum.domain.value import UserId

from .common import UserInfo, user_info


class CreateUserRequest(BaseModel):
    """Create user request."""

    user_id: str | None = Field(default=None, min_length=1, max_length=128)
    name: str = Field(default="", max_length=255)
    username: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=1)
    is_moderator: bool = False
    is_blocked: bool = False

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        """bcrypt only accepts 72 bytes of UTF-8, not 72 characters."""
        return check_password_length(v)


class CreateUserUseCase(BaseUseCase):
    """Use case for registering a user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> UserInfo:
        """Execute create user flow.

        Args:
            request: Registration data with plaintext password

        Returns:
            The stored user, without the password

        Raises:
            ConflictError: If the ID, username or email is already taken
        """
        user = await self.user_service.create_user(
            username=request.username,
            email=request.email,
            password=request.password,
            name=request.name,
            is_moderator=request.is_moderator,
            is_blocked=request.is_blocked,
            user_id=UserId(request.user_id) if request.user_id else None,
        )
        logfire.info("User registered", user_id=str(user.id))
        return user_info(user)
