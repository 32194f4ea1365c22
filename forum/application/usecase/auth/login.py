"""Login use case."""

import logfire
from pydantic import BaseModel, Field, field_validator

from forum.domain.error import AuthenticationError
from forum.domain.service import JWTService, UserService, check_password_length


class LoginRequest(BaseModel):
    """Login request with username and password."""

    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        """bcrypt only accepts 72 bytes of UTF-8, not 72 characters."""
        return check_password_length(v)


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user_id: str
    username: str


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Check the username and password
        2. Issue a JWT for the user

        Args:
            request: Login request

        Returns:
            Login response with JWT token

        Raises:
            AuthenticationError: If the credentials do not match a user
        """
        user = await self.user_service.authenticate(request.username, request.password)
        if not user:
            # Same message for unknown user and wrong password
            raise AuthenticationError("Invalid username or password")

        token = self.jwt_service.create_token(
            user_id=str(user.id), username=user.username
        )
        logfire.info("User logged in", user_id=str(user.id))
        return LoginResponse(token=token, user_id=str(user.id), username=user.username)
