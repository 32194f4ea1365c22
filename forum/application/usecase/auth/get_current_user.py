"""Get current user use case."""

from pydantic import BaseModel

from forum.application.usecase.user.common import UserInfo, user_info
from forum.domain.service import JWTService, UserService
from forum.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserInfo:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load user from the store

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid and user exists

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If user not found
        """
        # Verify token (raises JWTError if invalid)
        payload = self.jwt_service.verify_token(request.token)

        # Load user (raises NotFoundError if not found)
        user = await self.user_service.get_by_id(UserId(payload.user_id))

        return user_info(user)
