"""Get user use case."""

from typing import Optional

from pydantic import BaseModel

from forum.domain.service import UserService
from forum.domain.value import UserId

from .common import UserInfo, user_info


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: str


class GetUserUseCase:
    """Use case for retrieving a user by ID."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> Optional[UserInfo]:
        """Execute get user flow.

        Returns:
            User details if found, None otherwise
        """
        user = await self.user_service.get_user(UserId(request.user_id))
        if not user:
            return None
        return user_info(user)
