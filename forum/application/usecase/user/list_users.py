"""List users use case."""

from pydantic import BaseModel

from forum.domain.service import UserService

from .common import UserInfo, user_info


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserInfo]
    total: int


class ListUsersUseCase:
    """Use case for listing every user, ordered by username."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self) -> ListUsersResponse:
        users = await self.user_service.list_users()
        return ListUsersResponse(
            users=[user_info(u) for u in users],
            total=len(users),
        )
