"""User use cases."""

from .common import UserInfo
from .create_user import CreateUserRequest, CreateUserUseCase
from .get_user import GetUserRequest, GetUserUseCase
from .list_users import ListUsersResponse, ListUsersUseCase

__all__ = [
    "CreateUserRequest",
    "CreateUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UserInfo",
]
