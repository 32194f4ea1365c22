"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .password_service import PasswordService, check_password_length
from .thread_service import ThreadService, can_mutate
from .user_service import UserService

__all__ = [
    "JWTService",
    "PasswordService",
    "Service",
    "ThreadService",
    "UserService",
    "can_mutate",
    "check_password_length",
]
