"""User domain service."""

from uuid import uuid4

import logfire

from forum.domain.error import ConflictError, NotFoundError
from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId

from .base import Service
from .password_service import PasswordService


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_service: Password hashing service
        """
        self.user_repository = user_repository
        self.password_service = password_service

    async def list_users(self) -> list[User]:
        """List every user, ordered by username."""
        with logfire.span("user_service.list_users"):
            users = await self.user_repository.find_all()
            logfire.info("Users listed", count=len(users))
            return users

    async def create_user(
        self,
        username: str,
        email: str,
        password: str,
        name: str = "",
        is_moderator: bool = False,
        is_blocked: bool = False,
        user_id: UserId | None = None,
    ) -> User:
        """Register a new user.

        The password is hashed before anything is written.

        Args:
            username: Unique username
            email: Unique email address
            password: Plaintext password
            name: Display name
            is_moderator: Whether the user moderates the forum
            is_blocked: Whether the user is barred from commenting
            user_id: Caller-chosen ID; a random one is generated if omitted

        Returns:
            The stored user

        Raises:
            ConflictError: If the ID, username or email is already taken
        """
        new_id = user_id or UserId(str(uuid4()))
        with logfire.span(
            "user_service.create_user", user_id=str(new_id), username=username
        ):
            if await self.user_repository.find_by_id(new_id):
                logfire.warn("User ID already taken", user_id=str(new_id))
                raise ConflictError(f"User ID '{new_id}' is already taken")
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username already taken", username=username)
                raise ConflictError(f"Username '{username}' is already taken")
            if await self.user_repository.find_by_email(email):
                logfire.warn("Email already registered", email=email)
                raise ConflictError(f"Email '{email}' is already registered")

            user = User(
                id=new_id,
                name=name,
                username=username,
                email=email,
                password=self.password_service.hash_password(password),
                is_moderator=is_moderator,
                is_blocked=is_blocked,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id), username=username)
            return saved

    async def get_user(self, user_id: UserId) -> User | None:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        user = await self.get_user(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))
        return user

    async def authenticate(self, username: str, password: str) -> User | None:
        """Check a username and password pair.

        Args:
            username: Username
            password: Plaintext password

        Returns:
            The matching user, or None if either value is wrong
        """
        with logfire.span("user_service.authenticate", username=username):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.warn("Login for unknown username", username=username)
                return None
            if not self.password_service.verify_password(password, user.password):
                logfire.warn("Login with wrong password", username=username)
                return None
            logfire.info("User authenticated", user_id=str(user.id))
            return user
