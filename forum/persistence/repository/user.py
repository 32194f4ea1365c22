"""PostgreSQL implementation of User repository."""

from typing import Any, Optional

import logfire
from sqlalchemy import Column, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import ConflictError
from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import UserId
from forum.persistence.error import translate_store_errors
from forum.persistence.mappers import row_to_user, user_to_dict
from forum.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    ``username`` and ``email`` carry unique constraints, so each lookup
    matches at most one row.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, column: Column, value: Any) -> Optional[User]:
        result = await self.session.execute(select(users_table).where(column == value))
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    @translate_store_errors("users.find_all")
    async def find_all(self) -> list[User]:
        """Find all users, ordered by username."""
        stmt = select(users_table).order_by(users_table.c.username)
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    @translate_store_errors("users.find_by_id")
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return await self._find_one(users_table.c.id, user_id)

    @translate_store_errors("users.find_by_username")
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by their username."""
        return await self._find_one(users_table.c.username, username)

    @translate_store_errors("users.find_by_email")
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        return await self._find_one(users_table.c.email, email)

    @translate_store_errors("users.save")
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save, with the password already hashed

        Returns:
            Saved user

        Raises:
            ConflictError: If the ID, username or email is already stored
        """
        with logfire.span("user_repository.save", user_id=str(user.id)):
            values = user_to_dict(user)

            if await self.find_by_id(user.id):
                del values["id"]
                stmt = (
                    update(users_table)
                    .where(users_table.c.id == user.id)
                    .values(**values)
                )
            else:
                stmt = insert(users_table).values(**values)

            try:
                # Savepoint keeps the session usable after a violation
                async with self.session.begin_nested():
                    await self.session.execute(stmt)
                    await self.session.flush()
            except IntegrityError as e:
                # A concurrent registration took the same ID, username or email
                logfire.warn("User unique constraint violated", user_id=str(user.id))
                raise ConflictError(
                    "User ID, username or email is already taken"
                ) from e
            return user
