"""Integration test for LoginUseCase with a real database.

Registers a user through the domain service, then logs in against the
stored bcrypt hash.
"""

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from forum.application.usecase.auth import LoginRequest, LoginUseCase
from forum.domain.error import AuthenticationError
from forum.domain.service import JWTService, UserService
from forum.persistence.database import create_schema
from tests.factories import make_user
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    engine = await integration_env.get(AsyncEngine)
    await create_schema(engine)

    session = await integration_env.get(AsyncSession)
    await session.execute(text("TRUNCATE TABLE thread_comments, threads, users CASCADE"))
    await session.commit()

    yield


class TestLoginIntegration:
    """Login against users stored in PostgreSQL."""

    @pytest.mark.asyncio
    async def test_login_with_stored_user(self, integration_env):
        user_service = await integration_env.get(UserService)
        jwt_service = await integration_env.get(JWTService)
        login = await integration_env.get(LoginUseCase)
        alice = await make_user(user_service, "alice")

        response = await login.execute(
            LoginRequest(username="alice", password="correct-horse")
        )

        assert response.user_id == alice.id
        assert jwt_service.get_user_id_from_token(response.token) == alice.id

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(self, integration_env):
        user_service = await integration_env.get(UserService)
        login = await integration_env.get(LoginUseCase)
        await make_user(user_service, "alice")

        with pytest.raises(AuthenticationError):
            await login.execute(LoginRequest(username="alice", password="nope"))
