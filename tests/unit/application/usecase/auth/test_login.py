"""Unit tests for LoginUseCase and GetCurrentUserUseCase."""

import pytest

from forum.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from forum.domain.error import AuthenticationError
from forum.domain.service import UserService
from tests.factories import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_token_for_current_user(self, unit_env):
        # Arrange
        login = await unit_env.get(LoginUseCase)
        current_user = await unit_env.get(GetCurrentUserUseCase)
        user_service = await unit_env.get(UserService)
        user = await make_user(user_service, "alice", password="open-sesame")

        # Act
        response = await login.execute(
            LoginRequest(username="alice", password="open-sesame")
        )
        me = await current_user.execute(GetCurrentUserRequest(token=response.token))

        # Assert
        assert response.user_id == user.id
        assert me.user_id == user.id
        assert me.username == "alice"

    @pytest.mark.asyncio
    async def test_wrong_password_raises(self, unit_env):
        login = await unit_env.get(LoginUseCase)
        user_service = await unit_env.get(UserService)
        await make_user(user_service, "bob", password="open-sesame")

        with pytest.raises(AuthenticationError):
            await login.execute(LoginRequest(username="bob", password="nope"))
