"""Unit tests for ListThreadsUseCase."""

import pytest

from forum.application.usecase.thread import ListThreadsRequest, ListThreadsUseCase
from forum.domain.service import ThreadService, UserService
from forum.domain.value import TagType
from tests.factories import make_thread, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListThreadsUseCase:
    """Tests for ListThreadsUseCase."""

    @pytest.mark.asyncio
    async def test_list_without_filter_returns_all(self, unit_env):
        use_case = await unit_env.get(ListThreadsUseCase)
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        await make_thread(thread_service, creator, tag_types=(TagType.DEVOPS,))
        await make_thread(thread_service, creator, tag_types=(TagType.DATABASES,))

        result = await use_case.execute(ListThreadsRequest())

        assert result.total == 2
        assert len(result.threads) == 2

    @pytest.mark.asyncio
    async def test_list_filters_by_tag_type(self, unit_env):
        use_case = await unit_env.get(ListThreadsUseCase)
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        devops = await make_thread(
            thread_service, creator, tag_types=(TagType.DEVOPS, TagType.CLOUD_COMPUTING)
        )
        await make_thread(thread_service, creator, tag_types=(TagType.DATABASES,))

        result = await use_case.execute(ListThreadsRequest(tag=TagType.CLOUD_COMPUTING))

        assert result.total == 1
        assert result.threads[0].thread_id == str(devops.id)

    @pytest.mark.asyncio
    async def test_list_hides_commenter_email(self, unit_env):
        use_case = await unit_env.get(ListThreadsUseCase)
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        thread = await make_thread(thread_service, creator)
        await thread_service.add_comment(thread.id, creator.id, "Hello there")

        result = await use_case.execute(ListThreadsRequest())

        comment = result.threads[0].comments[0].model_dump()
        assert "email" not in comment["creator"]
