"""Unit tests for ThreadService."""

from uuid import uuid4

import pytest

from forum.domain.error import (
    LockedResourceError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from forum.domain.repository import ThreadRepository
from forum.domain.service import ThreadService, UserService
from forum.domain.value import (
    CommentId,
    TagType,
    ThreadCategory,
    ThreadId,
    ThreadStatus,
    UserId,
)
from tests.factories import make_tags, make_thread, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreateThread:
    """Tests for create_thread method."""

    @pytest.mark.asyncio
    async def test_create_thread_sets_initial_state(self, unit_env):
        """New threads start unlocked, unanswered and without comments."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service, "alice")

        # Act
        thread = await thread_service.create_thread(
            creator_id=creator.id,
            title="Why does TCP use three-way handshake?",
            description="Trying to understand why two messages are not enough.",
            category=ThreadCategory.NETWORKING_AND_SECURITY,
            tags=make_tags(TagType.CYBERSECURITY),
            is_qna=True,
        )

        # Assert
        assert thread.status == ThreadStatus.NEW
        assert thread.is_locked is False
        assert thread.is_answered is False
        assert thread.answered_comment_id is None
        assert thread.comments == []
        assert thread.creator.id == creator.id
        assert thread.creator.username == "alice"
        assert [t.tag_type for t in thread.tags] == [TagType.CYBERSECURITY]

    @pytest.mark.asyncio
    async def test_create_thread_is_readable_by_id(self, unit_env):
        """The stored thread matches what was supplied."""
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)

        created = await make_thread(thread_service, creator)
        fetched = await thread_service.get_thread(created.id)

        assert fetched is not None
        assert fetched.title == "Why does TCP use three-way handshake?"
        assert fetched.category == ThreadCategory.NETWORKING_AND_SECURITY
        assert fetched.tags == created.tags
        assert fetched.is_locked is False

    @pytest.mark.asyncio
    async def test_create_thread_with_unknown_creator_raises(self, unit_env):
        """Creator must be a registered user."""
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)

        with pytest.raises(NotFoundError):
            await thread_service.create_thread(
                creator_id=UserId("ghost"),
                title="A title that is long enough",
                description="A description that is long enough",
                category=ThreadCategory.SOFTWARE_DEVELOPMENT,
                tags=make_tags(TagType.DEVOPS),
            )

        assert await thread_repo.find_all() == []


class TestListThreads:
    """Tests for list_threads method."""

    @pytest.mark.asyncio
    async def test_list_threads_newest_first_with_comments(self, unit_env):
        """Listing returns newest threads first and includes comments."""
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)

        first = await make_thread(thread_service, creator, title="The first thread here")
        second = await make_thread(thread_service, creator, title="The second thread here")
        await thread_service.add_comment(first.id, creator.id, "First!")

        threads = await thread_service.list_threads()

        assert [t.id for t in threads] == [second.id, first.id]
        assert [c.content for c in threads[1].comments] == ["First!"]

    @pytest.mark.asyncio
    async def test_list_and_get_show_the_same_comments(self, unit_env):
        """List and get read comments from the same place."""
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        thread = await make_thread(thread_service, creator)
        await thread_service.add_comment(thread.id, creator.id, "One comment")
        await thread_service.add_comment(thread.id, creator.id, "Two comments")

        listed = (await thread_service.list_threads())[0]
        fetched = await thread_service.get_by_id(thread.id)

        assert listed.comments == fetched.comments
        assert [c.content for c in fetched.comments] == ["One comment", "Two comments"]


class TestEditThread:
    """Tests for edit_thread method."""

    @pytest.mark.asyncio
    async def test_creator_can_edit(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        thread = await make_thread(thread_service, creator)

        updated = await thread_service.edit_thread(
            thread.id, creator.id, {"title": "An edited title for the thread"}
        )

        assert updated.title == "An edited title for the thread"
        assert updated.description == thread.description

    @pytest.mark.asyncio
    async def test_moderator_can_edit_category(self, unit_env):
        """Moderators may edit threads they did not create."""
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        moderator = await make_user(user_service, is_moderator=True)
        thread = await make_thread(thread_service, creator)

        updated = await thread_service.edit_thread(
            thread.id, moderator.id, {"category": ThreadCategory.TECH_NEWS_AND_TRENDS}
        )

        assert updated.category == ThreadCategory.TECH_NEWS_AND_TRENDS
        fetched = await thread_service.get_by_id(thread.id)
        assert fetched.category == ThreadCategory.TECH_NEWS_AND_TRENDS

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        """Non-creator non-moderator edits are rejected and change nothing."""
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        stranger = await make_user(user_service)
        thread = await make_thread(thread_service, creator)

        with pytest.raises(PermissionDeniedError):
            await thread_service.edit_thread(
                thread.id, stranger.id, {"title": "Hijacked title for this"}
            )

        fetched = await thread_service.get_by_id(thread.id)
        assert fetched == thread

    @pytest.mark.asyncio
    async def test_edit_missing_thread_raises_not_found(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)

        with pytest.raises(NotFoundError):
            await thread_service.edit_thread(
                ThreadId(uuid4()), creator.id, {"is_qna": False}
            )

    @pytest.mark.asyncio
    async def test_edit_rejects_non_editable_fields(self, unit_env):
        """Lock and answered state cannot be changed through an edit."""
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        thread = await make_thread(thread_service, creator)

        with pytest.raises(ValidationError):
            await thread_service.edit_thread(thread.id, creator.id, {"is_locked": True})

    @pytest.mark.asyncio
    async def test_empty_edit_returns_thread_unchanged(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        thread = await make_thread(thread_service, creator)

        result = await thread_service.edit_thread(thread.id, creator.id, {})

        assert result == thread


class TestSetLocked:
    """Tests for set_locked method."""

    @pytest.mark.asyncio
    async def test_creator_can_lock_and_unlock(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        thread = await make_thread(thread_service, creator)

        locked = await thread_service.set_locked(thread.id, creator.id, True)
        assert locked.is_locked is True

        unlocked = await thread_service.set_locked(thread.id, creator.id, False)
        assert unlocked.is_locked is False

    @pytest.mark.asyncio
    async def test_other_user_cannot_lock(self, unit_env):
        """Locking goes through the same check as editing."""
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        stranger = await make_user(user_service)
        thread = await make_thread(thread_service, creator)

        with pytest.raises(PermissionDeniedError):
            await thread_service.set_locked(thread.id, stranger.id, True)

        assert (await thread_service.get_by_id(thread.id)).is_locked is False


class TestAddComment:
    """Tests for add_comment method."""

    @pytest.mark.asyncio
    async def test_add_comment_copies_commenter_details(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        commenter = await make_user(user_service, "bob")
        thread = await make_thread(thread_service, creator)

        comment = await thread_service.add_comment(thread.id, commenter.id, "Hello")

        assert comment.creator.id == commenter.id
        assert comment.creator.username == "bob"
        assert comment.creator.email == "bob@example.com"
        fetched = await thread_service.get_by_id(thread.id)
        assert [c.id for c in fetched.comments] == [comment.id]

    @pytest.mark.asyncio
    async def test_comment_on_locked_thread_raises(self, unit_env):
        """Locked threads accept no comments and keep their comment list."""
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        moderator = await make_user(user_service, is_moderator=True)
        thread = await make_thread(thread_service, creator)
        await thread_service.add_comment(thread.id, creator.id, "Before lock")
        await thread_service.set_locked(thread.id, creator.id, True)

        for user in (creator, moderator):
            with pytest.raises(LockedResourceError):
                await thread_service.add_comment(thread.id, user.id, "After lock")

        fetched = await thread_service.get_by_id(thread.id)
        assert len(fetched.comments) == 1

    @pytest.mark.asyncio
    async def test_comment_on_missing_thread_raises(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        commenter = await make_user(user_service)

        with pytest.raises(NotFoundError):
            await thread_service.add_comment(ThreadId(uuid4()), commenter.id, "Hello")

    @pytest.mark.asyncio
    async def test_unknown_commenter_raises(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        thread = await make_thread(thread_service, creator)

        with pytest.raises(NotFoundError):
            await thread_service.add_comment(thread.id, UserId("ghost"), "Hello")

    @pytest.mark.asyncio
    async def test_blocked_user_cannot_comment(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        blocked = await make_user(user_service, is_blocked=True)
        thread = await make_thread(thread_service, creator)

        with pytest.raises(PermissionDeniedError):
            await thread_service.add_comment(thread.id, blocked.id, "Let me in")

        assert (await thread_service.get_by_id(thread.id)).comments == []

    @pytest.mark.asyncio
    async def test_new_comment_clears_answered_state(self, unit_env):
        """Any new comment marks the thread unanswered again."""
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        other = await make_user(user_service)
        thread = await make_thread(thread_service, creator)
        answer = await thread_service.add_comment(thread.id, other.id, "Answer")
        answered = await thread_service.toggle_answered(thread.id, creator.id, answer.id)
        assert answered.is_answered is True

        await thread_service.add_comment(thread.id, other.id, "Follow up")

        fetched = await thread_service.get_by_id(thread.id)
        assert fetched.is_answered is False
        assert fetched.answered_comment_id is None


class TestToggleAnswered:
    """Tests for toggle_answered method."""

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_unanswered(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        thread = await make_thread(thread_service, creator)
        comment = await thread_service.add_comment(thread.id, creator.id, "Answer")

        marked = await thread_service.toggle_answered(thread.id, creator.id, comment.id)
        assert marked.is_answered is True
        assert marked.answered_comment_id == comment.id
        assert marked.answered_comment == comment

        unmarked = await thread_service.toggle_answered(
            thread.id, creator.id, comment.id
        )
        assert unmarked.is_answered is False
        assert unmarked.answered_comment_id is None

    @pytest.mark.asyncio
    async def test_toggle_other_comment_moves_answer(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        thread = await make_thread(thread_service, creator)
        first = await thread_service.add_comment(thread.id, creator.id, "First")
        second = await thread_service.add_comment(thread.id, creator.id, "Second")

        await thread_service.toggle_answered(thread.id, creator.id, first.id)
        result = await thread_service.toggle_answered(thread.id, creator.id, second.id)

        assert result.is_answered is True
        assert result.answered_comment_id == second.id

    @pytest.mark.asyncio
    async def test_only_creator_can_toggle(self, unit_env):
        """Moderators cannot pick the answer for someone else's question."""
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        moderator = await make_user(user_service, is_moderator=True)
        thread = await make_thread(thread_service, creator)
        comment = await thread_service.add_comment(thread.id, moderator.id, "Answer")

        with pytest.raises(PermissionDeniedError):
            await thread_service.toggle_answered(thread.id, moderator.id, comment.id)

        assert (await thread_service.get_by_id(thread.id)).is_answered is False

    @pytest.mark.asyncio
    async def test_unknown_comment_raises(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        thread = await make_thread(thread_service, creator)

        with pytest.raises(NotFoundError):
            await thread_service.toggle_answered(
                thread.id, creator.id, CommentId(uuid4())
            )


class TestDeleteThread:
    """Tests for delete_thread method."""

    @pytest.mark.asyncio
    async def test_moderator_deletes_thread_and_comments(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        moderator = await make_user(user_service, is_moderator=True)
        thread = await make_thread(thread_service, creator)
        await thread_service.add_comment(thread.id, creator.id, "Comment")

        previous = await thread_service.delete_thread(thread.id, moderator.id)

        assert previous is not None
        assert previous.id == thread.id
        assert len(previous.comments) == 1
        assert await thread_service.get_thread(thread.id) is None

    @pytest.mark.asyncio
    async def test_creator_cannot_delete(self, unit_env):
        """Deletion is reserved for moderators, even for the creator."""
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        creator = await make_user(user_service)
        thread = await make_thread(thread_service, creator)

        with pytest.raises(PermissionDeniedError):
            await thread_service.delete_thread(thread.id, creator.id)

        assert await thread_service.get_thread(thread.id) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_thread_returns_none(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        user_service = await unit_env.get(UserService)
        moderator = await make_user(user_service, is_moderator=True)

        assert await thread_service.delete_thread(ThreadId(uuid4()), moderator.id) is None
