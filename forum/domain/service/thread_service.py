"""Thread domain service.

All authorization for thread content happens here, after the current
state of the thread has been read and before anything is written.
"""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import logfire

from forum.domain.error import (
    LockedResourceError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from forum.domain.model import Comment, Thread, User
from forum.domain.repository import ThreadRepository
from forum.domain.value import (
    CommentId,
    ThreadCategory,
    ThreadId,
    ThreadStatus,
    ThreadTag,
    UserId,
)

from .base import Service
from .user_service import UserService

# Fields a creator or moderator may change through an edit
EDITABLE_FIELDS = frozenset({"title", "description", "category", "tags", "is_qna"})


def can_mutate(actor: User, thread: Thread) -> bool:
    """Whether the actor may edit, lock or unlock the thread."""
    return thread.can_be_modified_by(actor)


class ThreadService(Service):
    """Domain service for threads and their comments."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        user_service: UserService,
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            user_service: User service, used to resolve actors and authors
        """
        self.thread_repository = thread_repository
        self.user_service = user_service

    async def list_threads(self) -> list[Thread]:
        """List every thread, newest first, with comments attached."""
        with logfire.span("thread_service.list_threads"):
            threads = await self.thread_repository.find_all()
            logfire.info("Threads listed", count=len(threads))
            return threads

    async def get_thread(self, thread_id: ThreadId) -> Thread | None:
        """Get a thread with its comments.

        Args:
            thread_id: Thread ID

        Returns:
            Thread if found, None otherwise
        """
        with logfire.span("thread_service.get_thread", thread_id=str(thread_id)):
            thread = await self.thread_repository.find_by_id(thread_id)
            if thread:
                logfire.info(
                    "Thread found",
                    thread_id=str(thread_id),
                    comment_count=len(thread.comments),
                )
            else:
                logfire.warn("Thread not found", thread_id=str(thread_id))
            return thread

    async def get_by_id(self, thread_id: ThreadId) -> Thread:
        """Get a thread, raising NotFoundError if it does not exist."""
        thread = await self.get_thread(thread_id)
        if not thread:
            raise NotFoundError("Thread", str(thread_id))
        return thread

    async def create_thread(
        self,
        creator_id: UserId,
        title: str,
        description: str,
        category: ThreadCategory,
        tags: list[ThreadTag],
        is_qna: bool = False,
    ) -> Thread:
        """Create a new thread.

        The creator's username and name are copied onto the thread.

        Args:
            creator_id: ID of the user starting the thread
            title: Thread title
            description: Opening post
            category: Forum section
            tags: Topic tags
            is_qna: Whether the thread asks a question

        Returns:
            The stored thread

        Raises:
            NotFoundError: If the creator does not exist
        """
        with logfire.span(
            "thread_service.create_thread",
            creator_id=str(creator_id),
            category=category.value,
            tag_count=len(tags),
        ):
            creator = await self.user_service.get_by_id(creator_id)

            thread = Thread(
                id=ThreadId(uuid4()),
                title=title,
                category=category,
                status=ThreadStatus.NEW,
                creation_date=datetime.now(timezone.utc),
                description=description,
                creator=creator.as_creator(),
                comments=[],
                is_qna=is_qna,
                is_answered=False,
                is_locked=False,
                answered_comment_id=None,
                tags=tags,
            )

            saved = await self.thread_repository.save(thread)
            logfire.info(
                "Thread created", thread_id=str(saved.id), creator_id=str(creator_id)
            )
            return saved

    async def edit_thread(
        self, thread_id: ThreadId, actor_id: UserId, changes: dict[str, Any]
    ) -> Thread:
        """Apply a partial update to a thread.

        Args:
            thread_id: Thread ID
            actor_id: ID of the user making the change
            changes: Subset of title, description, category, tags and is_qna

        Returns:
            The thread after the change

        Raises:
            NotFoundError: If the thread or actor does not exist
            PermissionDeniedError: If the actor is neither creator nor moderator
            ValidationError: If a field outside the editable set is given
        """
        with logfire.span(
            "thread_service.edit_thread",
            thread_id=str(thread_id),
            actor_id=str(actor_id),
            fields=sorted(changes),
        ):
            unknown = set(changes) - EDITABLE_FIELDS
            if unknown:
                raise ValidationError(
                    f"Fields cannot be edited: {', '.join(sorted(unknown))}"
                )

            thread = await self.get_by_id(thread_id)
            actor = await self.user_service.get_by_id(actor_id)
            self._require_mutate(actor, thread, "edit")

            if not changes:
                return thread

            updated = await self.thread_repository.update(thread_id, changes)
            if updated is None:
                raise NotFoundError("Thread", str(thread_id))
            logfire.info("Thread edited", thread_id=str(thread_id))
            return updated

    async def set_locked(
        self, thread_id: ThreadId, actor_id: UserId, locked: bool
    ) -> Thread:
        """Lock or unlock a thread.

        Raises:
            NotFoundError: If the thread or actor does not exist
            PermissionDeniedError: If the actor is neither creator nor moderator
        """
        with logfire.span(
            "thread_service.set_locked",
            thread_id=str(thread_id),
            actor_id=str(actor_id),
            locked=locked,
        ):
            thread = await self.get_by_id(thread_id)
            actor = await self.user_service.get_by_id(actor_id)
            self._require_mutate(actor, thread, "lock" if locked else "unlock")

            updated = await self.thread_repository.update(
                thread_id, {"is_locked": locked}
            )
            if updated is None:
                raise NotFoundError("Thread", str(thread_id))
            logfire.info("Thread lock changed", thread_id=str(thread_id), locked=locked)
            return updated

    async def add_comment(
        self, thread_id: ThreadId, commenter_id: UserId, content: str
    ) -> Comment:
        """Post a comment on a thread.

        Posting a comment always clears the thread's answered state.

        Args:
            thread_id: Thread ID
            commenter_id: ID of the commenting user
            content: Comment text

        Returns:
            The stored comment

        Raises:
            NotFoundError: If the thread or commenter does not exist
            LockedResourceError: If the thread is locked
            PermissionDeniedError: If the commenter is blocked
        """
        with logfire.span(
            "thread_service.add_comment",
            thread_id=str(thread_id),
            commenter_id=str(commenter_id),
        ):
            thread = await self.get_by_id(thread_id)
            if thread.is_locked:
                logfire.warn("Comment on locked thread", thread_id=str(thread_id))
                raise LockedResourceError("Thread", str(thread_id))

            commenter = await self.user_service.get_by_id(commenter_id)
            if commenter.is_blocked:
                logfire.warn("Blocked user tried to comment", user_id=str(commenter_id))
                raise PermissionDeniedError(
                    "comment on", "Thread", str(thread_id), str(commenter_id)
                )

            comment = Comment(
                id=CommentId(uuid4()),
                content=content,
                creation_date=datetime.now(timezone.utc),
                creator=commenter.as_creator(include_email=True),
            )
            saved = await self.thread_repository.add_comment(thread_id, comment)
            await self.thread_repository.update(
                thread_id, {"is_answered": False, "answered_comment_id": None}
            )
            logfire.info(
                "Comment added", thread_id=str(thread_id), comment_id=str(saved.id)
            )
            return saved

    async def toggle_answered(
        self, thread_id: ThreadId, actor_id: UserId, comment_id: CommentId
    ) -> Thread:
        """Mark a comment as the answer, or unmark it if it already is.

        Raises:
            NotFoundError: If the thread, actor or comment does not exist
            PermissionDeniedError: If the actor did not create the thread
        """
        with logfire.span(
            "thread_service.toggle_answered",
            thread_id=str(thread_id),
            actor_id=str(actor_id),
            comment_id=str(comment_id),
        ):
            thread = await self.get_by_id(thread_id)
            actor = await self.user_service.get_by_id(actor_id)
            if not thread.is_created_by(actor):
                logfire.warn(
                    "Non-creator tried to mark answer",
                    thread_id=str(thread_id),
                    actor_id=str(actor_id),
                )
                raise PermissionDeniedError(
                    "mark an answer on", "Thread", str(thread_id), str(actor_id)
                )
            if thread.find_comment(comment_id) is None:
                raise NotFoundError("Comment", str(comment_id))

            if thread.answered_comment_id == comment_id:
                changes: dict[str, Any] = {
                    "is_answered": False,
                    "answered_comment_id": None,
                }
            else:
                changes = {"is_answered": True, "answered_comment_id": comment_id}

            updated = await self.thread_repository.update(thread_id, changes)
            if updated is None:
                raise NotFoundError("Thread", str(thread_id))
            logfire.info(
                "Answered state toggled",
                thread_id=str(thread_id),
                is_answered=updated.is_answered,
            )
            return updated

    async def delete_thread(
        self, thread_id: ThreadId, actor_id: UserId
    ) -> Thread | None:
        """Delete a thread and its comments.

        Args:
            thread_id: Thread ID
            actor_id: ID of the deleting user

        Returns:
            The thread as it was before deletion, or None if it did not exist

        Raises:
            NotFoundError: If the actor does not exist
            PermissionDeniedError: If the actor is not a moderator
        """
        with logfire.span(
            "thread_service.delete_thread",
            thread_id=str(thread_id),
            actor_id=str(actor_id),
        ):
            actor = await self.user_service.get_by_id(actor_id)
            if not actor.is_moderator:
                logfire.warn(
                    "Non-moderator tried to delete thread",
                    thread_id=str(thread_id),
                    actor_id=str(actor_id),
                )
                raise PermissionDeniedError(
                    "delete", "Thread", str(thread_id), str(actor_id)
                )

            thread = await self.thread_repository.find_by_id(thread_id)
            if thread is None:
                logfire.info("Nothing to delete", thread_id=str(thread_id))
                return None

            await self.thread_repository.delete(thread_id)
            logfire.info("Thread deleted", thread_id=str(thread_id))
            return thread

    def _require_mutate(self, actor: User, thread: Thread, action: str) -> None:
        if not can_mutate(actor, thread):
            logfire.warn(
                "Permission denied",
                action=action,
                thread_id=str(thread.id),
                actor_id=str(actor.id),
            )
            raise PermissionDeniedError(action, "Thread", str(thread.id), str(actor.id))
