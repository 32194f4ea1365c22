"""Edit thread use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from forum.domain.service import ThreadService
from forum.domain.value import ThreadCategory, ThreadId, UserId

from .common import TagInput, ThreadDetails, build_tags, thread_details


class EditThreadRequest(BaseModel):
    """Edit thread request.

    Fields left as None are not changed.
    """

    thread_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    title: str | None = Field(default=None, min_length=10, max_length=300)
    description: str | None = Field(default=None, min_length=10, max_length=10000)
    category: ThreadCategory | None = None
    tags: list[TagInput] | None = Field(default=None, min_length=1)
    is_qna: bool | None = None


class EditThreadUseCase:
    """Use case for editing a thread's content."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize edit thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: EditThreadRequest) -> ThreadDetails:
        """Execute edit thread flow.

        Args:
            request: Edit request with the fields to change

        Returns:
            The thread after the edit

        Raises:
            NotFoundError: If the thread or user does not exist
            PermissionDeniedError: If the user is neither creator nor moderator
        """
        changes: dict[str, Any] = {}
        if request.title is not None:
            changes["title"] = request.title
        if request.description is not None:
            changes["description"] = request.description
        if request.category is not None:
            changes["category"] = request.category
        if request.tags is not None:
            changes["tags"] = build_tags(request.tags)
        if request.is_qna is not None:
            changes["is_qna"] = request.is_qna

        thread = await self.thread_service.edit_thread(
            thread_id=ThreadId(UUID(request.thread_id)),
            actor_id=UserId(request.user_id),
            changes=changes,
        )
        return thread_details(thread)
