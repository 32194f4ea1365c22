"""Add comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from forum.domain.service import ThreadService
from forum.domain.value import ThreadId, UserId

from .common import CommentInfo, comment_info


class AddCommentRequest(BaseModel):
    """Add comment request."""

    thread_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    content: str = Field(min_length=2, max_length=10000)


class AddCommentResponse(BaseModel):
    """Add comment response."""

    thread_id: str
    comment: CommentInfo


class AddCommentUseCase:
    """Use case for commenting on a thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize add comment use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Args:
            request: Add comment request

        Returns:
            The stored comment

        Raises:
            NotFoundError: If the thread or user does not exist
            LockedResourceError: If the thread is locked
            PermissionDeniedError: If the user is blocked
        """
        thread_id = ThreadId(UUID(request.thread_id))
        comment = await self.thread_service.add_comment(
            thread_id=thread_id,
            commenter_id=UserId(request.user_id),
            content=request.content,
        )
        return AddCommentResponse(
            thread_id=str(thread_id),
            comment=comment_info(comment),
        )
