"""Toggle answered comment use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import ThreadService
from forum.domain.value import CommentId, ThreadId, UserId

from .common import ThreadDetails, thread_details


class ToggleAnsweredRequest(BaseModel):
    """Toggle answered request."""

    thread_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    comment_id: str  # UUID string


class ToggleAnsweredUseCase:
    """Use case for marking or unmarking a comment as the thread's answer.

    Marking the current answer again clears it.
    """

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: ToggleAnsweredRequest) -> ThreadDetails:
        thread = await self.thread_service.toggle_answered(
            thread_id=ThreadId(UUID(request.thread_id)),
            actor_id=UserId(request.user_id),
            comment_id=CommentId(UUID(request.comment_id)),
        )
        return thread_details(thread)
