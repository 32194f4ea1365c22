"""Lock thread use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import ThreadService
from forum.domain.value import ThreadId, UserId

from .common import ThreadDetails, thread_details


class LockThreadRequest(BaseModel):
    """Lock or unlock thread request."""

    thread_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    locked: bool


class LockThreadUseCase:
    """Use case for locking and unlocking a thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: LockThreadRequest) -> ThreadDetails:
        """Set the thread's lock state.

        Raises:
            NotFoundError: If the thread or user does not exist
            PermissionDeniedError: If the user is neither creator nor moderator
        """
        thread = await self.thread_service.set_locked(
            thread_id=ThreadId(UUID(request.thread_id)),
            actor_id=UserId(request.user_id),
            locked=request.locked,
        )
        return thread_details(thread)
