"""Delete thread use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import ThreadService
from forum.domain.value import ThreadId, UserId

from .common import ThreadDetails, thread_details


class DeleteThreadRequest(BaseModel):
    """Delete thread request."""

    thread_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class DeleteThreadResponse(BaseModel):
    """Delete thread response.

    ``thread`` holds the state before deletion, or None if there was
    nothing to delete.
    """

    deleted: bool
    thread: ThreadDetails | None = None


class DeleteThreadUseCase:
    """Use case for removing a thread and its comments."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize delete thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: DeleteThreadRequest) -> DeleteThreadResponse:
        """Execute delete thread flow.

        Args:
            request: Delete request

        Returns:
            Whether a thread was deleted, with its prior state

        Raises:
            PermissionDeniedError: If the user is not a moderator
        """
        previous = await self.thread_service.delete_thread(
            thread_id=ThreadId(UUID(request.thread_id)),
            actor_id=UserId(request.user_id),
        )
        if previous is None:
            return DeleteThreadResponse(deleted=False)
        return DeleteThreadResponse(deleted=True, thread=thread_details(previous))
