"""Get thread use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import ThreadService
from forum.domain.value import ThreadId

from .common import ThreadDetails, thread_details


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str  # UUID string


class GetThreadUseCase:
    """Use case for retrieving a thread by ID."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: GetThreadRequest) -> Optional[ThreadDetails]:
        """Execute get thread flow.

        Args:
            request: Request with the thread ID

        Returns:
            Thread details if found, None otherwise
        """
        thread = await self.thread_service.get_thread(
            ThreadId(UUID(request.thread_id))
        )
        if not thread:
            return None
        return thread_details(thread)
