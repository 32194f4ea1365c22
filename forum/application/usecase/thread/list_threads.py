"""List threads use case."""

import logfire
from pydantic import BaseModel

from forum.domain.service import ThreadService
from forum.domain.value import TagType

from .common import ThreadDetails, thread_details


class ListThreadsRequest(BaseModel):
    """List threads request."""

    tag: TagType | None = None  # Only threads carrying this tag type


class ListThreadsResponse(BaseModel):
    """List threads response."""

    threads: list[ThreadDetails]
    total: int


class ListThreadsUseCase:
    """Use case for listing threads, newest first."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize list threads use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: ListThreadsRequest) -> ListThreadsResponse:
        """Execute list threads flow.

        Args:
            request: List request with optional tag filter

        Returns:
            Matching threads with their comments

        Raises:
            StoreError: If the threads cannot be read
        """
        threads = await self.thread_service.list_threads()

        if request.tag is not None:
            threads = [
                t for t in threads if any(tag.tag_type == request.tag for tag in t.tags)
            ]
            logfire.info(
                "Filtered threads by tag", tag=request.tag.value, count=len(threads)
            )

        return ListThreadsResponse(
            threads=[thread_details(t) for t in threads],
            total=len(threads),
        )
