"""Create thread use case."""

from pydantic import BaseModel, Field

from forum.domain.service import ThreadService
from forum.domain.value import ThreadCategory, UserId

from .common import TagInput, ThreadDetails, build_tags, thread_details


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    creator_id: str  # User ID from authenticated user
    title: str = Field(min_length=10, max_length=300)
    description: str = Field(min_length=10, max_length=10000)
    category: ThreadCategory
    tags: list[TagInput] = Field(min_length=1)
    is_qna: bool = False


class CreateThreadUseCase:
    """Use case for starting a new thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: CreateThreadRequest) -> ThreadDetails:
        """Execute create thread flow.

        Args:
            request: Create thread request

        Returns:
            The stored thread

        Raises:
            NotFoundError: If the creator does not exist
        """
        thread = await self.thread_service.create_thread(
            creator_id=UserId(request.creator_id),
            title=request.title,
            description=request.description,
            category=request.category,
            tags=build_tags(request.tags),
            is_qna=request.is_qna,
        )
        return thread_details(thread)
