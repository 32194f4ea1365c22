"""Thread routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.thread import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    CreateThreadRequest,
    CreateThreadUseCase,
    DeleteThreadRequest,
    DeleteThreadResponse,
    DeleteThreadUseCase,
    EditThreadRequest,
    EditThreadUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    ListThreadsRequest,
    ListThreadsResponse,
    ListThreadsUseCase,
    LockThreadRequest,
    LockThreadUseCase,
    TagInput,
    ThreadDetails,
    ToggleAnsweredRequest,
    ToggleAnsweredUseCase,
)
from forum.domain.error import DomainError
from forum.domain.value import TagType, ThreadCategory
from forum.interface.api.session import require_user
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class CreateThreadAPIRequest(BaseModel):
    """API request for creating a thread."""

    title: str = Field(min_length=10, max_length=300)
    description: str = Field(min_length=10, max_length=10000)
    category: ThreadCategory
    tags: list[TagInput] = Field(min_length=1)
    is_qna: bool = False


class EditThreadAPIRequest(BaseModel):
    """API request for editing a thread. Omitted fields stay unchanged."""

    title: str | None = Field(default=None, min_length=10, max_length=300)
    description: str | None = Field(default=None, min_length=10, max_length=10000)
    category: ThreadCategory | None = None
    tags: list[TagInput] | None = Field(default=None, min_length=1)
    is_qna: bool | None = None


class LockThreadAPIRequest(BaseModel):
    """API request for locking or unlocking a thread."""

    locked: bool


class AddCommentAPIRequest(BaseModel):
    """API request for commenting on a thread."""

    content: str = Field(min_length=2, max_length=10000)


class ToggleAnsweredAPIRequest(BaseModel):
    """API request for marking or unmarking the answer."""

    comment_id: UUID


@router.get("", response_model=ListThreadsResponse)
async def list_threads(
    list_threads_use_case: FromDishka[ListThreadsUseCase],
    tag: TagType | None = None,
) -> ListThreadsResponse:
    """List threads, newest first.

    Args:
        list_threads_use_case: List threads use case from DI
        tag: Only return threads carrying this tag type

    Returns:
        Threads with their comments
    """
    try:
        return await list_threads_use_case.execute(ListThreadsRequest(tag=tag))
    except DomainError as e:
        raise to_http_exception(e, "Thread listing")


@router.post("", response_model=ThreadDetails, status_code=status.HTTP_201_CREATED)
async def create_thread(
    request: CreateThreadAPIRequest,
    create_thread_use_case: FromDishka[CreateThreadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ThreadDetails:
    """Create a new thread.

    Requires authentication.

    Returns:
        The created thread
    """
    user = await require_user(get_current_user_use_case, auth_token, "create threads")

    try:
        return await create_thread_use_case.execute(
            CreateThreadRequest(
                creator_id=user.user_id,
                title=request.title,
                description=request.description,
                category=request.category,
                tags=request.tags,
                is_qna=request.is_qna,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "Thread creation")


@router.get("/{thread_id}", response_model=ThreadDetails)
async def get_thread(
    thread_id: UUID,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> ThreadDetails:
    """Get a thread with its comments.

    Raises:
        HTTPException: If thread not found
    """
    try:
        thread = await get_thread_use_case.execute(
            GetThreadRequest(thread_id=str(thread_id))
        )
    except DomainError as e:
        raise to_http_exception(e, "Thread lookup")

    if not thread:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Thread not found",
        )
    return thread


@router.patch("/{thread_id}", response_model=ThreadDetails)
async def edit_thread(
    thread_id: UUID,
    request: EditThreadAPIRequest,
    edit_thread_use_case: FromDishka[EditThreadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ThreadDetails:
    """Edit a thread.

    Only the creator or a moderator can edit.

    Returns:
        The thread after the edit
    """
    user = await require_user(get_current_user_use_case, auth_token, "edit threads")

    try:
        return await edit_thread_use_case.execute(
            EditThreadRequest(
                thread_id=str(thread_id),
                user_id=user.user_id,
                **request.model_dump(exclude_unset=True),
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "Thread edit")


@router.delete("/{thread_id}", response_model=DeleteThreadResponse)
async def delete_thread(
    thread_id: UUID,
    delete_thread_use_case: FromDishka[DeleteThreadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteThreadResponse:
    """Delete a thread and its comments.

    Only moderators can delete. Deleting a thread that does not exist
    succeeds with ``deleted`` false.
    """
    user = await require_user(get_current_user_use_case, auth_token, "delete threads")

    try:
        result = await delete_thread_use_case.execute(
            DeleteThreadRequest(thread_id=str(thread_id), user_id=user.user_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "Thread deletion")

    logfire.info("Thread delete handled", thread_id=str(thread_id), deleted=result.deleted)
    return result


@router.put("/{thread_id}/lock", response_model=ThreadDetails)
async def lock_thread(
    thread_id: UUID,
    request: LockThreadAPIRequest,
    lock_thread_use_case: FromDishka[LockThreadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ThreadDetails:
    """Lock or unlock a thread.

    Only the creator or a moderator can change the lock.
    """
    user = await require_user(get_current_user_use_case, auth_token, "lock threads")

    try:
        return await lock_thread_use_case.execute(
            LockThreadRequest(
                thread_id=str(thread_id),
                user_id=user.user_id,
                locked=request.locked,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "Thread lock")


@router.post(
    "/{thread_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    thread_id: UUID,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AddCommentResponse:
    """Comment on a thread.

    Fails with 423 when the thread is locked.
    """
    user = await require_user(get_current_user_use_case, auth_token, "comment")

    try:
        return await add_comment_use_case.execute(
            AddCommentRequest(
                thread_id=str(thread_id),
                user_id=user.user_id,
                content=request.content,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "Comment creation")


@router.post("/{thread_id}/answer", response_model=ThreadDetails)
async def toggle_answered(
    thread_id: UUID,
    request: ToggleAnsweredAPIRequest,
    toggle_answered_use_case: FromDishka[ToggleAnsweredUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ThreadDetails:
    """Mark a comment as the answer, or unmark it if it already is.

    Only the thread's creator can do this.
    """
    user = await require_user(get_current_user_use_case, auth_token, "mark answers")

    try:
        return await toggle_answered_use_case.execute(
            ToggleAnsweredRequest(
                thread_id=str(thread_id),
                user_id=user.user_id,
                comment_id=str(request.comment_id),
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "Answer toggle")
