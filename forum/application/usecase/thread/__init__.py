"""Thread use cases."""

from .add_comment import AddCommentRequest, AddCommentResponse, AddCommentUseCase
from .common import CommentInfo, CreatorInfo, TagInfo, TagInput, ThreadDetails
from .create_thread import CreateThreadRequest, CreateThreadUseCase
from .delete_thread import (
    DeleteThreadRequest,
    DeleteThreadResponse,
    DeleteThreadUseCase,
)
from .edit_thread import EditThreadRequest, EditThreadUseCase
from .get_thread import GetThreadRequest, GetThreadUseCase
from .list_threads import ListThreadsRequest, ListThreadsResponse, ListThreadsUseCase
from .lock_thread import LockThreadRequest, LockThreadUseCase
from .toggle_answered import ToggleAnsweredRequest, ToggleAnsweredUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentResponse",
    "AddCommentUseCase",
    "CommentInfo",
    "CreateThreadRequest",
    "CreateThreadUseCase",
    "CreatorInfo",
    "DeleteThreadRequest",
    "DeleteThreadResponse",
    "DeleteThreadUseCase",
    "EditThreadRequest",
    "EditThreadUseCase",
    "GetThreadRequest",
    "GetThreadUseCase",
    "ListThreadsRequest",
    "ListThreadsResponse",
    "ListThreadsUseCase",
    "LockThreadRequest",
    "LockThreadUseCase",
    "TagInfo",
    "TagInput",
    "ThreadDetails",
    "ToggleAnsweredRequest",
    "ToggleAnsweredUseCase",
]
