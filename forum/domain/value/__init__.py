"""Domain value objects for the forum."""

from forum.domain.value.identifiers import CommentId, ThreadId, UserId
from forum.domain.value.types import (
    CreatorRef,
    TagType,
    ThreadCategory,
    ThreadStatus,
    ThreadTag,
)

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommentId",
    # Types
    "CreatorRef",
    "TagType",
    "ThreadCategory",
    "ThreadStatus",
    "ThreadTag",
]
