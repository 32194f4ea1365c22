"""Shared thread response models."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, Field

from forum.domain.model import Comment, Thread
from forum.domain.value import TagType, ThreadCategory, ThreadStatus, ThreadTag


class TagInput(BaseModel):
    """Tag as supplied by a client.

    ``thread_tag_id`` is generated when omitted.
    """

    tag_type: TagType
    thread_tag_id: str | None = Field(default=None, min_length=1, max_length=64)


class CreatorInfo(BaseModel):
    """Creator display data."""

    id: str
    username: str
    name: str


class CommentInfo(BaseModel):
    """Comment in a thread response."""

    comment_id: str
    content: str
    creation_date: datetime
    creator: CreatorInfo


class TagInfo(BaseModel):
    """Tag in a thread response."""

    thread_tag_id: str
    tag_type: TagType


class ThreadDetails(BaseModel):
    """Thread with its comments."""

    thread_id: str
    title: str
    category: ThreadCategory
    status: ThreadStatus
    creation_date: datetime
    description: str
    creator: CreatorInfo
    comments: list[CommentInfo]
    is_qna: bool
    is_answered: bool
    is_locked: bool
    answered_comment_id: str | None
    tags: list[TagInfo]


def build_tags(tags: list[TagInput]) -> list[ThreadTag]:
    """Turn client tags into thread tags.

    Repeated tag types are collapsed to their first occurrence.
    """
    seen: set[TagType] = set()
    result: list[ThreadTag] = []
    for tag in tags:
        if tag.tag_type in seen:
            continue
        seen.add(tag.tag_type)
        result.append(
            ThreadTag(
                thread_tag_id=tag.thread_tag_id or uuid4().hex,
                tag_type=tag.tag_type,
            )
        )
    return result


def comment_info(comment: Comment) -> CommentInfo:
    # Commenter email stays internal
    return CommentInfo(
        comment_id=str(comment.id),
        content=comment.content,
        creation_date=comment.creation_date,
        creator=CreatorInfo(
            id=str(comment.creator.id),
            username=comment.creator.username,
            name=comment.creator.name,
        ),
    )


def thread_details(thread: Thread) -> ThreadDetails:
    """Build the response model for a thread."""
    return ThreadDetails(
        thread_id=str(thread.id),
        title=thread.title,
        category=thread.category,
        status=thread.status,
        creation_date=thread.creation_date,
        description=thread.description,
        creator=CreatorInfo(
            id=str(thread.creator.id),
            username=thread.creator.username,
            name=thread.creator.name,
        ),
        comments=[comment_info(c) for c in thread.comments],
        is_qna=thread.is_qna,
        is_answered=thread.is_answered,
        is_locked=thread.is_locked,
        answered_comment_id=(
            str(thread.answered_comment_id) if thread.answered_comment_id else None
        ),
        tags=[
            TagInfo(thread_tag_id=t.thread_tag_id, tag_type=t.tag_type)
            for t in thread.tags
        ],
    )
