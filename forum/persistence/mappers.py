"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from forum.domain.model import Comment, Thread, User
from forum.domain.value import (
    CommentId,
    CreatorRef,
    TagType,
    ThreadCategory,
    ThreadId,
    ThreadStatus,
    ThreadTag,
    UserId,
)


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        name=row.get("name") or "",
        username=row["username"],
        email=row["email"],
        password=row["password"],
        is_moderator=row["is_moderator"],
        is_blocked=row.get("is_blocked", False),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def tags_to_json(tags: list[ThreadTag]) -> list[Dict[str, str]]:
    """Convert thread tags to the JSONB column representation."""
    return [
        {"thread_tag_id": tag.thread_tag_id, "tag_type": tag.tag_type.value}
        for tag in tags
    ]


def json_to_tags(data: Optional[list[Dict[str, str]]]) -> list[ThreadTag]:
    """Convert the JSONB column representation back to thread tags."""
    return [
        ThreadTag(thread_tag_id=item["thread_tag_id"], tag_type=TagType(item["tag_type"]))
        for item in data or []
    ]


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        content=row["content"],
        creation_date=row["created_at"],
        creator=CreatorRef(
            id=UserId(row["creator_id"]),
            username=row["creator_username"],
            name=row.get("creator_name") or "",
            email=row.get("creator_email"),
        ),
    )


def comment_to_dict(comment: Comment, thread_id: ThreadId) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model
        thread_id: Thread the comment belongs to

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": comment.id,
        "thread_id": thread_id,
        "content": comment.content,
        "creator_id": comment.creator.id,
        "creator_username": comment.creator.username,
        "creator_name": comment.creator.name,
        "creator_email": comment.creator.email,
        "created_at": comment.creation_date,
    }


def row_to_thread(
    row: Dict[str, Any], comments: Optional[list[Comment]] = None
) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict
        comments: Comments joined from the comments table, oldest first

    Returns:
        Thread domain model
    """
    answered = row.get("answered_comment_id")
    return Thread(
        id=ThreadId(_as_uuid(row["id"])),
        title=row["title"],
        category=ThreadCategory(row["category"]),
        status=ThreadStatus(row["status"]),
        creation_date=row["created_at"],
        description=row["description"],
        creator=CreatorRef(
            id=UserId(row["creator_id"]),
            username=row["creator_username"],
            name=row.get("creator_name") or "",
        ),
        comments=comments or [],
        is_qna=row["is_qna"],
        is_answered=row["is_answered"],
        is_locked=row["is_locked"],
        answered_comment_id=CommentId(_as_uuid(answered)) if answered else None,
        tags=json_to_tags(row.get("tags")),
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict.

    Comments are not included; they are stored in their own table.

    Args:
        thread: Thread domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": thread.id,
        "title": thread.title,
        "category": thread.category.value,
        "status": thread.status.value,
        "description": thread.description,
        "creator_id": thread.creator.id,
        "creator_username": thread.creator.username,
        "creator_name": thread.creator.name,
        "is_qna": thread.is_qna,
        "is_answered": thread.is_answered,
        "is_locked": thread.is_locked,
        "answered_comment_id": thread.answered_comment_id,
        "tags": tags_to_json(thread.tags),
        "created_at": thread.creation_date,
    }


def thread_changes_to_values(changes: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a partial Thread update to column values.

    Args:
        changes: Thread field name to new value

    Returns:
        Column name to value
    """
    values: Dict[str, Any] = {}
    for field, value in changes.items():
        if field == "tags":
            values["tags"] = tags_to_json(value)
        elif field in ("category", "status"):
            values[field] = value.value if hasattr(value, "value") else value
        elif field == "creation_date":
            values["created_at"] = value
        else:
            values[field] = value
    return values
