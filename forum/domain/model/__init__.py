"""Domain model entities for the forum."""

from forum.domain.model.comment import Comment
from forum.domain.model.thread import Thread
from forum.domain.model.user import User

__all__ = [
    "User",
    "Thread",
    "Comment",
]
