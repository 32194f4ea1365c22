"""Thread aggregate root.

A thread owns its comments. Reads always return the thread together with
its comments, in the order they were posted.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from forum.domain.model.comment import Comment
from forum.domain.model.common import DomainModel
from forum.domain.model.user import User
from forum.domain.value import (
    CommentId,
    CreatorRef,
    ThreadCategory,
    ThreadId,
    ThreadStatus,
    ThreadTag,
)


class Thread(DomainModel):
    """Thread aggregate root.

    Business rules:
    - Only the creator or a moderator may change a thread
    - Only a moderator may delete a thread
    - Only the creator may mark a comment as the answer
    - A locked thread accepts no new comments
    - ``answered_comment_id`` points at one of ``comments`` or is None
    """

    id: ThreadId
    title: str = Field(min_length=1, max_length=300)
    category: ThreadCategory
    status: ThreadStatus = ThreadStatus.NEW
    creation_date: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    description: str = Field(min_length=1, max_length=10000)
    creator: CreatorRef
    comments: list[Comment] = Field(default_factory=list)
    is_qna: bool = False
    is_answered: bool = False
    is_locked: bool = False
    answered_comment_id: Optional[CommentId] = None
    tags: list[ThreadTag] = Field(default_factory=list)

    def can_be_modified_by(self, user: User) -> bool:
        """Whether the user may edit or lock this thread."""
        return user.id == self.creator.id or user.is_moderator

    def is_created_by(self, user: User) -> bool:
        """Whether the user started this thread."""
        return user.id == self.creator.id

    def find_comment(self, comment_id: CommentId) -> Optional[Comment]:
        """Find one of this thread's comments by ID."""
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None

    @property
    def answered_comment(self) -> Optional[Comment]:
        """The comment currently marked as the answer, if any."""
        if self.answered_comment_id is None:
            return None
        return self.find_comment(self.answered_comment_id)
