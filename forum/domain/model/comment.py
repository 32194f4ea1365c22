"""Comment entity.

Comments belong to exactly one thread and have no lifecycle of their own:
they are created on an unlocked thread and removed only with it.
"""

from datetime import datetime, timezone

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, CreatorRef


class Comment(DomainModel):
    """A reply posted on a thread."""

    id: CommentId
    content: str = Field(min_length=2, max_length=10000)
    creation_date: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    creator: CreatorRef
