"""User aggregate root."""

from datetime import datetime, timezone

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CreatorRef, UserId


class User(DomainModel):
    """Registered forum member.

    ``password`` always holds a bcrypt hash, never the plaintext.
    Moderators may edit, lock and delete any thread. Blocked users can
    still read but may not comment.
    """

    id: UserId
    name: str = Field(default="", max_length=255)
    username: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    password: str
    is_moderator: bool = False
    is_blocked: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def as_creator(self, include_email: bool = False) -> CreatorRef:
        """Snapshot of this user's display data for embedding in content."""
        return CreatorRef(
            id=self.id,
            username=self.username,
            name=self.name,
            email=self.email if include_email else None,
        )
