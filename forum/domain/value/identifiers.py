"""Strongly typed identifiers for forum entities.

User identifiers are supplied by the caller at registration (for example an
external auth provider's uid), so they are plain strings. Threads and
comments get generated UUIDs.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", str)
ThreadId = NewType("ThreadId", UUID)
CommentId = NewType("CommentId", UUID)
