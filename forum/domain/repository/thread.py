"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from forum.domain.model.comment import Comment
from forum.domain.model.thread import Thread
from forum.domain.value import ThreadId


class ThreadRepository(ABC):
    """Repository for the Thread aggregate.

    Threads and their comments are stored separately; every read returns
    the thread with its comments attached, oldest comment first.
    """

    @abstractmethod
    async def find_all(self) -> list[Thread]:
        """Find all threads, newest first.

        Returns:
            Every stored thread with its comments
        """
        pass

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update).

        Only the thread's own fields are written. Comments are added
        through ``add_comment``.

        Args:
            thread: The thread to save

        Returns:
            The saved thread, re-read with its comments
        """
        pass

    @abstractmethod
    async def update(
        self, thread_id: ThreadId, changes: dict[str, Any]
    ) -> Optional[Thread]:
        """Merge a partial set of fields into a stored thread.

        Args:
            thread_id: The thread's unique identifier
            changes: Field name to new value, using Thread field names

        Returns:
            The updated thread, or None if it does not exist
        """
        pass

    @abstractmethod
    async def add_comment(self, thread_id: ThreadId, comment: Comment) -> Comment:
        """Append a comment to a thread's comments.

        Args:
            thread_id: The thread receiving the comment
            comment: The comment to store

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def delete(self, thread_id: ThreadId) -> None:
        """Delete a thread together with its comments.

        Args:
            thread_id: The thread's unique identifier
        """
        pass
