"""In-memory thread repository for testing."""

from typing import Any, Optional

from forum.domain.model.comment import Comment
from forum.domain.model.thread import Thread
from forum.domain.repository.thread import ThreadRepository
from forum.domain.value import ThreadId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing.

    Comments are kept apart from threads and attached on every read,
    mirroring the separate comments table.
    """

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}
        self._comments: dict[ThreadId, list[Comment]] = {}

    def _with_comments(self, thread: Thread) -> Thread:
        comments = sorted(
            self._comments.get(thread.id, []), key=lambda c: c.creation_date
        )
        return thread.model_copy(update={"comments": comments})

    async def find_all(self) -> list[Thread]:
        """Find all threads, newest first."""
        # Later insertions win ties on creation_date
        ordered = sorted(
            enumerate(self._threads.values()),
            key=lambda item: (item[1].creation_date, item[0]),
            reverse=True,
        )
        return [self._with_comments(t) for _, t in ordered]

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        thread = self._threads.get(thread_id)
        return self._with_comments(thread) if thread else None

    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update)."""
        self._threads[thread.id] = thread.model_copy(update={"comments": []})
        self._comments.setdefault(thread.id, [])
        return self._with_comments(self._threads[thread.id])

    async def update(
        self, thread_id: ThreadId, changes: dict[str, Any]
    ) -> Optional[Thread]:
        """Merge a partial set of fields into a stored thread."""
        thread = self._threads.get(thread_id)
        if thread is None:
            return None
        self._threads[thread_id] = thread.model_copy(update=changes)
        return self._with_comments(self._threads[thread_id])

    async def add_comment(self, thread_id: ThreadId, comment: Comment) -> Comment:
        """Append a comment to a thread."""
        self._comments.setdefault(thread_id, []).append(comment)
        return comment

    async def delete(self, thread_id: ThreadId) -> None:
        """Delete a thread together with its comments."""
        self._threads.pop(thread_id, None)
        self._comments.pop(thread_id, None)
