"""PostgreSQL implementation of Thread repository."""

from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Comment, Thread
from forum.domain.repository import ThreadRepository
from forum.domain.value import ThreadId
from forum.persistence.error import translate_store_errors
from forum.persistence.mappers import (
    comment_to_dict,
    row_to_comment,
    row_to_thread,
    thread_changes_to_values,
    thread_to_dict,
)
from forum.persistence.tables import thread_comments_table, threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository.

    Both ``find_all`` and ``find_by_id`` read comments from
    ``thread_comments``; the threads table holds no comment data.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_comments_for_threads(
        self, thread_ids: list[UUID]
    ) -> dict[UUID, list[Comment]]:
        """Fetch comments for multiple threads in a single query.

        Args:
            thread_ids: List of thread IDs

        Returns:
            Dict mapping thread_id -> comments, oldest first
        """
        if not thread_ids:
            return {}

        stmt = (
            select(thread_comments_table)
            .where(thread_comments_table.c.thread_id.in_(thread_ids))
            .order_by(thread_comments_table.c.created_at, thread_comments_table.c.id)
        )
        result = await self.session.execute(stmt)

        comment_map: dict[UUID, list[Comment]] = defaultdict(list)
        for row in result.mappings().all():
            comment_map[row["thread_id"]].append(row_to_comment(dict(row)))

        return comment_map

    @translate_store_errors("threads.find_all")
    async def find_all(self) -> list[Thread]:
        """Find all threads, newest first."""
        with logfire.span("thread_repository.find_all"):
            stmt = select(threads_table).order_by(desc(threads_table.c.created_at))
            result = await self.session.execute(stmt)
            rows = result.mappings().all()

            if not rows:
                logfire.info("No threads found")
                return []

            comment_map = await self._fetch_comments_for_threads(
                [row["id"] for row in rows]
            )

            threads = [
                row_to_thread(dict(row), comments=comment_map.get(row["id"], []))
                for row in rows
            ]
            logfire.info("Found threads", count=len(threads))
            return threads

    @translate_store_errors("threads.find_by_id")
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        with logfire.span("thread_repository.find_by_id", thread_id=str(thread_id)):
            stmt = select(threads_table).where(threads_table.c.id == thread_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                logfire.warn("Thread not found", thread_id=str(thread_id))
                return None

            comment_map = await self._fetch_comments_for_threads([thread_id])
            return row_to_thread(dict(row), comments=comment_map.get(thread_id, []))

    @translate_store_errors("threads.save")
    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update)."""
        with logfire.span("thread_repository.save", thread_id=str(thread.id)):
            existing = await self.session.execute(
                select(threads_table.c.id).where(threads_table.c.id == thread.id)
            )
            values = thread_to_dict(thread)
            values["updated_at"] = datetime.now(timezone.utc)

            if existing.first():
                del values["id"]
                stmt = (
                    update(threads_table)
                    .where(threads_table.c.id == thread.id)
                    .values(**values)
                )
            else:
                stmt = insert(threads_table).values(**values)
            await self.session.execute(stmt)
            await self.session.flush()

            saved = await self.find_by_id(thread.id)
            return saved if saved is not None else thread

    @translate_store_errors("threads.update")
    async def update(
        self, thread_id: ThreadId, changes: dict[str, Any]
    ) -> Optional[Thread]:
        """Merge a partial set of fields into a stored thread."""
        with logfire.span(
            "thread_repository.update",
            thread_id=str(thread_id),
            fields=sorted(changes),
        ):
            values = thread_changes_to_values(changes)
            values["updated_at"] = datetime.now(timezone.utc)
            stmt = (
                update(threads_table)
                .where(threads_table.c.id == thread_id)
                .values(**values)
            )
            result = await self.session.execute(stmt)
            await self.session.flush()

            if result.rowcount == 0:
                logfire.warn("Thread to update not found", thread_id=str(thread_id))
                return None
            return await self.find_by_id(thread_id)

    @translate_store_errors("threads.add_comment")
    async def add_comment(self, thread_id: ThreadId, comment: Comment) -> Comment:
        """Append a comment to a thread."""
        with logfire.span(
            "thread_repository.add_comment",
            thread_id=str(thread_id),
            comment_id=str(comment.id),
        ):
            stmt = insert(thread_comments_table).values(
                **comment_to_dict(comment, thread_id)
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return comment

    @translate_store_errors("threads.delete")
    async def delete(self, thread_id: ThreadId) -> None:
        """Delete a thread together with its comments."""
        with logfire.span("thread_repository.delete", thread_id=str(thread_id)):
            await self.session.execute(
                delete(thread_comments_table).where(
                    thread_comments_table.c.thread_id == thread_id
                )
            )
            await self.session.execute(
                delete(threads_table).where(threads_table.c.id == thread_id)
            )
            await self.session.flush()
