"""SQLAlchemy table definitions for the forum.

Threads and their comments live in separate tables. Creator and commenter
display data is copied into each row when it is written.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(128), primary_key=True),  # Caller-supplied or generated
    Column("name", String(255), nullable=False, server_default=""),
    Column("username", String(255), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password", String(255), nullable=False),  # bcrypt hash
    Column("is_moderator", Boolean, nullable=False, server_default="false"),
    Column("is_blocked", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(300), nullable=False),
    Column("category", String(64), nullable=False),
    Column("status", String(16), nullable=False, server_default="New"),
    Column("description", Text, nullable=False),
    # Denormalized creator
    Column("creator_id", String(128), nullable=False),
    Column("creator_username", String(255), nullable=False),
    Column("creator_name", String(255), nullable=False, server_default=""),
    Column("is_qna", Boolean, nullable=False, server_default="false"),
    Column("is_answered", Boolean, nullable=False, server_default="false"),
    Column("is_locked", Boolean, nullable=False, server_default="false"),
    Column("answered_comment_id", UUID(as_uuid=True), nullable=True),
    # [{"thread_tag_id": ..., "tag_type": ...}, ...]
    Column("tags", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_threads_created_at", threads_table.c.created_at.desc())
Index("idx_threads_creator_id", threads_table.c.creator_id)

# ============================================================================
# THREAD COMMENTS TABLE
# ============================================================================
thread_comments_table = Table(
    "thread_comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "thread_id",
        UUID(as_uuid=True),
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    # Denormalized commenter
    Column("creator_id", String(128), nullable=False),
    Column("creator_username", String(255), nullable=False),
    Column("creator_name", String(255), nullable=False, server_default=""),
    Column("creator_email", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_thread_comments_thread_created",
    thread_comments_table.c.thread_id,
    thread_comments_table.c.created_at,
)
