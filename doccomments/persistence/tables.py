"""SQLAlchemy table definitions for the comment system.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the authentication system)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("username", String(255), nullable=False, unique=True),
    Column("email", String(255), nullable=False, server_default=""),
    Column("moderator", Boolean, nullable=False, server_default="false"),
)

# ============================================================================
# TARGETS TABLE
# ============================================================================
targets_table = Table(
    "targets",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("domain", String(50), nullable=False),
    Column(
        "type",
        Enum("class", "guide", "video", name="target_type", create_type=False),
        nullable=False,
    ),
    Column("cls", String(255), nullable=False),
    Column("member", String(255), nullable=False, server_default=""),
    UniqueConstraint("domain", "type", "cls", "member", name="uq_target"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "target_id",
        BigInteger,
        ForeignKey("targets.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "user_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("content_html", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted", Boolean, nullable=False, server_default="false"),
)

Index("idx_comments_target_id", comments_table.c.target_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_user_id", comments_table.c.user_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# VOTES TABLE (current state, one row per user and comment)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column(
        "user_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "comment_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("value", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "comment_id", name="unique_vote"),
    CheckConstraint("value IN (1, -1)", name="vote_value_up_or_down"),
)

Index("idx_votes_comment_id", votes_table.c.comment_id)

# ============================================================================
# READINGS TABLE
# ============================================================================
readings_table = Table(
    "readings",
    metadata,
    Column(
        "user_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "comment_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "comment_id", name="unique_reading"),
)

# ============================================================================
# UPDATES TABLE (append-only audit log)
# ============================================================================
updates_table = Table(
    "updates",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "comment_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "action",
        Enum("update", "delete", "undo_delete", name="update_action", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_updates_comment_id", updates_table.c.comment_id)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("domain", String(50), nullable=False),
    Column("tagname", String(100), nullable=False),
    UniqueConstraint("domain", "tagname", name="uq_domain_tagname"),
)

# ============================================================================
# COMMENT_TAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
comment_tags_table = Table(
    "comment_tags",
    metadata,
    Column(
        "comment_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "tag_id", BigInteger, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "user_id", BigInteger, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "tag_id", name="uq_comment_tag"),
)

Index("idx_comment_tags_tag_id", comment_tags_table.c.tag_id)
