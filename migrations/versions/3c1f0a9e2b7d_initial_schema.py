"""initial_schema

Create the schema of the documentation comment system:
- Users (read-only here, owned by the authentication system)
- Targets (documented entities, one row per domain/type/name/member)
- Comments (one level of replies, soft-deleted)
- Votes (current vote per user and comment, +1 or -1)
- Readings (which moderator has read which comment)
- Updates (append-only audit log of edits and deletions)
- Tags and comment_tags (moderator tags, per domain)

Revision ID: 3c1f0a9e2b7d
Revises:
Create Date: 2026-10-19 16:20:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9e2b7d"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE target_type AS ENUM ('class', 'guide', 'video');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE update_action AS ENUM ('update', 'delete', 'undo_delete');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, server_default=""),
        sa.Column("moderator", sa.Boolean(), nullable=False, server_default="false"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    # ========================================================================
    # TARGETS table
    # ========================================================================
    op.create_table(
        "targets",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("domain", sa.String(50), nullable=False),
        sa.Column(
            "type",
            postgresql.ENUM(
                "class", "guide", "video", name="target_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("cls", sa.String(255), nullable=False),
        sa.Column("member", sa.String(255), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("domain", "type", "cls", "member", name="uq_target"),
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("target_id", sa.BigInteger(), nullable=False),
        sa.Column("parent_id", sa.BigInteger(), nullable=True),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("content_html", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("deleted", sa.Boolean(), nullable=False, server_default="false"),
        sa.ForeignKeyConstraint(["target_id"], ["targets.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_target_id", "comments", ["target_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_user_id", "comments", ["user_id"])
    op.create_index(
        "idx_comments_created_at", "comments", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("comment_id", sa.BigInteger(), nullable=False),
        sa.Column("value", sa.SmallInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "comment_id", name="unique_vote"),
        # A vote is either up or down; retracting deletes the row
        sa.CheckConstraint("value IN (1, -1)", name="vote_value_up_or_down"),
    )
    op.create_index("idx_votes_comment_id", "votes", ["comment_id"])

    # ========================================================================
    # READINGS table
    # ========================================================================
    op.create_table(
        "readings",
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("comment_id", sa.BigInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "comment_id", name="unique_reading"),
    )

    # ========================================================================
    # UPDATES table
    # ========================================================================
    op.create_table(
        "updates",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("comment_id", sa.BigInteger(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column(
            "action",
            postgresql.ENUM(
                "update",
                "delete",
                "undo_delete",
                name="update_action",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_updates_comment_id", "updates", ["comment_id"])

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("domain", sa.String(50), nullable=False),
        sa.Column("tagname", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("domain", "tagname", name="uq_domain_tagname"),
    )

    # ========================================================================
    # COMMENT_TAGS table (junction table for many-to-many)
    # ========================================================================
    op.create_table(
        "comment_tags",
        sa.Column("comment_id", sa.BigInteger(), nullable=False),
        sa.Column("tag_id", sa.BigInteger(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.UniqueConstraint("comment_id", "tag_id", name="uq_comment_tag"),
    )
    op.create_index("idx_comment_tags_tag_id", "comment_tags", ["tag_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("comment_tags")
    op.drop_table("tags")
    op.drop_table("updates")
    op.drop_table("readings")
    op.drop_table("votes")
    op.drop_table("comments")
    op.drop_table("targets")
    op.drop_table("users")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS update_action")
    op.execute("DROP TYPE IF EXISTS target_type")
