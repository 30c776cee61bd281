"""initial_schema

Create the discussion board schema:
- Posts (minimal read model owned by the post service)
- Comments (threaded via parent_id, nesting level stored per row)
- Comment edits (append-only edit history)
- Reports (member complaints with a pending -> resolved/rejected lifecycle)
- Moderation actions (append-only audit log, retired_at for corrections)

Revision ID: 3c1d9e2f4a6b
Revises:
Create Date: 2026-10-19 09:12:40.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1d9e2f4a6b"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_ENUMS = {
    "content_type": ("post", "comment"),
    "report_status": ("pending", "resolved", "rejected"),
    "moderation_action_type": ("delete", "warn", "hide", "edit", "ban", "restrict"),
    "acting_capacity": ("author", "member", "moderator", "admin"),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*_ENUMS[name], name=name, create_type=False)


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    for name, values in _ENUMS.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    op.create_table(
        "posts",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("author_id", postgresql.UUID(), nullable=False),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("deleted_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "comments",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("post_id", postgresql.UUID(), nullable=False),
        sa.Column("parent_id", postgresql.UUID(), nullable=True),
        sa.Column("author_id", postgresql.UUID(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "nesting_level", sa.Integer(), server_default="0", nullable=False
        ),
        sa.Column(
            "is_edited", sa.Boolean(), server_default=sa.false(), nullable=False
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("deleted_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.CheckConstraint("nesting_level >= 0", name="nesting_level_non_negative"),
        sa.CheckConstraint(
            "(parent_id IS NULL) = (nesting_level = 0)", name="root_iff_level_zero"
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])
    op.create_index("idx_comments_deleted_at", "comments", ["deleted_at"])

    op.create_table(
        "comment_edits",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("comment_id", postgresql.UUID(), nullable=False),
        sa.Column("editor_id", postgresql.UUID(), nullable=False),
        sa.Column("editor_capacity", _enum("acting_capacity"), nullable=False),
        sa.Column("previous_body", sa.Text(), nullable=False),
        sa.Column("new_body", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comment_edits_comment_id", "comment_edits", ["comment_id"]
    )

    op.create_table(
        "reports",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("reporter_id", postgresql.UUID(), nullable=False),
        sa.Column("content_type", _enum("content_type"), nullable=False),
        sa.Column("target_post_id", postgresql.UUID(), nullable=True),
        sa.Column("target_comment_id", postgresql.UUID(), nullable=True),
        sa.Column("reason", sa.Text(), nullable=False),
        sa.Column(
            "status",
            _enum("report_status"),
            server_default="pending",
            nullable=False,
        ),
        sa.Column("resolution_note", sa.Text(), nullable=True),
        sa.Column("resolved_by_id", postgresql.UUID(), nullable=True),
        sa.Column("resolved_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "(target_post_id IS NULL) <> (target_comment_id IS NULL)",
            name="report_exactly_one_target",
        ),
        sa.ForeignKeyConstraint(["target_post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["target_comment_id"], ["comments.id"], ondelete="CASCADE"
        ),
        sa.UniqueConstraint(
            "reporter_id", "target_post_id", name="uq_reports_reporter_post"
        ),
        sa.UniqueConstraint(
            "reporter_id", "target_comment_id", name="uq_reports_reporter_comment"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_reports_status", "reports", ["status"])
    op.create_index("idx_reports_created_at", "reports", ["created_at"])

    op.create_table(
        "moderation_actions",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("actor_moderator_id", postgresql.UUID(), nullable=True),
        sa.Column("actor_admin_id", postgresql.UUID(), nullable=True),
        sa.Column("target_post_id", postgresql.UUID(), nullable=True),
        sa.Column("target_comment_id", postgresql.UUID(), nullable=True),
        sa.Column("report_id", postgresql.UUID(), nullable=True),
        sa.Column(
            "action_type", _enum("moderation_action_type"), nullable=False
        ),
        sa.Column("action_details", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("retired_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.CheckConstraint(
            "(actor_moderator_id IS NULL) <> (actor_admin_id IS NULL)",
            name="moderation_action_exactly_one_actor",
        ),
        sa.CheckConstraint(
            "target_post_id IS NULL OR target_comment_id IS NULL",
            name="moderation_action_at_most_one_target",
        ),
        sa.ForeignKeyConstraint(
            ["target_post_id"], ["posts.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(
            ["target_comment_id"], ["comments.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(["report_id"], ["reports.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_moderation_actions_report_id", "moderation_actions", ["report_id"]
    )
    op.create_index(
        "idx_moderation_actions_created_at", "moderation_actions", ["created_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("moderation_actions")
    op.drop_table("reports")
    op.drop_table("comment_edits")
    op.drop_table("comments")
    op.drop_table("posts")

    # Drop ENUM types
    for name in reversed(list(_ENUMS)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
