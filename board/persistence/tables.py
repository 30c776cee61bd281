"""SQLAlchemy table definitions for the discussion board.

They match the schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

content_type_enum = Enum("post", "comment", name="content_type", create_type=False)
report_status_enum = Enum(
    "pending", "resolved", "rejected", name="report_status", create_type=False
)
moderation_action_type_enum = Enum(
    "delete",
    "warn",
    "hide",
    "edit",
    "ban",
    "restrict",
    name="moderation_action_type",
    create_type=False,
)
acting_capacity_enum = Enum(
    "author", "member", "moderator", "admin", name="acting_capacity", create_type=False
)

# ============================================================================
# POSTS TABLE (owned by the post service, read here)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("author_id", UUID, nullable=False),
    Column("title", String(300), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

# ============================================================================
# COMMENTS TABLE (threaded via parent_id)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("author_id", UUID, nullable=False),
    Column("body", Text, nullable=False),
    Column("nesting_level", Integer, nullable=False, server_default="0"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("nesting_level >= 0", name="nesting_level_non_negative"),
    CheckConstraint(
        "(parent_id IS NULL) = (nesting_level = 0)", name="root_iff_level_zero"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_created_at", comments_table.c.created_at)
Index("idx_comments_deleted_at", comments_table.c.deleted_at)

# ============================================================================
# COMMENT EDITS TABLE (append-only history)
# ============================================================================
comment_edits_table = Table(
    "comment_edits",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("editor_id", UUID, nullable=False),
    Column("editor_capacity", acting_capacity_enum, nullable=False),
    Column("previous_body", Text, nullable=False),
    Column("new_body", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comment_edits_comment_id", comment_edits_table.c.comment_id)

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("reporter_id", UUID, nullable=False),
    Column("content_type", content_type_enum, nullable=False),
    Column(
        "target_post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "target_comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("reason", Text, nullable=False),
    Column("status", report_status_enum, nullable=False, server_default="pending"),
    Column("resolution_note", Text, nullable=True),
    Column("resolved_by_id", UUID, nullable=True),
    Column("resolved_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(target_post_id IS NULL) <> (target_comment_id IS NULL)",
        name="report_exactly_one_target",
    ),
    UniqueConstraint(
        "reporter_id", "target_post_id", name="uq_reports_reporter_post"
    ),
    UniqueConstraint(
        "reporter_id", "target_comment_id", name="uq_reports_reporter_comment"
    ),
)

Index("idx_reports_status", reports_table.c.status)
Index("idx_reports_created_at", reports_table.c.created_at)

# ============================================================================
# MODERATION ACTIONS TABLE (append-only audit log)
# ============================================================================
moderation_actions_table = Table(
    "moderation_actions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("actor_moderator_id", UUID, nullable=True),
    Column("actor_admin_id", UUID, nullable=True),
    Column(
        "target_post_id", UUID, ForeignKey("posts.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "target_comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "report_id", UUID, ForeignKey("reports.id", ondelete="SET NULL"), nullable=True
    ),
    Column("action_type", moderation_action_type_enum, nullable=False),
    Column("action_details", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("retired_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "(actor_moderator_id IS NULL) <> (actor_admin_id IS NULL)",
        name="moderation_action_exactly_one_actor",
    ),
    CheckConstraint(
        "target_post_id IS NULL OR target_comment_id IS NULL",
        name="moderation_action_at_most_one_target",
    ),
)

Index("idx_moderation_actions_report_id", moderation_actions_table.c.report_id)
Index("idx_moderation_actions_created_at", moderation_actions_table.c.created_at)
