"""Unit tests for Comment, Report and ModerationAction invariants."""

from datetime import datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError

from board.domain.model import Comment, ModerationAction, Report
from board.domain.value import (
    CommentId,
    CommentState,
    ContentType,
    ModerationActionId,
    ModerationActionType,
    PostId,
    ReportId,
    UserId,
)


class TestComment:
    """Comment lifecycle and field constraints."""

    def test_lifecycle_state_follows_deleted_at(self):
        comment = Comment(
            id=CommentId(uuid4()),
            post_id=PostId(uuid4()),
            author_id=UserId(uuid4()),
            body="Hi",
        )
        deleted = comment.model_copy(update={"deleted_at": datetime.now()})

        assert comment.lifecycle_state is CommentState.ACTIVE
        assert deleted.lifecycle_state is CommentState.SOFT_DELETED
        assert not deleted.is_active

    def test_negative_nesting_level_rejected(self):
        with pytest.raises(ValidationError):
            Comment(
                id=CommentId(uuid4()),
                post_id=PostId(uuid4()),
                author_id=UserId(uuid4()),
                body="Hi",
                nesting_level=-1,
            )


class TestReport:
    """Report target consistency."""

    def test_both_targets_rejected(self):
        with pytest.raises(ValidationError):
            Report(
                id=ReportId(uuid4()),
                reporter_id=UserId(uuid4()),
                content_type=ContentType.POST,
                target_post_id=PostId(uuid4()),
                target_comment_id=CommentId(uuid4()),
                reason="Spam",
            )

    def test_target_must_match_content_type(self):
        with pytest.raises(ValidationError):
            Report(
                id=ReportId(uuid4()),
                reporter_id=UserId(uuid4()),
                content_type=ContentType.POST,
                target_comment_id=CommentId(uuid4()),
                reason="Spam",
            )

    def test_target_id_resolves_comment(self):
        comment_id = CommentId(uuid4())
        report = Report(
            id=ReportId(uuid4()),
            reporter_id=UserId(uuid4()),
            content_type=ContentType.COMMENT,
            target_comment_id=comment_id,
            reason="Spam",
        )

        assert report.target_id == comment_id
        assert report.is_pending


class TestModerationAction:
    """Actor exclusivity and target cardinality."""

    def test_needs_exactly_one_actor(self):
        with pytest.raises(ValidationError):
            ModerationAction(
                id=ModerationActionId(uuid4()),
                action_type=ModerationActionType.WARN,
            )
        with pytest.raises(ValidationError):
            ModerationAction(
                id=ModerationActionId(uuid4()),
                actor_moderator_id=UserId(uuid4()),
                actor_admin_id=UserId(uuid4()),
                action_type=ModerationActionType.WARN,
            )

    def test_at_most_one_target(self):
        with pytest.raises(ValidationError):
            ModerationAction(
                id=ModerationActionId(uuid4()),
                actor_admin_id=UserId(uuid4()),
                target_post_id=PostId(uuid4()),
                target_comment_id=CommentId(uuid4()),
                action_type=ModerationActionType.HIDE,
            )

    def test_actor_id_and_target_type(self):
        admin_id = UserId(uuid4())
        action = ModerationAction(
            id=ModerationActionId(uuid4()),
            actor_admin_id=admin_id,
            target_comment_id=CommentId(uuid4()),
            action_type=ModerationActionType.DELETE,
        )

        assert action.actor_id == admin_id
        assert action.target_type is ContentType.COMMENT
        assert not action.is_retired
