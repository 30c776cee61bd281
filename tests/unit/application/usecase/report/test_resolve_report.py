"""Unit tests for the report use cases."""

from uuid import UUID, uuid4

import pytest

from board.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from board.application.usecase.report import (
    CreateReportRequest,
    CreateReportUseCase,
    GetReportRequest,
    GetReportUseCase,
    ListReportsRequest,
    ListReportsUseCase,
    ResolveReportRequest,
    ResolveReportUseCase,
)
from board.domain.error import (
    ConflictError,
    InvalidStateTransitionError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from board.domain.repository import (
    CommentRepository,
    ModerationActionFilter,
    ModerationActionRepository,
    PostRepository,
)
from board.domain.value import (
    CommentId,
    ContentType,
    ModerationActionType,
    ReportStatus,
    Role,
)
from tests.conftest import make_principal, seed_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def reported_comment(env):
    """Create a comment and a pending report against it."""
    post = await seed_post(await env.get(PostRepository))
    create_comment = await env.get(CreateCommentUseCase)
    comment = await create_comment.execute(
        CreateCommentRequest(
            post_id=str(post.id), body="Buy cheap pills", principal=make_principal()
        )
    )
    create_report = await env.get(CreateReportUseCase)
    reporter = make_principal()
    report = await create_report.execute(
        CreateReportRequest(
            content_type=ContentType.COMMENT,
            target_comment_id=comment.comment_id,
            reason="Spam",
            principal=reporter,
        )
    )
    return comment, report, reporter


class TestCreateReportUseCase:
    """Tests for CreateReportUseCase."""

    @pytest.mark.asyncio
    async def test_same_member_cannot_report_twice(self, unit_env):
        """A second report from the same member should conflict."""
        # Arrange
        comment, _, reporter = await reported_comment(unit_env)
        use_case = await unit_env.get(CreateReportUseCase)

        # Act & Assert
        with pytest.raises(ConflictError):
            await use_case.execute(
                CreateReportRequest(
                    content_type=ContentType.COMMENT,
                    target_comment_id=comment.comment_id,
                    reason="Still spam",
                    principal=reporter,
                )
            )

    @pytest.mark.asyncio
    async def test_target_must_match_content_type(self, unit_env):
        """A post report naming a comment target should be rejected."""
        # Arrange
        use_case = await unit_env.get(CreateReportUseCase)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateReportRequest(
                    content_type=ContentType.POST,
                    target_comment_id=str(uuid4()),
                    reason="Spam",
                    principal=make_principal(),
                )
            )

    @pytest.mark.asyncio
    async def test_missing_target_not_found(self, unit_env):
        """Reporting a post that doesn't exist should raise NotFoundError."""
        # Arrange
        use_case = await unit_env.get(CreateReportUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateReportRequest(
                    content_type=ContentType.POST,
                    target_post_id=str(uuid4()),
                    reason="Spam",
                    principal=make_principal(),
                )
            )


class TestGetReportUseCase:
    """Tests for GetReportUseCase."""

    @pytest.mark.asyncio
    async def test_reporter_and_staff_can_read(self, unit_env):
        """The reporter and staff may read a report, other members may not."""
        # Arrange
        _, report, reporter = await reported_comment(unit_env)
        use_case = await unit_env.get(GetReportUseCase)

        # Act
        own = await use_case.execute(
            GetReportRequest(report_id=report.report_id, principal=reporter)
        )
        staff = await use_case.execute(
            GetReportRequest(
                report_id=report.report_id, principal=make_principal(Role.MODERATOR)
            )
        )

        # Assert
        assert own.report_id == staff.report_id == report.report_id
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                GetReportRequest(report_id=report.report_id, principal=make_principal())
            )


class TestResolveReportUseCase:
    """Tests for ResolveReportUseCase."""

    @pytest.mark.asyncio
    async def test_resolve_with_delete_action(self, unit_env):
        """Resolving with a delete action should remove the comment and link the action."""
        # Arrange
        comment, report, _ = await reported_comment(unit_env)
        moderator = make_principal(Role.MODERATOR)
        use_case = await unit_env.get(ResolveReportUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        # Act
        result = await use_case.execute(
            ResolveReportRequest(
                report_id=report.report_id,
                status=ReportStatus.RESOLVED,
                note="Removed spam",
                action_type=ModerationActionType.DELETE,
                principal=moderator,
            )
        )

        # Assert
        assert result.status is ReportStatus.RESOLVED
        assert result.reason == "Spam"
        assert result.resolution_note == "Removed spam"
        assert result.resolved_by_id == str(moderator.id)
        assert result.moderation_action is not None
        assert result.moderation_action.report_id == report.report_id
        assert result.moderation_action.target_comment_id == comment.comment_id
        assert result.moderation_action.actor_moderator_id == str(moderator.id)

        stored = await comment_repo.find_by_id(CommentId(UUID(comment.comment_id)))
        assert not stored.is_active

    @pytest.mark.asyncio
    async def test_reject_without_action(self, unit_env):
        """Rejecting should close the report without touching the target."""
        # Arrange
        _, report, _ = await reported_comment(unit_env)
        use_case = await unit_env.get(ResolveReportUseCase)
        action_repo = await unit_env.get(ModerationActionRepository)

        # Act
        result = await use_case.execute(
            ResolveReportRequest(
                report_id=report.report_id,
                status=ReportStatus.REJECTED,
                principal=make_principal(Role.ADMIN),
            )
        )

        # Assert
        assert result.status is ReportStatus.REJECTED
        assert result.moderation_action is None
        assert await action_repo.count(ModerationActionFilter()) == 0

    @pytest.mark.asyncio
    async def test_resolving_closed_report_conflicts(self, unit_env):
        """A report can only be closed once."""
        # Arrange
        _, report, _ = await reported_comment(unit_env)
        use_case = await unit_env.get(ResolveReportUseCase)
        moderator = make_principal(Role.MODERATOR)
        await use_case.execute(
            ResolveReportRequest(
                report_id=report.report_id,
                status=ReportStatus.RESOLVED,
                principal=moderator,
            )
        )

        # Act & Assert
        with pytest.raises(InvalidStateTransitionError):
            await use_case.execute(
                ResolveReportRequest(
                    report_id=report.report_id,
                    status=ReportStatus.REJECTED,
                    principal=moderator,
                )
            )

    @pytest.mark.asyncio
    async def test_action_on_rejection_leaves_report_pending(self, unit_env):
        """An action attached to a rejection should fail before any write."""
        # Arrange
        _, report, reporter = await reported_comment(unit_env)
        use_case = await unit_env.get(ResolveReportUseCase)
        get_report = await unit_env.get(GetReportUseCase)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                ResolveReportRequest(
                    report_id=report.report_id,
                    status=ReportStatus.REJECTED,
                    action_type=ModerationActionType.DELETE,
                    principal=make_principal(Role.MODERATOR),
                )
            )
        current = await get_report.execute(
            GetReportRequest(report_id=report.report_id, principal=reporter)
        )
        assert current.status is ReportStatus.PENDING

    @pytest.mark.asyncio
    async def test_member_cannot_resolve(self, unit_env):
        """Members may not resolve reports."""
        # Arrange
        _, report, reporter = await reported_comment(unit_env)
        use_case = await unit_env.get(ResolveReportUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                ResolveReportRequest(
                    report_id=report.report_id,
                    status=ReportStatus.RESOLVED,
                    principal=reporter,
                )
            )


class TestListReportsUseCase:
    """Tests for ListReportsUseCase."""

    @pytest.mark.asyncio
    async def test_filter_by_status(self, unit_env):
        """Staff should be able to page through pending reports."""
        # Arrange
        await reported_comment(unit_env)
        _, closed, _ = await reported_comment(unit_env)
        resolve = await unit_env.get(ResolveReportUseCase)
        await resolve.execute(
            ResolveReportRequest(
                report_id=closed.report_id,
                status=ReportStatus.REJECTED,
                principal=make_principal(Role.ADMIN),
            )
        )
        use_case = await unit_env.get(ListReportsUseCase)

        # Act
        result = await use_case.execute(
            ListReportsRequest(
                status=ReportStatus.PENDING,
                limit=10,
                principal=make_principal(Role.MODERATOR),
            )
        )

        # Assert
        assert result.pagination.records == 1
        assert result.pagination.pages == 1
        assert all(item.status is ReportStatus.PENDING for item in result.data)

    @pytest.mark.asyncio
    async def test_member_cannot_list(self, unit_env):
        """Members may not list reports."""
        # Arrange
        use_case = await unit_env.get(ListReportsUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(ListReportsRequest(principal=make_principal()))
