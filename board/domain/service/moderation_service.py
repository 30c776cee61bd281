"""Moderation domain service.

Runs the report lifecycle (pending -> resolved | rejected) and writes the
append-only moderation action log.
"""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from board.domain.error import (
    ConflictError,
    InvalidStateTransitionError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from board.domain.model.moderation_action import ModerationAction
from board.domain.model.report import Report
from board.domain.repository import (
    ModerationActionFilter,
    ModerationActionRepository,
    ReportFilter,
    ReportRepository,
)
from board.domain.value import (
    CommentId,
    ContentType,
    ModerationActionId,
    ModerationActionType,
    PostId,
    Principal,
    ReportId,
    ReportStatus,
    Role,
    SortSpec,
    UserId,
)

from .base import Service


class ModerationService(Service):
    """Domain service for reports and moderation actions."""

    def __init__(
        self,
        report_repository: ReportRepository,
        moderation_action_repository: ModerationActionRepository,
    ) -> None:
        """Initialize moderation service.

        Args:
            report_repository: Report repository
            moderation_action_repository: Moderation action repository
        """
        self.report_repository = report_repository
        self.moderation_action_repository = moderation_action_repository

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------

    async def create_report(
        self,
        reporter_id: UserId,
        content_type: ContentType,
        target_id: UUID,
        reason: str,
    ) -> Report:
        """File a report against a post or comment.

        The caller is responsible for checking that the target exists.

        Args:
            reporter_id: Reporting user
            content_type: Whether the target is a post or a comment
            target_id: ID of the reported post or comment
            reason: Reporter's explanation

        Returns:
            The pending report

        Raises:
            ValidationError: If the reason is empty
            ConflictError: If this user already reported this content
        """
        with logfire.span(
            "moderation_service.create_report",
            reporter_id=str(reporter_id),
            content_type=content_type,
            target_id=str(target_id),
        ):
            if not reason or not reason.strip():
                raise ValidationError("Report reason must not be empty")

            existing = await self.report_repository.find_by_reporter_and_target(
                reporter_id, content_type, target_id
            )
            if existing is not None:
                logfire.warn(
                    "Duplicate report",
                    reporter_id=str(reporter_id),
                    target_id=str(target_id),
                    existing_report_id=str(existing.id),
                )
                raise ConflictError(
                    f"User {reporter_id} has already reported {content_type.value} "
                    f"{target_id}"
                )

            now = datetime.now()
            report = Report(
                id=ReportId(uuid4()),
                reporter_id=reporter_id,
                content_type=content_type,
                target_post_id=(
                    PostId(target_id) if content_type is ContentType.POST else None
                ),
                target_comment_id=(
                    CommentId(target_id)
                    if content_type is ContentType.COMMENT
                    else None
                ),
                reason=reason,
                status=ReportStatus.PENDING,
                created_at=now,
                updated_at=now,
            )

            saved = await self.report_repository.save(report)
            logfire.info(
                "Report created",
                report_id=str(saved.id),
                content_type=content_type,
                target_id=str(target_id),
            )
            return saved

    async def get_report(self, report_id: ReportId) -> Report | None:
        """Get a report by ID.

        Args:
            report_id: Report ID

        Returns:
            Report if found, None otherwise
        """
        with logfire.span("moderation_service.get_report", report_id=str(report_id)):
            report = await self.report_repository.find_by_id(report_id)
            if report:
                logfire.info("Report found", report_id=str(report_id))
            else:
                logfire.warn("Report not found", report_id=str(report_id))
            return report

    def check_resolution(self, report: Report, new_status: ReportStatus) -> None:
        """Check that a report may move to the given status.

        Raises:
            ValidationError: If new_status is PENDING
            InvalidStateTransitionError: If the report is already closed
        """
        if new_status is ReportStatus.PENDING:
            raise ValidationError("A report can only be resolved or rejected")
        if report.status.is_terminal:
            logfire.warn(
                "Report already closed",
                report_id=str(report.id),
                status=report.status,
                requested=new_status,
            )
            raise InvalidStateTransitionError(
                "Report", str(report.id), report.status.value, new_status.value
            )

    async def resolve_report(
        self,
        report: Report,
        resolver: Principal,
        new_status: ReportStatus,
        note: str | None = None,
    ) -> Report:
        """Close a pending report as resolved or rejected.

        The reporter's reason is preserved; the resolver's note is stored
        separately.

        Args:
            report: Report to close (already authorized)
            resolver: Moderator or admin closing the report
            new_status: RESOLVED or REJECTED
            note: Optional resolution note

        Returns:
            The closed report

        Raises:
            ValidationError: If new_status is PENDING
            InvalidStateTransitionError: If the report is not pending
        """
        with logfire.span(
            "moderation_service.resolve_report",
            report_id=str(report.id),
            resolver_id=str(resolver.id),
            new_status=new_status,
        ):
            self.check_resolution(report, new_status)

            now = datetime.now()
            closed = report.model_copy(
                update={
                    "status": new_status,
                    "resolution_note": note,
                    "resolved_by_id": resolver.id,
                    "resolved_at": now,
                    "updated_at": now,
                }
            )
            saved = await self.report_repository.close(closed)
            if saved is None:
                # Closed by a concurrent request since it was loaded
                current = await self.report_repository.find_by_id(report.id)
                if current is None:
                    raise NotFoundError("Report", str(report.id))
                logfire.warn(
                    "Report already closed",
                    report_id=str(report.id),
                    status=current.status,
                    requested=new_status,
                )
                raise InvalidStateTransitionError(
                    "Report", str(report.id), current.status.value, new_status.value
                )
            logfire.info(
                "Report closed",
                report_id=str(report.id),
                status=new_status,
                resolver_id=str(resolver.id),
            )
            return saved

    async def list_reports(
        self,
        filter: ReportFilter,
        sort: SortSpec,
        limit: int,
        offset: int,
    ) -> list[Report]:
        """List reports matching a filter, one page at a time."""
        with logfire.span(
            "moderation_service.list_reports",
            status=filter.status,
            sort=sort.field,
            limit=limit,
            offset=offset,
        ):
            reports = await self.report_repository.find_all(
                filter=filter, sort=sort, limit=limit, offset=offset
            )
            logfire.info("Reports listed", count=len(reports))
            return reports

    async def count_reports(self, filter: ReportFilter) -> int:
        """Count reports matching a filter."""
        with logfire.span("moderation_service.count_reports"):
            return await self.report_repository.count(filter)

    # ------------------------------------------------------------------
    # Moderation actions
    # ------------------------------------------------------------------

    async def build_action(
        self,
        actor: Principal,
        action_type: ModerationActionType,
        target_post_id: PostId | None = None,
        target_comment_id: CommentId | None = None,
        report_id: ReportId | None = None,
        details: str | None = None,
    ) -> ModerationAction:
        """Validate and build a moderation action without storing it.

        Lets callers run every check before applying side effects such as
        deleting the target.

        Args:
            actor: Moderator or admin taking the action
            action_type: Kind of enforcement
            target_post_id: Targeted post, if any
            target_comment_id: Targeted comment, if any
            report_id: Report that prompted the action, if any
            details: Free-text details

        Returns:
            An unsaved moderation action

        Raises:
            NotAuthorizedError: If the actor is not staff
            ValidationError: If the targets are inconsistent with the type
            NotFoundError: If the referenced report doesn't exist
        """
        if not actor.is_staff:
            raise NotAuthorizedError(
                "record", "ModerationAction", action_type.value, str(actor.id)
            )
        if target_post_id is not None and target_comment_id is not None:
            raise ValidationError(
                "A moderation action targets at most one post or comment"
            )
        if (
            action_type.requires_target
            and target_post_id is None
            and target_comment_id is None
        ):
            raise ValidationError(
                f"A '{action_type.value}' action needs a target post or comment"
            )
        if report_id is not None:
            report = await self.report_repository.find_by_id(report_id)
            if report is None:
                raise NotFoundError("Report", str(report_id))

        return ModerationAction(
            id=ModerationActionId(uuid4()),
            actor_moderator_id=actor.id if actor.role is Role.MODERATOR else None,
            actor_admin_id=actor.id if actor.role is Role.ADMIN else None,
            target_post_id=target_post_id,
            target_comment_id=target_comment_id,
            report_id=report_id,
            action_type=action_type,
            action_details=details,
            created_at=datetime.now(),
        )

    async def save_action(self, action: ModerationAction) -> ModerationAction:
        """Append a built moderation action to the log."""
        with logfire.span(
            "moderation_service.save_action",
            action_id=str(action.id),
            action_type=action.action_type,
        ):
            saved = await self.moderation_action_repository.add(action)
            logfire.info(
                "Moderation action recorded",
                action_id=str(saved.id),
                action_type=saved.action_type,
                actor_id=str(saved.actor_id),
                target_post_id=str(saved.target_post_id)
                if saved.target_post_id
                else None,
                target_comment_id=str(saved.target_comment_id)
                if saved.target_comment_id
                else None,
                report_id=str(saved.report_id) if saved.report_id else None,
            )
            return saved

    async def record_action(
        self,
        actor: Principal,
        action_type: ModerationActionType,
        target_post_id: PostId | None = None,
        target_comment_id: CommentId | None = None,
        report_id: ReportId | None = None,
        details: str | None = None,
    ) -> ModerationAction:
        """Validate and append a moderation action.

        See build_action for arguments and errors.
        """
        with logfire.span(
            "moderation_service.record_action",
            actor_id=str(actor.id),
            action_type=action_type,
        ):
            action = await self.build_action(
                actor,
                action_type,
                target_post_id=target_post_id,
                target_comment_id=target_comment_id,
                report_id=report_id,
                details=details,
            )
            return await self.save_action(action)

    async def get_action(
        self, action_id: ModerationActionId
    ) -> ModerationAction | None:
        """Get a moderation action by ID, including retired ones."""
        with logfire.span(
            "moderation_service.get_action", action_id=str(action_id)
        ):
            action = await self.moderation_action_repository.find_by_id(action_id)
            if action is None:
                logfire.warn("Moderation action not found", action_id=str(action_id))
            return action

    async def retire_action(
        self, actor: Principal, action_id: ModerationActionId
    ) -> ModerationAction:
        """Retire a moderation action from the audit log.

        The moderation itself is not reversed. A retired action counts as
        absent, so retiring it again fails.

        Args:
            actor: Admin retiring the action
            action_id: Action to retire

        Returns:
            The retired action

        Raises:
            NotAuthorizedError: If the actor is not an admin
            NotFoundError: If the action doesn't exist or is already retired
        """
        with logfire.span(
            "moderation_service.retire_action",
            actor_id=str(actor.id),
            action_id=str(action_id),
        ):
            if not actor.is_admin:
                raise NotAuthorizedError(
                    "retire", "ModerationAction", str(action_id), str(actor.id)
                )

            retired = await self.moderation_action_repository.retire(action_id)
            if retired is None:
                logfire.warn(
                    "Moderation action not found or already retired",
                    action_id=str(action_id),
                )
                raise NotFoundError("ModerationAction", str(action_id))

            logfire.info(
                "Moderation action retired",
                action_id=str(action_id),
                actor_id=str(actor.id),
            )
            return retired

    async def list_actions(
        self,
        filter: ModerationActionFilter,
        sort: SortSpec,
        limit: int,
        offset: int,
    ) -> list[ModerationAction]:
        """List moderation actions matching a filter, one page at a time."""
        with logfire.span(
            "moderation_service.list_actions",
            action_type=filter.action_type,
            sort=sort.field,
            limit=limit,
            offset=offset,
        ):
            actions = await self.moderation_action_repository.find_all(
                filter=filter, sort=sort, limit=limit, offset=offset
            )
            logfire.info("Moderation actions listed", count=len(actions))
            return actions

    async def count_actions(self, filter: ModerationActionFilter) -> int:
        """Count moderation actions matching a filter."""
        with logfire.span("moderation_service.count_actions"):
            return await self.moderation_action_repository.count(filter)
