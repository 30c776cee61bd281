"""Create report use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.error import ValidationError
from board.domain.service import (
    AccessPolicy,
    CommentService,
    ModerationService,
    Operation,
    PostService,
)
from board.domain.value import CommentId, ContentType, PostId, Principal

from .common import ReportItem


class CreateReportRequest(BaseModel):
    """Create report request."""

    content_type: ContentType
    target_post_id: str | None = None
    target_comment_id: str | None = None
    reason: str
    principal: Principal


class CreateReportUseCase:
    """Use case for a member reporting a post or comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        moderation_service: ModerationService,
        access_policy: AccessPolicy,
    ) -> None:
        """Initialize create report use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            moderation_service: Moderation domain service
            access_policy: Access policy
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.moderation_service = moderation_service
        self.access_policy = access_policy

    async def execute(self, request: CreateReportRequest) -> ReportItem:
        """Execute create report flow.

        Steps:
        1. Check the caller is authenticated
        2. Check exactly the target matching content_type was given
        3. Verify the target exists and is not deleted
        4. File the report (duplicates are rejected by the service)

        Raises:
            ValidationError: If the target fields don't match content_type,
                or the reason is empty
            NotFoundError: If the target is missing or deleted
            ConflictError: If the caller already reported this content
        """
        self.access_policy.authorize(request.principal, Operation.CREATE_REPORT)

        if request.content_type is ContentType.POST:
            if request.target_post_id is None or request.target_comment_id is not None:
                raise ValidationError("A post report needs target_post_id only")
            target_id = PostId(UUID(request.target_post_id))
            await self.post_service.get_live_post(target_id)
        else:
            if request.target_comment_id is None or request.target_post_id is not None:
                raise ValidationError("A comment report needs target_comment_id only")
            target_id = CommentId(UUID(request.target_comment_id))
            await self.comment_service.get_active_comment(target_id)

        report = await self.moderation_service.create_report(
            reporter_id=request.principal.id,
            content_type=request.content_type,
            target_id=target_id,
            reason=request.reason,
        )
        return ReportItem.from_report(report)
