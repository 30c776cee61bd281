"""Comment domain service.

Owns the thread tree rules: nesting levels are computed from the parent when
a comment is created and checked against the configured maximum depth before
anything is written.
"""

from datetime import datetime
from uuid import uuid4

import logfire

from board.config import ThreadSettings
from board.domain.error import (
    NestingLimitExceededError,
    NotFoundError,
    ValidationError,
)
from board.domain.model.comment import Comment
from board.domain.model.comment_edit import CommentEdit
from board.domain.repository import (
    CommentEditRepository,
    CommentFilter,
    CommentRepository,
)
from board.domain.value import (
    ActingCapacity,
    CommentEditId,
    CommentId,
    PostId,
    SortSpec,
    UserId,
)

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_edit_repository: CommentEditRepository,
        thread_settings: ThreadSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_edit_repository: Comment edit history repository
            thread_settings: Threading limits, read once at construction
        """
        self.comment_repository = comment_repository
        self.comment_edit_repository = comment_edit_repository
        self.max_depth = thread_settings.max_depth
        self.max_body_length = thread_settings.max_body_length

    def _validate_body(self, body: str) -> None:
        if not body or not body.strip():
            raise ValidationError("Comment body must not be empty")
        if len(body) > self.max_body_length:
            raise ValidationError(
                f"Comment body exceeds {self.max_body_length} characters"
            )

    async def create_root_comment(
        self, post_id: PostId, author_id: UserId, body: str
    ) -> Comment:
        """Create a top-level comment on a post.

        The caller is responsible for checking that the post is live.

        Args:
            post_id: Post ID
            author_id: Author user ID
            body: Comment body

        Returns:
            Created comment at nesting level 0

        Raises:
            ValidationError: If the body is empty or too long
        """
        with logfire.span(
            "comment_service.create_root_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            self._validate_body(body)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                body=body,
                parent_id=None,
                nesting_level=0,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Root comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
            )
            return saved

    async def check_reply(self, parent_id: CommentId) -> Comment:
        """Check that a reply may be attached to a parent comment.

        Args:
            parent_id: Parent comment ID

        Returns:
            The parent comment

        Raises:
            NotFoundError: If the parent doesn't exist or is deleted
            NestingLimitExceededError: If the reply would be too deep
        """
        parent = await self.comment_repository.find_by_id(parent_id)
        if parent is None or not parent.is_active:
            logfire.warn("Parent comment not found", parent_id=str(parent_id))
            raise NotFoundError("Comment", str(parent_id))

        depth = parent.nesting_level + 1
        if depth > self.max_depth:
            logfire.warn(
                "Nesting limit exceeded",
                parent_id=str(parent_id),
                depth=depth,
                max_depth=self.max_depth,
            )
            raise NestingLimitExceededError(str(parent_id), depth, self.max_depth)

        return parent

    async def create_reply(
        self, parent_id: CommentId, author_id: UserId, body: str
    ) -> Comment:
        """Reply to an existing comment.

        The reply inherits the parent's post and sits one level below it.

        Args:
            parent_id: Parent comment ID
            author_id: Author user ID
            body: Reply body

        Returns:
            Created reply

        Raises:
            ValidationError: If the body is empty or too long
            NotFoundError: If the parent doesn't exist or is deleted
            NestingLimitExceededError: If the reply would exceed max depth
        """
        with logfire.span(
            "comment_service.create_reply",
            parent_id=str(parent_id),
            author_id=str(author_id),
        ):
            self._validate_body(body)
            parent = await self.check_reply(parent_id)

            now = datetime.now()
            reply = Comment(
                id=CommentId(uuid4()),
                post_id=parent.post_id,
                author_id=author_id,
                body=body,
                parent_id=parent.id,
                nesting_level=parent.nesting_level + 1,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(reply)
            logfire.info(
                "Reply created",
                comment_id=str(saved.id),
                parent_id=str(parent_id),
                post_id=str(saved.post_id),
                nesting_level=saved.nesting_level,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID, whatever its lifecycle state.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_active_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment that has not been deleted.

        Raises:
            NotFoundError: If the comment doesn't exist or is soft-deleted
        """
        comment = await self.get_comment_by_id(comment_id)
        if comment is None or not comment.is_active:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def edit_comment(
        self,
        comment: Comment,
        editor_id: UserId,
        capacity: ActingCapacity,
        new_body: str,
    ) -> Comment:
        """Replace a comment's body and append an edit history entry.

        Args:
            comment: Comment to edit (already authorized)
            editor_id: User performing the edit
            capacity: Capacity the editor acts in
            new_body: Replacement body

        Returns:
            The updated comment

        Raises:
            ValidationError: If the new body is empty or too long
            NotFoundError: If the comment is soft-deleted
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment.id),
            editor_id=str(editor_id),
            capacity=capacity,
        ):
            self._validate_body(new_body)
            if not comment.is_active:
                logfire.warn("Cannot edit deleted comment", comment_id=str(comment.id))
                raise NotFoundError("Comment", str(comment.id))

            now = datetime.now()
            updated = comment.model_copy(
                update={"body": new_body, "is_edited": True, "updated_at": now}
            )
            edit = CommentEdit(
                id=CommentEditId(uuid4()),
                comment_id=comment.id,
                editor_id=editor_id,
                editor_capacity=capacity,
                previous_body=comment.body,
                new_body=new_body,
                created_at=now,
            )

            saved = await self.comment_repository.save(updated)
            await self.comment_edit_repository.add(edit)
            logfire.info(
                "Comment edited",
                comment_id=str(comment.id),
                editor_id=str(editor_id),
                capacity=capacity,
                body_length=len(new_body),
            )
            return saved

    async def soft_delete_comment(self, comment: Comment) -> Comment:
        """Mark a comment as deleted.

        Replies stay where they are; their parent simply becomes invisible
        to non-staff readers.

        Args:
            comment: Comment to delete (already authorized)

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment is already deleted
        """
        with logfire.span(
            "comment_service.soft_delete_comment", comment_id=str(comment.id)
        ):
            if not comment.is_active:
                logfire.warn("Comment already deleted", comment_id=str(comment.id))
                raise NotFoundError("Comment", str(comment.id))

            saved = await self.comment_repository.soft_delete(
                comment.id, datetime.now()
            )
            if saved is None:
                # Deleted by a concurrent request since it was loaded
                logfire.warn("Comment already deleted", comment_id=str(comment.id))
                raise NotFoundError("Comment", str(comment.id))
            logfire.info(
                "Comment soft-deleted",
                comment_id=str(comment.id),
                post_id=str(comment.post_id),
            )
            return saved

    async def list_comments(
        self,
        filter: CommentFilter,
        sort: SortSpec,
        limit: int,
        offset: int,
    ) -> list[Comment]:
        """List comments matching a filter, one page at a time.

        Args:
            filter: Equality filters
            sort: Resolved sort spec
            limit: Page size
            offset: Records to skip

        Returns:
            Comments on the requested page
        """
        with logfire.span(
            "comment_service.list_comments",
            post_id=str(filter.post_id) if filter.post_id else None,
            sort=sort.field,
            direction=sort.direction,
            limit=limit,
            offset=offset,
        ):
            comments = await self.comment_repository.find_all(
                filter=filter, sort=sort, limit=limit, offset=offset
            )
            logfire.info("Comments listed", count=len(comments))
            return comments

    async def count_comments(self, filter: CommentFilter) -> int:
        """Count comments matching a filter."""
        with logfire.span("comment_service.count_comments"):
            return await self.comment_repository.count(filter)

    async def list_edits(self, comment_id: CommentId) -> list[CommentEdit]:
        """Get the edit history of a comment, oldest first.

        Args:
            comment_id: Comment ID

        Returns:
            Edit history entries
        """
        with logfire.span("comment_service.list_edits", comment_id=str(comment_id)):
            edits = await self.comment_edit_repository.find_by_comment(comment_id)
            logfire.info(
                "Comment edits retrieved", comment_id=str(comment_id), count=len(edits)
            )
            return edits
