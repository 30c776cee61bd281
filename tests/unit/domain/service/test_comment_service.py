"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from board.domain.error import (
    NestingLimitExceededError,
    NotFoundError,
    ValidationError,
)
from board.domain.repository import (
    CommentEditRepository,
    CommentFilter,
    CommentRepository,
    PostRepository,
)
from board.domain.service import CommentService
from board.domain.value import (
    ActingCapacity,
    CommentId,
    CommentState,
    SortDirection,
    SortSpec,
    UserId,
)
from tests.conftest import seed_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreateRootComment:
    """Tests for create_root_comment."""

    @pytest.mark.asyncio
    async def test_root_comment_has_level_zero(self, unit_env):
        """Root comment should sit at nesting level 0 with no parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await seed_post(await unit_env.get(PostRepository))
        author_id = UserId(uuid4())

        # Act
        result = await comment_service.create_root_comment(
            post_id=post.id, author_id=author_id, body="First!"
        )

        # Assert
        assert result.nesting_level == 0
        assert result.parent_id is None
        assert result.lifecycle_state is CommentState.ACTIVE
        assert result.is_edited is False

        saved = await comment_repo.find_by_id(result.id)
        assert saved is not None
        assert saved.body == "First!"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ["", "   ", "\n\t"])
    async def test_blank_body_rejected(self, unit_env, body):
        """Empty or whitespace-only bodies should be rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await seed_post(await unit_env.get(PostRepository))

        # Act & Assert
        with pytest.raises(ValidationError):
            await comment_service.create_root_comment(
                post_id=post.id, author_id=UserId(uuid4()), body=body
            )
        assert await comment_repo.count(CommentFilter(post_id=post.id)) == 0

    @pytest.mark.asyncio
    async def test_body_longer_than_limit_rejected(self, unit_env):
        """Bodies over 10000 characters should be rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await seed_post(await unit_env.get(PostRepository))

        # Act & Assert
        with pytest.raises(ValidationError):
            await comment_service.create_root_comment(
                post_id=post.id, author_id=UserId(uuid4()), body="x" * 10001
            )

    @pytest.mark.asyncio
    async def test_body_at_limit_accepted(self, unit_env):
        """A body of exactly 10000 characters should be accepted."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await seed_post(await unit_env.get(PostRepository))

        # Act
        result = await comment_service.create_root_comment(
            post_id=post.id, author_id=UserId(uuid4()), body="x" * 10000
        )

        # Assert
        assert len(result.body) == 10000


class TestCreateReply:
    """Tests for create_reply and the nesting limit."""

    @pytest.mark.asyncio
    async def test_reply_inherits_post_and_increments_level(self, unit_env):
        """A reply should join its parent's post one level deeper."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await seed_post(await unit_env.get(PostRepository))
        root = await comment_service.create_root_comment(
            post_id=post.id, author_id=UserId(uuid4()), body="Root"
        )

        # Act
        reply = await comment_service.create_reply(
            parent_id=root.id, author_id=UserId(uuid4()), body="Reply"
        )

        # Assert
        assert reply.post_id == post.id
        assert reply.parent_id == root.id
        assert reply.nesting_level == 1

    @pytest.mark.asyncio
    async def test_chain_stops_at_max_depth(self, unit_env):
        """Levels 0..5 should succeed and a reply at level 6 should fail."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await seed_post(await unit_env.get(PostRepository))
        author_id = UserId(uuid4())

        current = await comment_service.create_root_comment(
            post_id=post.id, author_id=author_id, body="Level 0"
        )
        for level in range(1, 6):
            current = await comment_service.create_reply(
                parent_id=current.id, author_id=author_id, body=f"Level {level}"
            )
            assert current.nesting_level == level

        # Act & Assert
        with pytest.raises(NestingLimitExceededError) as exc_info:
            await comment_service.create_reply(
                parent_id=current.id, author_id=author_id, body="Level 6"
            )

        assert exc_info.value.depth == 6
        assert exc_info.value.max_depth == 5
        assert await comment_repo.count(CommentFilter(post_id=post.id)) == 6
        assert await comment_repo.count(CommentFilter(nesting_level=6)) == 0

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_not_found(self, unit_env):
        """Replying to an unknown comment should fail with NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.create_reply(
                parent_id=CommentId(uuid4()), author_id=UserId(uuid4()), body="Hi"
            )

    @pytest.mark.asyncio
    async def test_reply_to_deleted_parent_not_found(self, unit_env):
        """Replying to a soft-deleted comment should fail with NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await seed_post(await unit_env.get(PostRepository))
        root = await comment_service.create_root_comment(
            post_id=post.id, author_id=UserId(uuid4()), body="Root"
        )
        await comment_service.soft_delete_comment(root)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.create_reply(
                parent_id=root.id, author_id=UserId(uuid4()), body="Too late"
            )


class TestEditComment:
    """Tests for edit_comment."""

    @pytest.mark.asyncio
    async def test_edit_updates_body_and_appends_history(self, unit_env):
        """Editing should flag the comment and record previous and new bodies."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        edit_repo = await unit_env.get(CommentEditRepository)
        post = await seed_post(await unit_env.get(PostRepository))
        author_id = UserId(uuid4())
        comment = await comment_service.create_root_comment(
            post_id=post.id, author_id=author_id, body="Original"
        )

        # Act
        updated = await comment_service.edit_comment(
            comment,
            editor_id=author_id,
            capacity=ActingCapacity.AUTHOR,
            new_body="Revised",
        )

        # Assert
        assert updated.body == "Revised"
        assert updated.is_edited is True
        assert updated.nesting_level == comment.nesting_level

        edits = await edit_repo.find_by_comment(comment.id)
        assert len(edits) == 1
        assert edits[0].previous_body == "Original"
        assert edits[0].new_body == "Revised"
        assert edits[0].editor_capacity is ActingCapacity.AUTHOR

    @pytest.mark.asyncio
    async def test_edit_with_blank_body_leaves_comment_unchanged(self, unit_env):
        """A blank edit should fail without touching the comment or history."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await seed_post(await unit_env.get(PostRepository))
        author_id = UserId(uuid4())
        comment = await comment_service.create_root_comment(
            post_id=post.id, author_id=author_id, body="Original"
        )

        # Act & Assert
        with pytest.raises(ValidationError):
            await comment_service.edit_comment(
                comment,
                editor_id=author_id,
                capacity=ActingCapacity.AUTHOR,
                new_body="  ",
            )

        stored = await comment_service.get_comment_by_id(comment.id)
        assert stored.body == "Original"
        assert stored.is_edited is False
        assert await comment_service.list_edits(comment.id) == []


class TestSoftDeleteComment:
    """Tests for soft_delete_comment."""

    @pytest.mark.asyncio
    async def test_soft_delete_keeps_replies(self, unit_env):
        """Deleting a parent should leave its replies active."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await seed_post(await unit_env.get(PostRepository))
        root = await comment_service.create_root_comment(
            post_id=post.id, author_id=UserId(uuid4()), body="Root"
        )
        reply = await comment_service.create_reply(
            parent_id=root.id, author_id=UserId(uuid4()), body="Reply"
        )

        # Act
        deleted = await comment_service.soft_delete_comment(root)

        # Assert
        assert deleted.lifecycle_state is CommentState.SOFT_DELETED
        assert deleted.deleted_at is not None
        stored_reply = await comment_service.get_comment_by_id(reply.id)
        assert stored_reply.is_active

    @pytest.mark.asyncio
    async def test_deleting_twice_not_found(self, unit_env):
        """A second delete should fail with NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await seed_post(await unit_env.get(PostRepository))
        root = await comment_service.create_root_comment(
            post_id=post.id, author_id=UserId(uuid4()), body="Root"
        )
        deleted = await comment_service.soft_delete_comment(root)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.soft_delete_comment(deleted)

    @pytest.mark.asyncio
    async def test_stale_active_copy_cannot_delete_twice(self, unit_env):
        """Deleting through a copy loaded before the first delete should fail."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await seed_post(await unit_env.get(PostRepository))
        root = await comment_service.create_root_comment(
            post_id=post.id, author_id=UserId(uuid4()), body="Root"
        )
        first = await comment_service.soft_delete_comment(root)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.soft_delete_comment(root)
        stored = await comment_service.get_comment_by_id(root.id)
        assert stored.deleted_at == first.deleted_at


class TestListComments:
    """Tests for list_comments and count_comments."""

    @pytest.mark.asyncio
    async def test_deleted_comments_hidden_unless_requested(self, unit_env):
        """Soft-deleted comments should only appear with include_deleted."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await seed_post(await unit_env.get(PostRepository))
        keep = await comment_service.create_root_comment(
            post_id=post.id, author_id=UserId(uuid4()), body="Keep"
        )
        drop = await comment_service.create_root_comment(
            post_id=post.id, author_id=UserId(uuid4()), body="Drop"
        )
        await comment_service.soft_delete_comment(drop)
        sort = SortSpec(field="created_at", direction=SortDirection.ASC)

        # Act
        visible = await comment_service.list_comments(
            CommentFilter(post_id=post.id), sort, limit=10, offset=0
        )
        everything = await comment_service.list_comments(
            CommentFilter(post_id=post.id, include_deleted=True),
            sort,
            limit=10,
            offset=0,
        )

        # Assert
        assert [c.id for c in visible] == [keep.id]
        assert {c.id for c in everything} == {keep.id, drop.id}
        assert await comment_service.count_comments(CommentFilter(post_id=post.id)) == 1

    @pytest.mark.asyncio
    async def test_filter_by_parent_returns_direct_replies(self, unit_env):
        """Filtering by parent should return direct replies only."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await seed_post(await unit_env.get(PostRepository))
        author_id = UserId(uuid4())
        root = await comment_service.create_root_comment(
            post_id=post.id, author_id=author_id, body="Root"
        )
        child = await comment_service.create_reply(
            parent_id=root.id, author_id=author_id, body="Child"
        )
        await comment_service.create_reply(
            parent_id=child.id, author_id=author_id, body="Grandchild"
        )

        # Act
        result = await comment_service.list_comments(
            CommentFilter(parent_id=root.id), SortSpec(), limit=10, offset=0
        )

        # Assert
        assert [c.id for c in result] == [child.id]
