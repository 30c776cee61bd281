"""Unit tests for CreateCommentUseCase and CreateReplyUseCase."""

from uuid import uuid4

import pytest

from board.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
)
from board.domain.error import NestingLimitExceededError, NotFoundError
from board.domain.repository import CommentFilter, CommentRepository, PostRepository
from board.domain.service import PostService
from board.domain.value import CommentState
from tests.conftest import make_principal, seed_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_on_live_post(self, unit_env):
        """Creating a comment should return a root item authored by the caller."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post = await seed_post(await unit_env.get(PostRepository))
        principal = make_principal()

        # Act
        result = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id), body="Great post", principal=principal
            )
        )

        # Assert
        assert result.post_id == str(post.id)
        assert result.author_id == str(principal.id)
        assert result.parent_id is None
        assert result.nesting_level == 0
        assert result.lifecycle_state is CommentState.ACTIVE

    @pytest.mark.asyncio
    async def test_create_comment_on_missing_post(self, unit_env):
        """Commenting on an unknown post should raise NotFoundError."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(uuid4()), body="Hello", principal=make_principal()
                )
            )

    @pytest.mark.asyncio
    async def test_create_comment_on_deleted_post(self, unit_env):
        """Commenting on a soft-deleted post should raise NotFoundError."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_service = await unit_env.get(PostService)
        post = await seed_post(await unit_env.get(PostRepository))
        await post_service.soft_delete_post(post)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(post.id), body="Hello", principal=make_principal()
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_post_id(self, unit_env):
        """A post ID that isn't a UUID should raise ValueError."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act & Assert
        with pytest.raises(ValueError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id="not-a-uuid", body="Hello", principal=make_principal()
                )
            )


class TestCreateReplyUseCase:
    """Tests for CreateReplyUseCase."""

    @pytest.mark.asyncio
    async def test_reply_chain_to_max_depth(self, unit_env):
        """Replies should nest to level 5 and the next reply should fail."""
        # Arrange
        create_comment = await unit_env.get(CreateCommentUseCase)
        create_reply = await unit_env.get(CreateReplyUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post = await seed_post(await unit_env.get(PostRepository))
        principal = make_principal()

        current = await create_comment.execute(
            CreateCommentRequest(post_id=str(post.id), body="0", principal=principal)
        )
        for level in range(1, 6):
            current = await create_reply.execute(
                CreateReplyRequest(
                    parent_id=current.comment_id, body=str(level), principal=principal
                )
            )
            assert current.nesting_level == level
            assert current.post_id == str(post.id)

        # Act & Assert
        with pytest.raises(NestingLimitExceededError):
            await create_reply.execute(
                CreateReplyRequest(
                    parent_id=current.comment_id, body="6", principal=principal
                )
            )
        assert await comment_repo.count(CommentFilter(post_id=post.id)) == 6

    @pytest.mark.asyncio
    async def test_reply_on_deleted_post(self, unit_env):
        """Replying under a deleted post should raise NotFoundError."""
        # Arrange
        create_comment = await unit_env.get(CreateCommentUseCase)
        create_reply = await unit_env.get(CreateReplyUseCase)
        post_service = await unit_env.get(PostService)
        post = await seed_post(await unit_env.get(PostRepository))
        principal = make_principal()
        root = await create_comment.execute(
            CreateCommentRequest(post_id=str(post.id), body="Root", principal=principal)
        )
        await post_service.soft_delete_post(await post_service.get_live_post(post.id))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await create_reply.execute(
                CreateReplyRequest(
                    parent_id=root.comment_id, body="Reply", principal=principal
                )
            )
