"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from board.domain.error import NotFoundError
from board.domain.repository import PostRepository
from board.domain.service import PostService
from board.domain.value import PostId
from tests.conftest import seed_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetLivePost:
    """Tests for get_live_post."""

    @pytest.mark.asyncio
    async def test_returns_live_post(self, unit_env):
        """A stored, undeleted post should be returned."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await seed_post(await unit_env.get(PostRepository))

        # Act
        result = await post_service.get_live_post(post.id)

        # Assert
        assert result.id == post.id

    @pytest.mark.asyncio
    async def test_missing_post_not_found(self, unit_env):
        """An unknown post ID should raise NotFoundError."""
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await post_service.get_live_post(PostId(uuid4()))

    @pytest.mark.asyncio
    async def test_deleted_post_not_found(self, unit_env):
        """A soft-deleted post should look absent."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await seed_post(await unit_env.get(PostRepository))
        await post_service.soft_delete_post(post)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await post_service.get_live_post(post.id)


class TestSoftDeletePost:
    """Tests for soft_delete_post."""

    @pytest.mark.asyncio
    async def test_deleting_twice_not_found(self, unit_env):
        """Deleting an already deleted post should raise NotFoundError."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await seed_post(await unit_env.get(PostRepository))
        deleted = await post_service.soft_delete_post(post)

        # Act & Assert
        assert deleted.deleted_at is not None
        with pytest.raises(NotFoundError):
            await post_service.soft_delete_post(deleted)
