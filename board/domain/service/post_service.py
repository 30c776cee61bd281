"""Post domain service."""

from datetime import datetime

import logfire

from board.domain.error import NotFoundError
from board.domain.model.post import Post
from board.domain.repository import PostRepository
from board.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for the post operations comments depend on."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_live_post(self, post_id: PostId) -> Post:
        """Get a post that exists and is not deleted.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post doesn't exist or is deleted
        """
        post = await self.get_post_by_id(post_id)
        if post is None or not post.is_active:
            raise NotFoundError("Post", str(post_id))
        return post

    async def soft_delete_post(self, post: Post) -> Post:
        """Soft-delete a post on behalf of a moderator.

        Args:
            post: Post to delete

        Returns:
            The deleted post

        Raises:
            NotFoundError: If the post is already deleted
        """
        with logfire.span("post_service.soft_delete_post", post_id=str(post.id)):
            if not post.is_active:
                logfire.warn("Post already deleted", post_id=str(post.id))
                raise NotFoundError("Post", str(post.id))

            now = datetime.now()
            deleted = post.model_copy(update={"deleted_at": now, "updated_at": now})
            saved = await self.post_repository.save(deleted)
            logfire.info("Post soft-deleted", post_id=str(post.id))
            return saved
