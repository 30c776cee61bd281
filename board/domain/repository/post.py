"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model.post import Post
from board.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post entity.

    Only the operations the discussion subsystem needs from posts.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, including soft-deleted posts.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass
