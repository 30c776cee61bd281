"""Test configuration and helpers."""

from uuid import uuid4

from board.config import Settings
from board.domain.model import Post
from board.domain.repository import PostRepository
from board.domain.value import PostId, Principal, Role, UserId
from board.util.jwt import create_token


def make_principal(role: Role = Role.MEMBER) -> Principal:
    """Build a principal with a fresh user ID."""
    return Principal(id=UserId(uuid4()), role=role)


async def seed_post(post_repository: PostRepository, title: str = "A post") -> Post:
    """Store a live post for comments and reports to point at."""
    post = Post(id=PostId(uuid4()), author_id=UserId(uuid4()), title=title)
    return await post_repository.save(post)


def auth_cookie(principal: Principal) -> dict[str, str]:
    """Cookie jar entry authenticating a principal with the configured secret."""
    token = create_token(str(principal.id), principal.role, Settings().auth)
    return {"auth_token": token}
