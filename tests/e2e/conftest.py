"""Fixtures for end-to-end API tests.

The app is served from a test container with in-memory persistence, so
every test starts from empty repositories.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from board.domain.model import Post
from board.domain.repository import PostRepository
from board.interface.api.app import create_app
from tests.conftest import seed_post
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container shared by the app and the test body."""
    return build_test_container(http=True)


@pytest.fixture
def client(container):
    """Create test client."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def post(container) -> Post:
    """A live post stored in the app's repositories."""

    async def _seed() -> Post:
        post_repository = await container.get(PostRepository)
        return await seed_post(post_repository)

    return asyncio.run(_seed())
