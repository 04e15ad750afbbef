import pytest

from content_api.repositories.memory_repository import InMemoryPostRepository
from content_api.repositories.post_repository import DynamoDBPostRepository
from content_api.services.post_service import PostService


@pytest.fixture
def post_repository(initialize_posts_table) -> DynamoDBPostRepository:
    return DynamoDBPostRepository(table=initialize_posts_table)


@pytest.fixture
def memory_repository(items: list[dict[str, str]]) -> InMemoryPostRepository:
    return InMemoryPostRepository(items)


@pytest.fixture
def post_service(memory_repository: InMemoryPostRepository) -> PostService:
    return PostService(memory_repository)
