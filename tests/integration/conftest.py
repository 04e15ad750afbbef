import pytest
from fastapi.testclient import TestClient

from content_api.http_handler import create_app
from content_api.repositories.post_repository import DynamoDBPostRepository
from content_api.settings import Settings


@pytest.fixture
def post_repository(settings: Settings, initialize_posts_table) -> DynamoDBPostRepository:
    return DynamoDBPostRepository(settings=settings)


@pytest.fixture
def test_client(settings: Settings, post_repository: DynamoDBPostRepository) -> TestClient:
    return TestClient(create_app(settings, post_repository), raise_server_exceptions=True)
