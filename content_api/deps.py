from fastapi import Request

from content_api.repositories.memory_repository import InMemoryPostRepository
from content_api.repositories.post_repository import (DynamoDBPostRepository,
                                                      PostRepository)
from content_api.services.post_service import PostService
from content_api.settings import Settings


def build_post_repository(settings: Settings) -> PostRepository:
    if settings.store_backend == "memory":
        return InMemoryPostRepository()
    return DynamoDBPostRepository(settings=settings)


def post_service(request: Request) -> PostService:
    return PostService(request.app.state.post_repository)
