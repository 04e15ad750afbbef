from typing import Any

from content_api.exceptions import PostNotFoundException
from content_api.models.post import Post
from content_api.repositories.post_repository import PostRepository
from content_api.utils import logger
from content_api.validation import (normalize_for_read, validate_post_id,
                                    validate_write_fields)


class PostService:
    def __init__(self, repository: PostRepository):
        self._logger = logger
        self._repo = repository

    def list_posts(self) -> list[Post]:
        return [normalize_for_read(item) for item in self._repo.list_all()]

    def get_post(self, post_id: str | None) -> Post:
        post_id = validate_post_id(post_id)
        item = self._repo.get_by_id(post_id)
        if item is None:
            self._logger.warning(f"Post was not found {post_id=}")
            raise PostNotFoundException()
        return normalize_for_read(item)

    def create_post(self, body: Any) -> str:
        fields = validate_write_fields(body)
        post_id = self._repo.create(fields.model_dump())
        self._logger.info(f"Post successfully created {post_id=}")
        return post_id

    def update_post(self, post_id: str | None, body: Any):
        post_id = validate_post_id(post_id)
        fields = validate_write_fields(body)
        if not self._repo.update_by_id(post_id, fields.model_dump()):
            self._logger.warning(f"Post was not found {post_id=}")
            raise PostNotFoundException()
        self._logger.info(f"Post successfully updated {post_id=}")

    def delete_post(self, post_id: str | None):
        post_id = validate_post_id(post_id)
        if not self._repo.delete_by_id(post_id):
            self._logger.warning(f"Post was not found {post_id=}")
            raise PostNotFoundException()
        self._logger.info(f"Post successfully deleted {post_id=}")
