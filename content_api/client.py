"""HTTP client for the posts API.

The client never talks to the document store; it only speaks the five JSON
routes. Non-2xx responses surface the ``error`` field of the body as a
:class:`PostsApiError`.
"""
import os
from typing import Any

import httpx

from content_api.utils import logger

BASE_URL_ENV = "CONTENT_API_BASE_URL"
DEFAULT_BASE_URL = "http://127.0.0.1:8080"
DEFAULT_TIMEOUT = 10.0


class PostsApiError(Exception):
    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class PostsClient:
    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        if base_url is None:
            base_url = os.environ.get(BASE_URL_ENV, DEFAULT_BASE_URL)
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "PostsClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self):
        self._client.close()

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"params": params}
        # Content-Type only goes out with a body
        if body is not None:
            kwargs["json"] = body
        response = self._client.request(method, f"{self._base_url}{path}", **kwargs)
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}
        if not response.is_success:
            message = data.get("error") or f"Request failed: {response.status_code}"
            logger.warning(f"{method} {path} failed {response.status_code=} {message=}")
            raise PostsApiError(message, response.status_code)
        return data

    def get_posts(self) -> dict[str, Any]:
        return self._request("GET", "/getPosts")

    def get_post_by_id(self, post_id: str) -> dict[str, Any]:
        return self._request("GET", "/getPostById", params={"id": post_id})

    def create_post(self, post: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/createPost", body=post)

    def update_post(self, post_id: str, post: dict[str, Any]) -> dict[str, Any]:
        return self._request("PUT", "/updatePost", params={"id": post_id}, body=post)

    def delete_post(self, post_id: str) -> dict[str, Any]:
        return self._request("DELETE", "/deletePost", params={"id": post_id})
