from typing import Any

from aws_lambda_powertools.metrics import MetricUnit
from fastapi import APIRouter, Body, Depends, Query, Response, status

from content_api.api.decorators import error_message
from content_api.deps import post_service
from content_api.models.response import (Acknowledgement, CreatedPost,
                                         PostEnvelope, PostList)
from content_api.services.post_service import PostService
from content_api.utils import metrics

router = APIRouter()


@router.get("/getPosts", response_model=PostList, status_code=status.HTTP_200_OK)
@error_message("Failed to fetch posts.")
def get_posts(service: PostService = Depends(post_service)) -> PostList:
    posts = service.list_posts()
    metrics.add_metric(name="GetPosts", unit=MetricUnit.Count, value=1)
    return PostList(posts=posts)


@router.get(
    "/getPostById", response_model=PostEnvelope, status_code=status.HTTP_200_OK
)
@error_message("Failed to fetch post.")
def get_post_by_id(
    post_id: str | None = Query(default=None, alias="id"),
    service: PostService = Depends(post_service),
) -> PostEnvelope:
    post = service.get_post(post_id)
    metrics.add_metric(name="GetPostById", unit=MetricUnit.Count, value=1)
    return PostEnvelope(post=post)


@router.post(
    "/createPost", response_model=CreatedPost, status_code=status.HTTP_201_CREATED
)
@error_message("Failed to create post.")
def create_post(
    response: Response,
    body: Any = Body(default=None),
    service: PostService = Depends(post_service),
) -> CreatedPost:
    post_id = service.create_post(body)
    metrics.add_metric(name="CreatePost", unit=MetricUnit.Count, value=1)
    response.headers["Location"] = f"/getPostById?id={post_id}"
    return CreatedPost(id=post_id)


@router.put(
    "/updatePost", response_model=Acknowledgement, status_code=status.HTTP_200_OK
)
@error_message("Failed to update post.")
def update_post(
    post_id: str | None = Query(default=None, alias="id"),
    body: Any = Body(default=None),
    service: PostService = Depends(post_service),
) -> Acknowledgement:
    service.update_post(post_id, body)
    metrics.add_metric(name="UpdatePost", unit=MetricUnit.Count, value=1)
    return Acknowledgement()


@router.delete(
    "/deletePost", response_model=Acknowledgement, status_code=status.HTTP_200_OK
)
@error_message("Failed to delete post.")
def delete_post(
    post_id: str | None = Query(default=None, alias="id"),
    service: PostService = Depends(post_service),
) -> Acknowledgement:
    service.delete_post(post_id)
    metrics.add_metric(name="DeletePost", unit=MetricUnit.Count, value=1)
    return Acknowledgement()
