from content_api.models.camel_model import CamelModel
from content_api.models.post import Post


class Acknowledgement(CamelModel):
    ok: bool = True


class CreatedPost(CamelModel):
    id: str


class ErrorResponse(CamelModel):
    error: str


class PostEnvelope(CamelModel):
    post: Post


class PostList(CamelModel):
    posts: list[Post]
