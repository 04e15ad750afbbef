from content_api.models.camel_model import CamelModel


class PostFields(CamelModel):
    title: str
    content: str
    author: str


class Post(CamelModel):
    id: str
    title: str = ""
    content: str = ""
    author: str = ""
    created_at: str | None = None
