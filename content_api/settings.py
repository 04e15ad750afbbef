from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True
    )

    debug: bool = False
    app_name: str = "content-api"
    aws_region: str = Field(default="eu-central-1", alias="AWS_DEFAULT_REGION")
    cors_allow_origins: list[str] = ["*"]
    dynamodb_endpoint_url: str | None = None
    metrics_namespace: str = "content"
    posts_table: str | None = None
    stage: str = "dev"
    store_backend: Literal["dynamodb", "memory"] = "dynamodb"

    @computed_field
    @property
    def posts_table_name(self) -> str:
        return self.posts_table or f"{self.stage}-posts"
