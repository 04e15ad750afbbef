import os

os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_SECURITY_TOKEN", "testing")
os.environ.setdefault("AWS_SESSION_TOKEN", "testing")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-central-1")

import uuid  # noqa: E402

import boto3  # noqa: E402
import pendulum  # noqa: E402
import pytest  # noqa: E402
from moto import mock_aws  # noqa: E402

from content_api.settings import Settings  # noqa: E402

NUMBER_OF_POSTS = 10


@pytest.fixture
def settings() -> Settings:
    return Settings(stage="test", store_backend="dynamodb")


@pytest.fixture
def dynamodb_resource(settings: Settings):
    with mock_aws():
        yield boto3.Session().resource("dynamodb", region_name=settings.aws_region)


@pytest.fixture
def posts_table(dynamodb_resource, settings: Settings):
    return dynamodb_resource.create_table(
        TableName=settings.posts_table_name,
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
        BillingMode="PAY_PER_REQUEST",
    )


@pytest.fixture
def make_post_fields(faker):
    def make() -> dict[str, str]:
        return {
            "title": faker.sentence(),
            "content": faker.text(),
            "author": faker.name(),
        }

    return make


@pytest.fixture
def make_item(make_post_fields):
    def make(created_at: pendulum.DateTime | None = None) -> dict[str, str]:
        created_at = created_at or pendulum.now("UTC")
        return {
            "id": str(uuid.uuid4()),
            **make_post_fields(),
            "created_at": created_at.to_iso8601_string(),
        }

    return make


@pytest.fixture
def items(make_item) -> list[dict[str, str]]:
    """Stored records, newest first."""
    now = pendulum.now("UTC")
    return [make_item(now.subtract(hours=hours)) for hours in range(NUMBER_OF_POSTS)]


@pytest.fixture
def initialize_posts_table(posts_table, items: list[dict[str, str]]):
    with posts_table.batch_writer() as batch:
        for item in reversed(items):
            batch.put_item(Item=item)
    return posts_table
