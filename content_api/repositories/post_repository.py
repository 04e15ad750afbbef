import uuid
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from content_api.exceptions import StoreUnavailableError
from content_api.settings import Settings
from content_api.timestamps import created_at_sort_key, now_iso
from content_api.utils import logger

WRITABLE_FIELDS = ("title", "content", "author")


def sort_newest_first(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return sorted(items, key=created_at_sort_key, reverse=True)


class PostRepository(ABC):
    """Primitives over the posts collection.

    Lookups report a missing record as ``None`` or ``False``. Only backend
    faults raise, as ``StoreUnavailableError``.
    """

    @abstractmethod
    def list_all(self) -> list[dict[str, Any]]:
        """Return every stored record, newest ``created_at`` first."""

    @abstractmethod
    def get_by_id(self, post_id: str) -> dict[str, Any] | None:
        ...

    @abstractmethod
    def create(self, fields: dict[str, str]) -> str:
        """Store a new record and return its generated id."""

    @abstractmethod
    def update_by_id(self, post_id: str, fields: dict[str, str]) -> bool:
        ...

    @abstractmethod
    def delete_by_id(self, post_id: str) -> bool:
        ...

    @staticmethod
    def _new_item(fields: dict[str, str]) -> dict[str, Any]:
        item = {name: fields[name] for name in WRITABLE_FIELDS}
        item["id"] = str(uuid.uuid4())
        item["created_at"] = now_iso()
        return item


class DynamoDBPostRepository(PostRepository):
    CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"
    # DynamoDB partition key size limit
    MAX_KEY_BYTES = 2048

    def __init__(self, table=None, settings: Settings | None = None):
        self._logger = logger
        if table is None:
            settings = settings or Settings()
            table = (
                boto3.Session(region_name=settings.aws_region)
                .resource("dynamodb", endpoint_url=settings.dynamodb_endpoint_url)
                .Table(settings.posts_table_name)
            )
        self._table = table

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except (BotoCoreError, ClientError) as exc:
            self._logger.exception(f"DynamoDB {operation} failed on {self._table.name}")
            raise StoreUnavailableError(f"{operation} failed") from exc

    def _is_missing(self, exc: ClientError) -> bool:
        return exc.response["Error"]["Code"] == self.CONDITIONAL_CHECK_FAILED

    def list_all(self) -> list[dict[str, Any]]:
        with self._store_errors("scan"):
            response = self._table.scan()
            items = response["Items"]
            while "LastEvaluatedKey" in response:
                response = self._table.scan(
                    ExclusiveStartKey=response["LastEvaluatedKey"]
                )
                items.extend(response["Items"])
        return sort_newest_first(items)

    def _is_valid_key(self, post_id: str) -> bool:
        if len(post_id.encode("utf-8")) > self.MAX_KEY_BYTES:
            self._logger.warning(f"Post id exceeds {self.MAX_KEY_BYTES} bytes")
            return False
        return True

    def get_by_id(self, post_id: str) -> dict[str, Any] | None:
        if not self._is_valid_key(post_id):
            return None
        with self._store_errors("get_item"):
            response = self._table.get_item(Key={"id": post_id})
        return response.get("Item")

    def create(self, fields: dict[str, str]) -> str:
        item = self._new_item(fields)
        with self._store_errors("put_item"):
            self._table.put_item(Item=item)
        return item["id"]

    def update_by_id(self, post_id: str, fields: dict[str, str]) -> bool:
        if not self._is_valid_key(post_id):
            return False
        attribute_names = {}
        attribute_values = {}
        update_expression = []
        for k in WRITABLE_FIELDS:
            attribute_names[f"#{k}"] = k
            attribute_values[f":{k}"] = fields[k]
            update_expression.append(f"#{k}=:{k}")
        with self._store_errors("update_item"):
            try:
                self._table.update_item(
                    Key={"id": post_id},
                    ConditionExpression=Attr("id").exists(),
                    UpdateExpression="SET " + ",".join(update_expression),
                    ExpressionAttributeNames=attribute_names,
                    ExpressionAttributeValues=attribute_values,
                )
            except ClientError as exc:
                if not self._is_missing(exc):
                    raise
                return False
        return True

    def delete_by_id(self, post_id: str) -> bool:
        if not self._is_valid_key(post_id):
            return False
        with self._store_errors("delete_item"):
            try:
                self._table.delete_item(
                    Key={"id": post_id}, ConditionExpression=Attr("id").exists()
                )
            except ClientError as exc:
                if not self._is_missing(exc):
                    raise
                return False
        return True
