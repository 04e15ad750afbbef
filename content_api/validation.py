import json
from decimal import Decimal
from typing import Any

from content_api.exceptions import MissingFieldsException, MissingIdException
from content_api.models.post import Post, PostFields
from content_api.timestamps import timestamp_to_iso
from content_api.utils import logger

REQUIRED_FIELDS = ("title", "content", "author")


def _json_default(value: Any) -> Any:
    # DynamoDB string/number/binary sets come back from boto3 as sets
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    return str(value)


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    return json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, default=_json_default
    )


def validate_post_id(post_id: str | None) -> str:
    if not post_id:
        raise MissingIdException()
    return post_id


def validate_write_fields(body: Any) -> PostFields:
    """Return the writable fields of a create or update body as text.

    A field counts as missing when it is absent or holds any falsy JSON
    value. A body that is not a JSON object is missing every field.
    """
    data = body if isinstance(body, dict) else {}
    missing = [name for name in REQUIRED_FIELDS if not data.get(name)]
    if missing:
        logger.warning(f"Rejected post write {missing=}")
        raise MissingFieldsException(missing)
    return PostFields(**{name: _to_text(data[name]) for name in REQUIRED_FIELDS})


def normalize_for_read(item: dict[str, Any]) -> Post:
    return Post(
        id=str(item["id"]),
        title=_to_text(item.get("title") or ""),
        content=_to_text(item.get("content") or ""),
        author=_to_text(item.get("author") or ""),
        created_at=timestamp_to_iso(item.get("created_at")),
    )
