"""Conversion of stored creation timestamps.

Records written by this service carry ``created_at`` as UTC ISO-8601 text.
Records written by other tools may hold a ``datetime`` or epoch seconds
(DynamoDB hands numbers back as ``Decimal``), so readers accept all three.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any

import pendulum

from content_api.utils import logger


def now_iso() -> str:
    return pendulum.now("UTC").to_iso8601_string()


def parse_timestamp(value: Any) -> pendulum.DateTime | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        if isinstance(value, datetime):
            moment = pendulum.instance(value)
        elif isinstance(value, (int, float, Decimal)):
            moment = pendulum.from_timestamp(float(value))
        elif isinstance(value, str):
            moment = pendulum.parse(value)
        else:
            return None
    except (ValueError, OverflowError, OSError):
        logger.warning(f"Unparsable timestamp {value=}")
        return None
    if not isinstance(moment, pendulum.DateTime):
        return None
    return moment.in_timezone("UTC")


def timestamp_to_iso(value: Any) -> str | None:
    moment = parse_timestamp(value)
    return moment.to_iso8601_string() if moment else None


def created_at_sort_key(item: dict[str, Any]) -> float:
    moment = parse_timestamp(item.get("created_at"))
    return moment.timestamp() if moment else float("-inf")
