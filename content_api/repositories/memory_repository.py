import copy
import threading
from typing import Any, Iterable

from content_api.repositories.post_repository import (WRITABLE_FIELDS,
                                                      PostRepository,
                                                      sort_newest_first)


class InMemoryPostRepository(PostRepository):
    """Process local posts collection for tests and local development."""

    def __init__(self, items: Iterable[dict[str, Any]] = ()):
        self._lock = threading.Lock()
        self._items: dict[str, dict[str, Any]] = {
            item["id"]: copy.deepcopy(item) for item in items
        }

    def list_all(self) -> list[dict[str, Any]]:
        with self._lock:
            items = [copy.deepcopy(item) for item in reversed(self._items.values())]
        return sort_newest_first(items)

    def get_by_id(self, post_id: str) -> dict[str, Any] | None:
        with self._lock:
            item = self._items.get(post_id)
            return copy.deepcopy(item) if item is not None else None

    def create(self, fields: dict[str, str]) -> str:
        item = self._new_item(fields)
        with self._lock:
            self._items[item["id"]] = item
        return item["id"]

    def update_by_id(self, post_id: str, fields: dict[str, str]) -> bool:
        with self._lock:
            item = self._items.get(post_id)
            if item is None:
                return False
            item.update({name: fields[name] for name in WRITABLE_FIELDS})
        return True

    def delete_by_id(self, post_id: str) -> bool:
        with self._lock:
            return self._items.pop(post_id, None) is not None
