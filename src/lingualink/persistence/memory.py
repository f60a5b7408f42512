"""
In-memory object store.

Used for tests and for local runs without a Cosmic bucket. Emulates the
Cosmic behaviors the repository relies on: an empty ``find`` result is a
404, missing ids are a 404, and updates merge ``metadata``.
"""

import copy
import re
import uuid
from datetime import datetime, timezone
from typing import Any

from .errors import ObjectStoreError

_MISSING = object()


def _slugify(value: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")
    return slug or "object"


def _lookup(obj: dict[str, Any], dotted_key: str) -> Any:
    current: Any = obj
    for part in dotted_key.split("."):
        if not isinstance(current, dict) or part not in current:
            return _MISSING
        current = current[part]
    return current


class InMemoryObjectStore:
    """ObjectStore implementation holding objects in a dict."""

    def __init__(self, objects: list[dict[str, Any]] | None = None):
        self._objects: dict[str, dict[str, Any]] = {}
        self.closed = False
        for obj in objects or []:
            self._store(obj)

    @property
    def objects(self) -> list[dict[str, Any]]:
        return [copy.deepcopy(obj) for obj in self._objects.values()]

    def _store(self, data: dict[str, Any]) -> dict[str, Any]:
        obj = copy.deepcopy(data)
        obj.setdefault("id", uuid.uuid4().hex)
        obj.setdefault("slug", f"{_slugify(obj.get('title', ''))}-{obj['id'][:8]}")
        obj.setdefault("metadata", {})
        obj.setdefault("created_at", datetime.now(timezone.utc).isoformat())
        self._objects[obj["id"]] = obj
        return obj

    async def find(
        self,
        object_type: str,
        query: dict[str, Any] | None = None,
        props: list[str] | None = None,
        depth: int = 1,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        criteria = {"type": object_type, **(query or {})}
        matches = [
            obj
            for obj in self._objects.values()
            if all(_lookup(obj, key) == value for key, value in criteria.items())
        ]
        if not matches:
            raise ObjectStoreError("No objects found", status=404)
        if limit is not None:
            matches = matches[:limit]
        if props:
            return [
                {key: copy.deepcopy(obj[key]) for key in props if key in obj} for obj in matches
            ]
        return [copy.deepcopy(obj) for obj in matches]

    async def find_one(self, object_type: str, slug: str, depth: int = 1) -> dict[str, Any]:
        objects = await self.find(object_type, {"slug": slug}, depth=depth, limit=1)
        return objects[0]

    async def insert_one(self, data: dict[str, Any]) -> dict[str, Any]:
        return copy.deepcopy(self._store(data))

    async def update_one(self, object_id: str, data: dict[str, Any]) -> dict[str, Any]:
        obj = self._objects.get(object_id)
        if obj is None:
            raise ObjectStoreError(f"Object {object_id} not found", status=404)

        changes = copy.deepcopy(data)
        metadata = changes.pop("metadata", None)
        obj.update(changes)
        if metadata:
            obj["metadata"].update(metadata)
        obj["modified_at"] = datetime.now(timezone.utc).isoformat()
        return copy.deepcopy(obj)

    async def delete_one(self, object_id: str) -> None:
        if self._objects.pop(object_id, None) is None:
            raise ObjectStoreError(f"Object {object_id} not found", status=404)

    async def close(self) -> None:
        self.closed = True
