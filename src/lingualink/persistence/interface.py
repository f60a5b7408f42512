"""
Object store interface contract.

Mirrors the small subset of the Cosmic objects API the service uses. Objects
are plain dicts (id, slug, title, type, metadata, created_at, ...). Missing
objects are reported as ObjectStoreError with status 404; ``find`` also
reports an empty match as 404, as the Cosmic API does.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ObjectStore(Protocol):
    """Protocol for remote object stores."""

    async def find(
        self,
        object_type: str,
        query: dict[str, Any] | None = None,
        props: list[str] | None = None,
        depth: int = 1,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Return objects of a type matching ``query``.

        Dotted keys (``metadata.user_id``) match nested metadata fields.
        """
        ...

    async def find_one(self, object_type: str, slug: str, depth: int = 1) -> dict[str, Any]:
        """Return the object with the given slug; 404 when absent."""
        ...

    async def insert_one(self, data: dict[str, Any]) -> dict[str, Any]:
        """Create an object and return it with its assigned id."""
        ...

    async def update_one(self, object_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Update an object and return the new version."""
        ...

    async def delete_one(self, object_id: str) -> None:
        """Delete an object; 404 when it does not exist."""
        ...

    async def close(self) -> None:
        """Release resources."""
        ...
