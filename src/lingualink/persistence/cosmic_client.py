"""
Cosmic object store client.

Thin async wrapper over the Cosmic REST API (v3) using httpx. Reads carry the
bucket read key as a query parameter; writes send the write key as a bearer
token.
"""

import json
import logging
from typing import Any

import httpx

from lingualink.config import DEFAULT_COSMIC_API_URL

from .errors import ObjectStoreError

logger = logging.getLogger(__name__)


class CosmicClient:
    """ObjectStore implementation backed by a Cosmic bucket."""

    def __init__(
        self,
        bucket_slug: str,
        read_key: str,
        write_key: str | None = None,
        api_url: str = DEFAULT_COSMIC_API_URL,
        timeout_seconds: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            bucket_slug: Bucket identifier
            read_key: Bucket read key
            write_key: Bucket write key (required for insert/update/delete)
            api_url: REST API base URL
            timeout_seconds: Per-request timeout
            http_client: Pre-built httpx client (mainly for tests)
        """
        self._bucket_slug = bucket_slug
        self._read_key = read_key
        self._write_key = write_key
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=f"{api_url.rstrip('/')}/buckets/{bucket_slug}",
            timeout=timeout_seconds,
        )

    @property
    def bucket_slug(self) -> str:
        return self._bucket_slug

    async def find(
        self,
        object_type: str,
        query: dict[str, Any] | None = None,
        props: list[str] | None = None,
        depth: int = 1,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {
            "read_key": self._read_key,
            "query": json.dumps({"type": object_type, **(query or {})}),
            "depth": depth,
        }
        if props:
            params["props"] = ",".join(props)
        if limit is not None:
            params["limit"] = limit

        data = await self._request("GET", "/objects", params=params)
        return list(data.get("objects") or [])

    async def find_one(self, object_type: str, slug: str, depth: int = 1) -> dict[str, Any]:
        objects = await self.find(object_type, {"slug": slug}, depth=depth, limit=1)
        if not objects:
            raise ObjectStoreError(f"No {object_type} object with slug {slug}", status=404)
        return objects[0]

    async def insert_one(self, data: dict[str, Any]) -> dict[str, Any]:
        response = await self._request("POST", "/objects", json_body=data, write=True)
        return response.get("object", response)

    async def update_one(self, object_id: str, data: dict[str, Any]) -> dict[str, Any]:
        response = await self._request(
            "PATCH", f"/objects/{object_id}", json_body=data, write=True
        )
        return response.get("object", response)

    async def delete_one(self, object_id: str) -> None:
        await self._request("DELETE", f"/objects/{object_id}", write=True)

    async def close(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
        write: bool = False,
    ) -> dict[str, Any]:
        """Send a request and decode the JSON body.

        Raises:
            ObjectStoreError: Transport failure (no status) or HTTP error status
        """
        headers: dict[str, str] = {}
        if write:
            if not self._write_key:
                raise ObjectStoreError("Cosmic write key is not configured")
            headers["Authorization"] = f"Bearer {self._write_key}"

        try:
            response = await self._http.request(
                method, path, params=params, json=json_body, headers=headers
            )
        except httpx.HTTPError as e:
            logger.error(f"Object store request {method} {path} failed: {e}")
            raise ObjectStoreError(f"Object store request failed: {e}") from e

        if response.status_code >= 400:
            raise ObjectStoreError(_error_message(response), status=response.status_code)

        if not response.content:
            return {}
        return response.json()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {response.status_code}"
