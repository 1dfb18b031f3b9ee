from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from artapp.config import settings
from artapp.errors import DecodeError, InvalidInputError, NetworkError
from artapp.models.schemas import Artwork, SearchResult

logger = logging.getLogger(__name__)


class ArtService:
    """Client for the museum collection API.

    A search resolves matching object identifiers with one call, then fetches
    each object's record concurrently. Only the search call can fail the
    operation; a detail fetch that fails drops its object from the result.
    The service keeps no mutable state, so one instance can be shared.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        max_concurrency: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or settings.catalog_base_url).rstrip("/")
        self.timeout = timeout
        self.max_concurrency = max_concurrency
        self._transport = transport

    async def search_artworks(self, query: str, limit: int = 20) -> List[Artwork]:
        if limit < 1:
            raise InvalidInputError(f"Search limit must be at least 1, got {limit}")
        encoded = self._encode_query(query)
        async with self._client() as client:
            ids = await self._search_ids(client, encoded)
            if not ids:
                logger.info("Search for %r matched no objects", query)
                return []

            ids_to_load = ids[:limit]
            artworks = await self._fetch_all(client, ids_to_load)

        logger.info("Search for %r loaded %d of %d objects", query, len(artworks), len(ids_to_load))
        return sorted(artworks, key=lambda art: art.title or "")

    async def fetch_artwork(self, object_id: int) -> Optional[Artwork]:
        """Fetch a single object record, returning None if it cannot be loaded."""
        async with self._client() as client:
            return await self._fetch_detail(client, object_id)

    def _client(self) -> httpx.AsyncClient:
        kwargs: Dict[str, Any] = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    @staticmethod
    def _encode_query(query: str) -> str:
        try:
            encoded = quote(query, safe="")
        except UnicodeEncodeError as exc:
            raise InvalidInputError(f"Query {query!r} cannot be encoded into a URL") from exc
        if not encoded:
            raise InvalidInputError("Query is empty")
        return encoded

    async def _search_ids(self, client: httpx.AsyncClient, encoded_query: str) -> List[int]:
        url = f"{self.base_url}/search?q={encoded_query}&hasImages=true"
        try:
            response = await client.get(url)
        except httpx.HTTPError as exc:
            raise NetworkError(f"Search request failed: {exc}") from exc

        if response.status_code != 200:
            raise NetworkError(f"Search request returned HTTP {response.status_code}")

        try:
            result = SearchResult.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(f"Malformed search response: {exc}") from exc
        return result.object_ids or []

    async def _fetch_all(self, client: httpx.AsyncClient, ids: List[int]) -> List[Artwork]:
        if self.max_concurrency:
            semaphore = asyncio.Semaphore(self.max_concurrency)

            async def worker(object_id: int) -> Optional[Artwork]:
                async with semaphore:
                    return await self._fetch_detail(client, object_id)

        else:

            async def worker(object_id: int) -> Optional[Artwork]:
                return await self._fetch_detail(client, object_id)

        results = await asyncio.gather(*(worker(object_id) for object_id in ids))
        return [art for art in results if art is not None]

    async def _fetch_detail(self, client: httpx.AsyncClient, object_id: int) -> Optional[Artwork]:
        url = f"{self.base_url}/objects/{object_id}"
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Skipping object %s: %s", object_id, exc)
            return None

        try:
            return Artwork.model_validate_json(response.content)
        except ValidationError:
            logger.debug("Skipping object %s: undecodable body", object_id)
            return None


def build_art_service() -> ArtService:
    """Return an `ArtService` configured from application settings."""
    return ArtService(
        settings.catalog_base_url,
        timeout=settings.http_timeout_seconds,
        max_concurrency=settings.max_concurrency,
    )
