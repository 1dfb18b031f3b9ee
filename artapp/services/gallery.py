from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from artapp.errors import CatalogError
from artapp.models.schemas import GalleryState, SearchStatus
from artapp.services.catalog import ArtService

logger = logging.getLogger(__name__)

NOTHING_FOUND_MESSAGE = "Nothing found."
LOAD_FAILED_MESSAGE = "Failed to load. Check your internet connection."


class Notifier(Protocol):
    async def broadcast(self, message: dict[str, Any]) -> None: ...


class GallerySession:
    """Presentation state for the search screen.

    Holds the current query, the results on display, the loading flag and
    the last error message. A search that returns nothing and a search that
    fails end with different messages. When searches overlap, only the most
    recently started one may update the state.
    """

    def __init__(self, service: ArtService, notifier: Optional[Notifier] = None, limit: int = 20) -> None:
        self.service = service
        self.notifier = notifier
        self.limit = limit
        self.state = GalleryState()
        self._generation = 0

    async def search(self, query: str, limit: Optional[int] = None) -> GalleryState:
        q = query.strip()
        if not q:
            return self.state

        self._generation += 1
        generation = self._generation
        self.state = GalleryState(query=q, is_loading=True, status=SearchStatus.loading)
        await self._publish()

        try:
            results = await self.service.search_artworks(q, limit=limit or self.limit)
        except CatalogError as exc:
            if generation != self._generation:
                return self.state
            logger.warning("Search for %r failed: %s", q, exc)
            self.state = GalleryState(query=q, error_message=LOAD_FAILED_MESSAGE, status=SearchStatus.failed)
        except Exception:
            if generation != self._generation:
                return self.state
            logger.exception("Search for %r failed unexpectedly", q)
            self.state = GalleryState(query=q, error_message=LOAD_FAILED_MESSAGE, status=SearchStatus.failed)
        else:
            if generation != self._generation:
                logger.debug("Discarding results of superseded search %r", q)
                return self.state
            if results:
                self.state = GalleryState(query=q, artworks=results, status=SearchStatus.ok)
            else:
                self.state = GalleryState(query=q, error_message=NOTHING_FOUND_MESSAGE, status=SearchStatus.empty)

        await self._publish()
        return self.state

    async def _publish(self) -> None:
        if self.notifier is None:
            return
        payload = self.state.model_dump(mode="json", by_alias=True)
        await self.notifier.broadcast({"type": "search_state", **payload})
