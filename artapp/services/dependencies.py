"""FastAPI dependency wiring for the gallery services.

Each factory builds its object once per process, so routers and the
WebSocket channel all see the same favorites list and search state.
"""

from __future__ import annotations

from functools import lru_cache

from artapp.config import settings
from artapp.db import session_scope
from artapp.notifications import notification_manager
from artapp.services.catalog import ArtService, build_art_service
from artapp.services.favorites import FavoritesStore
from artapp.services.gallery import GallerySession


@lru_cache(maxsize=1)
def get_art_service() -> ArtService:
    return build_art_service()


@lru_cache(maxsize=1)
def get_favorites_store() -> FavoritesStore:
    """Return the process-wide favorites store, loaded when first built at startup."""
    store = FavoritesStore(session_scope, key=settings.favorites_key)
    store.load()
    return store


@lru_cache(maxsize=1)
def get_gallery_session() -> GallerySession:
    return GallerySession(get_art_service(), notifier=notification_manager, limit=settings.search_limit)


__all__ = ["get_art_service", "get_favorites_store", "get_gallery_session"]
