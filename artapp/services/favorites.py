from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager
from typing import Callable, List, Optional

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from artapp.config import settings
from artapp.errors import FavoritesNotLoadedError
from artapp.models.schemas import Artwork
from artapp.repositories.settings import SettingsRepository

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AbstractContextManager[Session]]

_artwork_list = TypeAdapter(List[Artwork])


class FavoritesStore:
    """Saved artworks kept in memory and flushed to a settings slot.

    The list is insertion ordered and unique by artwork id. Every mutation
    rewrites the whole blob. Persistence is best effort: a blob that cannot
    be read loads as an empty list, and a list that cannot be written leaves
    the previously stored blob in place. Neither case raises.
    """

    def __init__(self, session_factory: SessionFactory, key: Optional[str] = None) -> None:
        self.session_factory = session_factory
        self.key = key or settings.favorites_key
        self._favorites: List[Artwork] = []
        self._loaded = False
        self._lock = threading.RLock()

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def favorites(self) -> List[Artwork]:
        with self._lock:
            self._require_loaded()
            return list(self._favorites)

    def load(self) -> None:
        with self._lock:
            self._favorites = self._read_blob()
            self._loaded = True
        logger.info("Loaded %d favorites from %r", len(self._favorites), self.key)

    def save(self) -> None:
        with self._lock:
            self._require_loaded()
            try:
                blob = _artwork_list.dump_json(self._favorites, by_alias=True).decode("utf-8")
            except (ValueError, TypeError):
                logger.exception("Could not serialize favorites; keeping previous blob")
                return

            try:
                with self.session_factory() as session:
                    SettingsRepository(session).upsert(self.key, blob)
            except SQLAlchemyError:
                logger.exception("Could not write favorites to %r", self.key)

    def toggle(self, artwork: Artwork) -> None:
        with self._lock:
            self._require_loaded()
            index = self._index_of(artwork.id)
            if index is None:
                self._favorites.append(artwork)
            else:
                del self._favorites[index]
            self.save()

    def is_favorite(self, artwork: Artwork) -> bool:
        return self.contains(artwork.id)

    def contains(self, object_id: int) -> bool:
        with self._lock:
            self._require_loaded()
            return self._index_of(object_id) is not None

    def _index_of(self, object_id: int) -> Optional[int]:
        for index, favorite in enumerate(self._favorites):
            if favorite.id == object_id:
                return index
        return None

    def _read_blob(self) -> List[Artwork]:
        try:
            with self.session_factory() as session:
                blob = SettingsRepository(session).get(self.key)
        except SQLAlchemyError:
            logger.exception("Could not read favorites from %r", self.key)
            return []

        if not blob:
            return []

        try:
            return _artwork_list.validate_json(blob)
        except ValidationError:
            logger.warning("Discarding undecodable favorites blob under %r", self.key)
            return []

    def _require_loaded(self) -> None:
        if not self._loaded:
            raise FavoritesNotLoadedError("FavoritesStore.load() must be called before use")
