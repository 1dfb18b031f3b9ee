"""Pydantic models and SQLModel ORM entities used by the service."""

from .schemas import Artwork, FavoriteStatus, GalleryState, SearchRequest, SearchResult, SearchStatus  # noqa: F401
