from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Artwork(BaseModel):
    """Catalog record for a single object. Identity is the `id` alone."""

    id: int = Field(..., alias="objectID", description="Catalog object identifier.")
    title: Optional[str] = None
    artist_display_name: Optional[str] = Field(None, alias="artistDisplayName")
    object_date: Optional[str] = Field(None, alias="objectDate")
    primary_image_small: Optional[str] = Field(None, alias="primaryImageSmall")
    primary_image: Optional[str] = Field(None, alias="primaryImage")
    medium: Optional[str] = None
    department: Optional[str] = None

    class Config:
        frozen = True
        populate_by_name = True


class SearchResult(BaseModel):
    """Body of the catalog search endpoint."""

    total: int = 0
    object_ids: Optional[List[int]] = Field(None, alias="objectIDs")


class SearchStatus(str, Enum):
    idle = "idle"
    loading = "loading"
    ok = "ok"
    empty = "empty"
    failed = "failed"


class SearchRequest(BaseModel):
    query: str = Field(..., description="Free-text query sent to the catalog.")
    limit: Optional[int] = Field(None, ge=1, le=100, description="Override for the number of detail fetches.")


class GalleryState(BaseModel):
    query: str = ""
    artworks: List[Artwork] = Field(default_factory=list)
    is_loading: bool = False
    error_message: Optional[str] = None
    status: SearchStatus = SearchStatus.idle


class FavoriteStatus(BaseModel):
    id: int
    is_favorite: bool
