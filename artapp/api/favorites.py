from typing import List

from fastapi import APIRouter, Depends

from artapp.models import Artwork, FavoriteStatus
from artapp.notifications import notification_manager
from artapp.services.dependencies import get_favorites_store
from artapp.services.favorites import FavoritesStore

router = APIRouter()


@router.get("", response_model=List[Artwork])
async def list_favorites(store: FavoritesStore = Depends(get_favorites_store)) -> List[Artwork]:
    return store.favorites


@router.post("/toggle", response_model=FavoriteStatus)
async def toggle_favorite(
    artwork: Artwork,
    store: FavoritesStore = Depends(get_favorites_store),
) -> FavoriteStatus:
    store.toggle(artwork)
    result = FavoriteStatus(id=artwork.id, is_favorite=store.is_favorite(artwork))

    await notification_manager.broadcast(
        {
            "type": "favorites",
            "id": artwork.id,
            "is_favorite": result.is_favorite,
            "count": len(store.favorites),
        }
    )
    return result


@router.get("/{object_id}", response_model=FavoriteStatus)
async def get_favorite_status(
    object_id: int,
    store: FavoritesStore = Depends(get_favorites_store),
) -> FavoriteStatus:
    return FavoriteStatus(id=object_id, is_favorite=store.contains(object_id))
