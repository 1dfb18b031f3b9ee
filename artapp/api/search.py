from fastapi import APIRouter, Depends, HTTPException, status

from artapp.models import Artwork, GalleryState, SearchRequest
from artapp.services.catalog import ArtService
from artapp.services.dependencies import get_art_service, get_gallery_session
from artapp.services.gallery import GallerySession

router = APIRouter()


@router.post("/search", response_model=GalleryState)
async def run_search(
    payload: SearchRequest,
    gallery: GallerySession = Depends(get_gallery_session),
) -> GalleryState:
    return await gallery.search(payload.query, limit=payload.limit)


@router.get("/search", response_model=GalleryState)
async def get_search_state(gallery: GallerySession = Depends(get_gallery_session)) -> GalleryState:
    return gallery.state


@router.get("/artworks/{object_id}", response_model=Artwork)
async def get_artwork(object_id: int, service: ArtService = Depends(get_art_service)) -> Artwork:
    artwork = await service.fetch_artwork(object_id)
    if artwork is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Artwork {object_id} not found")
    return artwork
