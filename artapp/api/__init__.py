"""FastAPI routers for the art gallery service."""

from fastapi import APIRouter

from .favorites import router as favorites_router
from .notifications import router as notifications_router
from .search import router as search_router

api_router = APIRouter()
api_router.include_router(search_router, tags=["search"])
api_router.include_router(favorites_router, prefix="/favorites", tags=["favorites"])
api_router.include_router(notifications_router, tags=["notifications"])
