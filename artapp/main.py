import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from artapp.api import api_router
from artapp.config import settings
from artapp.db import init_db
from artapp.services.dependencies import get_favorites_store

init_db()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load saved favorites once when the process starts."""
    get_favorites_store()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Art Gallery Service",
        version="0.1.0",
        description="Search the museum collection and keep a local list of favorite artworks.",
        lifespan=lifespan,
    )

    @app.get("/healthz", tags=["health"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api_router)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://127.0.0.1:8081",
            "http://localhost:8081",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app


app = create_app()


def run() -> None:
    import uvicorn

    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(
        "artapp.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        factory=False,
    )


if __name__ == "__main__":
    run()
