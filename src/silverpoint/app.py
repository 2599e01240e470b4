"""FastAPI entrypoint: wires settings, logging, the orchestrator and routes."""

from __future__ import annotations

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware

from silverpoint.config import Settings
from silverpoint.logger import get_logger, setup_logging
from silverpoint.models import SearchResult
from silverpoint.search import DEFAULT_TERM, SearchOrchestrator

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.settings = settings
    app.state.orchestrator = SearchOrchestrator.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            origin.strip()
            for origin in settings.cors_allow_origins.split(",")
            if origin.strip()
        ],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "healthy"}

    @app.get("/api/search", response_model=list[SearchResult])
    async def search(
        request: Request,
        q: str = Query(DEFAULT_TERM),
        lat: float | None = None,
        lng: float | None = None,
    ) -> list[SearchResult]:
        orchestrator: SearchOrchestrator = request.app.state.orchestrator
        return await orchestrator.search(q, lat, lng)

    logger.info(
        "SilverPoint ready (kroger=%s, places=%s)",
        settings.kroger_configured,
        settings.places_configured,
    )
    return app
