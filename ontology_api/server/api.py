from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ontology_api.logging_config import configure_logging
from .models import HealthResponse
from .ontology import OboFileSource, get_obo_source, router as ontology_router
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        logger.info("Ontology API starting (environment=%s, obo_path=%s)", settings.environment, settings.obo_path)
        yield

    app = FastAPI(title="Ontology API", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(ontology_router)

    @app.get("/api/health", response_model=HealthResponse)
    def health(source: OboFileSource = Depends(get_obo_source)) -> HealthResponse:
        return HealthResponse(status="ok", obo_file=str(source.path), obo_available=source.exists())

    return app


app = create_app()


__all__ = ["app", "create_app"]
