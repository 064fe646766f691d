"""FastAPI application for the quick scorecard API."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import Settings
from database.connection import db
from database.db_manager import DatabaseManager

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize DB pool on startup, close on shutdown."""
        await db.initialize(dsn=settings.database_url)
        app.state.db_manager = DatabaseManager(db.pool)
        if settings.apply_schema:
            await app.state.db_manager.apply_schema()
        yield
        await db.close()

    app = FastAPI(
        title="Quick Scorecard API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import holes, rounds, stats
    app.include_router(rounds.router, prefix="/api/rounds", tags=["rounds"])
    app.include_router(holes.router, prefix="/api/rounds", tags=["holes"])
    app.include_router(stats.router, prefix="/api/stats", tags=["stats"])

    @app.get("/api/health")
    async def health():
        healthy = await db.health_check()
        return {"status": "ok" if healthy else "degraded", "database": healthy}

    logger.debug("App created (CORS origins: %s)", settings.cors_origin_list)
    return app


app = create_app()
