# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster import __version__
from roster.api.v1.router import api_router
from roster.config import Settings, get_settings
from roster.context import build_context
from roster.services.sample_data import load_sample_data

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with a fresh roster context."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup and shutdown events."""
        if settings.load_sample_data:
            logger.info("Seeding stores with sample data...")
            load_sample_data(app.state.roster.members, app.state.roster.dates)

        yield

        logger.info("Shutting down roster...")

    app = FastAPI(
        title=settings.app_name,
        description="Track prospects, roster members and the dates you go on",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.roster = build_context()

    # CORS middleware for frontend development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
