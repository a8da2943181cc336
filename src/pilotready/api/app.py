"""FastAPI app factory."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pilotready import __version__
from pilotready.api.routes import router
from pilotready.config import data_dir

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    load_dotenv()

    app = FastAPI(
        title="PilotReady API",
        description="Personal-minimums go/no-go advisor",
        version=__version__,
    )

    app.state.data_dir = data_dir()
    logger.info("Profile data dir: %s", app.state.data_dir)

    if os.environ.get("ENVIRONMENT", "development") == "development":
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(router, prefix="/api")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
