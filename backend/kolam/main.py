"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kolam.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.kolam_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Kolam Studio",
        description="Dot-grid kolam designer backend: design storage and pattern analysis",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all stage modules to trigger registration
    from kolam.engine.pipeline import register_stages

    register_stages()

    from kolam.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
