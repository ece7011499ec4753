"""Mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from kolam.api import ai, analysis, designs, health, patterns

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(patterns.router)
api_router.include_router(analysis.router)
api_router.include_router(designs.router)
api_router.include_router(ai.router)
