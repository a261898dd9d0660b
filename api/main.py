"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Buduje ExpressionPipeline z Settings (etapy bezstanowe — tworzone raz)
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from api.routers import evaluate
from api.schemas import HealthResponse
from config import Settings
from pipeline import ExpressionPipeline

logger = logging.getLogger("evalex")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    app.state.pipeline = ExpressionPipeline.from_settings(settings)
    logger.info(
        "EvalEx API ready (power associativity: %s, parentheses validation: %s).",
        settings.power_associativity,
        settings.validate_parentheses,
    )
    yield
    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health(request: Request):
        return HealthResponse(status="ok", version=request.app.state.settings.app_version)

    return app


app = create_app()
