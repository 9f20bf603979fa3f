from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from crm_service.api.middleware.correlation_id import CorrelationIdMiddleware
from crm_service.api.middleware.metrics import RequestTimingMiddleware
from crm_service.api.v1.routers import customers, health, orders, scheduled_calls
from crm_service.application.exceptions import (
    NotFoundError,
    ValidationError,
)
from crm_service.config import settings
from crm_service.infrastructure.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown lifecycle."""
    logger.info("Database engine configured for %s:%s", settings.DB_HOST, settings.DB_PORT)

    yield

    await engine.dispose()
    logger.info("Database connection pool closed")


def create_app() -> FastAPI:
    app = FastAPI(
        title="CRM Service",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    _register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(orders.router)
    app.include_router(customers.router)
    app.include_router(scheduled_calls.router)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def _not_found(_req: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.detail})

    @app.exception_handler(ValidationError)
    async def _validation(_req: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.detail})
