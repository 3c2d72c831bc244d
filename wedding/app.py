"""
FastAPI application entry point for the wedding site backend.
"""

from __future__ import annotations

import logging

import redis
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from wedding.config import get_settings
from wedding.errors import WeddingError
from wedding.routes import router

logger = logging.getLogger(__name__)


def _backend_unavailable(kind: str):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("%s failure on %s %s", kind, request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=503,
            content={"detail": "Service temporarily unavailable. Please try again."},
        )

    return handler


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Wedding Site Backend (FastAPI)", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(WeddingError)
    async def wedding_error_handler(request: Request, exc: WeddingError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("Unhandled wedding error: %s", exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    app.add_exception_handler(SQLAlchemyError, _backend_unavailable("Database"))
    app.add_exception_handler(BotoCoreError, _backend_unavailable("Storage"))
    app.add_exception_handler(ClientError, _backend_unavailable("Storage"))
    app.add_exception_handler(redis.RedisError, _backend_unavailable("Redis"))

    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
