from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from system_messages.api.middleware.request_context import CorrelationIdMiddleware
from system_messages.api.v1.routers import health, invitations, messages
from system_messages.application.exceptions import ChannelUnavailableError, ValidationError
from system_messages.config import settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="System Messages Service",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    _register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(messages.router)
    app.include_router(invitations.router)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation(_req: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.detail})

    @app.exception_handler(ChannelUnavailableError)
    async def _unavailable(_req: Request, exc: ChannelUnavailableError) -> JSONResponse:
        logger.info("Invitation channel unavailable: %s", exc.detail)
        return JSONResponse(status_code=503, content={"detail": exc.detail})
