"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Run with:
    uvicorn jai_backend.fastapi_app:create_fastapi_app --factory --port 5000
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from jai_backend import __version__
from jai_backend.config.logging_config import correlation_id_var, setup_logging
from jai_backend.config.settings import Config
from jai_backend.observability.metrics import observe_request_latency
from jai_backend.presentation.api import (
    auth_router,
    chat_router,
    conversations_router,
    metrics_router,
)

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", "NO Correlation ID")

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Records request latency labelled by route template, not raw path."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        route = request.scope.get("route")
        observe_request_latency(
            request.method,
            getattr(route, "path", request.url.path),
            response.status_code,
            time.perf_counter() - start,
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: container and Dishka are already set up by the factory.
    Shutdown: close the DI container (disconnects Prisma, closes model clients).
    """
    logger.info("Jai backend started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("Jai backend shutdown. DI container closed.")


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; built from the production providers
            when omitted.

    Returns:
        FastAPI application instance
    """
    if container is None:
        # imported here so the generated Prisma client is only needed in production
        from jai_backend.setup.ioc.container import create_container

        container = create_container()

    app = FastAPI(
        title="Jai API",
        description="Backend for the Jai coding assistant",
        version=__version__,
        lifespan=lifespan,
    )

    # Must happen before the app starts (Dishka adds middleware)
    setup_dishka(container, app)

    app.add_middleware(MetricsMiddleware)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.info(f"Validation error on {request.url.path}: {errors}")
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": jsonable_encoder(errors)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Jai backend is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(metrics_router)
    app.include_router(auth_router, prefix=Config.API_PREFIX)
    app.include_router(chat_router, prefix=Config.API_PREFIX)
    app.include_router(conversations_router, prefix=Config.API_PREFIX)

    return app

