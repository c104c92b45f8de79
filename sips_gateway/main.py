"""
SIPS Gateway - Main Application Entry Point

Exposes the SIPS payment form and payment result decoding over HTTP.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response

from sips_gateway import __version__
from sips_gateway.core.config import settings
from sips_gateway.core.logging import setup_logging
from sips_gateway.core.metrics import get_metrics, get_metrics_content_type
from sips_gateway.presentation.api import api_router
from sips_gateway.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()

    logger = structlog.get_logger(__name__)
    logger.info("application_started", version=__version__)

    yield

    logger.info("application_stopped")


app = FastAPI(
    title="SIPS Gateway",
    description="Atos SIPS payment gateway adapter",
    version=__version__,
    lifespan=lifespan,
)

# Added last so it runs first and the request ID is bound for logging
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


if settings.metrics_enabled:
    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        """Prometheus metrics endpoint."""
        return Response(
            content=get_metrics(),
            media_type=get_metrics_content_type(),
        )
