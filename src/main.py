# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.middleware import VisitorTrackingMiddleware
from src.config import get_settings
from src.schemas.common import HealthResponse
from src.services import permission_service
from src.services.visitor_service import VisitorSessionCache

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    # Startup: refuse to serve with an incomplete permission catalog
    logger.info("Validating permission catalog...")
    permission_service.validate_catalog()

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    description="Role-based access control for the Fibreus business portal",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.visitor_tracking_enabled:
    app.state.visitor_cache = VisitorSessionCache(
        max_size=settings.visitor_cache_size,
        ttl_seconds=settings.visitor_cache_ttl_seconds,
    )
    app.add_middleware(VisitorTrackingMiddleware, cache=app.state.visitor_cache)


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


# Import and include API router after it's created
from src.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
