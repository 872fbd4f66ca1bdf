"""
PhishGuard API Application

Main FastAPI application entry point.
"""

# Load environment variables FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from phishguard.api.dependencies import get_activity_store, init_services
from phishguard.api.routes import get_api_router
from phishguard.config import get_settings
from phishguard.services.storage.activity import ActivityStore
from phishguard.services.threat_intel.cache import ThreatSnapshotCache
from phishguard.utils.constants import APP_DESCRIPTION, APP_VERSION

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def periodic_threat_refresh(
    cache: ThreatSnapshotCache,
    interval_seconds: int,
    activity_store: Optional[ActivityStore] = None,
):
    """
    Refresh the threat database on a fixed interval until cancelled.

    Expired activity records are dropped on the same schedule.
    """
    while True:
        await asyncio.sleep(interval_seconds)
        await cache.refresh(force=True)
        if activity_store is not None:
            await activity_store.cleanup_old_data()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info("Starting PhishGuard API...")

    engine = init_services(settings)

    # Seed the threat database immediately
    await engine.threat_cache.refresh(force=True)

    refresh_task = asyncio.create_task(
        periodic_threat_refresh(
            engine.threat_cache,
            settings.threat_feed_refresh_interval_seconds,
            get_activity_store(),
        )
    )
    logger.info(
        f"Threat database refresh every {settings.threat_feed_refresh_interval_seconds}s"
    )

    logger.info("PhishGuard API started successfully")

    yield

    # Shutdown
    logger.info("Shutting down PhishGuard API...")
    refresh_task.cancel()
    try:
        await refresh_task
    except asyncio.CancelledError:
        pass
    logger.info("PhishGuard API shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="PhishGuard API",
    description=APP_DESCRIPTION,
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Include API routes
app.include_router(get_api_router())


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint - API info."""
    return {
        "name": "PhishGuard API",
        "description": APP_DESCRIPTION,
        "version": APP_VERSION,
        "docs": "/docs",
    }


# Root-level health check (for Docker/K8s)
@app.get("/health")
async def health():
    """Basic health check."""
    return {
        "status": "healthy",
        "service": "phishguard-api",
        "version": APP_VERSION,
    }


# Error handlers
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if settings.debug or os.getenv("DEBUG") else "An error occurred",
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "phishguard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
