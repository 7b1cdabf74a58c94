"""
Main FastAPI application.

This is the entry point for the API server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import engine
from app.errors import AppError, app_error_handler
from app.routers import activity, health, tasks

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI app.
    
    Configures logging on startup and disposes the engine on shutdown.
    """
    setup_logging(settings.LOG_LEVEL)
    logger.info("Starting %s...", settings.APP_NAME)
    
    yield  # The server runs while we're "yielded" here
    
    await engine.dispose()
    logger.info("Shutting down %s...", settings.APP_NAME)


# Create the FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Team-scoped task management API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_exception_handler(AppError, app_error_handler)

# Include routers (API endpoints)
app.include_router(health.router, tags=["Health"])
app.include_router(tasks.router)
app.include_router(activity.router)
