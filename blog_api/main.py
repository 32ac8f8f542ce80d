"""FastAPI main application module."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.config.database import dispose_engine, init_models
from blog_api.config.logging import configure_logging
from blog_api.config.settings import settings
from blog_api.middleware.exception_handler import register_exception_handlers
from blog_api.middleware.logging_middleware import RequestLoggingMiddleware
from blog_api.routers import categories, comments, posts, users
from blog_api.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup and release the pool on shutdown."""
    if settings.CREATE_TABLES_ON_STARTUP:
        await init_models()
    logger.info(
        "Application started",
        extra={"environment": settings.ENVIRONMENT, "version": settings.API_VERSION},
    )
    yield
    await dispose_engine()


# Create FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
    redoc_url=f"{settings.API_PREFIX}/redoc",
    lifespan=lifespan,
)

# Register exception handlers
register_exception_handlers(app)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=settings.ALLOWED_METHODS,
    allow_headers=settings.ALLOWED_HEADERS,
)

# Request logging, bodies are never logged
app.add_middleware(
    RequestLoggingMiddleware,
    log_headers=settings.ENVIRONMENT == "development",
)


# Health check endpoint
@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(version=settings.API_VERSION)


# Include routers
app.include_router(users.router, prefix=f"{settings.API_PREFIX}/user", tags=["Users"])
app.include_router(posts.router, prefix=f"{settings.API_PREFIX}/post", tags=["Posts"])
app.include_router(comments.router, prefix=f"{settings.API_PREFIX}/comment", tags=["Comments"])
app.include_router(
    categories.router, prefix=f"{settings.API_PREFIX}/category", tags=["Categories"]
)
