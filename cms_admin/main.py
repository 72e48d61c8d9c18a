"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from cms_admin.api.errors import request_validation_handler
from cms_admin.api.routes import (
    auth_router,
    banners_router,
    classes_router,
    faqs_router,
    gallery_router,
    reviews_router,
)
from cms_admin.config import settings
from cms_admin.db import engine, schema_guard

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    try:
        await schema_guard.ensure(engine)
    except Exception as e:
        # Retried by get_db on the first request
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
    yield
    await engine.dispose()


app = FastAPI(
    title="Content Admin Service",
    description="Admin backend for banners, FAQs, classes, gallery images and reviews",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware (can't use allow_origins=["*"] with allow_credentials=True)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, request_validation_handler)

# Include routers
app.include_router(auth_router, prefix="/api")
app.include_router(banners_router, prefix="/api")
app.include_router(faqs_router, prefix="/api")
app.include_router(reviews_router, prefix="/api")
app.include_router(classes_router, prefix="/api")
app.include_router(gallery_router, prefix="/api")


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "service": "cms-admin"}


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "service": "Content Admin Service",
        "version": "0.1.0",
        "docs": "/docs",
    }
