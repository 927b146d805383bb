"""Nusaf catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nusaf_catalog.api.categories import public_router as public_categories_router
from nusaf_catalog.api.categories import router as categories_router
from nusaf_catalog.api.health import router as health_router
from nusaf_catalog.api.imports import router as imports_router
from nusaf_catalog.api.middleware import setup_middleware
from nusaf_catalog.catalog.taxonomy import CATEGORY_DEFINITIONS
from nusaf_catalog.domain.exceptions import DomainError
from nusaf_catalog.infrastructure.config import settings
from nusaf_catalog.infrastructure.logging import configure_logging

configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting Nusaf catalog API",
        version=settings.api_version,
        debug=settings.debug,
    )
    logger.info(
        "Taxonomy loaded",
        categories=len(CATEGORY_DEFINITIONS),
        sub_categories=sum(len(c.sub_categories) for c in CATEGORY_DEFINITIONS),
    )

    yield

    logger.info("Shutting down Nusaf catalog API")


app = FastAPI(
    title="Nusaf Catalog API",
    description="Product taxonomy, supplier SKU conversion and import validation",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_middleware(app)

app.include_router(health_router, tags=["Health"])
app.include_router(public_categories_router)
app.include_router(categories_router)
app.include_router(imports_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    request_id = getattr(request.state, "request_id", None)

    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "request_id": request_id,
        },
    )


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle domain errors that escaped a handler as 400 responses."""
    request_id = getattr(request.state, "request_id", None)

    logger.warning(
        "Domain error",
        path=request.url.path,
        error_code=exc.error_code,
        error=exc.message,
    )

    return JSONResponse(
        status_code=400,
        content={
            "error_code": exc.error_code,
            "message": exc.message,
            "details": [],
            "request_id": request_id,
        },
    )
