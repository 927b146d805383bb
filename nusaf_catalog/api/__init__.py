"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from nusaf_catalog.api.categories import public_router as public_categories_router
from nusaf_catalog.api.categories import router as categories_router
from nusaf_catalog.api.health import router as health_router
from nusaf_catalog.api.imports import router as imports_router

__all__ = [
    "categories_router",
    "health_router",
    "imports_router",
    "public_categories_router",
]
