"""API endpoints for the translation lookup service."""

from .search import router as search_router
from .imports import router as import_router
from .records import router as records_router
from .monitoring import router as monitoring_router

__all__ = [
    "search_router",
    "import_router",
    "records_router",
    "monitoring_router",
]
