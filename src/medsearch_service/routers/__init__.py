"""FastAPI routers for API endpoints."""

from .health import router as health_router
from .recommendations import router as recommendations_router
from .search import router as search_router
from .trending import router as trending_router

__all__ = [
    "health_router",
    "recommendations_router",
    "search_router",
    "trending_router",
]
