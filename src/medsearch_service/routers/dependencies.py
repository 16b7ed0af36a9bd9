"""Shared router dependencies and request guards."""

from collections.abc import Sized

from fastapi import HTTPException, status

from medsearch_service.analytics import SearchAnalytics
from medsearch_service.config import settings
from medsearch_service.search import MedicalSearchEngine

# Singleton engines: stateless, vocabulary is read-only
_search_engine: MedicalSearchEngine | None = None
_search_analytics: SearchAnalytics | None = None


def get_search_engine() -> MedicalSearchEngine:
    """Get or create the search engine instance."""
    global _search_engine
    if _search_engine is None:
        _search_engine = MedicalSearchEngine()
    return _search_engine


def get_search_analytics() -> SearchAnalytics:
    """Get or create the search analytics instance."""
    global _search_analytics
    if _search_analytics is None:
        _search_analytics = SearchAnalytics()
    return _search_analytics


def ensure_candidate_cap(candidates: Sized) -> None:
    """Reject candidate sets larger than ``settings.max_candidates``.

    Raises:
        HTTPException 422: If too many candidates were supplied
    """
    if len(candidates) > settings.max_candidates:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=(
                f"Too many candidates: {len(candidates)} "
                f"(maximum {settings.max_candidates})"
            ),
        )


def clamp_limit(limit: int | None, default: int, maximum: int) -> int:
    """Requested limit, falling back to ``default`` and capped at ``maximum``."""
    return min(limit or default, maximum)
