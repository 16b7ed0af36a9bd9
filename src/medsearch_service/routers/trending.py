"""Trending topics API endpoint.

Endpoints:
- POST /api/v1/trending: Trending topics, category breakdown and daily volume

Content ranked by search trends is served by POST
/api/v1/recommendations/trending.
"""

from fastapi import APIRouter, Depends

from medsearch_service.analytics import SearchAnalytics
from medsearch_service.analytics.trends import MAX_TOPICS
from medsearch_service.clock import utc_now
from medsearch_service.config import settings
from medsearch_service.schemas.trending import TrendingRequest, TrendingResponse

from .dependencies import clamp_limit, get_search_analytics

router = APIRouter(prefix=settings.api_v1_prefix, tags=["trending"])


@router.post(
    "/trending",
    response_model=TrendingResponse,
    summary="Trending search topics",
    description="""
Analyse a query log over a time window (default 7 days):

- **trending_topics**: queries searched at least 3 times, with growth rate,
  medical category and related queries (optionally filtered by category)
- **search_categories**: totals and top queries per medical category
- **search_volume_trend**: searches per day across the window

Windows longer than the configured maximum (365 days by default) are capped.
For content ranked by these trends use `/api/v1/recommendations/trending`.
    """,
)
async def trending_topics(
    request: TrendingRequest,
    analytics: SearchAnalytics = Depends(get_search_analytics),
) -> TrendingResponse:
    """Compute trending topics and breakdowns from the supplied log."""
    now = utc_now()
    window = clamp_limit(
        request.time_window,
        settings.trending_default_window_days,
        settings.trending_max_window_days,
    )
    limit = clamp_limit(request.limit, MAX_TOPICS, settings.trending_max_limit)

    topics = analytics.identify_trending_topics(request.search_log, window, now=now)
    if request.category:
        topics = [topic for topic in topics if topic.category == request.category]

    return TrendingResponse(
        trending_topics=topics[:limit],
        search_categories=analytics.category_breakdown(request.search_log, window, now=now),
        search_volume_trend=analytics.search_volume_trend(request.search_log, window, now=now),
        time_window=window,
        generated_at=now,
    )
