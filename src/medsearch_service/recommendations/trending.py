"""Trending content ranking from engagement and correlated search volume.

Trend score per candidate:

    base      engagement score
    volume    2 x sum(count of correlated searches), max 50
    recency   30 - hours_old x 1.25 when hours_old <= 24 (not clamped)
    velocity  5 x engagement / max(hours_old, 1), max 25

A search correlates with a candidate when the search query contains one of
the candidate's tags, or the candidate title contains the search query
(case-insensitive substrings in both checks).
"""

from collections.abc import Sequence
from datetime import datetime

from medsearch_service.clock import resolve_now, whole_hours_since
from medsearch_service.logging_config import get_logger
from medsearch_service.schemas.content import ContentItem, SearchVolumeEntry
from medsearch_service.schemas.recommendation import RecommendationResponse

logger = get_logger(__name__)

VOLUME_WEIGHT = 2
VOLUME_CAP = 50
RECENCY_WINDOW_HOURS = 24
RECENCY_BASE = 30
RECENCY_DECAY_PER_HOUR = 1.25
VELOCITY_WEIGHT = 5
VELOCITY_CAP = 25

TRENDING_REASON = "Based on recent search trends and high engagement"
TRENDING_CONFIDENCE = 0.85


def _correlates(item: ContentItem, query_lower: str) -> bool:
    return (
        any(tag.lower() in query_lower for tag in item.tags)
        or query_lower in item.title.lower()
    )


def trend_score(
    item: ContentItem,
    search_log: Sequence[SearchVolumeEntry],
    now: datetime,
) -> float:
    """Trend score of one candidate."""
    engagement = item.metrics.engagement_score
    score = engagement

    search_volume = sum(
        entry.count for entry in search_log if _correlates(item, entry.query.lower())
    )
    score += min(search_volume * VOLUME_WEIGHT, VOLUME_CAP)

    hours_old = whole_hours_since(item.published_at, now)
    if hours_old <= RECENCY_WINDOW_HOURS:
        score += RECENCY_BASE - hours_old * RECENCY_DECAY_PER_HOUR

    velocity = engagement / max(hours_old, 1)
    score += min(velocity * VELOCITY_WEIGHT, VELOCITY_CAP)

    return score


def rank_trending_content(
    search_log: Sequence[SearchVolumeEntry],
    candidates: Sequence[ContentItem],
    limit: int = 10,
    now: datetime | None = None,
) -> list[ContentItem]:
    """Top ``limit`` candidates by trend score (ties keep input order).

    Complexity: O(candidates x log entries x tags).
    """
    now = resolve_now(now)
    scored = [(item, trend_score(item, search_log, now)) for item in candidates]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return [item for item, _ in scored[:limit]]


def trending_recommendations(
    search_log: Sequence[SearchVolumeEntry],
    candidates: Sequence[ContentItem],
    limit: int = 10,
    now: datetime | None = None,
) -> RecommendationResponse:
    """Trending content wrapped as a recommendation response."""
    recommendations = rank_trending_content(search_log, candidates, limit, now=now)
    logger.debug(
        "recommendations.trending.completed",
        candidates=len(candidates),
        log_entries=len(search_log),
        returned=len(recommendations),
    )
    return RecommendationResponse(
        recommendations=recommendations,
        reason=TRENDING_REASON,
        confidence=TRENDING_CONFIDENCE if recommendations else 0.0,
    )
