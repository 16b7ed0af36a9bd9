"""Personalized recommendations from a reader profile.

Per-candidate affinity score:

    +50  any candidate specialty in the profile
    +30  candidate type is a preferred type
    +20  difficulty equals the reading level (no partial credit)
    +min(engagement x 0.3, 15)
    +min(rating x 3, 15)
    -25  already in the interaction history (penalized, not excluded)
    +10  published within 7 days AND engagement > 50

Candidates are sorted by score descending; equal scores keep input order.
"""

from collections.abc import Sequence
from datetime import datetime

from medsearch_service.clock import resolve_now, whole_days_since
from medsearch_service.logging_config import get_logger
from medsearch_service.schemas.content import ContentItem, UserProfile
from medsearch_service.schemas.recommendation import RecommendationResponse

logger = get_logger(__name__)

BOOST_SPECIALTY = 50
BOOST_PREFERRED_TYPE = 30
BOOST_READING_LEVEL = 20
ENGAGEMENT_WEIGHT = 0.3
ENGAGEMENT_CAP = 15
RATING_WEIGHT = 3
RATING_CAP = 15
PENALTY_SEEN = -25
BOOST_FRESH_POPULAR = 10
FRESH_WINDOW_DAYS = 7
FRESH_MIN_ENGAGEMENT = 50

PERSONALIZED_REASON = "Based on your specialties and reading preferences"
PERSONALIZED_CONFIDENCE = 0.85


def personalized_score(profile: UserProfile, item: ContentItem, now: datetime) -> float:
    """Affinity of one candidate for a reader profile."""
    score = 0.0

    if any(specialty in profile.specialties for specialty in item.specialties):
        score += BOOST_SPECIALTY

    if item.type in profile.preferred_content_types:
        score += BOOST_PREFERRED_TYPE

    if item.difficulty == profile.reading_level:
        score += BOOST_READING_LEVEL

    score += min(item.metrics.engagement_score * ENGAGEMENT_WEIGHT, ENGAGEMENT_CAP)
    score += min(item.metrics.rating * RATING_WEIGHT, RATING_CAP)

    if item.id in profile.interaction_history:
        score += PENALTY_SEEN

    days_since_published = whole_days_since(item.published_at, now)
    if (
        days_since_published <= FRESH_WINDOW_DAYS
        and item.metrics.engagement_score > FRESH_MIN_ENGAGEMENT
    ):
        score += BOOST_FRESH_POPULAR

    return score


def personalized_recommendations(
    profile: UserProfile,
    candidates: Sequence[ContentItem],
    limit: int = 10,
    now: datetime | None = None,
) -> RecommendationResponse:
    """Rank candidates for one reader.

    Args:
        profile: Reader profile supplied for this call
        candidates: Candidate content
        limit: Maximum recommendations returned
        now: Reference time for the freshness boost (default: current UTC)

    Returns:
        RecommendationResponse; confidence is 0.85, or 0.0 when empty
    """
    now = resolve_now(now)
    scored = [(item, personalized_score(profile, item, now)) for item in candidates]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    recommendations = [item for item, _ in scored[:limit]]

    logger.debug(
        "recommendations.personalized.completed",
        candidates=len(candidates),
        returned=len(recommendations),
    )
    return RecommendationResponse(
        recommendations=recommendations,
        reason=PERSONALIZED_REASON,
        confidence=PERSONALIZED_CONFIDENCE if recommendations else 0.0,
    )
