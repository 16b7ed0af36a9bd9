"""Specialty-focused recommendations."""

from collections.abc import Sequence

from medsearch_service.schemas.content import ContentItem
from medsearch_service.schemas.recommendation import RecommendationResponse

WEIGHT_CONTENT_SPECIALTY = 10
WEIGHT_AUTHOR_SPECIALTY = 5
SPECIALTY_CONFIDENCE = 0.75


def specialty_score(specialties: Sequence[str], item: ContentItem) -> float:
    """10 per matching content specialty, 5 per matching author specialty, plus engagement."""
    content_matches = sum(1 for s in item.specialties if s in specialties)
    author_matches = sum(1 for s in item.author.specialties if s in specialties)
    return (
        content_matches * WEIGHT_CONTENT_SPECIALTY
        + author_matches * WEIGHT_AUTHOR_SPECIALTY
        + item.metrics.engagement_score
    )


def specialty_recommendations(
    specialties: Sequence[str],
    candidates: Sequence[ContentItem],
    limit: int = 10,
) -> RecommendationResponse:
    """Rank candidates by how strongly they focus on the given specialties."""
    scored = [(item, specialty_score(specialties, item)) for item in candidates]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    recommendations = [item for item, _ in scored[:limit]]
    return RecommendationResponse(
        recommendations=recommendations,
        reason=f"Based on {', '.join(specialties)} specialty focus",
        confidence=SPECIALTY_CONFIDENCE if recommendations else 0.0,
    )
