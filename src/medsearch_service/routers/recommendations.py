"""Recommendation API endpoints.

Endpoints:
- POST /api/v1/recommendations/personalized: Rank for a reader profile
- POST /api/v1/recommendations/similar: Rank by similarity to a reference item
- POST /api/v1/recommendations/trending: Rank by engagement and search volume
- POST /api/v1/recommendations/specialty: Rank by specialty focus
"""

from fastapi import APIRouter, HTTPException, status

from medsearch_service.config import settings
from medsearch_service.logging_config import get_logger
from medsearch_service.recommendations import (
    personalized_recommendations,
    similar_content_recommendations,
    specialty_recommendations,
    trending_recommendations,
)
from medsearch_service.schemas.recommendation import (
    PersonalizedRecommendationRequest,
    RecommendationResponse,
    SimilarRecommendationRequest,
    SpecialtyRecommendationRequest,
    TrendingRecommendationRequest,
)

from .dependencies import clamp_limit, ensure_candidate_cap

router = APIRouter(prefix=f"{settings.api_v1_prefix}/recommendations", tags=["recommendations"])
logger = get_logger(__name__)


def _limit(requested: int | None) -> int:
    return clamp_limit(
        requested,
        settings.recommendation_default_limit,
        settings.recommendation_max_limit,
    )


@router.post(
    "/personalized",
    response_model=RecommendationResponse,
    summary="Personalized recommendations",
)
async def recommend_personalized(request: PersonalizedRecommendationRequest) -> RecommendationResponse:
    """Rank candidates by specialty, type, level, quality and freshness affinity."""
    ensure_candidate_cap(request.candidates)
    response = personalized_recommendations(
        request.profile, request.candidates, limit=_limit(request.limit)
    )
    logger.info(
        "recommendations.personalized.served",
        candidates=len(request.candidates),
        returned=len(response.recommendations),
    )
    return response


@router.post(
    "/similar",
    response_model=RecommendationResponse,
    summary="Similar content",
)
async def recommend_similar(request: SimilarRecommendationRequest) -> RecommendationResponse:
    """Rank candidates by similarity to the reference item."""
    ensure_candidate_cap(request.candidates)
    response = similar_content_recommendations(
        request.reference, request.candidates, limit=_limit(request.limit)
    )
    logger.info(
        "recommendations.similar.served",
        reference_id=request.reference.id,
        returned=len(response.recommendations),
    )
    return response


@router.post(
    "/trending",
    response_model=RecommendationResponse,
    summary="Trending content",
)
async def recommend_trending(request: TrendingRecommendationRequest) -> RecommendationResponse:
    """Rank candidates by engagement, correlated search volume and velocity."""
    ensure_candidate_cap(request.candidates)
    response = trending_recommendations(
        request.search_log, request.candidates, limit=_limit(request.limit)
    )
    logger.info(
        "recommendations.trending.served",
        candidates=len(request.candidates),
        returned=len(response.recommendations),
    )
    return response


@router.post(
    "/specialty",
    response_model=RecommendationResponse,
    summary="Specialty-based recommendations",
)
async def recommend_by_specialty(request: SpecialtyRecommendationRequest) -> RecommendationResponse:
    """Rank candidates by focus on the requested specialties.

    Raises:
        HTTPException 400: If no specialties were given
    """
    if not request.specialties:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="specialties required for specialty-based recommendations",
        )
    ensure_candidate_cap(request.candidates)
    response = specialty_recommendations(
        request.specialties, request.candidates, limit=_limit(request.limit)
    )
    logger.info(
        "recommendations.specialty.served",
        specialties=request.specialties,
        returned=len(response.recommendations),
    )
    return response
