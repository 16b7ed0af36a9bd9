"""Recommendation request and response schemas."""

from pydantic import BaseModel, Field

from .content import ContentItem, SearchVolumeEntry, UserProfile


class RecommendationResponse(BaseModel):
    """Ranked recommendations with a human-readable reason.

    ``confidence`` is a fixed per-strategy value when recommendations exist
    and 0.0 when the list is empty.
    """

    recommendations: list[ContentItem] = Field(default_factory=list)
    reason: str
    confidence: float = Field(..., ge=0.0, le=1.0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "recommendations": [],
                    "reason": "Based on your specialties and reading preferences",
                    "confidence": 0.0,
                }
            ]
        }
    }


class PersonalizedRecommendationRequest(BaseModel):
    """Candidates to rank for one user profile."""

    profile: UserProfile
    candidates: list[ContentItem] = Field(default_factory=list)
    limit: int | None = Field(default=None, ge=1)


class SimilarRecommendationRequest(BaseModel):
    """Candidates to rank by similarity to a reference item."""

    reference: ContentItem
    candidates: list[ContentItem] = Field(default_factory=list)
    limit: int | None = Field(default=None, ge=1)


class TrendingRecommendationRequest(BaseModel):
    """Candidates to rank by engagement and correlated search volume."""

    search_log: list[SearchVolumeEntry] = Field(default_factory=list)
    candidates: list[ContentItem] = Field(default_factory=list)
    limit: int | None = Field(default=None, ge=1)


class SpecialtyRecommendationRequest(BaseModel):
    """Candidates to rank by specialty focus."""

    specialties: list[str] = Field(default_factory=list)
    candidates: list[ContentItem] = Field(default_factory=list)
    limit: int | None = Field(default=None, ge=1)
