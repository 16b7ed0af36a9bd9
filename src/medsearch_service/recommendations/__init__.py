"""Content recommendation strategies: personalized, similar, trending, specialty."""

from .personalized import personalized_recommendations, personalized_score
from .similarity import content_similarity, similar_content_recommendations
from .specialty import specialty_recommendations, specialty_score
from .trending import rank_trending_content, trend_score, trending_recommendations

__all__ = [
    "content_similarity",
    "personalized_recommendations",
    "personalized_score",
    "rank_trending_content",
    "similar_content_recommendations",
    "specialty_recommendations",
    "specialty_score",
    "trend_score",
    "trending_recommendations",
]
