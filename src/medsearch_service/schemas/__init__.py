"""Pydantic schemas for the scoring core and API request/response validation."""

from .content import (
    AccessType,
    ContentAuthor,
    ContentHighlights,
    ContentItem,
    ContentMetrics,
    ContentType,
    DifficultyLevel,
    SearchQueryLogEntry,
    SearchVolumeEntry,
    UserProfile,
)
from .health import HealthResponse
from .recommendation import (
    PersonalizedRecommendationRequest,
    RecommendationResponse,
    SimilarRecommendationRequest,
    SpecialtyRecommendationRequest,
    TrendingRecommendationRequest,
)
from .search import (
    AuthorFacet,
    ExpandQueryRequest,
    ExpandQueryResponse,
    FacetCount,
    PopularSuggestionRequest,
    RangeCount,
    ScoredContent,
    SearchAggregations,
    SearchRequest,
    SearchResponse,
    SortOption,
    SuggestionRequest,
    SuggestionResponse,
)
from .trending import (
    DailySearchVolume,
    QueryCount,
    SearchCategoryBreakdown,
    TrendingRequest,
    TrendingResponse,
    TrendingTopic,
)

__all__ = [
    # Health
    "HealthResponse",
    # Content
    "AccessType",
    "ContentAuthor",
    "ContentHighlights",
    "ContentItem",
    "ContentMetrics",
    "ContentType",
    "DifficultyLevel",
    "SearchQueryLogEntry",
    "SearchVolumeEntry",
    "UserProfile",
    # Search
    "AuthorFacet",
    "ExpandQueryRequest",
    "ExpandQueryResponse",
    "FacetCount",
    "PopularSuggestionRequest",
    "RangeCount",
    "ScoredContent",
    "SearchAggregations",
    "SearchRequest",
    "SearchResponse",
    "SortOption",
    "SuggestionRequest",
    "SuggestionResponse",
    # Recommendations
    "PersonalizedRecommendationRequest",
    "RecommendationResponse",
    "SimilarRecommendationRequest",
    "SpecialtyRecommendationRequest",
    "TrendingRecommendationRequest",
    # Trending
    "DailySearchVolume",
    "QueryCount",
    "SearchCategoryBreakdown",
    "TrendingRequest",
    "TrendingResponse",
    "TrendingTopic",
]
