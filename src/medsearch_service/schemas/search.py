"""Search request and response schemas.

These schemas define the API contract for the search endpoints. The caller
supplies the candidate set (already filtered by access rules and joined
with author and metrics data); the service scores, sorts and paginates it.
"""

from enum import Enum

from pydantic import BaseModel, Field

from .content import ContentItem, SearchQueryLogEntry


class SortOption(str, Enum):
    """Result ordering.

    Values:
        RELEVANCE: Relevance score when a query is given, else views then recency
        DATE: Most recently published first
        POPULARITY: Most viewed first
        RATING: Highest rated first
        CME_CREDITS: Most CME credits first
        PRICE: Cheapest first (free content counts as 0)
    """

    RELEVANCE = "RELEVANCE"
    DATE = "DATE"
    POPULARITY = "POPULARITY"
    RATING = "RATING"
    CME_CREDITS = "CME_CREDITS"
    PRICE = "PRICE"


class ScoredContent(BaseModel):
    """A content item paired with its relevance score.

    ``score`` is None when no relevance scoring took place (empty query or
    a non-relevance sort).
    """

    item: ContentItem
    score: int | None = None


class FacetCount(BaseModel):
    """Count of candidates sharing one facet value."""

    value: str
    count: int = Field(..., ge=0)


class AuthorFacet(BaseModel):
    """Count of candidates per author."""

    value: str = Field(..., description="Author id")
    name: str
    count: int = Field(..., ge=0)


class RangeCount(BaseModel):
    """Count of candidates falling into a labelled range bucket."""

    range: str = Field(..., examples=["$1-$10"])
    count: int = Field(..., ge=0)


class SearchAggregations(BaseModel):
    """Facet counts over the whole candidate set."""

    content_types: list[FacetCount] = Field(default_factory=list)
    access_types: list[FacetCount] = Field(default_factory=list)
    specialties: list[FacetCount] = Field(default_factory=list)
    authors: list[AuthorFacet] = Field(default_factory=list)
    tags: list[FacetCount] = Field(default_factory=list)
    price_ranges: list[RangeCount] = Field(default_factory=list)
    cme_credits: list[RangeCount] = Field(default_factory=list)


class SearchRequest(BaseModel):
    """Search request parameters.

    Examples:
        >>> request = SearchRequest(query="heart attack", candidates=[], limit=10)
    """

    query: str = Field(
        default="",
        max_length=1000,
        description="Free-text search query (may be empty to browse)",
        examples=["heart attack"],
    )
    candidates: list[ContentItem] = Field(
        default_factory=list,
        description="Candidate records fetched by the caller",
    )
    sort: SortOption = Field(default=SortOption.RELEVANCE)
    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1, description="Page size")
    user_specialties: list[str] = Field(default_factory=list)
    recent_searches: list[str] = Field(
        default_factory=list,
        description="The user's recent queries, newest first",
    )
    query_log: list[SearchQueryLogEntry] = Field(
        default_factory=list,
        description="Global query log used for related queries",
    )


class SearchResponse(BaseModel):
    """One page of ranked results with facets and query assistance."""

    results: list[ScoredContent] = Field(default_factory=list)
    total_count: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    current_page: int = Field(..., ge=1)
    aggregations: SearchAggregations = Field(default_factory=SearchAggregations)
    suggestions: list[str] = Field(default_factory=list)
    related_queries: list[str] = Field(default_factory=list)


class SuggestionRequest(BaseModel):
    """Partial query plus the caller's recent searches."""

    query: str = Field(default="", max_length=200)
    recent_searches: list[str] = Field(default_factory=list)


class PopularSuggestionRequest(BaseModel):
    """Partial query plus the global query log."""

    query: str = Field(default="", max_length=200)
    query_log: list[SearchQueryLogEntry] = Field(default_factory=list)


class SuggestionResponse(BaseModel):
    """Ordered, de-duplicated suggestions."""

    suggestions: list[str] = Field(default_factory=list)


class ExpandQueryRequest(BaseModel):
    """Query to expand with medical vocabulary."""

    query: str = Field(..., max_length=1000, examples=["HTN"])


class ExpandQueryResponse(BaseModel):
    """Expanded search terms, original (lowercased) query first."""

    query: str
    terms: list[str]
