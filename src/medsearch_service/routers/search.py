"""Search API endpoints.

Handlers are stateless: the caller supplies the candidate set (already
filtered and joined by the storage layer) and any query-log context.

Endpoints:
- POST /api/v1/search: Rank, page and decorate candidates for a query
- POST /api/v1/search/expand: Expand a query with medical vocabulary
- POST /api/v1/search/suggestions: Vocabulary and history suggestions
- POST /api/v1/search/suggestions/popular: Popular recent queries
"""

from fastapi import APIRouter, Depends, status

from medsearch_service.analytics import popular_suggestions
from medsearch_service.config import settings
from medsearch_service.logging_config import get_logger
from medsearch_service.schemas.search import (
    ExpandQueryRequest,
    ExpandQueryResponse,
    PopularSuggestionRequest,
    SearchRequest,
    SearchResponse,
    SuggestionRequest,
    SuggestionResponse,
)
from medsearch_service.search import MedicalSearchEngine

from .dependencies import clamp_limit, ensure_candidate_cap, get_search_engine

router = APIRouter(prefix=settings.api_v1_prefix, tags=["search"])
logger = get_logger(__name__)


@router.post(
    "/search",
    response_model=SearchResponse,
    status_code=status.HTTP_200_OK,
    summary="Search medical content",
    description="""
Rank the supplied candidates for a query using medical vocabulary expansion
and multi-factor relevance scoring.

Sort options: **RELEVANCE** (default), DATE, POPULARITY, RATING,
CME_CREDITS, PRICE. RELEVANCE without a query orders by views, then date.

Returns one page of results with excerpts and highlights, facet counts over
all candidates, suggestions and related queries.
    """,
)
async def search_content(
    request: SearchRequest,
    engine: MedicalSearchEngine = Depends(get_search_engine),
) -> SearchResponse:
    """Search the candidate set.

    Raises:
        HTTPException 422: If more than ``max_candidates`` candidates are sent
    """
    ensure_candidate_cap(request.candidates)
    limit = clamp_limit(request.limit, settings.search_default_limit, settings.search_max_limit)

    return engine.search(
        query=request.query,
        candidates=request.candidates,
        sort=request.sort,
        page=request.page,
        limit=limit,
        user_specialties=request.user_specialties,
        recent_searches=request.recent_searches,
        query_log=request.query_log,
    )


@router.post(
    "/search/expand",
    response_model=ExpandQueryResponse,
    summary="Expand a query",
    description="Returns the lowercased query followed by synonym, abbreviation and wildcard terms.",
)
async def expand_query(
    request: ExpandQueryRequest,
    engine: MedicalSearchEngine = Depends(get_search_engine),
) -> ExpandQueryResponse:
    """Expand a query with the medical vocabulary."""
    return ExpandQueryResponse(query=request.query, terms=engine.expand_query(request.query))


@router.post(
    "/search/suggestions",
    response_model=SuggestionResponse,
    summary="Query suggestions",
    description="Up to 8 suggestions from medical abbreviations, synonyms and recent searches.",
)
async def search_suggestions(
    request: SuggestionRequest,
    engine: MedicalSearchEngine = Depends(get_search_engine),
) -> SuggestionResponse:
    """Suggest queries for a partial query."""
    return SuggestionResponse(
        suggestions=engine.generate_suggestions(request.query, request.recent_searches)
    )


@router.post(
    "/search/suggestions/popular",
    response_model=SuggestionResponse,
    summary="Popular query suggestions",
    description="Most frequent queries from the last few days that contain the partial query.",
)
async def popular_search_suggestions(request: PopularSuggestionRequest) -> SuggestionResponse:
    """Suggest popular recent queries."""
    suggestions = popular_suggestions(
        request.query,
        request.query_log,
        window_days=settings.popular_suggestion_window_days,
        min_query_length=settings.suggestion_min_query_length,
    )
    logger.debug(
        "search.suggestions.popular",
        query=request.query,
        log_entries=len(request.query_log),
        returned=len(suggestions),
    )
    return SuggestionResponse(suggestions=suggestions)
