"""Search orchestration over a caller-supplied candidate set.

The storage layer has already filtered candidates (published, access
rules, facet filters) and joined author and metrics data. This module
scores, orders and pages them and adds the display extras a results page
needs: excerpts, highlights, facets, suggestions and related queries.
Input items are never modified; displayed items are ``model_copy``s.
"""

import math
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime

from medsearch_service.analytics.query_log import related_queries
from medsearch_service.clock import resolve_now
from medsearch_service.logging_config import get_logger
from medsearch_service.schemas.content import ContentItem, SearchQueryLogEntry
from medsearch_service.schemas.search import ScoredContent, SearchResponse, SortOption
from medsearch_service.vocabulary import DEFAULT_VOCABULARY, MedicalVocabulary

from .aggregations import build_aggregations
from .highlighting import generate_excerpt, generate_highlights
from .query_expander import QueryExpander
from .relevance import RelevanceScorer
from .suggestions import SuggestionGenerator

logger = get_logger(__name__)

DEFAULT_PAGE_SIZE = 20

# Sort keys for the non-relevance orderings; all sort descending except PRICE
_SORT_KEYS: dict[SortOption, Callable[[ContentItem], tuple]] = {
    SortOption.DATE: lambda item: (item.published_at,),
    SortOption.POPULARITY: lambda item: (item.metrics.views,),
    SortOption.RATING: lambda item: (item.metrics.rating,),
    SortOption.CME_CREDITS: lambda item: (item.cme_credits or 0,),
    SortOption.PRICE: lambda item: (item.price or 0,),
    # RELEVANCE without a query: most viewed, then newest
    SortOption.RELEVANCE: lambda item: (item.metrics.views, item.published_at),
}


class MedicalSearchEngine:
    """Facade over query expansion, relevance scoring and suggestions.

    All components share one injected vocabulary.

    Usage:
        engine = MedicalSearchEngine()
        response = engine.search("heart attack", candidates, limit=10)
    """

    def __init__(self, vocabulary: MedicalVocabulary = DEFAULT_VOCABULARY) -> None:
        self.vocabulary = vocabulary
        self.expander = QueryExpander(vocabulary)
        self.scorer = RelevanceScorer(self.expander)
        self.suggester = SuggestionGenerator(vocabulary)

    def expand_query(self, query: str) -> list[str]:
        """Expanded search terms for a query."""
        return self.expander.expand(query)

    def calculate_relevance_score(
        self,
        query: str,
        item: ContentItem,
        user_specialties: Iterable[str] = (),
        now: datetime | None = None,
    ) -> int:
        """Relevance of one item for a query."""
        return self.scorer.score(query, item, user_specialties, now=now)

    def generate_suggestions(self, query: str, recent_searches: Iterable[str] = ()) -> list[str]:
        """Up to 8 query suggestions."""
        return self.suggester.suggest(query, recent_searches)

    def rank(
        self,
        query: str,
        candidates: Sequence[ContentItem],
        sort: SortOption = SortOption.RELEVANCE,
        user_specialties: Iterable[str] = (),
        now: datetime | None = None,
    ) -> list[ScoredContent]:
        """Order the full candidate set.

        Relevance scores are only computed for a RELEVANCE sort with a
        non-empty query; ties keep input order.
        """
        if sort == SortOption.RELEVANCE and query:
            scored = self.scorer.score_many(query, candidates, user_specialties, now=now)
            scored.sort(key=lambda pair: pair[1], reverse=True)
            return [ScoredContent(item=item, score=score) for item, score in scored]

        key = _SORT_KEYS[sort]
        ordered = sorted(candidates, key=key, reverse=sort != SortOption.PRICE)
        return [ScoredContent(item=item) for item in ordered]

    def search(
        self,
        query: str,
        candidates: Sequence[ContentItem],
        sort: SortOption = SortOption.RELEVANCE,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        user_specialties: Iterable[str] = (),
        recent_searches: Iterable[str] = (),
        query_log: Iterable[SearchQueryLogEntry] = (),
        now: datetime | None = None,
    ) -> SearchResponse:
        """Run a full search over the candidate set.

        Args:
            query: Raw query (empty to browse)
            candidates: Pre-filtered candidate records
            sort: Result ordering
            page: 1-based page number
            limit: Page size
            user_specialties: Reader specialties for the relevance boost
            recent_searches: Reader's recent queries for suggestions
            query_log: Global query log for related queries
            now: Reference time for recency signals

        Returns:
            SearchResponse with one page of results; facets cover every
            candidate, not just the page
        """
        now = resolve_now(now)
        ranked = self.rank(query, candidates, sort, user_specialties, now=now)

        offset = (page - 1) * limit
        page_results = [
            ScoredContent(item=self._decorate(entry.item, query), score=entry.score)
            for entry in ranked[offset : offset + limit]
        ]

        total_count = len(candidates)
        response = SearchResponse(
            results=page_results,
            total_count=total_count,
            total_pages=math.ceil(total_count / limit),
            current_page=page,
            aggregations=build_aggregations(candidates),
            suggestions=self.generate_suggestions(query, recent_searches) if query else [],
            related_queries=related_queries(query, query_log) if query else [],
        )

        logger.info(
            "search.rank.completed",
            query=query,
            sort=sort.value,
            candidates=total_count,
            page=page,
            returned=len(page_results),
        )
        return response

    @staticmethod
    def _decorate(item: ContentItem, query: str) -> ContentItem:
        """Copy of ``item`` with an excerpt and query highlights filled in."""
        return item.model_copy(
            update={
                "excerpt": item.excerpt or generate_excerpt(item.content),
                "highlighted": generate_highlights(item, query),
            }
        )
