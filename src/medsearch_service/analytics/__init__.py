"""Search-log analytics: trending topics, category and volume breakdowns."""

from .query_log import popular_suggestions, related_queries
from .trends import SearchAnalytics, find_related_terms, growth_rate, normalize_query

__all__ = [
    "SearchAnalytics",
    "find_related_terms",
    "growth_rate",
    "normalize_query",
    "popular_suggestions",
    "related_queries",
]
