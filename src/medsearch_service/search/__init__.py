"""Medical search: query expansion, relevance scoring and suggestions."""

from .aggregations import build_aggregations
from .engine import MedicalSearchEngine
from .highlighting import generate_excerpt, generate_highlights
from .query_expander import QueryExpander, expand_query
from .relevance import RelevanceScorer
from .suggestions import SuggestionGenerator

__all__ = [
    "MedicalSearchEngine",
    "QueryExpander",
    "RelevanceScorer",
    "SuggestionGenerator",
    "build_aggregations",
    "expand_query",
    "generate_excerpt",
    "generate_highlights",
]
