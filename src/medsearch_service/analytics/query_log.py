"""Query-assistance lookups over the global search log."""

from collections import Counter
from collections.abc import Iterable
from datetime import datetime, timedelta

from medsearch_service.clock import resolve_now
from medsearch_service.schemas.content import SearchQueryLogEntry

from .trends import normalize_query

MAX_RELATED_QUERIES = 5
MAX_POPULAR_SUGGESTIONS = 8
MIN_POPULAR_QUERY_LENGTH = 2
POPULAR_WINDOW_DAYS = 7


def related_queries(
    query: str,
    query_log: Iterable[SearchQueryLogEntry],
    limit: int = MAX_RELATED_QUERIES,
) -> list[str]:
    """Recent distinct queries that contain the first word of ``query``.

    The query itself is excluded. Matching is case-insensitive substring
    containment; results are newest first.

    Examples:
        Given a log containing "asthma in children" and "asthma inhalers",
        ``related_queries("asthma", log)`` returns both, newest first.
    """
    words = query.lower().split()
    if not words:
        return []
    first_word = words[0]
    query_lower = query.lower()

    related: list[str] = []
    for entry in sorted(query_log, key=lambda e: e.timestamp, reverse=True):
        candidate = normalize_query(entry.query)
        if first_word in candidate and candidate != query_lower and candidate not in related:
            related.append(candidate)
            if len(related) >= limit:
                break
    return related


def popular_suggestions(
    query: str,
    query_log: Iterable[SearchQueryLogEntry],
    window_days: int = POPULAR_WINDOW_DAYS,
    now: datetime | None = None,
    min_query_length: int = MIN_POPULAR_QUERY_LENGTH,
    limit: int = MAX_POPULAR_SUGGESTIONS,
) -> list[str]:
    """Most frequent recent queries containing ``query``.

    Queries shorter than ``min_query_length`` return no suggestions.
    """
    if len(query) < min_query_length:
        return []

    cutoff = resolve_now(now) - timedelta(days=window_days)
    query_lower = query.lower()
    counts = Counter(
        normalize_query(entry.query)
        for entry in query_log
        if entry.timestamp >= cutoff and query_lower in entry.query.lower()
    )
    return [suggestion for suggestion, _ in counts.most_common(limit)]
