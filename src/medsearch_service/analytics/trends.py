"""Trend detection over time-windowed search logs.

Everything here is recomputed on each call from the log it is given; no
result is cached or persisted.

Growth rate (used for topics and categories):
    The window [now - days, now] is split at its midpoint. With ``recent``
    entries at or after the midpoint and ``earlier`` entries before it:

        growth = (recent / earlier - 1) * 100   if earlier > 0
        growth = 100                            otherwise

    A query that only appears in the second half therefore reports 100%.
"""

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta

from medsearch_service.clock import resolve_now
from medsearch_service.logging_config import get_logger
from medsearch_service.schemas.content import SearchQueryLogEntry
from medsearch_service.schemas.trending import (
    DailySearchVolume,
    QueryCount,
    SearchCategoryBreakdown,
    TrendingTopic,
)
from medsearch_service.vocabulary import DEFAULT_VOCABULARY, MedicalVocabulary

logger = get_logger(__name__)

DEFAULT_WINDOW_DAYS = 7
MIN_TOPIC_SEARCHES = 3
MAX_TOPICS = 20
MAX_RELATED_TERMS = 5
MAX_CATEGORY_QUERIES = 5
NO_BASELINE_GROWTH = 100.0


def normalize_query(query: str) -> str:
    """Trim and lowercase a logged query."""
    return query.strip().lower()


def growth_rate(timestamps: Iterable[datetime], midpoint: datetime) -> float:
    """Percentage growth of the second half of a window over the first."""
    recent_count = earlier_count = 0
    for timestamp in timestamps:
        if timestamp >= midpoint:
            recent_count += 1
        else:
            earlier_count += 1
    if earlier_count > 0:
        return (recent_count / earlier_count - 1) * 100
    return NO_BASELINE_GROWTH


def find_related_terms(
    query: str,
    all_queries: Iterable[str],
    limit: int = MAX_RELATED_TERMS,
) -> list[str]:
    """Other queries sharing a word with ``query``.

    Two words are related when either is a substring of the other, so
    "diabetes" relates to "type 2 diabetes management" and "diab".

    Examples:
        >>> find_related_terms("chest pain", ["chest pain", "pain management", "sepsis"])
        ['pain management']
    """
    query_words = query.lower().split()
    related = []
    for other in all_queries:
        if other == query:
            continue
        other_words = other.lower().split()
        if any(
            other_word in word or word in other_word
            for word in query_words
            for other_word in other_words
        ):
            related.append(other)
            if len(related) >= limit:
                break
    return related


class SearchAnalytics:
    """Trending topics, category breakdowns and daily volume from a query log.

    Usage:
        analytics = SearchAnalytics()
        topics = analytics.identify_trending_topics(log_entries, time_window_days=7)
    """

    def __init__(self, vocabulary: MedicalVocabulary = DEFAULT_VOCABULARY) -> None:
        self.vocabulary = vocabulary

    @staticmethod
    def _window(
        search_log: Iterable[SearchQueryLogEntry],
        time_window_days: int,
        now: datetime,
    ) -> tuple[list[SearchQueryLogEntry], datetime, datetime]:
        """Entries inside the window, plus the window's cutoff and midpoint."""
        window = timedelta(days=time_window_days)
        cutoff = now - window
        midpoint = cutoff + window / 2
        entries = [entry for entry in search_log if entry.timestamp >= cutoff]
        return entries, cutoff, midpoint

    def categorize_query(self, query: str) -> str:
        """First-match medical category for a query (``general`` if none)."""
        return self.vocabulary.categorize(query)

    def identify_trending_topics(
        self,
        search_log: Iterable[SearchQueryLogEntry],
        time_window_days: int = DEFAULT_WINDOW_DAYS,
        now: datetime | None = None,
        min_searches: int = MIN_TOPIC_SEARCHES,
        limit: int = MAX_TOPICS,
    ) -> list[TrendingTopic]:
        """Cluster recent searches into trending topics.

        Args:
            search_log: Query log; may be unfiltered, the window is applied here
            time_window_days: Window length in days
            now: Window end (default: current UTC)
            min_searches: Minimum group size to qualify as a topic
            limit: Maximum topics returned

        Returns:
            Topics sorted by search count descending (ties keep first-seen
            order). Related terms are drawn from every query in the window,
            including ones below the threshold. Blank queries are skipped.
        """
        now = resolve_now(now)
        entries, _cutoff, midpoint = self._window(search_log, time_window_days, now)

        groups: dict[str, list[SearchQueryLogEntry]] = defaultdict(list)
        for entry in entries:
            query = normalize_query(entry.query)
            if query:
                groups[query].append(entry)
        all_queries = list(groups)

        topics = []
        for query, searches in groups.items():
            if len(searches) < min_searches:
                continue
            avg_results = sum(s.results_count for s in searches) / len(searches)
            topics.append(
                TrendingTopic(
                    term=query,
                    category=self.categorize_query(query),
                    search_count=len(searches),
                    growth_rate=growth_rate((s.timestamp for s in searches), midpoint),
                    related_terms=find_related_terms(query, all_queries),
                )
            )
            logger.debug(
                "trending.topic.scored",
                term=query,
                search_count=len(searches),
                avg_results=round(avg_results, 2),
            )

        topics.sort(key=lambda topic: topic.search_count, reverse=True)
        logger.info(
            "trending.topics.detected",
            window_days=time_window_days,
            entries=len(entries),
            groups=len(groups),
            topics=len(topics),
        )
        return topics[:limit]

    def category_breakdown(
        self,
        search_log: Iterable[SearchQueryLogEntry],
        time_window_days: int = DEFAULT_WINDOW_DAYS,
        now: datetime | None = None,
    ) -> list[SearchCategoryBreakdown]:
        """Search totals, top queries and growth per category.

        Categories with no searches in the window are omitted. Results are
        sorted by total searches descending, ties in category-table order.
        """
        now = resolve_now(now)
        entries, _cutoff, midpoint = self._window(search_log, time_window_days, now)

        by_category: dict[str, list[SearchQueryLogEntry]] = {
            name: [] for name in self.vocabulary.category_names
        }
        for entry in entries:
            by_category[self.categorize_query(entry.query)].append(entry)

        breakdown = []
        for category, searches in by_category.items():
            if not searches:
                continue
            counts = Counter(normalize_query(s.query) for s in searches)
            breakdown.append(
                SearchCategoryBreakdown(
                    category=category,
                    total_searches=len(searches),
                    top_queries=[
                        QueryCount(query=query, count=count)
                        for query, count in counts.most_common(MAX_CATEGORY_QUERIES)
                    ],
                    growth_rate=growth_rate((s.timestamp for s in searches), midpoint),
                )
            )

        breakdown.sort(key=lambda row: row.total_searches, reverse=True)
        return breakdown

    @staticmethod
    def search_volume_trend(
        search_log: Sequence[SearchQueryLogEntry],
        time_window_days: int = DEFAULT_WINDOW_DAYS,
        now: datetime | None = None,
    ) -> list[DailySearchVolume]:
        """Daily search counts for each day of the window, oldest first.

        Buckets start on the cutoff's calendar day (UTC); days without
        searches report 0 and entries outside the buckets are ignored.
        """
        now = resolve_now(now)
        cutoff = now - timedelta(days=time_window_days)
        days = [(cutoff + timedelta(days=i)).date() for i in range(time_window_days)]
        buckets = dict.fromkeys(days, 0)

        for entry in search_log:
            if entry.timestamp < cutoff:
                continue
            day = entry.timestamp.date()
            if day in buckets:
                buckets[day] += 1

        return [
            DailySearchVolume(date=day, search_count=count, day_of_week=day.strftime("%a"))
            for day, count in buckets.items()
        ]
