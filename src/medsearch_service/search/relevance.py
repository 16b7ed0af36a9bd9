"""Multi-factor relevance scoring for medical content.

Scores one candidate against a query, its vocabulary expansion and the
reader's specialties. Every signal is additive and independently testable.

Signals:
- Raw query in title (+100)
- Each expanded term in title (+80, stacks)
- Each tag containing any expanded term (+50 per tag)
- Each expanded term in body text (+10 per term, not per occurrence)
- Reader specialty overlap (+30 flat)
- Rating quality floor (rating x 10, max 50)
- Engagement floor (engagement x 0.5, max 25)
- Recency (20 - days x 0.67 within 30 days)

Design Decision: Substring matching
- Title, tag and body checks use plain substring containment, so the
  expanded term "mi" also matches inside "Vitamin". This keeps scores
  identical to the ranking readers already see.
- The recency term is not clamped: at day 30 it contributes -0.1.

Performance: O(terms x (tags + 2)) per candidate; no allocation beyond the
expansion, which is computed once per query by ``score_many``.
"""

import math
from collections.abc import Iterable
from datetime import datetime

from medsearch_service.clock import resolve_now, whole_days_since
from medsearch_service.schemas.content import ContentItem

from .query_expander import QueryExpander

BOOST_TITLE_QUERY = 100
BOOST_TITLE_TERM = 80
BOOST_TAG_MATCH = 50
BOOST_CONTENT_TERM = 10
BOOST_SPECIALTY = 30

RATING_WEIGHT = 10
RATING_CAP = 50
ENGAGEMENT_WEIGHT = 0.5
ENGAGEMENT_CAP = 25

RECENCY_WINDOW_DAYS = 30
RECENCY_BASE = 20
RECENCY_DECAY_PER_DAY = 0.67


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (2.5 -> 3)."""
    return math.floor(value + 0.5)


class RelevanceScorer:
    """Scores content relevance for a query.

    Usage:
        scorer = RelevanceScorer()
        score = scorer.score("heart attack", item, ["Cardiology"])
    """

    def __init__(self, expander: QueryExpander | None = None) -> None:
        self.expander = expander or QueryExpander()

    def score(
        self,
        query: str,
        item: ContentItem,
        user_specialties: Iterable[str] = (),
        now: datetime | None = None,
    ) -> int:
        """Score one item for a query.

        Args:
            query: Raw query string
            item: Candidate content (never modified)
            user_specialties: Reader specialties; empty disables the boost
            now: Reference time for the recency signal (default: current UTC)

        Returns:
            Integer relevance score, higher = more relevant
        """
        return self.score_with_terms(
            query,
            self.expander.expand(query),
            item,
            user_specialties=user_specialties,
            now=now,
        )

    def score_with_terms(
        self,
        query: str,
        expanded_terms: list[str],
        item: ContentItem,
        user_specialties: Iterable[str] = (),
        now: datetime | None = None,
    ) -> int:
        """Score one item using a precomputed query expansion."""
        now = resolve_now(now)
        query_lower = query.lower()
        title_lower = item.title.lower()
        content_lower = item.content.lower()
        score = 0.0

        # Signal 1: Raw query in title
        if query_lower in title_lower:
            score += BOOST_TITLE_QUERY

        # Signal 2: Each expanded term in title
        score += BOOST_TITLE_TERM * sum(1 for term in expanded_terms if term in title_lower)

        # Signal 3: Tags containing any expanded term
        for tag in item.tags:
            tag_lower = tag.lower()
            if any(term in tag_lower for term in expanded_terms):
                score += BOOST_TAG_MATCH

        # Signal 4: Expanded terms present in body text
        score += BOOST_CONTENT_TERM * sum(1 for term in expanded_terms if term in content_lower)

        # Signal 5: Reader specialty overlap (flat)
        specialties = set(user_specialties)
        if specialties and specialties.intersection(item.specialties):
            score += BOOST_SPECIALTY

        # Signal 6: Quality floors
        score += min(item.metrics.rating * RATING_WEIGHT, RATING_CAP)
        score += min(item.metrics.engagement_score * ENGAGEMENT_WEIGHT, ENGAGEMENT_CAP)

        # Signal 7: Recency
        days_since_published = whole_days_since(item.published_at, now)
        if days_since_published <= RECENCY_WINDOW_DAYS:
            score += RECENCY_BASE - days_since_published * RECENCY_DECAY_PER_DAY

        return round_half_up(score)

    def score_many(
        self,
        query: str,
        items: Iterable[ContentItem],
        user_specialties: Iterable[str] = (),
        now: datetime | None = None,
    ) -> list[tuple[ContentItem, int]]:
        """Score a candidate set, expanding the query once.

        Returns:
            (item, score) pairs in input order
        """
        now = resolve_now(now)
        terms = self.expander.expand(query)
        specialties = list(user_specialties)
        return [
            (item, self.score_with_terms(query, terms, item, specialties, now))
            for item in items
        ]
