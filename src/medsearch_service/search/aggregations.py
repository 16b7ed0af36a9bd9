"""Facet counts over a candidate set."""

from collections import Counter
from collections.abc import Callable, Sequence

from medsearch_service.schemas.content import ContentItem
from medsearch_service.schemas.search import (
    AuthorFacet,
    FacetCount,
    RangeCount,
    SearchAggregations,
)

TOP_SPECIALTIES = 10
TOP_AUTHORS = 10
TOP_TAGS = 20

# (label, predicate) buckets; a missing price counts as free
PRICE_BUCKETS: tuple[tuple[str, Callable[[float], bool]], ...] = (
    ("Free", lambda price: price == 0),
    ("$1-$10", lambda price: 0 < price <= 10),
    ("$11-$50", lambda price: 10 < price <= 50),
    ("$51+", lambda price: price > 50),
)

# A missing CME value matches no bucket
CME_BUCKETS: tuple[tuple[str, Callable[[float], bool]], ...] = (
    ("1-3 credits", lambda credits: 1 <= credits <= 3),
    ("4-8 credits", lambda credits: 4 <= credits <= 8),
    ("9+ credits", lambda credits: credits >= 9),
)


def _facets(counter: Counter[str], top: int | None = None) -> list[FacetCount]:
    return [FacetCount(value=value, count=count) for value, count in counter.most_common(top)]


def build_aggregations(candidates: Sequence[ContentItem]) -> SearchAggregations:
    """Count content types, access types, specialties, authors, tags and ranges.

    Content and access types are listed in first-seen order; specialties,
    authors and tags are ranked by count (ties keep first-seen order) and
    truncated.
    """
    content_types: Counter[str] = Counter(item.type.value for item in candidates)
    access_types: Counter[str] = Counter(item.access_type.value for item in candidates)
    specialties: Counter[str] = Counter(s for item in candidates for s in item.specialties)
    tags: Counter[str] = Counter(tag for item in candidates for tag in item.tags)

    author_counts: Counter[str] = Counter(item.author.id for item in candidates)
    author_names = {item.author.id: item.author.name for item in candidates}

    prices = [item.price or 0.0 for item in candidates]
    credits = [item.cme_credits for item in candidates if item.cme_credits is not None]

    return SearchAggregations(
        content_types=[FacetCount(value=v, count=c) for v, c in content_types.items()],
        access_types=[FacetCount(value=v, count=c) for v, c in access_types.items()],
        specialties=_facets(specialties, TOP_SPECIALTIES),
        authors=[
            AuthorFacet(value=author_id, name=author_names[author_id], count=count)
            for author_id, count in author_counts.most_common(TOP_AUTHORS)
        ],
        tags=_facets(tags, TOP_TAGS),
        price_ranges=[
            RangeCount(range=label, count=sum(1 for p in prices if matches(p)))
            for label, matches in PRICE_BUCKETS
        ],
        cme_credits=[
            RangeCount(range=label, count=sum(1 for c in credits if matches(c)))
            for label, matches in CME_BUCKETS
        ],
    )
