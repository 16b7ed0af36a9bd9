"""Trending topic and search analytics schemas."""

import datetime as dt

from pydantic import BaseModel, Field

from .content import SearchQueryLogEntry


class TrendingTopic(BaseModel):
    """A query cluster that is being searched repeatedly.

    ``growth_rate`` is a percentage comparing the second half of the
    window against the first half.
    """

    term: str
    category: str
    search_count: int = Field(..., ge=0)
    growth_rate: float
    related_terms: list[str] = Field(default_factory=list)


class QueryCount(BaseModel):
    """Occurrences of one normalized query."""

    query: str
    count: int = Field(..., ge=0)


class SearchCategoryBreakdown(BaseModel):
    """Search totals for one medical category."""

    category: str
    total_searches: int = Field(..., ge=0)
    top_queries: list[QueryCount] = Field(default_factory=list)
    growth_rate: float


class DailySearchVolume(BaseModel):
    """Number of searches on one calendar day (UTC)."""

    date: dt.date
    search_count: int = Field(..., ge=0)
    day_of_week: str = Field(..., examples=["Mon"])


class TrendingRequest(BaseModel):
    """Query log to analyse, plus window and output controls."""

    search_log: list[SearchQueryLogEntry] = Field(default_factory=list)
    time_window: int | None = Field(default=None, ge=1, description="Window in days")
    limit: int | None = Field(default=None, ge=1)
    category: str | None = Field(
        default=None,
        description="Only return topics in this category",
        examples=["cardiology"],
    )


class TrendingResponse(BaseModel):
    """Trending topics with per-category and per-day breakdowns."""

    trending_topics: list[TrendingTopic] = Field(default_factory=list)
    search_categories: list[SearchCategoryBreakdown] = Field(default_factory=list)
    search_volume_trend: list[DailySearchVolume] = Field(default_factory=list)
    time_window: int
    generated_at: dt.datetime
