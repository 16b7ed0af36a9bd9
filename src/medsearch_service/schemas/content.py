"""Content, query-log and user-profile schemas consumed by the scoring core.

These are read-only inputs: the storage layer fetches, filters and joins
them before any scorer sees them. ``ContentItem`` is frozen so that scorers
cannot write derived values back into a record; derived data is returned
alongside the item or on a ``model_copy``.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from medsearch_service.clock import UtcDatetime


class ContentType(str, Enum):
    """Kind of published content."""

    ARTICLE = "ARTICLE"
    VIDEO = "VIDEO"
    CASE_STUDY = "CASE_STUDY"
    CONFERENCE = "CONFERENCE"


class AccessType(str, Enum):
    """How readers get access to the content."""

    FREE = "FREE"
    PAID = "PAID"
    CME = "CME"


class DifficultyLevel(str, Enum):
    """Reading level, used for exact-match affinity only."""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    EXPERT = "EXPERT"


class ContentAuthor(BaseModel):
    """Author fields joined onto a content record."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    specialties: list[str] = Field(default_factory=list)
    credentials: str = ""


class ContentMetrics(BaseModel):
    """Aggregated engagement metrics.

    ``engagement_score`` is computed upstream as
    ``likes + 2 * shares + 1.5 * comments`` and consumed as-is.
    """

    model_config = ConfigDict(frozen=True)

    views: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
    shares: int = Field(default=0, ge=0)
    comments: int = Field(default=0, ge=0)
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    engagement_score: float = Field(default=0.0, ge=0.0)


class ContentHighlights(BaseModel):
    """Per-field highlighted excerpts (``<mark>`` wrapped)."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None


class ContentItem(BaseModel):
    """A published content record (article, video, case study, conference)."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    slug: str = ""
    content: str = ""
    excerpt: str = ""
    author: ContentAuthor
    type: ContentType = ContentType.ARTICLE
    access_type: AccessType = AccessType.FREE
    price: float | None = Field(default=None, ge=0.0)
    cme_credits: float | None = Field(default=None, ge=0.0)
    tags: list[str] = Field(default_factory=list)
    specialties: list[str] = Field(default_factory=list)
    difficulty: DifficultyLevel = DifficultyLevel.INTERMEDIATE
    published_at: UtcDatetime
    updated_at: UtcDatetime
    metrics: ContentMetrics = Field(default_factory=ContentMetrics)
    highlighted: ContentHighlights = Field(default_factory=ContentHighlights)


class SearchQueryLogEntry(BaseModel):
    """One tracked search, as appended by the search-tracking hook."""

    model_config = ConfigDict(frozen=True)

    query: str
    timestamp: UtcDatetime
    results_count: int = Field(default=0, ge=0)


class SearchVolumeEntry(BaseModel):
    """Search volume for a query on a given date (trending content input)."""

    model_config = ConfigDict(frozen=True)

    query: str
    count: int = Field(default=1, ge=0)
    date: UtcDatetime


class UserProfile(BaseModel):
    """Per-call personalization context; nothing is retained between calls."""

    model_config = ConfigDict(frozen=True)

    specialties: list[str] = Field(default_factory=list)
    interaction_history: list[str] = Field(
        default_factory=list,
        description="Content ids the user has already seen or interacted with",
    )
    reading_level: DifficultyLevel = DifficultyLevel.INTERMEDIATE
    preferred_content_types: list[ContentType] = Field(
        default_factory=lambda: [ContentType.ARTICLE, ContentType.CASE_STUDY]
    )
