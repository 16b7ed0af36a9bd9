"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Callable
from datetime import datetime, timezone
from typing import Any

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from medsearch_service.main import app
from medsearch_service.schemas.content import (
    ContentAuthor,
    ContentItem,
    ContentMetrics,
)

# ============================================================================
# Time
# ============================================================================

# Pinned reference time for every clock-dependent computation under test
FIXED_NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)

# Far enough before FIXED_NOW that no recency or freshness signal applies
OLD_DATE = datetime(2020, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Pinned 'current' time."""
    return FIXED_NOW


# ============================================================================
# Content Factories
# ============================================================================

ItemFactory = Callable[..., ContentItem]


@pytest.fixture
def make_item() -> ItemFactory:
    """Factory for content items with neutral defaults.

    Defaults produce an item with no tags, no specialties, zero metrics and
    an old publish date, so only the fields a test sets affect its score.
    Extra ``metrics`` and ``author`` values may be passed as dicts.

    Example:
        item = make_item(title="Managing Acute MI", tags=["cardiology"])
    """
    counter = {"next": 1}

    def _make(**overrides: Any) -> ContentItem:
        item_id = overrides.pop("id", None) or f"item-{counter['next']}"
        counter["next"] += 1

        author = overrides.pop("author", None) or {}
        if isinstance(author, dict):
            author = ContentAuthor(**{"id": "author-1", "name": "Dr. Grey", **author})

        metrics = overrides.pop("metrics", None) or {}
        if isinstance(metrics, dict):
            metrics = ContentMetrics(**metrics)

        fields: dict[str, Any] = {
            "id": item_id,
            "title": f"Untitled {item_id}",
            "author": author,
            "metrics": metrics,
            "published_at": OLD_DATE,
            "updated_at": OLD_DATE,
        }
        fields.update(overrides)
        return ContentItem(**fields)

    return _make


def as_payload(item: ContentItem) -> dict[str, Any]:
    """JSON-ready dict for request bodies."""
    return item.model_dump(mode="json")


@pytest.fixture
def payload() -> Callable[[ContentItem], dict[str, Any]]:
    """Serializer for content items in request bodies."""
    return as_payload


# ============================================================================
# HTTP Clients
# ============================================================================


@pytest.fixture
def client() -> TestClient:
    """Synchronous test client."""
    return TestClient(app)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Asynchronous test client over the ASGI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
