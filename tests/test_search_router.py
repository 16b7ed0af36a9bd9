"""Integration tests for the search API endpoints."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient

from medsearch_service.config import settings


class TestSearchEndpoint:
    """Tests for POST /api/v1/search."""

    def test_relevance_search(self, client: TestClient, make_item, payload) -> None:
        """Test ranked, decorated results with facets and suggestions."""
        items = [
            make_item(id="gout", title="Gout flares", tags=["gout"]),
            make_item(
                id="mi",
                title="Heart Attack Recovery",
                content="Rehabilitation after a heart attack.",
                tags=["cardiology"],
            ),
        ]

        response = client.post(
            "/api/v1/search",
            json={"query": "heart attack", "candidates": [payload(i) for i in items]},
        )

        assert response.status_code == 200
        data = response.json()
        assert [r["item"]["id"] for r in data["results"]] == ["mi", "gout"]
        assert data["results"][0]["score"] > data["results"][1]["score"]
        assert data["results"][0]["item"]["highlighted"]["title"] == (
            "<mark>Heart Attack</mark> Recovery"
        )
        assert data["results"][0]["item"]["excerpt"] == "Rehabilitation after a heart attack."
        assert data["total_count"] == 2
        assert data["total_pages"] == 1
        assert data["current_page"] == 1
        assert {t["value"] for t in data["aggregations"]["tags"]} == {"gout", "cardiology"}
        assert "heart attack symptoms" in data["suggestions"]

    def test_sort_and_paging(self, client: TestClient, make_item, payload) -> None:
        """Test price sort with an explicit page size."""
        items = [make_item(id=f"p{price}", price=price) for price in (30, 10, 20)]

        response = client.post(
            "/api/v1/search",
            json={
                "candidates": [payload(i) for i in items],
                "sort": "PRICE",
                "page": 2,
                "limit": 2,
            },
        )

        data = response.json()
        assert response.status_code == 200
        assert [r["item"]["id"] for r in data["results"]] == ["p30"]
        assert data["results"][0]["score"] is None
        assert data["total_pages"] == 2

    def test_limit_clamped_to_maximum(self, client: TestClient, make_item, payload) -> None:
        """Test that an oversized page size is capped."""
        items = [make_item() for _ in range(settings.search_max_limit + 5)]

        response = client.post(
            "/api/v1/search",
            json={"candidates": [payload(i) for i in items], "limit": 1000},
        )

        assert response.status_code == 200
        assert len(response.json()["results"]) == settings.search_max_limit

    def test_related_queries_from_log(self, client: TestClient, make_item, payload) -> None:
        """Test that related queries come from the supplied query log."""
        yesterday = (datetime.now(timezone.utc) - timedelta(days=1)).isoformat()

        response = client.post(
            "/api/v1/search",
            json={
                "query": "asthma",
                "candidates": [payload(make_item())],
                "query_log": [{"query": "asthma inhalers", "timestamp": yesterday}],
            },
        )

        assert response.json()["related_queries"] == ["asthma inhalers"]

    def test_too_many_candidates_rejected(self, client: TestClient, make_item, payload) -> None:
        """Test 422 when the candidate cap is exceeded."""
        item = payload(make_item())

        response = client.post(
            "/api/v1/search",
            json={"query": "asthma", "candidates": [item] * (settings.max_candidates + 1)},
        )

        assert response.status_code == 422
        assert "Too many candidates" in response.json()["detail"]

    def test_invalid_sort_rejected(self, client: TestClient) -> None:
        """Test request validation of the sort option."""
        response = client.post("/api/v1/search", json={"sort": "SHUFFLE"})

        assert response.status_code == 422

    def test_invalid_page_rejected(self, client: TestClient) -> None:
        """Test that page numbers start at 1."""
        response = client.post("/api/v1/search", json={"page": 0})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_empty_search_async(self, async_client: AsyncClient) -> None:
        """Test an empty candidate set."""
        response = await async_client.post("/api/v1/search", json={"query": "asthma"})

        assert response.status_code == 200
        data = response.json()
        assert data["results"] == []
        assert data["total_count"] == 0
        assert data["total_pages"] == 0


class TestQueryAssistanceEndpoints:
    """Tests for expansion and suggestion endpoints."""

    def test_expand(self, client: TestClient) -> None:
        """Test query expansion."""
        response = client.post("/api/v1/search/expand", json={"query": "HTN"})

        assert response.status_code == 200
        assert response.json() == {"query": "HTN", "terms": ["htn", "hypertension"]}

    def test_expand_requires_query(self, client: TestClient) -> None:
        """Test that the query field is required."""
        response = client.post("/api/v1/search/expand", json={})

        assert response.status_code == 422

    def test_suggestions(self, client: TestClient) -> None:
        """Test vocabulary and recent-search suggestions."""
        response = client.post(
            "/api/v1/search/suggestions",
            json={"query": "htn", "recent_searches": ["htn in pregnancy"]},
        )

        assert response.status_code == 200
        assert response.json()["suggestions"] == [
            "hypertension",
            "htn in pregnancy",
            "htn symptoms",
            "htn treatment",
        ]

    def test_popular_suggestions(self, client: TestClient) -> None:
        """Test frequency-ranked suggestions from a recent query log."""
        now = datetime.now(timezone.utc)
        recent = (now - timedelta(hours=2)).isoformat()
        stale = (now - timedelta(days=30)).isoformat()
        log = (
            [{"query": "asthma inhalers", "timestamp": recent}]
            + [{"query": "asthma", "timestamp": recent}] * 2
            + [{"query": "asthma action plan", "timestamp": stale}] * 3
        )

        response = client.post(
            "/api/v1/search/suggestions/popular",
            json={"query": "asth", "query_log": log},
        )

        assert response.status_code == 200
        assert response.json()["suggestions"] == ["asthma", "asthma inhalers"]

    def test_popular_suggestions_short_query(self, client: TestClient) -> None:
        """Test that a one-character query returns nothing."""
        response = client.post("/api/v1/search/suggestions/popular", json={"query": "a"})

        assert response.json() == {"suggestions": []}
