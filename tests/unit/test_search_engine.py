"""Unit tests for search orchestration: ranking, sorting, paging and decoration."""

from datetime import datetime, timedelta

import pytest

from medsearch_service.schemas.content import SearchQueryLogEntry
from medsearch_service.schemas.search import SortOption
from medsearch_service.search import MedicalSearchEngine
from medsearch_service.vocabulary import MedicalVocabulary


@pytest.fixture
def engine() -> MedicalSearchEngine:
    """Search engine with the default vocabulary."""
    return MedicalSearchEngine()


class TestRank:
    """Tests for MedicalSearchEngine.rank."""

    def test_relevance_order(self, engine, make_item, now: datetime) -> None:
        """Test that the best match ranks first with its score attached."""
        plain = make_item(id="plain", title="Gout flares")
        match = make_item(id="match", title="Heart Attack Recovery")

        ranked = engine.rank("heart attack", [plain, match], now=now)

        assert [(entry.item.id, entry.score) for entry in ranked] == [
            ("match", 180),
            ("plain", 0),
        ]

    def test_relevance_ties_keep_input_order(self, engine, make_item, now: datetime) -> None:
        """Test stable ordering of equal scores."""
        items = [make_item(id=f"item-{i}", title="Gout") for i in range(3)]

        ranked = engine.rank("sepsis", items, now=now)

        assert [entry.item.id for entry in ranked] == ["item-0", "item-1", "item-2"]

    def test_relevance_without_query_uses_views_then_date(
        self, engine, make_item, now: datetime
    ) -> None:
        """Test browse ordering by views, newest first on ties."""
        older = make_item(id="older", metrics={"views": 10}, published_at=now - timedelta(days=9))
        newer = make_item(id="newer", metrics={"views": 10}, published_at=now - timedelta(days=1))
        popular = make_item(id="popular", metrics={"views": 99})

        ranked = engine.rank("", [older, newer, popular], now=now)

        assert [entry.item.id for entry in ranked] == ["popular", "newer", "older"]
        assert all(entry.score is None for entry in ranked)

    def test_sort_by_date(self, engine, make_item, now: datetime) -> None:
        """Test newest-first date ordering even with a query."""
        old = make_item(id="old", title="Heart Attack", published_at=now - timedelta(days=100))
        new = make_item(id="new", published_at=now - timedelta(days=1))

        ranked = engine.rank("heart attack", [old, new], SortOption.DATE, now=now)

        assert [entry.item.id for entry in ranked] == ["new", "old"]

    def test_sort_by_price_ascending(self, engine, make_item) -> None:
        """Test cheapest-first ordering with free content as 0."""
        items = [
            make_item(id="pricey", price=80),
            make_item(id="free", price=None),
            make_item(id="cheap", price=5),
        ]

        ranked = engine.rank("", items, SortOption.PRICE)

        assert [entry.item.id for entry in ranked] == ["free", "cheap", "pricey"]

    @pytest.mark.parametrize(
        ("sort", "field", "values"),
        [
            (SortOption.RATING, "metrics", [{"rating": 3.0}, {"rating": 4.5}]),
            (SortOption.POPULARITY, "metrics", [{"views": 1}, {"views": 50}]),
            (SortOption.CME_CREDITS, "cme_credits", [None, 4]),
        ],
    )
    def test_descending_sorts(self, engine, make_item, sort, field, values) -> None:
        """Test that rating, popularity and CME sorts put the larger value first."""
        low = make_item(id="low", **{field: values[0]})
        high = make_item(id="high", **{field: values[1]})

        ranked = engine.rank("", [low, high], sort)

        assert [entry.item.id for entry in ranked] == ["high", "low"]


class TestSearch:
    """Tests for MedicalSearchEngine.search."""

    def test_pagination(self, engine, make_item, now: datetime) -> None:
        """Test page slicing, total count and total pages."""
        items = [make_item(id=f"item-{i}") for i in range(5)]

        response = engine.search("", items, page=3, limit=2, now=now)

        assert response.total_count == 5
        assert response.total_pages == 3
        assert response.current_page == 3
        assert [entry.item.id for entry in response.results] == ["item-4"]

    def test_page_past_end_is_empty(self, engine, make_item, now: datetime) -> None:
        """Test that a page beyond the last returns no results."""
        response = engine.search("", [make_item()], page=4, limit=2, now=now)

        assert response.results == []
        assert response.total_pages == 1

    def test_no_candidates(self, engine, now: datetime) -> None:
        """Test an empty candidate set."""
        response = engine.search("asthma", [], now=now)

        assert response.results == []
        assert response.total_count == 0
        assert response.total_pages == 0

    def test_results_decorated_without_touching_input(
        self, engine, make_item, now: datetime
    ) -> None:
        """Test excerpt and highlights on results while inputs stay unchanged."""
        item = make_item(title="Asthma in Children", content="<p>Asthma is common.</p>")

        response = engine.search("asthma", [item], now=now)
        result = response.results[0].item

        assert result.excerpt == "Asthma is common."
        assert result.highlighted.title == "<mark>Asthma</mark> in Children"
        assert item.excerpt == ""
        assert item.highlighted.title is None

    def test_existing_excerpt_kept(self, engine, make_item, now: datetime) -> None:
        """Test that an upstream excerpt is not replaced."""
        item = make_item(content="Long body text.", excerpt="Editor summary")

        response = engine.search("", [item], now=now)

        assert response.results[0].item.excerpt == "Editor summary"

    def test_aggregations_cover_all_candidates(self, engine, make_item, now: datetime) -> None:
        """Test that facets count every candidate, not just the page."""
        items = [make_item(tags=["asthma"]) for _ in range(4)]

        response = engine.search("", items, limit=1, now=now)

        assert response.aggregations.tags[0].count == 4

    def test_suggestions_and_related_queries(self, engine, make_item, now: datetime) -> None:
        """Test query assistance is attached when there is a query."""
        log = [
            SearchQueryLogEntry(query="htn in pregnancy", timestamp=now - timedelta(days=1)),
        ]

        response = engine.search("htn", [make_item()], query_log=log, now=now)

        assert response.suggestions == ["hypertension", "htn symptoms", "htn treatment"]
        assert response.related_queries == ["htn in pregnancy"]

    def test_no_assistance_without_query(self, engine, make_item, now: datetime) -> None:
        """Test that browsing returns no suggestions or related queries."""
        response = engine.search("", [make_item()], recent_searches=["asthma"], now=now)

        assert response.suggestions == []
        assert response.related_queries == []

    def test_user_specialties_boost(self, engine, make_item, now: datetime) -> None:
        """Test that the reader's specialties lift matching content."""
        other = make_item(id="other", title="Gout", specialties=["Rheumatology"])
        mine = make_item(id="mine", title="Gout", specialties=["Cardiology"])

        response = engine.search("zzz", [other, mine], user_specialties=["Cardiology"], now=now)

        assert [entry.item.id for entry in response.results] == ["mine", "other"]
        assert response.results[0].score == 30


class TestEngineVocabulary:
    """Tests for the facade helpers and vocabulary injection."""

    def test_helpers_share_vocabulary(self, make_item, now: datetime) -> None:
        """Test that expansion, scoring and suggestions use the injected vocabulary."""
        vocabulary = MedicalVocabulary.build(abbreviations={"AKI": "acute kidney injury"})
        engine = MedicalSearchEngine(vocabulary)
        item = make_item(title="Acute kidney injury in the ICU")

        assert engine.expand_query("AKI") == ["aki", "acute kidney injury"]
        assert engine.calculate_relevance_score("AKI", item, now=now) == 80
        assert engine.generate_suggestions("aki") == [
            "acute kidney injury",
            "aki symptoms",
            "aki treatment",
        ]
