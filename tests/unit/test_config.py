"""Unit tests for application settings and time helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from medsearch_service.clock import ensure_utc, whole_days_since, whole_hours_since
from medsearch_service.config import Settings
from medsearch_service.schemas.content import ContentItem


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self) -> None:
        """Test default limits."""
        settings = Settings()

        assert settings.api_v1_prefix == "/api/v1"
        assert settings.search_default_limit == 20
        assert settings.max_candidates == 100
        assert settings.recommendation_default_limit == 10
        assert settings.trending_max_window_days == 365

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables override defaults."""
        monkeypatch.setenv("MAX_CANDIDATES", "250")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.max_candidates == 250
        assert settings.log_level == "DEBUG"

    def test_cors_origins_list(self) -> None:
        """Test comma-separated origin parsing."""
        settings = Settings(cors_origins="http://a.test, http://b.test", cors_allow_all=False)

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_cors_allow_all(self) -> None:
        """Test wildcard origins."""
        assert Settings(cors_allow_all=True).cors_origins_list == ["*"]


class TestClock:
    """Tests for UTC helpers."""

    def test_naive_treated_as_utc(self) -> None:
        """Test that naive datetimes get the UTC zone."""
        assert ensure_utc(datetime(2024, 1, 1)).tzinfo == timezone.utc

    def test_aware_converted_to_utc(self) -> None:
        """Test that offsets are converted."""
        plus_two = timezone(timedelta(hours=2))

        converted = ensure_utc(datetime(2024, 1, 1, 12, tzinfo=plus_two))

        assert converted == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)

    def test_whole_units_floor(self, now: datetime) -> None:
        """Test that elapsed days and hours are floored."""
        moment = now - timedelta(days=2, hours=23, minutes=59)

        assert whole_days_since(moment, now) == 2
        assert whole_hours_since(moment, now) == 71

    def test_future_moment_is_negative(self, now: datetime) -> None:
        """Test that a future moment gives a negative count."""
        assert whole_days_since(now + timedelta(hours=1), now) == -1

    def test_content_dates_normalized(self) -> None:
        """Test that naive content dates are parsed as UTC."""
        item = ContentItem(
            id="a",
            title="t",
            author={"id": "x"},
            published_at="2024-06-01T08:00:00",
            updated_at="2024-06-01T08:00:00",
        )

        assert item.published_at.tzinfo == timezone.utc
