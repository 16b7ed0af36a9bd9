"""Unit tests for structured logging configuration."""

from medsearch_service.logging_config import (
    MAX_LOGGED_QUERY_LENGTH,
    configure_logging,
    get_logger,
    truncate_queries,
)


class TestTruncateQueries:
    """Tests for the query-truncating processor."""

    def test_long_query_truncated(self) -> None:
        """Test that long queries are cut with an ellipsis."""
        event = truncate_queries(None, "info", {"event": "x", "query": "a" * 500})

        assert event["query"] == "a" * MAX_LOGGED_QUERY_LENGTH + "..."

    def test_short_values_untouched(self) -> None:
        """Test that short queries and other keys pass through."""
        event = {"event": "x", "query": "htn", "term": "asthma", "other": "b" * 500}

        assert truncate_queries(None, "info", dict(event)) == event

    def test_non_string_ignored(self) -> None:
        """Test that non-string values are left alone."""
        assert truncate_queries(None, "info", {"query": None}) == {"query": None}


def test_configure_logging_json_and_console() -> None:
    """Test both renderers configure without error and yield a usable logger."""
    configure_logging(log_level="DEBUG", json_logs=True)
    get_logger(__name__).info("test.logging.configured", query="x" * 200)

    configure_logging(log_level="INFO", json_logs=False)
    get_logger(__name__).info("test.logging.configured", query="htn")
