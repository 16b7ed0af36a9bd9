"""Application configuration using Pydantic Settings.

Only the HTTP layer and logging read these values. The scoring core keeps
its weights as module constants and takes its vocabulary as an argument.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_v1_prefix: str = "/api/v1"
    cors_origins: str = "http://localhost:3000,http://localhost:5173"
    cors_allow_all: bool = False

    # App
    debug: bool = False
    log_level: str = "INFO"
    json_logs: bool = False
    app_name: str = "MedSearch Service"
    app_version: str = "0.1.0"

    # Search
    search_default_limit: int = 20
    search_max_limit: int = 50  # Page size cap for /search
    max_candidates: int = 100  # Scorers are O(n) or O(n^2) with no internal cap

    # Suggestions
    suggestion_min_query_length: int = 2
    popular_suggestion_window_days: int = 7

    # Recommendations
    recommendation_default_limit: int = 10
    recommendation_max_limit: int = 20

    # Trending
    trending_default_window_days: int = 7
    trending_max_window_days: int = 365  # One volume bucket per day
    trending_max_limit: int = 50

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string.

        Returns:
            List of allowed origins, or ["*"] if cors_allow_all is True.
        """
        if self.cors_allow_all:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
