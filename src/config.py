from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Data Point Local SEO"
    service_name: str = "datapoint-local-seo"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3460

    # Google Places text search
    google_places_api_key: str = ""
    places_search_url: str = "https://maps.googleapis.com/maps/api/place/textsearch/json"

    # Timeouts (seconds)
    http_timeout: float = 15.0
    listing_timeout: float = 5.0
    analysis_deadline: float = 30.0

    # Page fetching
    max_redirects: int = 5
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko; DataPointLocalSEO/1.0)"
    )

    # Scoring
    min_word_count: int = 300


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once at first use."""
    return Settings()
