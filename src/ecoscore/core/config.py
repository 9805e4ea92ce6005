"""Configuration management for EcoScore."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # Google Places API
    google_places_api_key: str = Field("", description="Google Places API key")
    GOOGLE_PLACES_KEY: str = Field("", description="Google Places API key (alternative naming)")
    places_base_url: str = Field(
        "https://maps.googleapis.com/maps/api/place",
        description="Google Places API base URL"
    )

    @property
    def effective_places_key(self) -> str:
        """Get the effective Places API key from either field."""
        return self.google_places_api_key or self.GOOGLE_PLACES_KEY

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Network settings
    request_timeout: float = Field(10.0, description="Places API request timeout in seconds")
    max_retries: int = Field(3, description="Maximum retry attempts")
    retry_delay: float = Field(1.0, description="Base retry delay in seconds")
    retry_backoff: float = Field(2.0, description="Retry backoff multiplier")

    # Rescoring policy
    rescore_max_age_days: int = Field(7, description="Recompute scores older than this many days")
    rescore_min_confidence: float = Field(3.0, description="Recompute scores below this confidence")
    max_workers: int = Field(4, description="Worker threads for batch rescoring")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
