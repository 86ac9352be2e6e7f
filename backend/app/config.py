"""Typed settings configuration - single source of truth."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Catalogue
    fixtures_dir: Path = Path(__file__).parent / "fixtures"
    default_language: str = "en"
    supported_languages: list[str] = ["en", "de", "fr", "es"]
    currency: str = "NOK"

    # Gap filling
    min_gap_minutes: int = 30
    end_of_day_cap_minutes: int = 180
    evening_end: str = "22:00"
    evening_cutoff_hour: int = 20
    gap_recommendation_count: int = 3

    # Fallback departure for tours selected on a day they do not run
    default_departure_time: str = "09:00"

    # Calendar export
    calendar_prodid: str = "-//Arctic Fjord Tours//Trip Planner//EN"
    calendar_name: str = "Arctic Fjord Trip"
    calendar_uid_domain: str = "arcticfjordtours.example"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
