from pathlib import Path
from pydantic_settings import BaseSettings
from typing import List
from functools import lru_cache

PACKAGE_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


class Settings(BaseSettings):
    """Centralized configuration for all components."""

    # Application
    app_name: str = "Risk Management Worksheet"
    app_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Catalogs
    catalog_dir: str = str(PACKAGE_DATA_DIR)
    risk_sources_file: str = "risk_sources.json"
    risk_events_file: str = "risk_events.json"
    mitigation_measures_file: str = "mitigation_measures.json"

    # Scoring
    expert_panel_size: int = 10
    indicators_per_category: int = 18

    class Config:
        env_file = ".env"
        env_prefix = "RISK_"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Singleton settings instance."""
    return Settings()
