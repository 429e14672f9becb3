"""
Centralized configuration for the Waste Match backend.

All environment variables and settings should be defined here
to avoid duplication across modules.
"""
import os
from functools import lru_cache


class Settings:
    """Application settings loaded from environment variables."""

    # CORS - comma-separated list of allowed origins
    ALLOWED_ORIGINS: list = os.environ.get(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000"
    ).split(",")

    # Engine config file (empty = bundled waste_match_config.json)
    CONFIG_PATH: str = os.environ.get("WASTE_MATCH_CONFIG", "")

    # Catalog override (empty = catalog_path from the engine config)
    CATALOG_PATH: str = os.environ.get("WASTE_MATCH_CATALOG", "")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Singleton instance for easy import
settings = get_settings()
