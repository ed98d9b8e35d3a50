"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from envreg.configs.base import BaseSettings
from envreg.configs.database import DatabaseSettings
from envreg.configs.law_catalog import LawCatalogSettings
from envreg.configs.llm_gateway import LLMGatewaySettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = DatabaseSettings()
    llm: LLMGatewaySettings = LLMGatewaySettings()
    law_catalog: LawCatalogSettings = LawCatalogSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from envreg.configs import get_settings
        settings = get_settings()
    """
    return Settings()
