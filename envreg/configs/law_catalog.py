"""
Law catalog configuration settings.

Dependencies: pydantic_settings
System role: Location of the norms JSON file
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from envreg.configs.base import BaseSettings

DEFAULT_NORMS_PATH = Path(__file__).resolve().parent.parent / "data" / "norms.json"


class LawCatalogSettings(BaseSettings):
    """Law catalog source configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LAW_CATALOG_",
        case_sensitive=False,
        extra="ignore",
    )

    path: Path = Field(
        default=DEFAULT_NORMS_PATH,
        description="Path to the norms JSON file",
    )
