"""
LLM gateway configuration settings.

Connection parameters for the hosted OpenAI-compatible completion gateway.

Dependencies: pydantic_settings
System role: LLM client configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from envreg.configs.base import BaseSettings


class LLMGatewaySettings(BaseSettings):
    """Hosted LLM gateway configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Bearer token for the LLM gateway",
    )
    base_url: str = Field(
        default="https://ai.gateway.lovable.dev/v1",
        description="OpenAI-compatible gateway base URL",
    )
    model: str = Field(
        default="google/gemini-2.5-flash",
        description="Model identifier forwarded to the gateway",
    )
    temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    timeout_seconds: float = Field(default=60.0, description="Request timeout")
    max_retries: int = Field(default=1, description="Client-side retries on transient errors")

    @property
    def is_configured(self) -> bool:
        """True when an API key is available."""
        return bool(self.api_key)
