"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chat_service,
    get_compliance_service,
    get_conversation_service,
    get_law_catalog,
    get_llm_client,
    get_polimi_chat_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_chat_service",
    "get_compliance_service",
    "get_conversation_service",
    "get_law_catalog",
    "get_llm_client",
    "get_polimi_chat_service",
    "get_service_cache",
    "get_settings_dependency",
]
