"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: envreg.configs, envreg.application, envreg.boundary, envreg.core
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from envreg.application.services import (
    ChatService,
    ComplianceService,
    ConversationService,
    PolimiChatService,
)
from envreg.boundary.db import get_async_db
from envreg.boundary.llm import LLMGatewayClient
from envreg.configs import Settings, get_settings
from envreg.core.citation_extractor import CitationExtractor
from envreg.core.law_catalog import LawCatalog


class ServiceCache:
    """Container for process-wide service instances, created on first access."""

    def __init__(self):
        self._llm_client = None
        self._law_catalog = None
        self._citation_extractor = None

    @property
    def llm_client(self) -> LLMGatewayClient:
        """Get cached LLM gateway client."""
        if self._llm_client is None:
            self._llm_client = LLMGatewayClient(get_settings().llm)
        return self._llm_client

    @property
    def law_catalog(self) -> LawCatalog:
        """Get cached law catalog, loaded from the configured norms file."""
        if self._law_catalog is None:
            self._law_catalog = LawCatalog.load(get_settings().law_catalog.path)
        return self._law_catalog

    @property
    def citation_extractor(self) -> CitationExtractor:
        """Get cached citation extractor."""
        if self._citation_extractor is None:
            self._citation_extractor = CitationExtractor()
        return self._citation_extractor

    def clear(self) -> None:
        """Clear all cached instances."""
        self._llm_client = None
        self._law_catalog = None
        self._citation_extractor = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_law_catalog() -> LawCatalog:
    """Get the in-memory law catalog."""
    return get_service_cache().law_catalog


def get_llm_client() -> LLMGatewayClient:
    """Get the LLM gateway client."""
    return get_service_cache().llm_client


def get_chat_service() -> ChatService:
    """
    Get stateless chat service.

    Returns:
        ChatService: Chat service with gateway client and citation extractor
    """
    cache = get_service_cache()
    return ChatService(
        llm_client=cache.llm_client,
        extractor=cache.citation_extractor,
    )


def get_polimi_chat_service() -> PolimiChatService:
    """Get degree-scoped chat service."""
    cache = get_service_cache()
    return PolimiChatService(
        llm_client=cache.llm_client,
        extractor=cache.citation_extractor,
    )


def get_conversation_service(
    db: AsyncSession = Depends(get_async_db),
    chat_service: ChatService = Depends(get_chat_service),
) -> ConversationService:
    """
    Get conversation service instance.

    Args:
        db: Async database session (injected via Depends)
        chat_service: Completion service (injected via Depends)

    Returns:
        ConversationService: Conversation service bound to this request's session
    """
    return ConversationService(
        db=db,
        chat_service=chat_service,
        law_catalog=get_service_cache().law_catalog,
    )


def get_compliance_service(db: AsyncSession = Depends(get_async_db)) -> ComplianceService:
    """
    Get compliance service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ComplianceService: Compliance service bound to this request's session
    """
    return ComplianceService(db=db, llm_client=get_service_cache().llm_client)
