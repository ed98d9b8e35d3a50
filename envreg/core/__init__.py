"""
Core business logic module.

Citation extraction, the law catalog, prompt builders and the exception
hierarchy. Nothing here performs I/O except LawCatalog.load().
"""

from envreg.core.citation_extractor import CitationExtractor, extract_citations
from envreg.core.exceptions import (
    ConversationNotFoundError,
    EnvRegException,
    LawCatalogError,
    LawNotFoundError,
    LLMGatewayError,
    NotFoundError,
    ReportNotFoundError,
    ReportParsingError,
    ValidationError,
)
from envreg.core.law_catalog import LawCatalog

__all__ = [
    # Exceptions
    "EnvRegException",
    "ValidationError",
    "NotFoundError",
    "ConversationNotFoundError",
    "LawNotFoundError",
    "ReportNotFoundError",
    "LawCatalogError",
    "LLMGatewayError",
    "ReportParsingError",
    # Business logic
    "CitationExtractor",
    "LawCatalog",
    "extract_citations",
]
