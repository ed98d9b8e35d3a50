"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite async session, law catalog, gateway client mocks
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

from envreg.core.citation_extractor import CitationExtractor
from envreg.core.law_catalog import LawCatalog
from envreg.models.law import Jurisdiction, Law, LawCategory, LawStatus


@pytest_asyncio.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from envreg.boundary.db.base import Base
    from envreg.boundary.db import models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def sample_laws() -> list[Law]:
    """Small catalog covering every jurisdiction."""
    return [
        Law(
            id="eu-wfd-2000-60",
            title="Water Framework Directive",
            short_name="Directive 2000/60/EC",
            jurisdiction=Jurisdiction.EU,
            category=LawCategory.WATER,
            publication_date=date(2000, 12, 22),
            status=LawStatus.AMENDED,
            summary="Framework for Community action in the field of water policy.",
            pdf_url="https://example.org/wfd.pdf",
            tags=["water", "river basin"],
        ),
        Law(
            id="it-dlgs-152-2006",
            title="Norme in materia ambientale",
            short_name="D.Lgs. 152/2006",
            jurisdiction=Jurisdiction.ITALY,
            category=LawCategory.GENERAL,
            publication_date=date(2006, 4, 3),
            status=LawStatus.ACTIVE,
            summary="Italian Environmental Code.",
            pdf_url="https://example.org/dlgs152.pdf",
            tags=["environmental code", "EIA"],
        ),
        Law(
            id="lr-lombardia-26-2003",
            title="Disciplina dei servizi locali di interesse economico generale",
            short_name="L.R. 26/2003",
            jurisdiction=Jurisdiction.REGIONAL,
            category=LawCategory.WASTE,
            publication_date=date(2003, 12, 12),
            status=LawStatus.ACTIVE,
            summary="Regional rules for waste, energy and water services.",
            pdf_url="https://example.org/lr26.pdf",
            tags=["waste", "Lombardy"],
        ),
    ]


@pytest.fixture
def law_catalog(sample_laws: list[Law]) -> LawCatalog:
    """In-memory catalog built from sample_laws."""
    return LawCatalog(sample_laws)


@pytest.fixture
def citation_extractor() -> CitationExtractor:
    """Default citation extractor (five citations max)."""
    return CitationExtractor()


@pytest.fixture
def mock_llm_client() -> MagicMock:
    """
    Create mock LLMGatewayClient.

    Returns:
        MagicMock: Client whose acomplete returns a cited answer
    """
    client = MagicMock()
    client.model_name = "google/gemini-2.5-flash"
    client.acomplete = AsyncMock(
        return_value="Discharges are regulated by D.Lgs. 152/2006, Art. 101."
    )
    return client


@pytest.fixture
def user_id() -> str:
    """Generate a test user ID."""
    return f"user-{uuid.uuid4()}"
