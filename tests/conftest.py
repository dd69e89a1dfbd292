"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite database, session factory, sample documents and
chunks, mocked pipeline collaborators
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from regchat.models.chat import Completion, RetrievedChunk
from regchat.models.document import DocumentMetadata


@pytest.fixture
async def db_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine sharing one connection (StaticPool)
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from regchat.boundary.db import create_all_tables
    from regchat.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all_tables(engine)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Session factory bound to the test engine."""
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_async_db(session_factory):
    """
    Provide a test database session.

    Yields:
        AsyncSession: Session rolled back after the test
    """
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def seeded_documents(test_async_db):
    """Insert three federal documents and return their ids, newest first."""
    from regchat.boundary.db.models import FederalDocumentModel

    test_async_db.add_all([
        FederalDocumentModel(
            doc_id="EPA-2024-001",
            title="National Emission Standards for Hazardous Air Pollutants",
            agency_id="EPA",
            document_type="Rule",
            posted_date=date(2024, 3, 1),
            summary="Emission limits for coke ovens.",
        ),
        FederalDocumentModel(
            doc_id="FDA-2023-117",
            title="Food Labeling: Nutrient Content Claims",
            agency_id="FDA",
            document_type="Proposed Rule",
            posted_date=date(2023, 11, 15),
            open_for_comment=True,
            comment_end_date=date(2024, 2, 15),
        ),
        FederalDocumentModel(
            doc_id="DOT-0000-000",
            title="Undated notice",
            agency_id="DOT",
            document_type="Notice",
        ),
    ])
    await test_async_db.commit()
    return ["EPA-2024-001", "FDA-2023-117", "DOT-0000-000"]


@pytest.fixture
def sample_document() -> DocumentMetadata:
    """Provide sample document metadata."""
    return DocumentMetadata(
        doc_id="EPA-2024-001",
        title="National Emission Standards for Hazardous Air Pollutants",
        agency_id="EPA",
        document_type="Rule",
        posted_date=date(2024, 3, 1),
    )


@pytest.fixture
def sample_chunks() -> list[RetrievedChunk]:
    """Provide retrieved chunks in ranked order."""
    return [
        RetrievedChunk(
            text="Section 63.7300: Owners must limit benzene emissions to 0.5 ppm.",
            score=0.91,
            metadata_filename="EPA-2024-001",
        ),
        RetrievedChunk(
            text="Section 63.7310: Compliance is due within three years.",
            score=0.84,
            metadata_filename="EPA-2024-001",
        ),
    ]


@pytest.fixture
def sample_embedding() -> list[float]:
    """Provide a short query embedding."""
    return [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8]


@pytest.fixture
def mock_embedder(sample_embedding):
    """Embedding client returning sample_embedding."""
    embedder = MagicMock()
    embedder.embed = AsyncMock(return_value=sample_embedding)
    return embedder


@pytest.fixture
def mock_vector_index(sample_chunks):
    """Vector index returning sample_chunks."""
    index = MagicMock()
    index.query = AsyncMock(return_value=sample_chunks)
    return index


@pytest.fixture
def mock_generator():
    """Completion generator returning a fixed answer."""
    generator = MagicMock()
    generator.generate = AsyncMock(
        return_value=Completion(text="Benzene emissions are capped at 0.5 ppm.", tokens_used=321)
    )
    return generator


@pytest.fixture
def mock_interaction_logger():
    """Interaction logger that only records scheduled entries."""
    interaction_logger = MagicMock()
    interaction_logger.log_in_background = MagicMock()
    return interaction_logger


@pytest.fixture
def mock_document_store(sample_document):
    """Document store resolving every id to sample_document."""
    store = MagicMock()
    store.get_metadata = AsyncMock(return_value=sample_document)
    return store


@pytest.fixture
def mock_access_validator():
    """Access validator that allows everything."""
    from regchat.application.services import AccessDecision

    validator = MagicMock()
    validator.validate = AsyncMock(return_value=AccessDecision(valid=True))
    return validator


@pytest.fixture
def orchestrator(
    mock_embedder,
    mock_vector_index,
    mock_generator,
    mock_interaction_logger,
    mock_document_store,
    mock_access_validator,
):
    """ChatOrchestrator wired with mocked collaborators."""
    from regchat.core.chat import ChatOrchestrator

    return ChatOrchestrator(
        embedder=mock_embedder,
        vector_index=mock_vector_index,
        generator=mock_generator,
        interaction_logger=mock_interaction_logger,
        document_store=mock_document_store,
        access_validator=mock_access_validator,
    )
