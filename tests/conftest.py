"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from docsummarizer.api.dependencies import get_summarizer
from docsummarizer.infrastructure.database import get_session
from docsummarizer.infrastructure.models import Base
from docsummarizer.main import app

# Test database URL (use SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

GENERATED_SUMMARY = "The document greets the world in a short and friendly way."


@pytest.fixture
async def test_engine():
    """Create test database engine."""
    # StaticPool keeps one connection so the in-memory DB survives across sessions
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    session_factory = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
def mock_summarizer() -> MagicMock:
    """Summarizer whose completion call is replaced with a canned summary."""
    summarizer = MagicMock()
    summarizer.generate_summary = AsyncMock(return_value=GENERATED_SUMMARY)
    return summarizer


@pytest.fixture
async def client(test_engine, mock_summarizer) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client backed by the test database."""
    session_factory = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_summarizer] = lambda: mock_summarizer

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def pdf_bytes() -> bytes:
    """A one-page PDF containing a short sentence."""
    import io

    from reportlab.pdfgen import canvas

    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer)
    pdf.drawString(72, 720, "Hello from a PDF document.")
    pdf.showPage()
    pdf.save()
    return buffer.getvalue()


@pytest.fixture
def docx_bytes() -> bytes:
    """A DOCX file with two paragraphs."""
    import io

    from docx import Document

    document = Document()
    document.add_paragraph("Hello from a Word document.")
    document.add_paragraph("Second paragraph.")
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()
