"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy import text

from docsummarizer.api.router import router as api_router
from docsummarizer.config import DEFAULT_AUTH_SECRET, get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    from docsummarizer.infrastructure.database import create_tables, engine

    logger.info("Starting Document Summarizer...")
    logger.info(f"Environment: {settings.environment}")

    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; summarization requests will fail")
    if settings.is_production and settings.auth_secret == DEFAULT_AUTH_SECRET:
        logger.warning("AUTH_SECRET is the development default; set it in production")

    if settings.auto_create_tables:
        await create_tables()
        logger.info("Database tables created")

    yield

    await engine.dispose()
    logger.info("Shutting down Document Summarizer...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    docs_kwargs = {}
    if settings.is_production:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}

    app = FastAPI(
        title="Document Summarizer",
        description="Upload PDF, DOCX or TXT documents and get AI-generated summaries",
        version="0.1.0",
        lifespan=lifespan,
        **docs_kwargs,
    )

    app.include_router(api_router)

    @app.get("/health")
    async def health_check() -> JSONResponse:
        """Lightweight health check with DB connectivity test."""
        from docsummarizer.infrastructure.database import async_session_factory

        try:
            async with async_session_factory() as session:
                await session.execute(text("SELECT 1"))
            return JSONResponse({"status": "healthy", "database": "connected"})
        except Exception:
            return JSONResponse(
                {"status": "unhealthy", "database": "disconnected"},
                status_code=503,
            )

    return app


# Create app instance
app = create_app()
