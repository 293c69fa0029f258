"""API router aggregator."""

from fastapi import APIRouter

from docsummarizer.api.auth import router as auth_router
from docsummarizer.api.export import router as export_router
from docsummarizer.api.history import router as history_router
from docsummarizer.api.summarize import router as summarize_router

router = APIRouter(prefix="/api")
router.include_router(summarize_router)
router.include_router(history_router)
router.include_router(export_router)
router.include_router(auth_router)
