"""Document summarization endpoint."""

import logging
import time
from typing import Any

from fastapi import APIRouter, File, Form, HTTPException
from starlette.datastructures import UploadFile

from docsummarizer.api.dependencies import ExtractorDep, SummarizerDep
from docsummarizer.api.schemas import SummaryResponse
from docsummarizer.config import get_settings
from docsummarizer.domain.errors import (
    DocumentError,
    EmptyDocumentError,
    ExtractionError,
    SummaryGenerationError,
)
from docsummarizer.domain.summary import Summary, SummaryType
from docsummarizer.infrastructure.metrics_logger import SummaryMetrics, get_metrics_logger
from docsummarizer.services.extractor import TextExtractor

logger = logging.getLogger(__name__)

router = APIRouter(tags=["summarize"])

GENERIC_FAILURE = "Failed to process file and generate summary"


@router.post("/summarize", response_model=SummaryResponse)
async def summarize_document(
    extractor: ExtractorDep,
    summarizer: SummarizerDep,
    file: Any = File(None),
    summary_type: str | None = Form(None, alias="summaryType"),
) -> SummaryResponse:
    """Extract text from an uploaded document and summarize it.

    The summary is returned but not saved; clients persist it via /api/history.
    """
    # A plain form field named "file" counts as no file
    if not isinstance(file, UploadFile):
        raise HTTPException(400, "No file provided")

    media_type = file.content_type
    if not TextExtractor.is_supported(media_type):
        raise HTTPException(400, "Unsupported file type. Please upload PDF, DOCX, or TXT files.")

    max_bytes = get_settings().max_upload_bytes
    if file.size is not None and file.size > max_bytes:
        raise HTTPException(413, "File too large")
    data = await file.read()
    if len(data) > max_bytes:
        raise HTTPException(413, "File too large")

    style = SummaryType.parse(summary_type)
    document_name = file.filename or "document"
    metrics = SummaryMetrics(
        document_name=document_name,
        media_type=media_type or "",
        summary_type=style.value,
    )

    try:
        started = time.perf_counter()
        text = await extractor.extract(data, media_type)
        metrics.extraction_ms = (time.perf_counter() - started) * 1000
        if not text.strip():
            raise EmptyDocumentError()
        metrics.input_chars = len(text)

        started = time.perf_counter()
        content = await summarizer.generate_summary(text, style)
        metrics.generation_ms = (time.perf_counter() - started) * 1000
    except ExtractionError as e:
        raise HTTPException(500, str(e))
    except DocumentError as e:
        raise HTTPException(400, str(e))
    except SummaryGenerationError as e:
        raise HTTPException(500, str(e))
    except Exception:
        logger.exception(f"Summarization error for {document_name}")
        raise HTTPException(500, GENERIC_FAILURE)

    summary = Summary.from_generation(content, document_name, style)
    metrics.word_count = summary.word_count

    metrics_logger = get_metrics_logger()
    if metrics_logger is not None:
        metrics_logger.log(metrics)

    logger.info(
        f"Summarized {document_name}: {metrics.input_chars} chars -> "
        f"{summary.word_count} words in {metrics.generation_ms:.0f}ms"
    )
    return SummaryResponse.from_domain(summary)
