"""Summary export endpoint."""

import asyncio
import re

from fastapi import APIRouter
from fastapi.responses import Response

from docsummarizer.api.dependencies import SummaryPayloadDep
from docsummarizer.services.exporter import ExportFormat, export_summary

router = APIRouter(prefix="/export", tags=["export"])

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]")


@router.post("/{fmt}")
async def export(
    fmt: ExportFormat,
    payload: SummaryPayloadDep,
) -> Response:
    """Render a summary as a downloadable file."""
    summary = payload.to_domain()
    summary.id = _UNSAFE_FILENAME_CHARS.sub("", summary.id) or "export"

    exported = await asyncio.to_thread(export_summary, summary, fmt)
    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )
