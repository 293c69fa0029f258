"""Render summaries as downloadable TXT, Markdown or PDF files."""

import io
import logging
from dataclasses import dataclass
from enum import StrEnum
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from docsummarizer.domain.summary import Summary

logger = logging.getLogger(__name__)


class ExportFormat(StrEnum):
    """Supported export formats."""

    TXT = "txt"
    MARKDOWN = "markdown"
    PDF = "pdf"


@dataclass
class ExportedFile:
    """A rendered export ready to be sent as an attachment."""

    content: bytes
    media_type: str
    filename: str


def _metadata_line(summary: Summary) -> str:
    return (
        f"{summary.document_name} | {summary.word_count} words | "
        f"{summary.summary_type} | {summary.created_at:%Y-%m-%d}"
    )


def render_txt(summary: Summary) -> bytes:
    title = summary.title or "Document Summary"
    lines = [title, "=" * len(title), _metadata_line(summary), "", summary.content, ""]
    return "\n".join(lines).encode("utf-8")


def render_markdown(summary: Summary) -> bytes:
    title = summary.title or "Document Summary"
    lines = [f"# {title}", "", f"*{_metadata_line(summary)}*", "", summary.content, ""]
    return "\n".join(lines).encode("utf-8")


def render_pdf(summary: Summary) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=letter, title=summary.title or "Document Summary")
    styles = getSampleStyleSheet()

    story = [
        Paragraph(escape(summary.title or "Document Summary"), styles["Title"]),
        Paragraph(escape(_metadata_line(summary)), styles["Italic"]),
        Spacer(1, 12),
    ]
    # Blank lines separate paragraphs; single newlines are kept as line breaks
    for block in summary.content.split("\n\n"):
        if block.strip():
            text = escape(block.strip()).replace("\n", "<br/>")
            story.append(Paragraph(text, styles["BodyText"]))
            story.append(Spacer(1, 6))

    doc.build(story)
    return buffer.getvalue()


_RENDERERS = {
    ExportFormat.TXT: (render_txt, "text/plain; charset=utf-8", "txt"),
    ExportFormat.MARKDOWN: (render_markdown, "text/markdown; charset=utf-8", "md"),
    ExportFormat.PDF: (render_pdf, "application/pdf", "pdf"),
}


def export_summary(summary: Summary, fmt: ExportFormat) -> ExportedFile:
    """Render a summary in the requested format."""
    renderer, media_type, extension = _RENDERERS[fmt]
    content = renderer(summary)
    logger.info(f"Exported summary {summary.id} as {fmt} ({len(content)} bytes)")
    return ExportedFile(
        content=content,
        media_type=media_type,
        filename=f"summary-{summary.id}.{extension}",
    )
