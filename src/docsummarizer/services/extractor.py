"""Plain-text extraction from uploaded PDF, DOCX and TXT documents."""

import asyncio
import io
import logging
from collections.abc import Callable

from docx import Document
from pypdf import PdfReader

from docsummarizer.domain.errors import ExtractionError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)
TEXT_MEDIA_TYPE = "text/plain"

SUPPORTED_MEDIA_TYPES = (PDF_MEDIA_TYPE, DOCX_MEDIA_TYPE, TEXT_MEDIA_TYPE)


def _extract_pdf(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def _extract_docx(data: bytes) -> str:
    document = Document(io.BytesIO(data))
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


def _extract_text(data: bytes) -> str:
    return data.decode("utf-8")


class TextExtractor:
    """Dispatches on the declared media type to a format-specific parser."""

    _PARSERS: dict[str, tuple[str, Callable[[bytes], str]]] = {
        PDF_MEDIA_TYPE: ("PDF", _extract_pdf),
        DOCX_MEDIA_TYPE: ("DOCX", _extract_docx),
        TEXT_MEDIA_TYPE: ("TXT", _extract_text),
    }

    @staticmethod
    def is_supported(media_type: str | None) -> bool:
        """Check whether a media type can be extracted."""
        return media_type in SUPPORTED_MEDIA_TYPES

    def extract_sync(self, data: bytes, media_type: str | None) -> str:
        """Extract text, raising on unsupported types or parser failures.

        Args:
            data: Raw file contents
            media_type: Declared media type, matched exactly

        Returns:
            Extracted text, possibly empty

        Raises:
            UnsupportedFileTypeError: media type is not PDF, DOCX or plain text
            ExtractionError: the parser rejected the document
        """
        entry = self._PARSERS.get(media_type or "")
        if entry is None:
            raise UnsupportedFileTypeError(media_type)

        kind, parser = entry
        try:
            return parser(data)
        except Exception as e:
            logger.error(f"Failed to parse {kind} document: {e}")
            raise ExtractionError(kind) from e

    async def extract(self, data: bytes, media_type: str | None) -> str:
        """Extract text in a worker thread so parsing doesn't block the loop."""
        return await asyncio.to_thread(self.extract_sync, data, media_type)
